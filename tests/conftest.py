"""Shared pytest configuration for the ArborTreeLib test suite."""


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: builds very deep trees; excluded by run_tests.py unless --all"
    )
