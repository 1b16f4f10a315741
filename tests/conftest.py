import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Pins the environment and configures logging once, before any module-level
    logger is used.
    """
    os.environ["STOREFRONT_ENV"] = session.config.option.env

    from storefront.utils.logging import configure_logging

    configure_logging()


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)


@pytest.fixture(autouse=True)
def reset_adapters():
    """Drop any collaborator a test installed in the module-level factories."""
    yield

    from storefront.clock import reset_clock
    from storefront.receipts import reset_presenter
    from storefront.shipping import reset_notifier

    reset_clock()
    reset_notifier()
    reset_presenter()
