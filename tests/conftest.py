import logging

import pytest


@pytest.fixture(autouse=True)
def debug_logging(caplog: pytest.LogCaptureFixture) -> None:
    """
    Capture debug output of the package in every test.
    """
    caplog.set_level(logging.DEBUG, logger="receipt_primitives")
