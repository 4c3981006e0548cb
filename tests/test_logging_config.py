"""Tests for logging setup."""

import logging

import pytest

from bundlescope.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_level():
    logger = logging.getLogger("bundlescope")
    level = logger.level
    yield
    logger.setLevel(level)


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbosity, level",
        [("quiet", logging.ERROR), ("normal", logging.WARNING), ("verbose", logging.DEBUG)],
    )
    def test_levels(self, verbosity, level):
        logger = setup_logging(verbosity)
        assert logger.name == "bundlescope"
        assert logger.level == level

    def test_module_loggers_inherit(self):
        setup_logging("quiet")
        assert not logging.getLogger("bundlescope.codec").isEnabledFor(logging.WARNING)

    def test_unknown_verbosity(self):
        with pytest.raises(KeyError):
            setup_logging("chatty")
