"""Tests for wren.errors and wren._internal.logs."""

import logging

import pytest

from wren._internal.logs import configure_logging
from wren.config import ShellConfig
from wren.errors import ConfigurationError, NavigationError, WrenError
from wren.shell import Shell


class TestHierarchy:
    def test_all_derive_from_wren_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)
        assert issubclass(NavigationError, WrenError)

    def test_catchable_as_base(self) -> None:
        with pytest.raises(WrenError):
            raise NavigationError("bad path")


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_level(self):
        logger = logging.getLogger("wren")
        level = logger.level
        yield
        logger.setLevel(level)

    def test_named_level(self) -> None:
        logger = configure_logging("DEBUG")
        assert logger.name == "wren"
        assert logger.level == logging.DEBUG

    def test_numeric_level(self) -> None:
        assert configure_logging(logging.ERROR).level == logging.ERROR

    def test_unknown_level(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown log level"):
            configure_logging("loud")

    def test_shell_applies_configured_level(self) -> None:
        Shell(ShellConfig(log_level="info"))
        assert logging.getLogger("wren").level == logging.INFO

    def test_shell_leaves_level_alone_by_default(self) -> None:
        logging.getLogger("wren").setLevel(logging.ERROR)
        Shell()
        assert logging.getLogger("wren").level == logging.ERROR

    def test_navigation_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        from wren.navigation.context import NavigationProvider

        with caplog.at_level(logging.DEBUG, logger="wren"), NavigationProvider() as nav:
            nav.navigate("/table")
        assert any(r.name.startswith("wren.navigation") for r in caplog.records)
