"""Logger configuration for the ``wren`` logger tree."""

import logging

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def configure_logging(level: str | int = "warning") -> logging.Logger:
    """Set the level of the ``wren`` logger and return it.

    Handlers are left to the host application; only the level is applied.
    """
    if isinstance(level, str):
        try:
            level = _LEVELS[level.lower()]
        except KeyError:
            from wren.errors import ConfigurationError

            msg = f"Unknown log level {level!r}; expected one of {sorted(_LEVELS)}"
            raise ConfigurationError(msg) from None
    logger = logging.getLogger("wren")
    logger.setLevel(level)
    return logger
