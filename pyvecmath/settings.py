"""
Library-wide settings and logging setup.
"""
import logging

from pyvecmath.types.enums import LogLevel, ZeroLengthPolicy

logger = logging.getLogger(__name__)

_LOGGING_LEVELS = {
    LogLevel.NONE: logging.CRITICAL + 10,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class Settings:
    """
    Runtime settings consulted by the vector operations.

    Class attributes hold the defaults; each instance carries the values
    actually in effect. The module-level ``settings`` instance is the one
    the library reads.
    """

    # --- Class Variables (Defaults) ---
    DEFAULT_ZERO_LENGTH_POLICY: ZeroLengthPolicy = ZeroLengthPolicy.PROPAGATE
    """Default behaviour of ``norm()`` on a zero-length vector."""

    LOG_LEVEL: LogLevel = LogLevel.WARNING
    """Default level applied by ``configure_logging``."""

    APPROX_TOLERANCE: float = 1e-6
    """Default absolute tolerance used by ``is_close``."""

    # --- Instance Variables ---
    def __init__(self):
        self._zero_length_policy: ZeroLengthPolicy = self.DEFAULT_ZERO_LENGTH_POLICY
        self.log_level: LogLevel = self.LOG_LEVEL
        """Level applied by ``configure_logging`` when none is passed."""

        self.approx_tolerance: float = self.APPROX_TOLERANCE
        """Absolute tolerance used by ``is_close`` when none is passed."""

    @property
    def zero_length_policy(self) -> ZeroLengthPolicy:
        """Behaviour of ``norm()`` on a zero-length vector."""
        return self._zero_length_policy

    @zero_length_policy.setter
    def zero_length_policy(self, value) -> None:
        policy = ZeroLengthPolicy(value)
        if policy is not self._zero_length_policy:
            logger.debug("Zero-length policy changed from %s to %s",
                         self._zero_length_policy.value, policy.value)
        self._zero_length_policy = policy

    def reset(self) -> None:
        """Restores every setting to its class default."""
        self._zero_length_policy = self.DEFAULT_ZERO_LENGTH_POLICY
        self.log_level = self.LOG_LEVEL
        self.approx_tolerance = self.APPROX_TOLERANCE

    def __repr__(self) -> str:
        return (f"Settings(zero_length_policy={self._zero_length_policy.value!r}, "
                f"log_level={self.log_level.name}, approx_tolerance={self.approx_tolerance})")


settings = Settings()


def configure_logging(level=None) -> logging.Logger:
    """Sets the level of the ``pyvecmath`` logger and returns it.

    ``level`` is a ``LogLevel`` (or its integer value); ``settings.log_level``
    is used when it is omitted. ``LogLevel.NONE`` silences the library.
    Handlers are left to the application.
    """
    log_level = settings.log_level if level is None else LogLevel(level)
    package_logger = logging.getLogger("pyvecmath")
    package_logger.setLevel(_LOGGING_LEVELS[log_level])
    return package_logger
