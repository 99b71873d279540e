"""Internal diagnostics sink through which loading and substitution report errors.

The core never raises on its own except through :meth:`ErrorSink.error` with
``fatal=True``; whether that aborts is the sink's policy.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from propconf.errors import ErrorCodes, PropertiesError
from propconf.parsing import parse_bool

if TYPE_CHECKING:
    from propconf.properties import Properties

__all__ = ["ErrorSink", "LogLog", "get_loglog", "set_loglog"]

DEBUG_ENV_VAR = "PROPCONF_LOGLOG_DEBUG"
QUIET_ENV_VAR = "PROPCONF_LOGLOG_QUIETMODE"


@runtime_checkable
class ErrorSink(Protocol):
    """Single-operation error reporter consumed by the loader and substitution."""

    def error(self, message: str, fatal: bool = False, *, exc: PropertiesError | None = None) -> None:
        """Report *message*; when *fatal*, raise instead of returning."""
        ...


class LogLog:
    """Default error sink writing to the ``propconf`` stdlib logger.

    Attributes:
        debug_enabled: Emit :meth:`debug` messages.
        quiet_mode: Suppress all output. Fatal errors still raise.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        debug_enabled: bool = False,
        quiet_mode: bool = False,
    ) -> None:
        self._logger = logger or logging.getLogger("propconf")
        self.debug_enabled = debug_enabled
        self.quiet_mode = quiet_mode

    @classmethod
    def from_env(cls, logger: logging.Logger | None = None) -> LogLog:
        """Create a sink configured from ``PROPCONF_LOGLOG_DEBUG`` and ``PROPCONF_LOGLOG_QUIETMODE``."""
        return cls(
            logger=logger,
            debug_enabled=_env_flag(DEBUG_ENV_VAR),
            quiet_mode=_env_flag(QUIET_ENV_VAR),
        )

    def configure(self, properties: Properties) -> None:
        """Apply the ``configDebug`` and ``quietMode`` keys of a loaded store.

        Keys that are absent or not boolean leave the current setting alone.
        """
        debug, ok = properties.get_bool("configDebug")
        if ok:
            self.debug_enabled = bool(debug)
        quiet, ok = properties.get_bool("quietMode")
        if ok:
            self.quiet_mode = bool(quiet)

    def debug(self, message: str) -> None:
        if self.debug_enabled and not self.quiet_mode:
            self._logger.debug(message)

    def warn(self, message: str) -> None:
        if not self.quiet_mode:
            self._logger.warning(message)

    def error(self, message: str, fatal: bool = False, *, exc: PropertiesError | None = None) -> None:
        """Log *message* at ERROR level and raise when *fatal*.

        Raises:
            PropertiesError: *exc* if given, otherwise a generic error
                carrying *message*, when *fatal* is true.
        """
        if not self.quiet_mode:
            self._logger.error(message)
        if fatal:
            if exc is not None:
                raise exc
            raise PropertiesError(code=ErrorCodes.GENERAL_ERROR, message=message)

    def __repr__(self) -> str:
        return f"LogLog(debug_enabled={self.debug_enabled}, quiet_mode={self.quiet_mode})"


def _env_flag(name: str) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return False
    return bool(parse_bool(raw))


_default_loglog: ErrorSink | None = None


def get_loglog() -> ErrorSink:
    """Return the process-wide sink, creating it from the environment on first use."""
    global _default_loglog
    if _default_loglog is None:
        _default_loglog = LogLog.from_env()
    return _default_loglog


def set_loglog(sink: ErrorSink | None) -> None:
    """Replace the process-wide sink; None resets it to be rebuilt on next use."""
    global _default_loglog
    _default_loglog = sink
