"""Error hierarchy for propconf."""

from __future__ import annotations

from typing import Any

__all__ = [
    "PropertiesError",
    "FileOpenError",
    "UnterminatedVariableError",
    "IncludeCycleError",
    "IncludeDepthExceededError",
    "ExpansionLimitError",
    "ErrorCodes",
]


class PropertiesError(Exception):
    """Base error for all propconf errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class FileOpenError(PropertiesError):
    """Raised or reported when a properties file cannot be opened."""

    def __init__(self, path: str, reason: str | None = None, **kwargs: Any) -> None:
        message = f"could not open file {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            code="FILE_OPEN_FAILED",
            message=message,
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The path that failed to open."""
        return self.details["path"]


class UnterminatedVariableError(PropertiesError):
    """Reported when a ``${`` marker has no closing brace."""

    def __init__(self, text: str, position: int, **kwargs: Any) -> None:
        super().__init__(
            code="UNTERMINATED_VARIABLE",
            message=f'"{text}" has no closing brace. Opening brace at position {position}.',
            details={"text": text, "position": position},
            **kwargs,
        )

    @property
    def position(self) -> int:
        """Index of the unmatched opening marker."""
        return self.details["position"]


class IncludeCycleError(PropertiesError):
    """Reported when an include chain revisits a file already being loaded."""

    def __init__(self, path: str, chain: list[str], **kwargs: Any) -> None:
        super().__init__(
            code="INCLUDE_CYCLE",
            message=f"Circular include detected: {' -> '.join([*chain, path])}",
            details={"path": path, "chain": chain},
            **kwargs,
        )


class IncludeDepthExceededError(PropertiesError):
    """Reported when include nesting goes deeper than the loader allows."""

    def __init__(self, path: str, max_depth: int, **kwargs: Any) -> None:
        super().__init__(
            code="INCLUDE_DEPTH_EXCEEDED",
            message=f"Include depth {max_depth} exceeded including {path}",
            details={"path": path, "max_depth": max_depth},
            **kwargs,
        )

    @property
    def max_depth(self) -> int:
        """The configured maximum include depth."""
        return self.details["max_depth"]


class ExpansionLimitError(PropertiesError):
    """Reported when recursive expansion does not settle."""

    def __init__(self, text: str, limit: int, **kwargs: Any) -> None:
        super().__init__(
            code="EXPANSION_LIMIT_EXCEEDED",
            message=f'"{text}" still expanding after {limit} substitutions; self-referential variable?',
            details={"text": text, "limit": limit},
            **kwargs,
        )


class ErrorCodes:
    """All propconf error codes as constants.

    Example:
        if error.code == ErrorCodes.FILE_OPEN_FAILED:
            fall_back_to_defaults()
    """

    FILE_OPEN_FAILED = "FILE_OPEN_FAILED"
    UNTERMINATED_VARIABLE = "UNTERMINATED_VARIABLE"
    INCLUDE_CYCLE = "INCLUDE_CYCLE"
    INCLUDE_DEPTH_EXCEEDED = "INCLUDE_DEPTH_EXCEEDED"
    EXPANSION_LIMIT_EXCEEDED = "EXPANSION_LIMIT_EXCEEDED"
    GENERAL_ERROR = "GENERAL_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
