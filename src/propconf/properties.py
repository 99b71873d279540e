"""The Properties store: a key -> text mapping with typed reads."""

from __future__ import annotations

import io
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from propconf.parsing import INT, LONG, UINT, ULONG, IntegralKind, parse_bool, parse_integral
from propconf.types import LoadFlags

if TYPE_CHECKING:
    from propconf.loglog import ErrorSink
    from propconf.variables import VariableProvider

__all__ = ["Properties", "EMPTY"]

# Returned by get() for absent keys.
EMPTY = ""


class Properties:
    """An unordered mapping of property keys to text values.

    Keys are compared by exact text equality and are unique; the last
    ``set`` for a key wins. Build one empty, or load it from a stream or file
    with :meth:`from_stream`, :meth:`from_string` or :meth:`from_file`.

    Not safe for concurrent mutation. Concurrent reads are fine once loading
    is finished.
    """

    def __init__(self, flags: LoadFlags | None = None) -> None:
        self._data: dict[str, str] = {}
        self.flags: LoadFlags = flags if flags is not None else LoadFlags()

    # === Construction ===

    @classmethod
    def from_stream(
        cls,
        stream: Iterable[str],
        sink: ErrorSink | None = None,
        provider: VariableProvider | None = None,
    ) -> Properties:
        """Load properties from a readable text stream (or any iterable of lines)."""
        from propconf.loader import PropertiesLoader

        props = cls()
        PropertiesLoader(props, sink=sink, provider=provider).load_stream(stream)
        return props

    @classmethod
    def from_string(
        cls,
        text: str,
        sink: ErrorSink | None = None,
        provider: VariableProvider | None = None,
    ) -> Properties:
        """Load properties from the text of a properties file."""
        return cls.from_stream(io.StringIO(text), sink=sink, provider=provider)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        flags: LoadFlags | None = None,
        sink: ErrorSink | None = None,
        provider: VariableProvider | None = None,
    ) -> Properties:
        """Load properties from *path*, following ``include`` directives.

        An empty *path* yields an empty store. Failure to open the file is
        reported through *sink*; it raises only when
        ``flags.raise_on_open_failure`` is set.

        Raises:
            FileOpenError: If the file cannot be opened and the flags ask
                for failures to be fatal (with the default sink).
        """
        from propconf.loader import PropertiesLoader

        props = cls(flags)
        # Path("") normalises to ".", which has no parts.
        if not path or (isinstance(path, Path) and not path.parts):
            return props
        PropertiesLoader(props, sink=sink, provider=provider).load_file(path)
        return props

    # === CRUD ===

    def exists(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str, default: str | None = None) -> str:
        """Return the value for *key*.

        Absent keys give *default* when one is passed, otherwise the shared
        empty string.
        """
        if key in self._data:
            return self._data[key]
        return EMPTY if default is None else default

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> bool:
        """Remove *key*; return True if it was present."""
        if key not in self._data:
            return False
        del self._data[key]
        return True

    def keys(self) -> list[str]:
        """Return a snapshot of the property names."""
        return list(self._data)

    def subset(self, prefix: str) -> Properties:
        """Return a new store with every key starting with *prefix*, prefix removed.

        Example:
            ``{"a.b": "x", "c": "y"}.subset("a.")`` gives ``{"b": "x"}``.
        """
        result = Properties(self.flags)
        for key in self.keys():
            if key.startswith(prefix):
                result.set(key[len(prefix) :], self._data[key])
        return result

    def to_dict(self) -> dict[str, str]:
        return dict(self._data)

    # === Typed reads ===
    # Each returns (value, ok); on failure value is the caller's default.

    def get_int(self, key: str, default: int | None = None) -> tuple[int | None, bool]:
        return self._get_integral(key, INT, default)

    def get_uint(self, key: str, default: int | None = None) -> tuple[int | None, bool]:
        return self._get_integral(key, UINT, default)

    def get_long(self, key: str, default: int | None = None) -> tuple[int | None, bool]:
        return self._get_integral(key, LONG, default)

    def get_ulong(self, key: str, default: int | None = None) -> tuple[int | None, bool]:
        return self._get_integral(key, ULONG, default)

    def get_bool(self, key: str, default: bool | None = None) -> tuple[bool | None, bool]:
        """Read *key* as a boolean (``true``/``false`` or a number)."""
        if key not in self._data:
            return default, False
        parsed = parse_bool(self._data[key])
        if parsed is None:
            return default, False
        return parsed, True

    def get_string(self, key: str, default: str | None = None) -> tuple[str | None, bool]:
        """Read *key* as raw text; fails only when the key is absent."""
        if key not in self._data:
            return default, False
        return self._data[key], True

    def _get_integral(
        self, key: str, kind: IntegralKind, default: int | None
    ) -> tuple[int | None, bool]:
        if key not in self._data:
            return default, False
        parsed = parse_integral(self._data[key], kind)
        if parsed is None:
            return default, False
        return parsed, True

    # === Container protocol ===

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Properties):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"Properties({self._data!r})"
