"""Line-oriented properties parser with recursive ``include`` support."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from pathlib import Path

from propconf.decoders import Decoder, get_decoder
from propconf.errors import FileOpenError, IncludeCycleError, IncludeDepthExceededError
from propconf.loglog import ErrorSink, get_loglog
from propconf.properties import Properties
from propconf.substitution import substitute
from propconf.types import Encoding, SubstitutionFlags
from propconf.utils.text import is_space, trim, trim_leading, trim_trailing
from propconf.variables import VariableProvider

__all__ = ["PropertiesLoader", "COMMENT_CHAR", "INCLUDE_TOKEN"]

logger = logging.getLogger(__name__)

COMMENT_CHAR = "#"
INCLUDE_TOKEN = "include"


class PropertiesLoader:
    """Reads properties text line by line into a :class:`Properties` store.

    Each line is a comment (``#``), blank, an ``include <path>`` directive,
    or a ``key=value`` assignment. Lines with no ``=`` are ignored. Included
    files are merged into the same store, so later assignments win.

    The loader tracks the chain of files being loaded. An include that
    would revisit a file on the chain, or nest deeper than *max_depth*, is
    reported through the sink and skipped.
    """

    def __init__(
        self,
        properties: Properties,
        sink: ErrorSink | None = None,
        provider: VariableProvider | None = None,
        decoders: Mapping[Encoding, Decoder] | None = None,
        max_depth: int = 32,
    ) -> None:
        self._properties = properties
        self._sink = sink
        self._provider = provider
        self._decoders = decoders
        self._max_depth = max_depth
        self._chain: list[Path] = []

    @property
    def sink(self) -> ErrorSink:
        return self._sink if self._sink is not None else get_loglog()

    def load_stream(self, stream: Iterable[str]) -> None:
        """Parse every line of *stream* into the store."""
        for line in stream:
            self._parse_line(line)

    def load_file(self, path: str | Path) -> None:
        """Load the file at *path* into the store.

        Open failure is reported through the sink, fatally when the store's
        flags set ``raise_on_open_failure``.
        """
        self._load_file(Path(path), fatal=self._properties.flags.raise_on_open_failure)

    def _load_file(self, path: Path, fatal: bool) -> None:
        text = self._read(path, fatal)
        if text is None:
            return

        logger.debug("Loading properties from %s", path)
        self._chain.append(Path(os.path.realpath(path)))
        try:
            self.load_stream(text.split("\n"))
        finally:
            self._chain.pop()

    def _read(self, path: Path, fatal: bool) -> str | None:
        """Read and decode *path*, reporting failures; None if unreadable."""
        encoding = self._properties.flags.encoding
        try:
            with open(path, "rb") as f:
                data = f.read()
            return get_decoder(encoding, self._decoders)(data)
        except OSError as e:
            err = FileOpenError(path=str(path), reason=e.strerror, cause=e)
        except UnicodeDecodeError as e:
            err = FileOpenError(path=str(path), reason=f"not valid {encoding.value} text", cause=e)
        except ValueError as e:
            # e.g. an embedded NUL in the path
            err = FileOpenError(path=str(path), reason=str(e), cause=e)
        self.sink.error(err.message, fatal, exc=err)
        return None

    def _parse_line(self, raw: str) -> None:
        line = raw[:-1] if raw.endswith("\n") else raw
        line = trim_leading(line)
        if not line or line[0] == COMMENT_CHAR:
            return

        # Files written on Windows and read as binary keep the \r.
        if line[-1] == "\r":
            line = line[:-1]

        n = len(INCLUDE_TOKEN)
        if len(line) >= n + 2 and line.startswith(INCLUDE_TOKEN) and is_space(line[n]):
            self._include(trim(line[n + 1 :]))
            return

        key, sep, value = line.partition("=")
        if not sep:
            return
        self._properties.set(trim_trailing(key), trim(value))

    def _include(self, included: str) -> None:
        """Merge the file named by *included* into the store; never fatal."""
        expanded, _ = substitute(
            included,
            self._properties,
            SubstitutionFlags(),
            provider=self._provider,
            sink=self._sink,
        )
        target = Path(expanded)
        try:
            resolved = Path(os.path.realpath(target))
        except ValueError as e:
            err = FileOpenError(path=str(target), reason=str(e), cause=e)
            self.sink.error(err.message, exc=err)
            return

        if resolved in self._chain:
            cycle = IncludeCycleError(path=str(resolved), chain=[str(p) for p in self._chain])
            self.sink.error(cycle.message, exc=cycle)
            return
        if len(self._chain) >= self._max_depth:
            too_deep = IncludeDepthExceededError(path=str(target), max_depth=self._max_depth)
            self.sink.error(too_deep.message, exc=too_deep)
            return

        logger.debug("Including %s", target)
        self._load_file(target, fatal=False)
