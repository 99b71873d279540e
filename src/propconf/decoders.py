"""Byte decoders for property files, selected by :class:`~propconf.types.Encoding`.

UTF-16 and UTF-32 honour a leading byte-order mark and otherwise assume
little endian. UTF-8 drops a leading BOM. ``UNSPECIFIED`` decodes with the
locale's preferred encoding; bytes it cannot decode are carried through as
lone surrogates instead of failing the load.
"""

from __future__ import annotations

import codecs
import locale
from collections.abc import Callable, Mapping

from propconf.types import Encoding

__all__ = [
    "Decoder",
    "DEFAULT_DECODERS",
    "get_decoder",
    "decode_locale",
    "decode_utf8",
    "decode_utf16",
    "decode_utf32",
]

Decoder = Callable[[bytes], str]


def decode_locale(data: bytes) -> str:
    return data.decode(locale.getpreferredencoding(False), errors="surrogateescape")


def decode_utf8(data: bytes) -> str:
    return data.decode("utf-8-sig")


def decode_utf16(data: bytes) -> str:
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return data.decode("utf-16")
    return data.decode("utf-16-le")


def decode_utf32(data: bytes) -> str:
    if data.startswith((codecs.BOM_UTF32_LE, codecs.BOM_UTF32_BE)):
        return data.decode("utf-32")
    return data.decode("utf-32-le")


DEFAULT_DECODERS: Mapping[Encoding, Decoder] = {
    Encoding.UNSPECIFIED: decode_locale,
    Encoding.UTF8: decode_utf8,
    Encoding.UTF16: decode_utf16,
    Encoding.UTF32: decode_utf32,
}


def get_decoder(encoding: Encoding, decoders: Mapping[Encoding, Decoder] | None = None) -> Decoder:
    """Return the decoder for *encoding*, preferring entries in *decoders*."""
    if decoders is not None and encoding in decoders:
        return decoders[encoding]
    return DEFAULT_DECODERS[encoding]
