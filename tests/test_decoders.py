"""Tests for the byte decoders used when loading files."""

from __future__ import annotations

import codecs

import pytest

from propconf.decoders import (
    DEFAULT_DECODERS,
    decode_locale,
    decode_utf8,
    decode_utf16,
    decode_utf32,
    get_decoder,
)
from propconf.types import Encoding


class TestDecoders:
    def test_utf8_with_and_without_bom(self) -> None:
        assert decode_utf8(codecs.BOM_UTF8 + "k=ä".encode()) == "k=ä"
        assert decode_utf8("k=ä".encode()) == "k=ä"

    def test_utf16_defaults_to_little_endian(self) -> None:
        assert decode_utf16("k=v".encode("utf-16-le")) == "k=v"

    def test_utf16_honours_big_endian_bom(self) -> None:
        assert decode_utf16(codecs.BOM_UTF16_BE + "k=v".encode("utf-16-be")) == "k=v"

    def test_utf32_defaults_to_little_endian(self) -> None:
        assert decode_utf32("k=v".encode("utf-32-le")) == "k=v"

    def test_utf32_honours_bom(self) -> None:
        assert decode_utf32(codecs.BOM_UTF32_BE + "k=v".encode("utf-32-be")) == "k=v"

    def test_locale_keeps_undecodable_bytes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("locale.getpreferredencoding", lambda do_setlocale=True: "utf-8")
        text = decode_locale(b"k=caf\xe9")
        assert text.startswith("k=caf")
        assert text.encode("utf-8", "surrogateescape") == b"k=caf\xe9"


class TestGetDecoder:
    def test_every_encoding_has_a_default(self) -> None:
        assert set(DEFAULT_DECODERS) == set(Encoding)

    def test_override_wins(self) -> None:
        def upper(data: bytes) -> str:
            return data.decode("ascii").upper()

        decoder = get_decoder(Encoding.UTF8, {Encoding.UTF8: upper})
        assert decoder(b"k=v") == "K=V"

    def test_falls_back_to_default(self) -> None:
        assert get_decoder(Encoding.UTF16, {Encoding.UTF8: decode_utf8}) is decode_utf16
