"""Unit tests for strict codec transforms."""

from __future__ import annotations

from pathlib import Path

import pytest

from vb6enc.codec import convert_file, to_gbk, to_utf8, transform
from vb6enc.errors import DecodeError, EncodeError
from vb6enc.types import ConversionDirection

GBK_ZHONGWEN = bytes.fromhex("D6D0CEC4")
UTF8_ZHONGWEN = bytes.fromhex("E4B8ADE69687")


def test_gbk_to_utf8_scenario() -> None:
    assert transform(GBK_ZHONGWEN, ConversionDirection.TO_UTF8) == UTF8_ZHONGWEN
    assert to_utf8(GBK_ZHONGWEN) == UTF8_ZHONGWEN


def test_utf8_to_gbk_scenario() -> None:
    assert to_gbk(UTF8_ZHONGWEN) == GBK_ZHONGWEN


@pytest.mark.parametrize(
    "buffer",
    [b"", b"Private Sub Form_Load()\r\n", UTF8_ZHONGWEN + b" = " + UTF8_ZHONGWEN],
)
def test_roundtrip_through_gbk(buffer: bytes) -> None:
    """Content representable in both encodings survives UTF-8 -> GBK -> UTF-8."""
    there = transform(buffer, ConversionDirection.TO_GBK)
    assert transform(there, ConversionDirection.TO_UTF8) == buffer


def test_invalid_gbk_raises_decode_error() -> None:
    """No replacement character is ever produced for invalid input."""
    with pytest.raises(DecodeError) as excinfo:
        transform(b"ok \xff\xfe", ConversionDirection.TO_UTF8)
    assert "offset 3" in str(excinfo.value)
    assert excinfo.value.kind == "decode"


def test_truncated_gbk_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        to_utf8(GBK_ZHONGWEN + b"\xd6")


def test_invalid_utf8_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        to_gbk(GBK_ZHONGWEN)


def test_unmappable_character_raises_encode_error() -> None:
    """Characters outside GBK fail the whole buffer."""
    emoji = "\U0001f600".encode("utf-8")
    with pytest.raises(EncodeError) as excinfo:
        to_gbk(UTF8_ZHONGWEN + emoji)
    assert "U+1F600" in str(excinfo.value)
    assert "position 2" in str(excinfo.value)


def test_convert_file_writes_through_writer(tmp_path: Path) -> None:
    path = tmp_path / "Form1.frm"
    path.write_bytes(GBK_ZHONGWEN)
    written: list[tuple[Path, bytes]] = []

    result = convert_file(
        path,
        ConversionDirection.TO_UTF8,
        writer=lambda p, data: written.append((p, data)),
    )

    assert result == UTF8_ZHONGWEN
    assert written == [(path, UTF8_ZHONGWEN)]


def test_convert_file_decode_failure_never_writes(tmp_path: Path) -> None:
    path = tmp_path / "broken.cls"
    path.write_bytes(b"\xff\xfe")
    written: list[bytes] = []

    with pytest.raises(DecodeError) as excinfo:
        convert_file(
            path,
            ConversionDirection.TO_UTF8,
            writer=lambda _p, data: written.append(data),
        )

    assert excinfo.value.path == path
    assert written == []
    assert path.read_bytes() == b"\xff\xfe"


def test_convert_file_default_writer_rewrites_in_place(tmp_path: Path) -> None:
    path = tmp_path / "Module1.bas"
    path.write_bytes(UTF8_ZHONGWEN)

    convert_file(path, ConversionDirection.TO_GBK)

    assert path.read_bytes() == GBK_ZHONGWEN
