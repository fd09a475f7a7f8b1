"""Byte-buffer converters implementing application ports."""

from __future__ import annotations

from vb6enc.codec import transform
from vb6enc.types import ConversionDirection


class StrictCodecConverter:
    """Convert buffers with the strict GBK/UTF-8 codec transform."""

    def convert(self, data: bytes, direction: ConversionDirection) -> bytes:
        """Transform ``data`` in ``direction``.

        Parameters
        ----------
        data : bytes
            Content in the direction's source encoding.
        direction : ConversionDirection
            Requested conversion.

        Returns
        -------
        bytes
            Content in the direction's target encoding.

        Raises
        ------
        DecodeError, EncodeError
            On any byte sequence or character the codecs cannot map.
        """
        return transform(data, direction)
