"""Inflate compressed ``.rnote`` bytes into their JSON text."""

from __future__ import annotations

import zlib

from rnotesight.rnote.errors import DecompressionError

# 32 + MAX_WBITS lets zlib detect a gzip or zlib header on its own.
_AUTO_HEADER_WBITS = 32 + zlib.MAX_WBITS


def _inflate_members(data: bytes) -> bytes:
    chunks: list[bytes] = []
    remaining = data
    while remaining:
        obj = zlib.decompressobj(_AUTO_HEADER_WBITS)
        try:
            chunks.append(obj.decompress(remaining))
            chunks.append(obj.flush())
        except zlib.error as e:
            raise DecompressionError(f"invalid compressed data: {e}") from e
        if not obj.eof:
            raise DecompressionError("truncated compressed data")
        # Back-to-back members are concatenated, like gunzip does.
        remaining = obj.unused_data
    return b"".join(chunks)


def inflate_to_text(blob: bytes) -> str:
    """
    Inflate an ``.rnote`` container into its JSON text. Rnote writes a single
    gzip member, but concatenated members and a bare zlib stream are accepted
    too since each carries a header zlib can recognise.
    """

    if not blob:
        raise DecompressionError("empty input")

    payload = _inflate_members(bytes(blob))

    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecompressionError(f"payload is not UTF-8 text: {e}") from e
