"""Recovering a secret file hidden in the pixel bytes of a BMP image."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .lsb import (
    BITS_PER_BYTE,
    HEADER_SIZE,
    MAGIC_STRING,
    SIZE_BITS,
    StegoError,
    decode_data_from_lsb,
    decode_size_from_lsb,
)


@dataclass(frozen=True)
class DecodedPayload:
    """Everything recovered from a stego image."""

    magic: bytes
    extension: bytes
    data: bytes

    @property
    def has_magic(self) -> bool:
        """True when the recovered marker is the stego magic string."""
        return self.magic == MAGIC_STRING


def skip_header(image: bytes) -> bytes:
    """Return the pixel bytes that follow the 54-byte BMP header."""
    image = bytes(image)
    if len(image) < HEADER_SIZE:
        raise StegoError("image is too short to hold a BMP header")
    return image[HEADER_SIZE:]


def _read_size(body: bytes, pos: int) -> tuple[int, int]:
    end = pos + SIZE_BITS
    return decode_size_from_lsb(body[pos:end]), end


def _read_data(body: bytes, pos: int, length: int) -> tuple[bytes, int]:
    end = pos + length * BITS_PER_BYTE
    return decode_data_from_lsb(body[pos:end], length), end


def decode_bytes(image: bytes) -> DecodedPayload:
    """Recover the magic string, extension and data hidden in ``image``."""
    body = skip_header(image)
    pos = 0
    magic_len, pos = _read_size(body, pos)
    magic, pos = _read_data(body, pos, magic_len)
    ext_len, pos = _read_size(body, pos)
    extension, pos = _read_data(body, pos, ext_len)
    data_len, pos = _read_size(body, pos)
    data, pos = _read_data(body, pos, data_len)
    return DecodedPayload(magic=magic, extension=extension, data=data)


def decode_file(
    input_path: str | os.PathLike,
    output_path: str | os.PathLike = "decode.txt",
) -> DecodedPayload:
    """Decode the stego image at ``input_path`` and write the hidden data out."""
    payload = decode_bytes(Path(input_path).read_bytes())
    Path(output_path).write_bytes(payload.data)
    return payload