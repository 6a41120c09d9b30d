"""Hiding a secret file inside the pixel bytes of a 24-bit BMP image."""

from __future__ import annotations

import os
import struct
from pathlib import Path

from .lsb import (
    BITS_PER_BYTE,
    HEADER_SIZE,
    MAGIC_STRING,
    StegoError,
    encode_data_to_lsb,
    encode_size_to_lsb,
)

MAX_FILE_SUFFIX = 4
_SIZE_FIELD_BYTES = 4
_WIDTH_OFFSET = 18


class CapacityError(StegoError):
    """Raised when the image is too small to hold the secret."""


def get_image_size_for_bmp(image: bytes) -> int:
    """Return width * height * 3, read from the BMP header at offset 18."""
    if len(image) < _WIDTH_OFFSET + 8:
        raise StegoError("image is too short to hold a BMP header")
    width, height = struct.unpack_from("<II", image, _WIDTH_OFFSET)
    return (width * height * 3) & 0xFFFFFFFF


def required_capacity(secret_size: int) -> int:
    """Return the image capacity needed to hide a secret of ``secret_size`` bytes."""
    if secret_size < 0:
        raise StegoError(f"negative secret size: {secret_size}")
    payload = len(MAGIC_STRING) + 3 * _SIZE_FIELD_BYTES + secret_size
    return HEADER_SIZE + payload * BITS_PER_BYTE


def check_capacity(image: bytes, secret: bytes) -> int:
    """Return the image capacity, raising CapacityError if it cannot hold ``secret``."""
    capacity = get_image_size_for_bmp(image)
    needed = required_capacity(len(secret))
    if capacity <= needed:
        raise CapacityError(
            f"image capacity {capacity} is not greater than the {needed} required"
        )
    return capacity


def _extension_bytes(extension: str | bytes) -> bytes:
    ext = extension.encode("ascii") if isinstance(extension, str) else bytes(extension)
    if len(ext) != MAX_FILE_SUFFIX:
        raise StegoError(
            f"extension must be {MAX_FILE_SUFFIX} bytes long, got {ext!r}"
        )
    return ext


def encode_bytes(image: bytes, secret: bytes, extension: str | bytes = ".txt") -> bytes:
    """Return a copy of ``image`` with ``secret`` and its extension hidden in it."""
    image = bytes(image)
    secret = bytes(secret)
    ext = _extension_bytes(extension)
    check_capacity(image, secret)
    if len(image) < HEADER_SIZE:
        raise StegoError("image is too short to hold a BMP header")

    segments = [
        (encode_size_to_lsb, len(MAGIC_STRING), 32),
        (encode_data_to_lsb, MAGIC_STRING, len(MAGIC_STRING) * BITS_PER_BYTE),
        (encode_size_to_lsb, len(ext), 32),
        (encode_data_to_lsb, ext, len(ext) * BITS_PER_BYTE),
        (encode_size_to_lsb, len(secret), 32),
        (encode_data_to_lsb, secret, len(secret) * BITS_PER_BYTE),
    ]

    out = bytearray(image[:HEADER_SIZE])
    pos = HEADER_SIZE
    for encoder, payload, width in segments:
        out.extend(encoder(payload, image[pos:pos + width]))
        pos += width
    out.extend(image[pos:])
    return bytes(out)


def encode_file(
    src_image_path: str | os.PathLike,
    secret_path: str | os.PathLike,
    stego_image_path: str | os.PathLike = "output.bmp",
    extension: str | bytes | None = None,
) -> Path:
    """Hide the file at ``secret_path`` in a BMP image and write the result.

    The extension defaults to the suffix of ``secret_path``.
    """
    image = Path(src_image_path).read_bytes()
    secret = Path(secret_path).read_bytes()
    if extension is None:
        extension = Path(secret_path).suffix
    stego = encode_bytes(image, secret, extension)
    out_path = Path(stego_image_path)
    out_path.write_bytes(stego)
    return out_path