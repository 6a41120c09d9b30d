"""Least-significant-bit packing of bytes and 32-bit sizes into image bytes."""

from __future__ import annotations

MAGIC_STRING = b"#*"
"""Marker written at the start of the payload to identify a stego image."""

HEADER_SIZE = 54
"""Size in bytes of the BMP header that is copied through untouched."""

BITS_PER_BYTE = 8
SIZE_BITS = 32


class StegoError(Exception):
    """Raised when data cannot be hidden in or recovered from an image."""


def _require(image_buffer: bytes, needed: int) -> bytes:
    buffer = bytes(image_buffer)
    if len(buffer) < needed:
        raise StegoError(
            f"image buffer holds {len(buffer)} bytes, {needed} are needed"
        )
    return buffer[:needed]


def _embed_bits(bits: list[int], image_buffer: bytes) -> bytes:
    buffer = _require(image_buffer, len(bits))
    return bytes((b & 0xFE) | bit for b, bit in zip(buffer, bits))


def _extract_bits(image_buffer: bytes, count: int) -> int:
    value = 0
    for b in _require(image_buffer, count):
        value = (value << 1) | (b & 0x01)
    return value


def _bits_msb_first(value: int, width: int) -> list[int]:
    return [(value >> shift) & 1 for shift in range(width - 1, -1, -1)]


def encode_byte_to_lsb(value: int, image_buffer: bytes) -> bytes:
    """Hide one byte in the low bits of 8 image bytes, most significant bit first."""
    if not 0 <= value <= 0xFF:
        raise StegoError(f"byte value out of range: {value}")
    return _embed_bits(_bits_msb_first(value, BITS_PER_BYTE), image_buffer)


def decode_byte_from_lsb(image_buffer: bytes) -> int:
    """Recover one byte from the low bits of 8 image bytes."""
    return _extract_bits(image_buffer, BITS_PER_BYTE)


def encode_size_to_lsb(value: int, image_buffer: bytes) -> bytes:
    """Hide a 32-bit size in the low bits of 32 image bytes, most significant bit first."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise StegoError(f"size out of range: {value}")
    return _embed_bits(_bits_msb_first(value, SIZE_BITS), image_buffer)


def decode_size_from_lsb(image_buffer: bytes) -> int:
    """Recover a 32-bit size from the low bits of 32 image bytes."""
    return _extract_bits(image_buffer, SIZE_BITS)


def encode_data_to_lsb(data: bytes, image_buffer: bytes) -> bytes:
    """Hide each byte of ``data`` in consecutive groups of 8 image bytes."""
    payload = bytes(data)
    buffer = _require(image_buffer, len(payload) * BITS_PER_BYTE)
    return b"".join(
        encode_byte_to_lsb(value, buffer[i * BITS_PER_BYTE:(i + 1) * BITS_PER_BYTE])
        for i, value in enumerate(payload)
    )


def decode_data_from_lsb(image_buffer: bytes, length: int) -> bytes:
    """Recover ``length`` bytes hidden by :func:`encode_data_to_lsb`."""
    if length < 0:
        raise StegoError(f"negative length: {length}")
    buffer = _require(image_buffer, length * BITS_PER_BYTE)
    return bytes(
        decode_byte_from_lsb(buffer[i:i + BITS_PER_BYTE])
        for i in range(0, len(buffer), BITS_PER_BYTE)
    )