import random
import struct

import pytest

from stegbmp.encode import (
    CapacityError,
    check_capacity,
    encode_bytes,
    encode_file,
    get_image_size_for_bmp,
    required_capacity,
)
from stegbmp.lsb import (
    HEADER_SIZE,
    MAGIC_STRING,
    StegoError,
    decode_data_from_lsb,
    decode_size_from_lsb,
)


def make_bmp(width, height, seed=1):
    header = bytearray(HEADER_SIZE)
    header[0:2] = b"BM"
    struct.pack_into("<II", header, 18, width, height)
    rng = random.Random(seed)
    pixels = bytes(rng.randrange(256) for _ in range(width * height * 3))
    return bytes(header) + pixels


def _read_payload(stego):
    pos = HEADER_SIZE
    fields = []
    for _ in range(3):
        size = decode_size_from_lsb(stego[pos:pos + 32])
        pos += 32
        fields.append(decode_data_from_lsb(stego[pos:pos + size * 8], size))
        pos += size * 8
    return fields, pos


def test_image_size_from_header():
    assert get_image_size_for_bmp(make_bmp(10, 10)) == 300


def test_image_size_short_header():
    with pytest.raises(StegoError):
        get_image_size_for_bmp(b"BM" + bytes(10))


def test_required_capacity_grows_by_eight_per_byte():
    for n in (0, 1, 50, 1000):
        assert required_capacity(n + 1) - required_capacity(n) == 8
    assert required_capacity(0) > HEADER_SIZE


def test_required_capacity_negative():
    with pytest.raises(StegoError):
        required_capacity(-1)


def test_check_capacity_ok():
    image = make_bmp(20, 20)
    assert check_capacity(image, b"hello") == get_image_size_for_bmp(image)


def test_check_capacity_too_small():
    with pytest.raises(CapacityError):
        check_capacity(make_bmp(4, 4), b"x" * 50)


def test_capacity_error_is_stego_error():
    with pytest.raises(StegoError):
        encode_bytes(make_bmp(2, 2), b"too much data here")


def test_encode_bytes_layout():
    image = make_bmp(30, 30)
    hidden = b"the hidden text\n"
    stego = encode_bytes(image, hidden, ".txt")
    assert len(stego) == len(image)
    assert stego[:HEADER_SIZE] == image[:HEADER_SIZE]
    (magic, ext, data), end = _read_payload(stego)
    assert magic == MAGIC_STRING
    assert ext == b".txt"
    assert data == hidden
    assert stego[end:] == image[end:]


def test_encode_bytes_changes_only_low_bits():
    image = make_bmp(25, 25, seed=9)
    stego = encode_bytes(image, b"abc")
    assert [b & 0xFE for b in stego] == [b & 0xFE for b in image]


def test_encode_bytes_bad_extension():
    with pytest.raises(StegoError):
        encode_bytes(make_bmp(30, 30), b"abc", ".md")


def test_encode_bytes_truncated_pixels():
    image = make_bmp(30, 30)[:HEADER_SIZE + 40]
    with pytest.raises(StegoError):
        encode_bytes(image, b"abc")


def test_encode_file(tmp_path):
    src = tmp_path / "image.bmp"
    note_path = tmp_path / "note.txt"
    out = tmp_path / "stego.bmp"
    src.write_bytes(make_bmp(30, 30, seed=4))
    note_path.write_bytes(b"meet at noon")
    result = encode_file(src, note_path, out)
    assert result == out
    (magic, ext, data), _ = _read_payload(out.read_bytes())
    assert (magic, ext, data) == (MAGIC_STRING, b".txt", b"meet at noon")


def test_encode_file_missing_input(tmp_path):
    src = tmp_path / "image.bmp"
    src.write_bytes(make_bmp(10, 10))
    with pytest.raises(FileNotFoundError):
        encode_file(src, tmp_path / "absent.txt", tmp_path / "out.bmp")