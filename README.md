# stegbmp

Hide the contents of a text file in a 24-bit BMP image by rewriting the
least significant bit of each image byte, and get it back later.

The image bytes after the 54-byte BMP header carry, in order:

1. the length of the magic marker `#*` (32 bits), then the marker itself;
2. the length of the secret file's extension (32 bits), then the 4 bytes of
   the extension;
3. the size of the secret file (32 bits), then its bytes.

Every hidden byte takes 8 image bytes and every length takes 32, each packed
most significant bit first. The header and all image bytes after the payload
are copied through unchanged.

The capacity of an image is taken as `width * height * 3`, with width and
height read from offset 18 of the header. The encoder raises `CapacityError`
unless that capacity is greater than `54 + (2 + 12 + secret size) * 8`.

## Installing

```
pip install .
```

## Command line

Hide `secret.txt` in `beautiful.bmp`, writing `stego.bmp`:

```
stegbmp -e beautiful.bmp secret.txt stego.bmp
```

The name of the file to hide must contain `.txt`; the text from `.txt` onwards
is stored as the extension, and it must be exactly 4 bytes long. If the output
name is left out, `output.bmp` is written.

Recover the hidden text from `stego.bmp` into `recovered.txt`:

```
stegbmp -d stego.bmp recovered.txt
```

The input name must contain `.bmp`, and an output name, if given, must
contain `.txt`. If the output name is left out, `decode.txt` is written.

The command exits with 0 on success, 1 on a usage, image or file error, and 2
when the first argument is neither `-e` nor `-d`.

## Library

```python
from stegbmp.encode import encode_file, encode_bytes, check_capacity
from stegbmp.decode import decode_file, decode_bytes

encode_file("beautiful.bmp", "secret.txt", "stego.bmp", ".txt")
payload = decode_file("stego.bmp", "recovered.txt")
print(payload.extension, payload.data, payload.has_magic)
```

- `stegbmp.encode`: `encode_bytes(image, secret, extension=".txt")` returns
  the stego image as bytes; `encode_file(src_image_path, secret_path,
  stego_image_path="output.bmp", extension=None)` reads and writes files,
  taking the extension from the secret file's suffix when none is given.
  `get_image_size_for_bmp`, `required_capacity` and `check_capacity` do the
  capacity check.
- `stegbmp.decode`: `decode_bytes(image)` and `decode_file(input_path,
  output_path="decode.txt")` return a `DecodedPayload` with `magic`,
  `extension` and `data`; `has_magic` tells whether the marker read back is
  `#*`. `skip_header(image)` returns the bytes after the header.
- `stegbmp.lsb`: the bit-level helpers `encode_byte_to_lsb`,
  `decode_byte_from_lsb`, `encode_size_to_lsb`, `decode_size_from_lsb`,
  `encode_data_to_lsb` and `decode_data_from_lsb`.
- `stegbmp.cli`: `main(argv=None)` and the argument checks
  `check_operation_type`, `read_and_validate_encode_args` and
  `read_and_validate_decode_args`.

Errors are raised as `StegoError` (from `stegbmp.lsb`), `CapacityError`
(from `stegbmp.encode`, a kind of `StegoError`) and `UsageError` (from
`stegbmp.cli`).

## What it does not do

- The payload is hidden, not encrypted: anyone who knows the layout can read
  it back.
- The BMP header is not validated beyond its length and the width and height
  fields; the bit depth and pixel-data offset are not checked.
- Decoding does not refuse an image without the `#*` marker; check
  `DecodedPayload.has_magic` yourself.

## Tests

```
pip install .[test]
pytest
```