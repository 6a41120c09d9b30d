"""Command line for hiding a text file in a BMP image and getting it back."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .decode import decode_file
from .encode import encode_file
from .lsb import StegoError

DEFAULT_STEGO_IMAGE = "output.bmp"
DEFAULT_DECODED_FILE = "decode.txt"

_USAGE = (
    "usage: stegbmp -e <source.bmp> <file.txt> [output.bmp]\n"
    "       stegbmp -d <stego.bmp> [output.txt]"
)


class UsageError(Exception):
    """Raised when the command line arguments are invalid."""


class Operation(Enum):
    ENCODE = "encode"
    DECODE = "decode"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class EncodeArgs:
    src_image: str
    payload_path: str
    stego_image: str
    extension: str


@dataclass(frozen=True)
class DecodeArgs:
    input_image: str
    output_path: str


def check_operation_type(args: Sequence[str]) -> Operation:
    """Tell the operation from the first argument: -e encodes, -d decodes."""
    if not args:
        return Operation.UNSUPPORTED
    return {"-e": Operation.ENCODE, "-d": Operation.DECODE}.get(
        args[0], Operation.UNSUPPORTED
    )


def read_and_validate_encode_args(args: Sequence[str]) -> EncodeArgs:
    """Validate ``-e <source.bmp> <file.txt> [output.bmp]``."""
    if len(args) < 2:
        raise UsageError("no source image provided")
    src_image = args[1]
    if len(args) < 3:
        raise UsageError("no file to hide provided")
    payload_path = args[2]
    index = payload_path.find(".txt")
    if index < 0:
        raise UsageError(f".txt file is not found in {payload_path!r}")
    extension = payload_path[index:]
    stego_image = args[3] if len(args) > 3 else DEFAULT_STEGO_IMAGE
    return EncodeArgs(src_image, payload_path, stego_image, extension)


def read_and_validate_decode_args(args: Sequence[str]) -> DecodeArgs:
    """Validate ``-d <stego.bmp> [output.txt]``."""
    if len(args) < 2:
        raise UsageError("no stego image provided")
    input_image = args[1]
    if ".bmp" not in input_image:
        raise UsageError(f".bmp file not found in {input_image!r}")
    if len(args) < 3:
        return DecodeArgs(input_image, DEFAULT_DECODED_FILE)
    output_path = args[2]
    if ".txt" not in output_path:
        raise UsageError(f".txt file not found in {output_path!r}")
    return DecodeArgs(input_image, output_path)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print(_USAGE, file=sys.stderr)
        return 1

    operation = check_operation_type(args)
    try:
        if operation is Operation.ENCODE:
            print("-e found encoding operation started")
            enc = read_and_validate_encode_args(args)
            out = encode_file(
                enc.src_image, enc.payload_path, enc.stego_image, enc.extension
            )
            print(f"encoding success! written to {out}")
        elif operation is Operation.DECODE:
            print("-d found decoding operation started")
            dec = read_and_validate_decode_args(args)
            payload = decode_file(dec.input_image, dec.output_path)
            print(
                f"decoding successfully done: {len(payload.data)} bytes "
                f"written to {dec.output_path}"
            )
        else:
            print("invalid argument", file=sys.stderr)
            print(_USAGE, file=sys.stderr)
            return 2
    except UsageError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 1
    except (StegoError, OSError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())