"""CLI shim for running the converter directly from the repository checkout."""

from byteconv.cli import main
from byteconv.codec import (
    ConversionConfig,
    Format,
    convert,
    decode,
    encode,
    interleave,
)

__all__ = [
    "ConversionConfig",
    "Format",
    "convert",
    "decode",
    "encode",
    "interleave",
    "main",
]


if __name__ == "__main__":
    main()
