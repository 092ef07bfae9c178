"""Convert byte sequences between ASCII, UTF-8, hex and decimal text."""

__version__ = "0.1.0"

from .codec import (
    AsciiDecodeError,
    AsciiEncodeError,
    ConversionConfig,
    ConversionError,
    DecDecodeError,
    DecodeError,
    EncodeError,
    Format,
    GroupingError,
    HexDecodeError,
    Utf8DecodeError,
    Interleaving,
    Utf8EncodeError,
    chunk_bytes,
    convert,
    decode,
    encode,
    interleave,
)

__all__ = [
    "AsciiDecodeError",
    "AsciiEncodeError",
    "ConversionConfig",
    "ConversionError",
    "DecDecodeError",
    "DecodeError",
    "EncodeError",
    "Format",
    "GroupingError",
    "HexDecodeError",
    "Utf8DecodeError",
    "Interleaving",
    "Utf8EncodeError",
    "chunk_bytes",
    "convert",
    "decode",
    "encode",
    "interleave",
]
