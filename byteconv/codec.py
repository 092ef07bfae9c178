import dataclasses
import enum
import functools
import logging
import re
import string
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset(string.hexdigits)
DEC_DELIMITER_PATTERN = re.compile(r"\s*,\s*|\s+")
DEC_TOKEN_PATTERN = re.compile(r"\+?0*([0-9]+)")
ASCII_MAX = 127


@functools.total_ordering
class Format(enum.Enum):
    """Textual representation of a byte sequence."""

    ASCII = "ascii"
    UTF8 = "utf8"
    HEX = "hex"
    DEC = "dec"

    @classmethod
    def parse(cls, token: str) -> "Format":
        try:
            return cls(token.strip().lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise ValueError(f"unknown format {token!r} (choose from {choices})") from None

    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other):
        if not isinstance(other, Format):
            return NotImplemented
        return self._rank() < other._rank()

    def __str__(self) -> str:
        return self.value


class ConversionError(ValueError):
    """Base class for every decode or encode failure."""


class DecodeError(ConversionError):
    pass


class EncodeError(ConversionError):
    pass


class AsciiDecodeError(DecodeError):
    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(
            f"non-ASCII character {char!r} (U+{ord(char):04X}) at position {position}"
        )


class Utf8DecodeError(DecodeError):
    def __init__(self, position: int, char: str):
        self.position = position
        self.char = char
        super().__init__(
            f"lone surrogate U+{ord(char):04X} at position {position} has no utf-8 encoding"
        )


class HexDecodeError(DecodeError):
    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"invalid hex string: {detail}")


class DecDecodeError(DecodeError):
    def __init__(self, token: str):
        self.token = token
        if token == "":
            message = "empty byte value in decimal list"
        else:
            message = f"invalid byte value {token!r} (expected an integer from 0 to 255)"
        super().__init__(message)


class AsciiEncodeError(EncodeError):
    def __init__(self, position: int, value: int):
        self.position = position
        self.value = value
        super().__init__(f"byte {value} at position {position} is outside the ASCII range")


class Utf8EncodeError(EncodeError):
    def __init__(self, valid_up_to: int, reason: str):
        self.valid_up_to = valid_up_to
        self.reason = reason
        super().__init__(f"invalid utf-8 sequence after {valid_up_to} valid bytes: {reason}")


class GroupingError(EncodeError):
    def __init__(self, grouping: int):
        self.grouping = grouping
        super().__init__(f"grouping must be a positive number of bytes, got {grouping}")


@dataclasses.dataclass(frozen=True)
class Interleaving:
    separator: str
    grouping: int


@dataclasses.dataclass(frozen=True)
class ConversionConfig:
    input_format: Format
    output_format: Format
    data: str
    interleaving: Optional[Interleaving] = None

    @classmethod
    def from_options(
        cls,
        input_format: Format,
        output_format: Format,
        data: str,
        separator: Optional[str] = None,
        grouping: Optional[int] = None,
    ) -> "ConversionConfig":
        if (separator is None) != (grouping is None):
            raise ValueError("--separator and --grouping must be given together")
        interleaving = None
        if separator is not None:
            interleaving = Interleaving(separator=separator, grouping=grouping)
        return cls(
            input_format=input_format,
            output_format=output_format,
            data=data,
            interleaving=interleaving,
        )


def _decode_ascii(text: str) -> bytes:
    for position, char in enumerate(text):
        if ord(char) > ASCII_MAX:
            raise AsciiDecodeError(position, char)
    return text.encode("ascii")


def _hex_digits(text: str) -> List[Tuple[int, str]]:
    """Pair each hex digit of ``text`` with its index, skipping every ``0x``."""
    digits: List[Tuple[int, str]] = []
    index = 0
    while index < len(text):
        if text.startswith("0x", index):
            index += 2
            continue
        digits.append((index, text[index]))
        index += 1
    return digits


def _decode_hex(text: str) -> bytes:
    digits = _hex_digits(text)
    if len(digits) % 2:
        raise HexDecodeError(f"odd number of digits ({len(digits)})")
    for index, char in digits:
        if char not in HEX_DIGITS:
            raise HexDecodeError(f"invalid character {char!r} at position {index}")
    return bytes.fromhex("".join(char for _, char in digits))


def _decode_dec(text: str) -> bytes:
    text = text.strip()
    if not text:
        return b""
    values: List[int] = []
    for token in DEC_DELIMITER_PATTERN.split(text):
        match = DEC_TOKEN_PATTERN.fullmatch(token)
        if match is None:
            raise DecDecodeError(token)
        significant = match.group(1)
        if len(significant) > 3 or int(significant) > 255:
            raise DecDecodeError(token)
        values.append(int(significant))
    return bytes(values)


def _decode_utf8(text: str) -> bytes:
    # argv bytes that are not valid UTF-8 arrive as surrogateescape code points
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError as exc:
        raise Utf8DecodeError(exc.start, text[exc.start]) from exc


def decode(fmt: Format, text: str) -> bytes:
    """Decode ``text`` written in ``fmt`` into raw bytes.

    Raises a :class:`DecodeError` subclass when ``text`` is not valid for
    the format.
    """
    if fmt is Format.ASCII:
        data = _decode_ascii(text)
    elif fmt is Format.UTF8:
        data = _decode_utf8(text)
    elif fmt is Format.HEX:
        data = _decode_hex(text)
    elif fmt is Format.DEC:
        data = _decode_dec(text)
    else:
        raise ValueError(f"unsupported format: {fmt!r}")
    logger.debug("decoded %d characters of %s into %d bytes", len(text), fmt, len(data))
    return data


def encode(fmt: Format, data: bytes) -> str:
    """Encode raw bytes as ``fmt`` text.

    Hex output is lowercase with no prefix; decimal output is the byte
    values concatenated without a separator, so callers usually want
    :func:`interleave` for it.
    """
    if fmt is Format.ASCII:
        for position, value in enumerate(data):
            if value > ASCII_MAX:
                raise AsciiEncodeError(position, value)
        return bytes(data).decode("ascii")
    if fmt is Format.UTF8:
        try:
            return bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise Utf8EncodeError(exc.start, exc.reason) from exc
    if fmt is Format.HEX:
        return bytes(data).hex()
    if fmt is Format.DEC:
        return "".join(str(value) for value in data)
    raise ValueError(f"unsupported format: {fmt!r}")


def chunk_bytes(data: bytes, grouping: int) -> List[bytes]:
    if grouping < 1:
        raise GroupingError(grouping)
    return [data[i : i + grouping] for i in range(0, len(data), grouping)]


def interleave(fmt: Format, data: bytes, separator: str, grouping: int) -> str:
    """Encode ``data`` in chunks of ``grouping`` bytes joined by ``separator``."""
    chunks = chunk_bytes(bytes(data), grouping)
    logger.debug("encoding %d bytes as %s in %d chunk(s)", len(data), fmt, len(chunks))
    return separator.join(encode(fmt, chunk) for chunk in chunks)


def convert(config: ConversionConfig) -> str:
    data = decode(config.input_format, config.data)
    if config.interleaving is None:
        return encode(config.output_format, data)
    return interleave(
        config.output_format,
        data,
        config.interleaving.separator,
        config.interleaving.grouping,
    )


__all__ = [
    "Format",
    "ConversionError",
    "DecodeError",
    "EncodeError",
    "AsciiDecodeError",
    "HexDecodeError",
    "Utf8DecodeError",
    "DecDecodeError",
    "AsciiEncodeError",
    "Utf8EncodeError",
    "GroupingError",
    "Interleaving",
    "ConversionConfig",
    "decode",
    "encode",
    "chunk_bytes",
    "interleave",
    "convert",
]
