"""Text helpers: trimming, escape expansion, message payloads and RFH2 headers."""

from __future__ import annotations

import os
import random
import struct
from pathlib import Path

# Characters used to fill generated message bodies: 'A' (65) up to 'z' (122).
_FIRST_CHAR = 65
_LAST_CHAR = 122
_CHAR_RANGE = _LAST_CHAR - _FIRST_CHAR + 1

# Fixed seed so randomised payloads are repeatable from run to run.
_RNG = random.Random(0)

# MQRFH2 fixed part, written in little-endian (native x86) integer order.
_RFH2_STRUCT = struct.Struct("<4s4l8s2l")
_RFH_STRUC_ID = b"RFH "
_RFH_VERSION_2 = 2
_ENCODING_NATIVE = 0x222
_CCSID_UTF8 = 1208
_FORMAT_STRING = b"MQSTR   "
_RFH_NONE = 0
_LENGTH_FIELD = struct.Struct("<l")

_NAME_VALUE_1 = b"<mcd><Msd>jms_text</Msd></mcd>"
_NAME_VALUE_1_LENGTH = 32
_NAME_VALUE_2 = (
    b"<jms><Dst>topic://TOPIC1</Dst><Tms>1207047258454</Tms><Dlv>1</Dlv>"
    b"<Uci dt='bin.hex'>414D51435A4D53504552463420202020CDF7F147011B0020</Uci></jms>"
)
_NAME_VALUE_2_LENGTH = 144

RFH2_LENGTH = (
    _RFH2_STRUCT.size
    + _LENGTH_FIELD.size
    + _NAME_VALUE_1_LENGTH
    + _LENGTH_FIELD.size
    + _NAME_VALUE_2_LENGTH
)

_ESCAPED_NEWLINE = "\\n"


def rtrim(text: str | None) -> str | None:
    """Remove trailing blanks (spaces only)."""
    if text is None:
        return None
    return text.rstrip(" ")


def ltrim(text: str | None) -> str | None:
    """Remove leading blanks (spaces only)."""
    if text is None:
        return None
    return text.lstrip(" ")


def trim(text: str | None) -> str | None:
    """Remove leading and trailing blanks (spaces only)."""
    return ltrim(rtrim(text))


def ends_with(text: str, ending: str) -> bool:
    """Whether ``text`` ends with ``ending``.

    Only the first occurrence of ``ending`` is considered, and it must not be
    at the very start of ``text``; an empty ``ending`` never matches.
    """
    if text is None:
        raise TypeError("text must not be None")
    index = text.find(ending)
    return index > 0 and index + len(ending) == len(text)


def _expand(text: str, replacement: str) -> str:
    if text is None:
        raise TypeError("text must not be None")
    # A literal "\n" at the very start leaves the whole string untouched.
    if text.startswith(_ESCAPED_NEWLINE):
        return text
    return text.replace(_ESCAPED_NEWLINE, replacement)


def expand_newlines(text: str) -> str:
    """Replace each literal backslash-n with a blank followed by a newline."""
    return _expand(text, " \n")


def expand_newlines_with_tab(text: str) -> str:
    """Replace each literal backslash-n with a newline followed by a tab."""
    return _expand(text, "\n\t")


def read_message_file(path: str | os.PathLike[str]) -> bytes:
    """Return the whole contents of a message file.

    Raises OSError (such as FileNotFoundError) if the file cannot be read.
    """
    return Path(path).read_bytes()


def make_big_string(size: int, randomise: bool = False) -> str:
    """Build a message body of ``size`` letters in the range 'A' to 'z'.

    Without ``randomise`` the characters cycle in order from 'A'; otherwise
    they are drawn from a generator with a fixed seed.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    if randomise:
        codes = (_RNG.randrange(_CHAR_RANGE) + _FIRST_CHAR for _ in range(size))
    else:
        codes = (_FIRST_CHAR + i % _CHAR_RANGE for i in range(size))
    return "".join(map(chr, codes))


def build_rfh2() -> bytes:
    """Build an MQRFH2 header carrying fixed mcd and jms folders."""
    fixed = _RFH2_STRUCT.pack(
        _RFH_STRUC_ID,
        _RFH_VERSION_2,
        RFH2_LENGTH,
        _ENCODING_NATIVE,
        _CCSID_UTF8,
        _FORMAT_STRING,
        _RFH_NONE,
        _CCSID_UTF8,
    )
    header = b"".join(
        (
            fixed,
            _LENGTH_FIELD.pack(_NAME_VALUE_1_LENGTH),
            _NAME_VALUE_1.ljust(_NAME_VALUE_1_LENGTH, b" "),
            _LENGTH_FIELD.pack(_NAME_VALUE_2_LENGTH),
            _NAME_VALUE_2.ljust(_NAME_VALUE_2_LENGTH, b" "),
        )
    )
    assert len(header) == RFH2_LENGTH
    return header


def make_big_string_with_rfh2(size: int) -> bytes:
    """An RFH2 header followed by a ``size``-character cycling message body.

    The header occupies the first ``RFH2_LENGTH`` bytes.
    """
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    return build_rfh2() + make_big_string(size).encode("ascii")


def get_env(name: str, max_length: int) -> str | None:
    """Value of environment variable ``name``.

    Returns None if the variable is not set or its value is longer than
    ``max_length`` characters.
    """
    value = os.environ.get(name)
    if value is None or len(value) > max_length:
        return None
    return value