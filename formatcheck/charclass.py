"""
formatcheck Character Classes

Code-point lookups shared by the grammar validators: ASCII and multibyte tests, full-width/half-width
classification (East Asian width forms), surrogate detection, and UTF-8 byte length.

All functions are pure and operate on code points; none of them normalize their input.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re

# Constants ------------------------------------------------------------------------------------------------------------

# Half-width forms: printable ASCII, half-width katakana, half-width hangul, half-width symbols
_HALF_WIDTH_RANGES = (
    (0x0020, 0x007E),
    (0xFF61, 0xFF9F),
    (0xFFA0, 0xFFDC),
    (0xFFE8, 0xFFEE),
)

# Full-width variants of ASCII '!'..'~'
FULL_WIDTH_ASCII_START = 0xFF01
FULL_WIDTH_ASCII_END = 0xFF5E

_SURROGATES = re.compile("[\ud800-\udfff]")
_SURROGATE_PAIR = re.compile("[\ud800-\udbff][\udc00-\udfff]")


# Methods --------------------------------------------------------------------------------------------------------------


def byte_length(s: str) -> int:
    """
    Return the UTF-8 octet count of s.

    Raises:
        ValueError: If s contains surrogate code points, which have no UTF-8 encoding.

    Examples:
        >>> byte_length("abc")
        3
        >>> byte_length("ｇｍａｉｌ")
        15
    """
    try:
        return len(s.encode("utf-8"))
    except UnicodeEncodeError as e:
        raise ValueError(f"text is not encodable as UTF-8: {e.reason}") from e


def has_surrogates(s: str) -> bool:
    """True if s holds any raw surrogate code point (U+D800..U+DFFF)."""
    return _SURROGATES.search(s) is not None


def is_ascii(s: str) -> bool:
    """True if s is non-empty and every code point is below 0x80."""
    return bool(s) and s.isascii()


def is_full_width(s: str) -> bool:
    """
    True if s contains at least one full-width character.

    A character is full-width when it is outside the half-width forms (printable ASCII,
    half-width katakana/hangul/symbols).

    Examples:
        >>> is_full_width("Good＝Parts")
        True
        >>> is_full_width("abc123")
        False
    """
    return any(not _is_half_width_char(ch) for ch in s)


def is_full_width_ascii(ch: str) -> bool:
    """True if ch is a full-width variant of a printable ASCII character (e.g. 'ｇ', '０')."""
    return FULL_WIDTH_ASCII_START <= ord(ch) <= FULL_WIDTH_ASCII_END


def is_half_width(s: str) -> bool:
    """True if s contains at least one half-width character."""
    return any(_is_half_width_char(ch) for ch in s)


def is_multibyte(s: str) -> bool:
    """True if s contains at least one code point that needs more than one UTF-8 byte."""
    return not s.isascii()


def is_surrogate_pair(s: str) -> bool:
    """
    True if s contains a character outside the Basic Multilingual Plane.

    Such characters are encoded as surrogate pairs in UTF-16. A str built with the
    'surrogatepass' handler may also hold the pair as two code points; both forms count.

    Examples:
        >>> is_surrogate_pair("𠮷野𠮷")
        True
        >>> is_surrogate_pair("吉野竈")
        False
    """
    if any(ord(ch) > 0xFFFF for ch in s):
        return True
    return _SURROGATE_PAIR.search(s) is not None


def is_variable_width(s: str) -> bool:
    """True if s mixes full-width and half-width characters."""
    return is_full_width(s) and is_half_width(s)


# Private Methods ------------------------------------------------------------------------------------------------------

def _is_half_width_char(ch: str) -> bool:
    cp = ord(ch)
    return any(lo <= cp <= hi for lo, hi in _HALF_WIDTH_RANGES)
