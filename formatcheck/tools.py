#
# formatcheck Tools
#

# Standard library -----------------------------------------------------------------------------------------------------

from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------

from .charclass import has_surrogates


# Methods --------------------------------------------------------------------------------------------------------------


def as_text(value: Any, *, name: str = "value") -> str:
    """Return the text a validator should inspect.

    Validators take ``str``. Raw ``bytes``/``bytearray`` are accepted as strict UTF-8 so that every
    byte sequence has a verdict; nothing else is coerced.

    Args:
        value: Candidate input.
        name: Label used in error messages.

    Returns:
        The input as ``str``.

    Raises:
        TypeError: If value is not str, bytes or bytearray (caller misuse).
        ValueError: If bytes are not valid UTF-8, or the text holds raw surrogate code points.

    Examples:
        >>> as_text("foo@bar.com")
        'foo@bar.com'
        >>> as_text(b"caf\\xc3\\xa9")
        'café'
        >>> as_text(42)
        Traceback (most recent call last):
            ...
        TypeError: value must be a string, got <type: int>
    """
    if isinstance(value, str):
        text = value
    elif isinstance(value, (bytes, bytearray)):
        try:
            text = bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValueError(f"{name} is not valid UTF-8: {e.reason} at byte {e.start}") from e
    else:
        raise TypeError(f"{name} must be a string, got {fmt_type(value)}")

    if has_surrogates(text):
        raise ValueError(f"{name} contains unpaired surrogate code points")
    return text


def fmt_type(obj: Any) -> str:
    """Format type information for exception messages.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(int)
        '<type: int>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)
    return f"<type: {type_name}>"


def fmt_value(x: Any, *, max_repr: int = 80) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Long inputs (a 3000-character URL, say) are truncated so messages stay readable; quoted
    reprs keep their quotes and the ellipsis goes outside them. A '>' in the repr is escaped
    so the wrapper stays unambiguous.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("hello world", max_repr=8)
        "<str: 'hell'...>"
    """
    t = type(x).__name__
    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    r = _fmt_truncate(base_repr.replace(">", "\\>"), max_repr)
    return f"<{t}: {r}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(s: str, max_len: int) -> str:
    """
    Truncate s to at most max_len visible characters before appending the ellipsis.

    Quoted reprs keep both quotes with the ellipsis placed after the closing one.
    """
    if max_len <= 0:
        return ""
    if len(s) <= max_len:
        return s

    if len(s) >= 2 and s[0] in ("'", '"') and s[-1] == s[0]:
        inner_budget = max(1, max_len - 4)
        return f"{s[0]}{s[1:1 + inner_budget]}{s[0]}..."

    return s[:max(1, max_len)] + "..."
