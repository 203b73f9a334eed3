"""
formatcheck Mobile Phone Validators

Locale-specific mobile number grammars such as '+086-13238234822' (zh-CN), '07888814488' (en-GB)
or '+852-9123-4567' (en-HK).

Numbers are matched as written: separators are only accepted where a locale's grammar places them,
and nothing is stripped or normalized beforehand.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import as_text, fmt_type, fmt_value


# Constants ------------------------------------------------------------------------------------------------------------

_NORWAY = re.compile(r"(?:\+?47)?[49][0-9]{7}")

MOBILE_PHONE_LOCALES: dict[str, re.Pattern] = {
    "el-GR": re.compile(r"(?:\+?30)?69[0-9]{8}"),
    "en-AU": re.compile(r"(?:\+?61|0)4[0-9]{8}"),
    "en-GB": re.compile(r"(?:\+?44|0)7[0-9]{9}"),
    "en-HK": re.compile(r"(?:\+?852-?)?[569][0-9]{3}-?[0-9]{4}"),
    "en-NZ": re.compile(r"(?:\+?64|0)2[0-9]{7,9}"),
    # NANP: area code and exchange start with 2-9, exchange is not an N11 service code
    "en-US": re.compile(r"(?:\+?1)?[2-9][0-9]{2}[2-9](?!11)[0-9]{6}"),
    "en-ZA": re.compile(r"(?:\+?27|0)[0-9]{9}"),
    "en-ZM": re.compile(r"(?:\+26)?09[567][0-9]{7}"),
    "fr-FR": re.compile(r"(?:\+?33|0)[67][0-9]{8}"),
    "nb-NO": _NORWAY,
    "nn-NO": _NORWAY,
    "ru-RU": re.compile(r"(?:\+?7|8)?9[0-9]{9}"),
    "vi-VN": re.compile(r"(?:0|\+?84)?(?:1(?:2[0-9]|6[2-9]|88|99)|9(?!5)[0-9])[0-9]{7}"),
    "zh-CN": re.compile(r"(?:\+?0?86-?)?1[345789][0-9]{9}"),
    "zh-TW": re.compile(r"(?:\+?886-?|0)?9[0-9]{8}"),
}


# Methods --------------------------------------------------------------------------------------------------------------


def is_mobile_phone(value: str, locale: str) -> bool:
    """
    Check whether a string is a mobile phone number of the given locale.

    Examples:
        >>> is_mobile_phone("+86-17823492338", "zh-CN")
        True
        >>> is_mobile_phone("010-38238383", "zh-CN")
        False
        >>> is_mobile_phone("+447861235675", "en_gb")
        True
    """
    pattern = mobile_phone_pattern(locale)
    try:
        value = as_text(value, name="phone number")
    except ValueError:
        return False
    return pattern.fullmatch(value) is not None


def validate_mobile_phone(value: str, locale: str) -> str:
    """
    Validate a mobile phone number against a locale grammar.

    Args:
        value: Candidate number, with the separators the locale allows ('+', '-').
        locale: Locale tag, case-insensitive, with '-' or '_' (see MOBILE_PHONE_LOCALES).

    Returns:
        The input unchanged.

    Raises:
        TypeError: If value or locale is not a string.
        ValueError: If the locale is unsupported or value does not conform.

    Examples:
        >>> validate_mobile_phone("0612457898", "fr-FR")
        '0612457898'
        >>> validate_mobile_phone("0112457898", "fr-FR")
        Traceback (most recent call last):
            ...
        ValueError: invalid fr-FR mobile phone number <str: '0112457898'>
    """
    pattern = mobile_phone_pattern(locale)
    value = as_text(value, name="phone number")
    if pattern.fullmatch(value) is None:
        raise ValueError(f"invalid {_canonical_locale(locale)} mobile phone number {fmt_value(value)}")
    return value


def mobile_phone_pattern(locale: str) -> re.Pattern:
    """
    Return the compiled number grammar for a locale tag, meant for fullmatch().

    Examples:
        >>> mobile_phone_pattern("nn_NO") is mobile_phone_pattern("nb-NO")
        True

    Raises:
        TypeError: If locale is not a string.
        ValueError: If locale has no grammar; the message lists the supported tags.
    """
    return MOBILE_PHONE_LOCALES[_canonical_locale(locale)]


# Private Methods ------------------------------------------------------------------------------------------------------

def _canonical_locale(locale: str) -> str:
    if not isinstance(locale, str):
        raise TypeError(f"locale must be a string, got {fmt_type(locale)}")
    key = locale.replace("_", "-").lower()
    for name in MOBILE_PHONE_LOCALES:
        if name.lower() == key:
            return name
    supported = ", ".join(sorted(MOBILE_PHONE_LOCALES))
    raise ValueError(f"unsupported mobile phone locale '{locale}'. Supported: {supported}")
