"""
formatcheck Validator Options

Immutable, defaulted configuration records for the grammar validators, and the single helper that
composes defaults with caller overrides.

Every validator accepts either an options instance, a plain mapping, or keyword overrides:

    >>> is_url("foo_bar.com", allow_underscores=True)                  # doctest: +SKIP
    >>> is_url("foo_bar.com", {"allow_underscores": True})             # doctest: +SKIP
    >>> is_url("foo_bar.com", URLOptions(allow_underscores=True))      # doctest: +SKIP

Unknown keys are dropped at this boundary (forward compatible) and never reach grammar code.
Out-of-domain values raise from ``__post_init__`` before any input is examined.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re
import warnings

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields, replace as dataclasses_replace
from typing import Any, TypeVar

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value

logger = logging.getLogger(__name__)

O = TypeVar("O")


# Classes --------------------------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class FQDNOptions:
    """
    Options for fully-qualified domain name validation.

    Attributes:
        require_tld: Require at least two labels, the last being an alphabetic or punycode TLD.
        allow_underscores: Permit single '_' inside labels ('foo_bar.com'); '__' is always rejected.
        allow_trailing_dot: Accept one trailing root dot ('example.com.').
        allow_numeric_tld: Accept an all-digit TLD.
    """
    require_tld: bool = True
    allow_underscores: bool = False
    allow_trailing_dot: bool = False
    allow_numeric_tld: bool = False

    def __post_init__(self):
        _check_bools(self)


@dataclass(frozen=True)
class EmailOptions:
    """
    Options for email address validation.

    Attributes:
        allow_display_name: Accept 'Display Name <local@domain>' as well as a bare address.
        require_display_name: Accept only the display-name form; implies allow_display_name.
        allow_utf8_local_part: Accept non-ASCII characters in the local part.
        require_tld: Passed through to the domain FQDN check.
        allow_ip_domain: Accept a bracketed IP literal domain ('user@[192.168.0.1]').
        ignore_gmail_dots: Disregard dots in the local part of gmail.com/googlemail.com addresses.
        ignore_max_length: Skip the 64/254 octet ceilings on local part and domain.
    """
    allow_display_name: bool = False
    require_display_name: bool = False
    allow_utf8_local_part: bool = True
    require_tld: bool = True
    allow_ip_domain: bool = True
    ignore_gmail_dots: bool = False
    ignore_max_length: bool = False

    def __post_init__(self):
        _check_bools(self)

    @property
    def display_name_enabled(self) -> bool:
        return self.allow_display_name or self.require_display_name


@dataclass(frozen=True)
class URLOptions:
    """
    Options for URL validation.

    Attributes:
        protocols: Accepted schemes, compared case-insensitively. Stored as a frozenset.
        require_protocol: Reject URLs without 'scheme://'.
        require_valid_protocol: Reject schemes not listed in protocols.
        require_host: Reject an empty host ('file:///tmp' needs require_host=False).
        require_port: Reject URLs without an explicit port.
        allow_underscores: Passed through to the host FQDN check.
        allow_trailing_dot: Passed through to the host FQDN check.
        allow_protocol_relative_urls: Accept '//host/path'.
        require_tld: Passed through to the host FQDN check.
        allow_fragments: Accept a '#fragment'.
        allow_query_components: Accept a '?query'.
        disallow_auth: Reject 'user:pass@' userinfo.
        validate_length: Reject URLs of 2083 characters or more.
        host_whitelist: If set, host must equal one entry (str) or fullmatch one entry (re.Pattern).
        host_blacklist: If set, host must not equal / fullmatch any entry.
    """
    protocols: frozenset[str] = frozenset({"http", "https", "ftp"})
    require_protocol: bool = False
    require_valid_protocol: bool = True
    require_host: bool = True
    require_port: bool = False
    allow_underscores: bool = False
    allow_trailing_dot: bool = False
    allow_protocol_relative_urls: bool = False
    require_tld: bool = True
    allow_fragments: bool = True
    allow_query_components: bool = True
    disallow_auth: bool = False
    validate_length: bool = True
    host_whitelist: tuple[str | re.Pattern, ...] | None = None
    host_blacklist: tuple[str | re.Pattern, ...] | None = None

    def __post_init__(self):
        _check_bools(self)
        protocols = _as_str_collection(self.protocols, "protocols")
        if not protocols:
            raise ValueError("protocols cannot be empty")
        object.__setattr__(self, "protocols", frozenset(p.lower() for p in protocols))
        for name in ("host_whitelist", "host_blacklist"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, _as_host_list(value, name))

    @property
    def fqdn_options(self) -> FQDNOptions:
        return FQDNOptions(
            require_tld=self.require_tld,
            allow_underscores=self.allow_underscores,
            allow_trailing_dot=self.allow_trailing_dot,
        )


@dataclass(frozen=True)
class DateOptions:
    """
    Options for date validation: which grammar families are tried, in priority order.

    Attributes:
        allow_iso8601: Try ISO-8601 calendar, ordinal and week dates with optional time.
        allow_rfc2822: Try RFC-2822 email header dates.
        allow_locale_formats: Try common locale patterns such as '08/04/2011' and '2011.08.04'.
    """
    allow_iso8601: bool = True
    allow_rfc2822: bool = True
    allow_locale_formats: bool = True

    def __post_init__(self):
        _check_bools(self)


@dataclass(frozen=True)
class CurrencyOptions:
    """
    Options for currency amount validation.

    The defaults describe en-US amounts such as '-$10,123.45'. See ``for_locale()`` for presets.

    Attributes:
        symbol: Currency symbol, matched literally (may be several characters, e.g. 'kr.').
        require_symbol: Reject amounts without the symbol.
        allow_space_after_symbol: Accept one space between a leading symbol and the digits.
        symbol_after_digits: The symbol trails the amount ('10,03 €') instead of leading it.
        allow_negatives: Accept negative amounts at all.
        parens_for_negatives: Negative amounts are written '($1.00)'; a bare '-' is not accepted.
        negative_sign_before_digits: '-' sits between symbol and digits ('¥-100').
        negative_sign_after_digits: '-' trails the digits ('100-').
        allow_negative_sign_placeholder: A space after the symbol stands in for a '-' ('R 10', 'R-10').
        thousands_separator: Single character grouping thousands; groups hold exactly three digits.
        decimal_separator: Single character before the fractional digits.
        allow_decimal: Accept a fractional part.
        require_decimal: Require a fractional part.
        digits_after_decimal: Accepted fractional digit counts. Stored as a tuple.
        allow_space_after_digits: Accept one space between the digits and a trailing symbol.

    Raises:
        TypeError: On wrongly typed fields.
        ValueError: On out-of-domain values (see ``__post_init__``).
    """
    symbol: str = "$"
    require_symbol: bool = False
    allow_space_after_symbol: bool = False
    symbol_after_digits: bool = False
    allow_negatives: bool = True
    parens_for_negatives: bool = False
    negative_sign_before_digits: bool = False
    negative_sign_after_digits: bool = False
    allow_negative_sign_placeholder: bool = False
    thousands_separator: str = ","
    decimal_separator: str = "."
    allow_decimal: bool = True
    require_decimal: bool = False
    digits_after_decimal: tuple[int, ...] = (2,)
    allow_space_after_digits: bool = False

    def __post_init__(self):
        _check_bools(self)

        if not isinstance(self.symbol, str):
            raise TypeError(f"symbol must be a string, got {fmt_type(self.symbol)}")
        if any(ch.isdigit() for ch in self.symbol):
            raise ValueError(f"symbol cannot contain digits, got {fmt_value(self.symbol)}")

        for name in ("thousands_separator", "decimal_separator"):
            sep = getattr(self, name)
            if not isinstance(sep, str):
                raise TypeError(f"{name} must be a string, got {fmt_type(sep)}")
            if len(sep) != 1 or sep.isdigit():
                raise ValueError(f"{name} must be a single non-digit character, got {fmt_value(sep)}")
        if self.thousands_separator == self.decimal_separator:
            raise ValueError(
                f"thousands_separator and decimal_separator must differ, both are {fmt_value(self.decimal_separator)}"
            )

        digits = self.digits_after_decimal
        if isinstance(digits, int) and not isinstance(digits, bool):
            digits = (digits,)
        if not isinstance(digits, Iterable) or isinstance(digits, (str, bytes)):
            raise TypeError(f"digits_after_decimal must be a sequence of int, got {fmt_type(digits)}")
        digits = tuple(digits)
        if not digits:
            raise ValueError("digits_after_decimal cannot be empty")
        for n in digits:
            if not isinstance(n, int) or isinstance(n, bool):
                raise TypeError(f"digits_after_decimal must contain only int, got {fmt_value(n)}")
            if n < 1:
                raise ValueError(f"digits_after_decimal entries must be positive, got {n}")
        object.__setattr__(self, "digits_after_decimal", digits)

        if self.parens_for_negatives and (self.negative_sign_before_digits or self.negative_sign_after_digits):
            warnings.warn(
                "parens_for_negatives takes precedence over negative_sign_before_digits/negative_sign_after_digits; "
                "a bare '-' will not be accepted",
                UserWarning,
                stacklevel=3,
            )
        elif self.negative_sign_before_digits and self.negative_sign_after_digits:
            warnings.warn(
                "negative_sign_after_digits takes precedence over negative_sign_before_digits",
                UserWarning,
                stacklevel=3,
            )

    @classmethod
    def for_locale(cls, locale: str, **overrides) -> "CurrencyOptions":
        """
        Preset options for a locale tag, optionally adjusted with overrides.

        Supported tags: en-US, zh-CN, en-ZA, it-IT, el-GR, da-DK (case-insensitive, '_' or '-').

        Examples:
            >>> CurrencyOptions.for_locale("it-IT").decimal_separator
            ','
            >>> CurrencyOptions.for_locale("xx-XX")
            Traceback (most recent call last):
                ...
            ValueError: unsupported currency locale 'xx-XX'. Supported: da-DK, el-GR, en-US, en-ZA, it-IT, zh-CN
        """
        if not isinstance(locale, str):
            raise TypeError(f"locale must be a string, got {fmt_type(locale)}")
        key = locale.replace("_", "-").lower()
        presets = {k.lower(): v for k, v in CURRENCY_LOCALES.items()}
        if key not in presets:
            supported = ", ".join(sorted(CURRENCY_LOCALES))
            raise ValueError(f"unsupported currency locale '{locale}'. Supported: {supported}")
        return resolve_options(cls, None, **{**presets[key], **overrides})


# Constants ------------------------------------------------------------------------------------------------------------

CURRENCY_LOCALES: dict[str, dict[str, Any]] = {
    "en-US": {},
    "zh-CN": {"symbol": "¥", "negative_sign_before_digits": True},
    "en-ZA": {
        "symbol": "R",
        "negative_sign_before_digits": True,
        "thousands_separator": " ",
        "decimal_separator": ",",
        "allow_negative_sign_placeholder": True,
    },
    "it-IT": {
        "symbol": "€",
        "thousands_separator": ".",
        "decimal_separator": ",",
        "allow_space_after_symbol": True,
    },
    "el-GR": {
        "symbol": "€",
        "thousands_separator": ".",
        "symbol_after_digits": True,
        "decimal_separator": ",",
        "allow_space_after_digits": True,
    },
    "da-DK": {
        "symbol": "kr.",
        "negative_sign_before_digits": True,
        "thousands_separator": ".",
        "decimal_separator": ",",
        "allow_space_after_symbol": True,
    },
}


# Methods --------------------------------------------------------------------------------------------------------------


def resolve_options(cls: type[O], options: O | Mapping[str, Any] | None = None, **overrides) -> O:
    """
    Compose validator options from defaults, a base options value, and overrides.

    Args:
        cls: Options dataclass (e.g. EmailOptions).
        options: None for defaults, an instance of cls, or a mapping of field names to values.
        **overrides: Field values applied last.

    Returns:
        An instance of cls. The input instance is returned unchanged when there is nothing to apply.

    Raises:
        TypeError: If options is neither None, a cls instance nor a mapping, or a field has a wrong type.
        ValueError: If a field value is out of its domain.

    Examples:
        >>> resolve_options(FQDNOptions, {"allow_underscores": True, "colour": "red"})
        FQDNOptions(require_tld=True, allow_underscores=True, allow_trailing_dot=False, allow_numeric_tld=False)
    """
    if options is None:
        base = cls()
        values = dict(overrides)
    elif isinstance(options, cls):
        base = options
        values = dict(overrides)
    elif isinstance(options, Mapping):
        base = cls()
        values = {**options, **overrides}
    else:
        raise TypeError(f"options must be {cls.__name__}, a mapping or None, got {fmt_type(options)}")

    known = {f.name for f in fields(cls)}
    unknown = sorted(str(k) for k in values if k not in known)
    if unknown:
        logger.debug("Ignoring unknown %s key(s): %s", cls.__name__, ", ".join(unknown))

    values = {k: v for k, v in values.items() if k in known}
    if not values:
        return base
    return dataclasses_replace(base, **values)


# Private Methods ------------------------------------------------------------------------------------------------------

def _check_bools(options: Any) -> None:
    for f in fields(options):
        if f.type in (bool, "bool"):
            value = getattr(options, f.name)
            if not isinstance(value, bool):
                raise TypeError(f"{f.name} must be a bool, got {fmt_type(value)}")


def _as_str_collection(value: Any, name: str) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise TypeError(f"{name} must be a collection of strings, got {fmt_type(value)}")
    items = tuple(value)
    non_string = next((v for v in items if not isinstance(v, str)), None)
    if non_string is not None:
        raise TypeError(f"{name} must contain only strings, found {fmt_type(non_string)}")
    return items


def _as_host_list(value: Any, name: str) -> tuple[str | re.Pattern, ...]:
    if isinstance(value, (str, re.Pattern)) or not isinstance(value, Iterable):
        raise TypeError(f"{name} must be a collection of strings or patterns, got {fmt_type(value)}")
    items = tuple(value)
    bad = next((v for v in items if not isinstance(v, (str, re.Pattern))), None)
    if bad is not None:
        raise TypeError(f"{name} must contain only strings or compiled patterns, found {fmt_type(bad)}")
    return items
