"""
formatcheck Currency Validators

Validation of locale-formatted currency amounts such as '-$10,123.45', '€ 1.234,56' or 'R-10 123'.

A single pattern is composed from CurrencyOptions and cached per options value; CurrencyOptions is
frozen and hashable, so equal options share one compiled pattern.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .options import CurrencyOptions, resolve_options
from .tools import as_text, fmt_value


# Methods --------------------------------------------------------------------------------------------------------------


def is_currency(value: str, options: CurrencyOptions | Mapping[str, Any] | None = None, **overrides) -> bool:
    """
    Check whether a string is a currency amount in the configured format.

    Examples:
        >>> is_currency("-$10,123.45")
        True
        >>> is_currency("$ 32.50", require_symbol=True)
        False
        >>> is_currency("$ 32.50", require_symbol=True, allow_space_after_symbol=True)
        True
        >>> is_currency("R-10 123", CurrencyOptions.for_locale("en-ZA"))
        True
    """
    opts = resolve_options(CurrencyOptions, options, **overrides)
    try:
        value = as_text(value, name="currency amount")
    except ValueError:
        return False
    return currency_pattern(opts).fullmatch(value) is not None


def validate_currency(value: str, options: CurrencyOptions | Mapping[str, Any] | None = None, **overrides) -> str:
    """
    Validate a currency amount.

    Format (all parts driven by options):
        - Whole part: '0', digits without a leading zero, or 1-3 digits followed by groups of exactly
          three digits joined by thousands_separator. May be empty when a decimal part is present.
        - Decimal part: decimal_separator followed by exactly n digits for some n in
          digits_after_decimal; optional unless require_decimal, absent unless allow_decimal.
        - Symbol before the amount, or after it with symbol_after_digits; optional unless
          require_symbol. One space may separate it from the digits with allow_space_after_symbol
          (leading symbol) or allow_space_after_digits (trailing symbol).
        - Negatives: '-' before the symbol by default, between symbol and digits with
          negative_sign_before_digits, trailing with negative_sign_after_digits, or '(...)' with
          parens_for_negatives. allow_negative_sign_placeholder lets a space after the symbol
          stand in for the sign ('R 10' next to 'R-10'). allow_negatives=False rejects them all.

    The amount must contain a digit and may not begin with a space.

    Args:
        value: Candidate amount.
        options: CurrencyOptions, a mapping of its fields, or None for defaults.
        **overrides: CurrencyOptions fields applied on top of options.

    Returns:
        The input unchanged.

    Raises:
        TypeError: If value is not a string or options are mistyped.
        ValueError: If value does not conform.

    Examples:
        >>> validate_currency("$1,234,567.89")
        '$1,234,567.89'
        >>> validate_currency("$1.1")
        Traceback (most recent call last):
            ...
        ValueError: invalid currency amount <str: '$1.1'>: does not match the configured format
    """
    opts = resolve_options(CurrencyOptions, options, **overrides)
    value = as_text(value, name="currency amount")

    if not any("0" <= ch <= "9" for ch in value):
        raise ValueError(f"invalid currency amount {fmt_value(value)}: no digits")
    if value.startswith(" ") or value.startswith("- "):
        raise ValueError(f"invalid currency amount {fmt_value(value)}: cannot start with a space")
    if currency_pattern(opts).fullmatch(value) is None:
        raise ValueError(f"invalid currency amount {fmt_value(value)}: does not match the configured format")
    return value


@lru_cache(maxsize=64)
def currency_pattern(opts: CurrencyOptions) -> re.Pattern:
    """
    Compile the amount pattern described by opts.

    The result is meant for fullmatch(). Cached per options value.

    Examples:
        >>> bool(currency_pattern(CurrencyOptions()).fullmatch("-$.99"))
        True
    """
    symbol = f"(?:{re.escape(opts.symbol)})" + ("" if opts.require_symbol else "?")
    sep = re.escape(opts.thousands_separator)

    # Whole amount: 0 | 12345 | 12,345
    pattern = f"(?:0|[1-9][0-9]*|[1-9][0-9]{{0,2}}(?:{sep}[0-9]{{3}})*)?"

    if opts.allow_decimal or opts.require_decimal:
        counts = "|".join(f"[0-9]{{{n}}}" for n in opts.digits_after_decimal)
        decimal = f"(?:{re.escape(opts.decimal_separator)}(?:{counts}))"
        pattern += decimal if opts.require_decimal else decimal + "?"

    if opts.allow_negatives and not opts.parens_for_negatives:
        if opts.negative_sign_after_digits:
            pattern += "-?"
        elif opts.negative_sign_before_digits:
            pattern = "-?" + pattern

    if opts.allow_negative_sign_placeholder:
        pattern = "(?: (?!-))?" + pattern
    elif opts.allow_space_after_symbol:
        pattern = " ?" + pattern
    elif opts.allow_space_after_digits:
        pattern += r"(?: (?!\Z))?"

    if opts.symbol_after_digits:
        pattern += symbol
    else:
        pattern = symbol + pattern

    if opts.allow_negatives:
        if opts.parens_for_negatives:
            pattern = rf"(?:\({pattern}\)|{pattern})"
        elif not (opts.negative_sign_before_digits or opts.negative_sign_after_digits):
            pattern = "-?" + pattern

    # Needs a digit; no leading space, also not after a sign
    return re.compile(r"(?!-? )(?=.*[0-9])" + pattern)
