"""Locale-aware number, currency, date, time and plural formatting for the two UI languages."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Optional, Union

from .i18n import I18N, get_list, t


log = logging.getLogger(__name__)

_ARABIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")

# Arabic grouping/decimal/percent signs as rendered for ar-SA
_SEPARATORS = {
    "ar": ("٬", "٫", "٪"),
    "en": (",", ".", "%"),
}

DateLike = Union[date, datetime, str]

# (unit, exclusive upper bound in seconds, seconds per unit)
_UNITS = (
    ("second", 60, 1),
    ("minute", 3600, 60),
    ("hour", 86400, 3600),
    ("day", None, 86400),
)


def _separators(lang: str) -> tuple[str, str, str]:
    return _SEPARATORS.get(lang, _SEPARATORS["en"])


def to_native_digits(text: str, lang: str) -> str:
    return text.translate(_ARABIC_DIGITS) if lang == "ar" else text


def format_number(number: float, lang: str, decimals: Optional[int] = None) -> str:
    group, point, _ = _separators(lang)
    if decimals is None:
        text = f"{number:,}" if isinstance(number, int) else f"{number:,.3f}".rstrip("0").rstrip(".")
    else:
        text = f"{number:,.{decimals}f}"
    # Swap through a placeholder so "," and "." do not collide
    text = text.replace(",", "\0").replace(".", point).replace("\0", group)
    return to_native_digits(text, lang)


def format_percentage(value: float, lang: str, decimals: int = 1) -> str:
    _, _, percent = _separators(lang)
    return format_number(value, lang, decimals) + percent


def format_currency(amount: float, lang: str, currency: str = "SAR") -> str:
    """Two-decimal amount with the currency sign from the ``currencies`` group.

    English puts the sign first (``SAR 1,234.50``, ``$5.00``), Arabic after
    the amount. Unknown currency codes are shown as the code itself.
    """
    key = f"currencies.{currency}"
    symbol = t(lang, key)
    if symbol == key:
        symbol = currency
    sign = "-" if amount < 0 else ""
    number = format_number(abs(amount), lang, 2)
    if lang == "ar":
        return f"{sign}{number} {symbol}"
    spacer = " " if symbol[-1:].isalpha() else ""
    return f"{sign}{symbol}{spacer}{number}"


def _as_date(value: DateLike) -> date:
    if isinstance(value, str):
        # fromisoformat only accepts "Z" from Python 3.11 on
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    return value


def format_time(value: Union[DateLike, time], lang: str) -> str:
    """Two-digit 12-hour clock time with the locale's AM/PM marker."""
    moment = value if isinstance(value, time) else _as_date(value)
    hour = getattr(moment, "hour", 0)
    minute = getattr(moment, "minute", 0)
    marker = t(lang, "time.am" if hour < 12 else "time.pm")
    return to_native_digits(f"{hour % 12 or 12:02d}:{minute:02d} {marker}", lang)


def format_date(value: DateLike, lang: str) -> str:
    """Render ``day month year`` using month names from the locale document.

    Always uses the Gregorian calendar.
    """
    d = _as_date(value)
    months = get_list("calendar.months", I18N.document(lang)) or get_list(
        "calendar.months", I18N.fallback_document()
    )
    if not months or len(months) != 12:
        log.debug("No month names for %s, using numeric date", lang)
        return to_native_digits(f"{d.day}/{d.month}/{d.year}", lang)
    return to_native_digits(f"{d.day} {months[d.month - 1]} {d.year}", lang)


def format_relative_time(moment: DateLike, lang: str, now: Optional[datetime] = None) -> str:
    then = _as_date(moment)
    if not isinstance(then, datetime):
        then = datetime(then.year, then.month, then.day)
    if now is None:
        now = datetime.now(then.tzinfo)
    seconds = int((now - then).total_seconds())
    if seconds == 0:
        return t(lang, "time.now")

    past = seconds > 0
    span = abs(seconds)
    for unit, limit, size in _UNITS:
        if limit is None or span < limit:
            count = span // size
            break

    if count == 1:
        if unit == "day":
            key = "time.yesterday" if past else "time.tomorrow"
        else:
            key = f"time.{unit}_ago" if past else f"time.in_{unit}"
    else:
        key = f"time.{unit}s_ago" if past else f"time.in_{unit}s"
    return t(lang, key, count=format_number(count, lang))


def pluralize(count: int, singular: str, plural: str, lang: str) -> str:
    if lang == "ar":
        # Simplified Arabic rules: zero, one, dual, few (3-10), many
        if count == 0:
            return f"لا {plural}"
        if count == 1:
            return singular
        if count == 2:
            return f"{singular}ان"
        if 3 <= count <= 10:
            return f"{count} {plural}"
        return f"{count} {singular}"
    return f"{count} {singular}" if count == 1 else f"{count} {plural}"
