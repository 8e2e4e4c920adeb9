from __future__ import annotations

import re
from typing import List, Optional

from .config import settings


_URL_LANG_RE = re.compile(r"/([a-z]{2})/")
_ACCEPT_RE = re.compile(r"^\s*([A-Za-z]{1,8})(?:-[A-Za-z0-9]{1,8})*\s*(?:;\s*q\s*=\s*([0-9.]+))?\s*$")

RTL_LANGS = {"ar"}


def is_valid_language(lang: str | None) -> bool:
    return lang in settings.SUPPORTED_LANGS


def text_direction(lang: str) -> str:
    return "rtl" if lang in RTL_LANGS else "ltr"


def font_family(lang: str) -> str:
    return "font-arabic" if lang == "ar" else "font-english"


def opposite_language(lang: str) -> str:
    # Only meaningful for the two-language setup
    return "en" if lang == "ar" else "ar"


def localized_url(path: str, lang: str, base_url: str | None = None) -> str:
    """Build ``<base>/<lang>/<path>``.

    >>> localized_url("/tests/marquis", "ar")
    '/ar/tests/marquis'
    """
    base = settings.BASE_URL if base_url is None else base_url
    clean_path = path[1:] if path.startswith("/") else path
    return f"{base}/{lang}/{clean_path}"


def language_from_url(url: str) -> Optional[str]:
    m = _URL_LANG_RE.search(url)
    if m and is_valid_language(m.group(1)):
        return m.group(1)
    return None


def rank_languages(accept_language: str | None) -> List[str]:
    """Primary subtags of an ``Accept-Language`` header, best ``q`` first.

    Ties keep header order; entries with a malformed or zero weight are dropped.
    """
    ranked = []
    for pos, part in enumerate((accept_language or "").split(",")):
        m = _ACCEPT_RE.match(part)
        if not m:
            continue
        try:
            q = float(m.group(2)) if m.group(2) else 1.0
        except ValueError:
            continue
        if q <= 0:
            continue
        ranked.append((-q, pos, m.group(1).lower()))
    return [code for _, _, code in sorted(ranked)]


def detect_language(accept_language: str | None) -> str:
    for code in rank_languages(accept_language):
        if is_valid_language(code):
            return code
    return settings.DEFAULT_LANG
