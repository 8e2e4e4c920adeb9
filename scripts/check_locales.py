#!/usr/bin/env python3
"""Report keys the fallback locale has that other locales are missing.

Exits with status 1 when any supported language is missing keys or failed to load.
"""
from __future__ import annotations

import sys

from colortest.core.config import settings
from colortest.core.i18n import I18N, missing_keys
from colortest.main import bootstrap


def main() -> int:
    bootstrap()
    reference = I18N.fallback_document()
    if reference is None:
        print(f"Fallback locale {settings.FALLBACK_LANG!r} could not be loaded")
        return 1

    status = 0
    for lang in settings.SUPPORTED_LANGS:
        if lang == settings.FALLBACK_LANG:
            continue
        doc = I18N.document(lang)
        if doc is None:
            print(f"[{lang}] not loaded")
            status = 1
            continue
        gaps = missing_keys(reference, doc)
        if gaps:
            status = 1
            print(f"[{lang}] {len(gaps)} missing key(s), served from {settings.FALLBACK_LANG}:")
            for key in gaps:
                print(f"  {key}")
        else:
            print(f"[{lang}] complete")
    return status


if __name__ == "__main__":
    sys.exit(main())
