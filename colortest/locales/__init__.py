"""Locale package for i18n JSON resources.

Holds one translation document per supported language (``en.json``,
``ar.json``), read through importlib.resources so the files resolve the same
way from a source checkout and from an installed wheel. English is the
fallback document and carries every key.
"""
