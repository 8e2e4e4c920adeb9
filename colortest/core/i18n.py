from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from importlib import resources
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

from .config import settings
from .languages import rank_languages


log = logging.getLogger(__name__)

LocaleNode = Union[str, Tuple[str, ...], Mapping]

TEST_NAMES_KEY = "tests.test_names"
TEST_DESCRIPTIONS_KEY = "tests.test_descriptions"
COLORS_KEY = "colors"
SUBSTANCES_KEY = "substances"

_MISSING = object()


class LocaleFormatError(ValueError):
    """Raised when a locale document does not have the expected tree shape."""


def validate_document(node: Any, path: str = "") -> None:
    """Check that ``node`` is a mapping tree with string or string-list leaves."""
    if not isinstance(node, Mapping):
        raise LocaleFormatError(f"{path or '<root>'}: expected a mapping, got {type(node).__name__}")
    for key, value in node.items():
        if not isinstance(key, str):
            raise LocaleFormatError(f"{path or '<root>'}: non-string key {key!r}")
        here = f"{path}.{key}" if path else key
        if isinstance(value, str):
            continue
        if isinstance(value, (list, tuple)):
            for i, item in enumerate(value):
                if not isinstance(item, str):
                    raise LocaleFormatError(f"{here}[{i}]: expected a string, got {type(item).__name__}")
            continue
        validate_document(value, here)


def freeze(node: Any) -> LocaleNode:
    """Return a read-only copy: mappings become proxies, lists become tuples."""
    if isinstance(node, Mapping):
        return MappingProxyType({k: freeze(v) for k, v in node.items()})
    if isinstance(node, (list, tuple)):
        return tuple(node)
    return node


def _walk(key: str, document: Optional[Mapping]) -> Any:
    node: Any = document
    for segment in key.split("."):
        if isinstance(node, Mapping) and segment in node:
            node = node[segment]
        else:
            return _MISSING
    return node


def resolve(key: str, primary: Optional[Mapping], fallback: Optional[Mapping]) -> str:
    """Look ``key`` up in ``primary``, then ``fallback``; echo the key if neither has a string."""
    value = _walk(key, primary)
    if isinstance(value, str):
        return value
    value = _walk(key, fallback)
    if isinstance(value, str):
        return value
    log.debug("Translation not found for key: %s", key)
    return key


def _param_text(value: Any) -> str:
    # Floats render positionally: 2.0 -> "2", 1e-07 -> "0.0000001"
    if isinstance(value, float) and math.isfinite(value):
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    return str(value)


def resolve_with_params(
    key: str,
    primary: Optional[Mapping],
    fallback: Optional[Mapping],
    params: Optional[Mapping[str, Any]] = None,
) -> str:
    """Resolve ``key`` and replace every ``{{name}}`` placeholder.

    Parameters are applied in the mapping's iteration order, so a value that
    itself contains a placeholder can be expanded by a later parameter.
    """
    text = resolve(key, primary, fallback)
    if params:
        for name, value in params.items():
            text = text.replace("{{" + str(name) + "}}", _param_text(value))
    return text


def key_exists(key: str, document: Optional[Mapping]) -> bool:
    return isinstance(_walk(key, document), str)


def get_subtree(key: str, document: Optional[Mapping]) -> Optional[Mapping]:
    value = _walk(key, document)
    return value if isinstance(value, Mapping) else None


def get_list(key: str, document: Optional[Mapping]) -> Optional[Tuple[str, ...]]:
    value = _walk(key, document)
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return None


def leaf_keys(document: Optional[Mapping], prefix: str = "") -> List[str]:
    """Dotted paths of every string or sequence leaf, in document order."""
    out: List[str] = []
    for key, value in (document or {}).items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, Mapping):
            out.extend(leaf_keys(value, path))
        else:
            out.append(path)
    return out


def missing_keys(reference: Optional[Mapping], document: Optional[Mapping]) -> List[str]:
    """Leaf keys of ``reference`` that ``document`` does not resolve to the same kind of leaf."""
    out = []
    for key in leaf_keys(reference):
        ref = _walk(key, reference)
        found = _walk(key, document)
        if isinstance(ref, str) and not isinstance(found, str):
            out.append(key)
        elif isinstance(ref, (list, tuple)) and not isinstance(found, (list, tuple)):
            out.append(key)
    return out


_EMPTY: Mapping = MappingProxyType({})


class I18N:
    _messages: Dict[str, Mapping] = {}

    @classmethod
    def load_locales(cls, languages: Iterable[str] | None = None, package: str | None = None) -> None:
        # Load packaged locale files
        package = package or settings.LOCALES_PACKAGE
        try:
            root = resources.files(package)
        except (ImportError, TypeError) as e:
            log.error("Locale package %s is not available: %s", package, e)
            return
        for lang in languages or settings.SUPPORTED_LANGS:
            try:
                raw = root.joinpath(f"{lang}.json").read_text(encoding="utf-8")
                cls.register(lang, json.loads(raw))
            except (OSError, ValueError) as e:
                log.warning("Failed to load locale %s: %s", lang, e)
        log.info("Loaded locales: %s", ", ".join(sorted(cls._messages)) or "none")

    @classmethod
    def register(cls, lang: str, document: Mapping) -> None:
        validate_document(document)
        cls._messages[lang] = freeze(document)

    @classmethod
    def clear(cls) -> None:
        cls._messages = {}

    @classmethod
    def languages(cls) -> Tuple[str, ...]:
        return tuple(cls._messages)

    @classmethod
    def document(cls, lang: str) -> Optional[Mapping]:
        return cls._messages.get(lang)

    @classmethod
    def fallback_document(cls) -> Optional[Mapping]:
        return cls._messages.get(settings.FALLBACK_LANG)

    @classmethod
    def all_translations(cls, lang: str) -> Mapping:
        doc = cls._messages.get(lang) or cls.fallback_document()
        return doc if doc is not None else _EMPTY

    @classmethod
    def translator(cls, lang: str) -> Callable[..., str]:
        """Return ``t(key, **params)`` bound to ``lang`` with the fallback language behind it."""
        primary = cls.document(lang)
        fallback = cls.fallback_document()

        def _t(key: str, **params: Any) -> str:
            return resolve_with_params(key, primary, fallback, params)

        return _t

    @classmethod
    def has_translation(cls, lang: str, key: str) -> bool:
        return key_exists(key, cls.document(lang))

    @classmethod
    def translation_object(cls, lang: str, key: str) -> Optional[Mapping]:
        return get_subtree(key, cls.document(lang))

    @staticmethod
    def pick_lang(accept_language: str | None, fallback: str | None = None) -> str:
        """Choose a loaded language from an ``Accept-Language`` header value."""
        fallback = fallback or settings.DEFAULT_LANG
        for code in rank_languages(accept_language):
            if code in I18N._messages:
                return code
        return fallback if fallback in I18N._messages else settings.FALLBACK_LANG


def t(lang: str, key: str, **kwargs: Any) -> str:
    return resolve_with_params(key, I18N.document(lang), I18N.fallback_document(), kwargs)


def _named_subtree(lang: str, key: str) -> Mapping:
    found = I18N.translation_object(lang, key)
    return found if found is not None else _EMPTY


def get_test_names(lang: str) -> Mapping:
    return _named_subtree(lang, TEST_NAMES_KEY)


def get_test_descriptions(lang: str) -> Mapping:
    return _named_subtree(lang, TEST_DESCRIPTIONS_KEY)


def get_color_names(lang: str) -> Mapping:
    return _named_subtree(lang, COLORS_KEY)


def get_substance_names(lang: str) -> Mapping:
    return _named_subtree(lang, SUBSTANCES_KEY)


def _localized_item(names: Mapping, item_key: str) -> str:
    value = names.get(item_key)
    return value if isinstance(value, str) and value else item_key


def get_localized_test_name(test_key: str, lang: str) -> str:
    return _localized_item(get_test_names(lang), test_key)


def get_localized_color_name(color_key: str, lang: str) -> str:
    return _localized_item(get_color_names(lang), color_key)


def get_localized_substance_name(substance_key: str, lang: str) -> str:
    return _localized_item(get_substance_names(lang), substance_key)
