from collections.abc import Mapping

import pytest

from colortest.core.i18n import I18N


class UntouchableMapping(Mapping):
    """Mapping that fails the test if anything reads from it."""

    def __getitem__(self, key):
        raise AssertionError(f"fallback document was consulted for {key!r}")

    def __iter__(self):
        raise AssertionError("fallback document was iterated")

    def __len__(self):
        raise AssertionError("fallback document was sized")


@pytest.fixture
def untouchable():
    return UntouchableMapping()


@pytest.fixture
def registry():
    """Empty I18N registry, restored after the test."""
    saved = dict(I18N._messages)
    I18N.clear()
    yield I18N
    I18N._messages = saved


@pytest.fixture
def packaged(registry):
    """Registry loaded from the packaged en/ar documents."""
    registry.load_locales()
    return registry


@pytest.fixture
def auth_docs():
    primary = {"auth": {"login": {"title": "Sign In"}}}
    fallback = {
        "auth": {
            "login": {"title": "Sign In (EN)"},
            "register": {"title": "Register"},
        }
    }
    return primary, fallback
