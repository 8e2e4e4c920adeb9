from __future__ import annotations

from typing import Type

from .core.config import settings
from .core.i18n import I18N
from .core.logging_config import setup_logging, get_logger

log = get_logger(__name__)


def bootstrap(configure_logging: bool = True) -> Type[I18N]:
    """Configure logging and load the packaged locale documents once per process."""
    if configure_logging:
        setup_logging(log_file=settings.LOG_TO_FILE, debug=settings.DEBUG, log_dir=settings.LOG_DIR)
    I18N.load_locales()
    missing = [lang for lang in settings.SUPPORTED_LANGS if lang not in I18N.languages()]
    if missing:
        log.warning("Locales not available, lookups will use %s: %s", settings.FALLBACK_LANG, ", ".join(missing))
    if settings.FALLBACK_LANG not in I18N.languages():
        log.error("Fallback locale %s failed to load; missing keys will echo back", settings.FALLBACK_LANG)
    return I18N
