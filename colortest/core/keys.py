"""Key paths used by the UI, kept in one place so typos show up as attribute errors."""

from __future__ import annotations


class TranslationKeys:
    class COMMON:
        LOADING = "common.loading"
        ERROR = "common.error"
        SUCCESS = "common.success"
        CANCEL = "common.cancel"
        CONFIRM = "common.confirm"
        SAVE = "common.save"
        EDIT = "common.edit"
        DELETE = "common.delete"
        ADD = "common.add"
        SEARCH = "common.search"
        NEXT = "common.next"
        PREVIOUS = "common.previous"
        CLOSE = "common.close"
        BACK = "common.back"
        HOME = "common.home"

    class NAVIGATION:
        HOME = "navigation.home"
        TESTS = "navigation.tests"
        RESULTS = "navigation.results"
        ADMIN = "navigation.admin"
        PROFILE = "navigation.profile"
        SETTINGS = "navigation.settings"
        LOGOUT = "navigation.logout"
        LOGIN = "navigation.login"
        REGISTER = "navigation.register"

    class HOME:
        TITLE = "home.title"
        SUBTITLE = "home.subtitle"
        DESCRIPTION = "home.description"
        GET_STARTED = "home.get_started"

    class TESTS:
        TITLE = "tests.title"
        SUBTITLE = "tests.subtitle"
        SELECT_TEST = "tests.select_test"
        PREPARATION_TIME = "tests.preparation_time"
        MINUTES = "tests.minutes"

    class TEST_PROCESS:
        STEP1 = "test_process.step_titles.step1"
        STEP2 = "test_process.step_titles.step2"
        STEP3 = "test_process.step_titles.step3"
        STEP4 = "test_process.step_titles.step4"

    class ADMIN:
        TITLE = "admin.title"
        DASHBOARD = "admin.dashboard"

    class AUTH:
        LOGIN_TITLE = "auth.login.title"
        REGISTER_TITLE = "auth.register.title"
        EMAIL = "auth.login.email"
        PASSWORD = "auth.login.password"

    class NOTIFICATIONS:
        TEST_COMPLETED = "notifications.test_completed"
        RESULT_SAVED = "notifications.result_saved"
        LOGIN_SUCCESS = "notifications.login_success"
        ERROR_OCCURRED = "notifications.error_occurred"


def all_keys() -> list[str]:
    """Every key path declared on :class:`TranslationKeys`."""
    out: list[str] = []
    for group in vars(TranslationKeys).values():
        if isinstance(group, type):
            out.extend(v for k, v in vars(group).items() if k.isupper() and isinstance(v, str))
    return out
