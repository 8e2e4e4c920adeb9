import pytest

from colortest.core.i18n import (
    LocaleFormatError,
    freeze,
    get_list,
    get_subtree,
    key_exists,
    leaf_keys,
    missing_keys,
    resolve,
    resolve_with_params,
    validate_document,
)


PRIMARY = freeze(
    {
        "common": {"save": "حفظ"},
        "tests": {
            "title": "الاختبارات",
            "test_names": {"marquis": "اختبار ماركيز"},
        },
        "calendar": {"months": ["يناير", "فبراير"]},
        "home": {"title": {"short": "nested where the fallback has a string"}},
    }
)
FALLBACK = freeze(
    {
        "common": {"save": "Save", "cancel": "Cancel"},
        "tests": {
            "title": "Chemical Tests",
            "test_names": {"marquis": "Marquis Test", "mecke": "Mecke Test"},
        },
        "calendar": {"months": ["January", "February"]},
        "home": {"title": "Color Testing"},
    }
)


class TestResolve:
    def test_auth_scenario(self, auth_docs):
        primary, fallback = auth_docs
        assert resolve("auth.login.title", primary, fallback) == "Sign In"
        assert resolve("auth.register.title", primary, fallback) == "Register"
        assert resolve("auth.missing.title", primary, fallback) == "auth.missing.title"

    def test_primary_hit_never_touches_fallback(self, untouchable):
        assert resolve("common.save", PRIMARY, untouchable) == "حفظ"
        assert resolve("tests.test_names.marquis", PRIMARY, untouchable) == "اختبار ماركيز"

    @pytest.mark.parametrize("key", ["common.cancel", "tests.test_names.mecke"])
    def test_fallback_only_key_matches_fallback_lookup(self, key):
        assert resolve(key, PRIMARY, FALLBACK) == resolve(key, FALLBACK, FALLBACK)

    @pytest.mark.parametrize(
        "key",
        ["nope", "common.nope", "tests.test_names.simon", "", ".", "common.", ".common.save", "common..save"],
    )
    def test_absent_key_is_echoed(self, key):
        assert resolve(key, PRIMARY, FALLBACK) == key

    def test_subtree_in_primary_falls_through_to_fallback_string(self):
        assert resolve("home.title", PRIMARY, FALLBACK) == "Color Testing"

    def test_subtree_or_sequence_in_both_echoes_key(self):
        assert resolve("tests.test_names", PRIMARY, FALLBACK) == "tests.test_names"
        assert resolve("calendar.months", PRIMARY, FALLBACK) == "calendar.months"

    def test_does_not_index_into_sequences(self):
        assert resolve("calendar.months.0", PRIMARY, FALLBACK) == "calendar.months.0"

    def test_does_not_descend_through_strings(self):
        assert resolve("common.save.label", PRIMARY, FALLBACK) == "common.save.label"

    def test_missing_primary_document_uses_fallback(self):
        assert resolve("common.save", None, FALLBACK) == "Save"
        assert resolve("common.save", None, None) == "common.save"

    def test_plain_dicts_work_without_freezing(self):
        assert resolve("a.b", {"a": {"b": "x"}}, {}) == "x"


class TestResolveWithParams:
    def test_named_parameters(self):
        doc = {"greeting": "Hello {{name}}, you have {{count}} items"}
        out = resolve_with_params("greeting", doc, doc, {"name": "Sam", "count": 3})
        assert out == "Hello Sam, you have 3 items"

    def test_replaces_every_occurrence(self):
        doc = {"echo": "{{w}} and {{w}} and {{w}}"}
        assert resolve_with_params("echo", doc, {}, {"w": "x"}) == "x and x and x"

    def test_without_params_returns_template(self):
        doc = {"welcome": "Welcome, {{name}}"}
        assert resolve_with_params("welcome", doc, {}) == "Welcome, {{name}}"
        assert resolve_with_params("welcome", doc, {}, {}) == "Welcome, {{name}}"

    def test_unknown_placeholders_are_left_alone(self):
        doc = {"msg": "{{a}} {{b}}"}
        assert resolve_with_params("msg", doc, {}, {"a": 1}) == "1 {{b}}"

    def test_number_forms(self):
        doc = {"n": "{{n}}"}
        assert resolve_with_params("n", doc, {}, {"n": 2.0}) == "2"
        assert resolve_with_params("n", doc, {}, {"n": 2.5}) == "2.5"
        assert resolve_with_params("n", doc, {}, {"n": -7}) == "-7"

    @pytest.mark.parametrize(
        "value,expected",
        [(1e-7, "0.0000001"), (1.5e-10, "0.00000000015"), (1e20, "100000000000000000000"), (0.1, "0.1")],
    )
    def test_floats_render_without_exponent(self, value, expected):
        assert resolve_with_params("n", {"n": "{{n}}"}, {}, {"n": value}) == expected

    def test_parameters_apply_in_insertion_order(self):
        doc = {"msg": "{{a}}"}
        assert resolve_with_params("msg", doc, {}, {"a": "{{b}}", "b": "x"}) == "x"
        assert resolve_with_params("msg", doc, {}, {"b": "x", "a": "{{b}}"}) == "{{b}}"

    def test_missing_key_echo_gets_substituted_too(self):
        assert resolve_with_params("no.{{x}}", {}, {}, {"x": "y"}) == "no.y"

    def test_fallback_template_is_used(self):
        assert resolve_with_params("common.cancel", PRIMARY, FALLBACK, {"x": 1}) == "Cancel"


class TestKeyExists:
    def test_string_leaf(self):
        assert key_exists("common.save", PRIMARY)

    def test_subtree_and_sequence_do_not_count(self):
        assert not key_exists("tests.test_names", PRIMARY)
        assert not key_exists("calendar.months", PRIMARY)

    def test_missing(self):
        assert not key_exists("common.cancel", PRIMARY)
        assert not key_exists("", PRIMARY)
        assert not key_exists("common.save", None)


class TestSubtreesAndLists:
    def test_get_subtree_returns_mapping(self):
        names = get_subtree("tests.test_names", FALLBACK)
        assert dict(names) == {"marquis": "Marquis Test", "mecke": "Mecke Test"}

    def test_get_subtree_rejects_leaves(self):
        assert get_subtree("common.save", FALLBACK) is None
        assert get_subtree("calendar.months", FALLBACK) is None
        assert get_subtree("nope", FALLBACK) is None

    def test_get_list(self):
        assert get_list("calendar.months", FALLBACK) == ("January", "February")
        assert get_list("calendar", FALLBACK) is None
        assert get_list("common.save", FALLBACK) is None


class TestDocumentShape:
    def test_valid_document_passes(self):
        validate_document({"a": "x", "b": ["y", "z"], "c": {"d": "w"}})
        validate_document({})

    @pytest.mark.parametrize(
        "doc",
        [
            ["not", "a", "mapping"],
            {"a": 1},
            {"a": {"b": None}},
            {"a": ["x", 2]},
            {1: "x"},
        ],
    )
    def test_invalid_documents_raise(self, doc):
        with pytest.raises(LocaleFormatError):
            validate_document(doc)

    def test_error_names_the_path(self):
        with pytest.raises(LocaleFormatError, match=r"tests\.test_names\.marquis"):
            validate_document({"tests": {"test_names": {"marquis": 5}}})

    def test_frozen_documents_are_read_only(self):
        doc = freeze({"a": {"b": "x"}, "l": ["y"]})
        with pytest.raises(TypeError):
            doc["a"] = "changed"
        with pytest.raises(TypeError):
            doc["a"]["b"] = "changed"
        assert doc["l"] == ("y",)

    def test_freeze_copies(self):
        source = {"a": {"b": "x"}}
        doc = freeze(source)
        source["a"]["b"] = "changed"
        assert doc["a"]["b"] == "x"


class TestKeyInventory:
    def test_leaf_keys(self):
        assert leaf_keys(FALLBACK) == [
            "common.save",
            "common.cancel",
            "tests.title",
            "tests.test_names.marquis",
            "tests.test_names.mecke",
            "calendar.months",
            "home.title",
        ]

    def test_missing_keys(self):
        assert missing_keys(FALLBACK, PRIMARY) == ["common.cancel", "tests.test_names.mecke", "home.title"]
        assert missing_keys(FALLBACK, FALLBACK) == []
        assert missing_keys(FALLBACK, None) == leaf_keys(FALLBACK)
