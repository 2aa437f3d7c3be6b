"""Command Validator — raw input to command or Failure.

Tests cover:
    - Every violated field reported at once, using wire (camelCase) names
    - Unknown fields ignored, defaults applied
    - Non-object input fails on "body"
    - Unknown schema name is a programming error
    - Page numbers are bounded; word page size depends on the view
"""

from uuid import UUID

import pytest

from wordbank.core.domain_types import LanguageScope
from wordbank.core.errors import Failure, FailureKind
from wordbank.schemas.commands import (
    MAX_PAGE, CategoryWordsQuery, LanguagesQuery, LearningLanguagesQuery,
    RegisterCommand, UpdateProfileCommand, UpdateWordCommand,
)
from wordbank.schemas.validate import COMMAND_SCHEMAS, validate


def _fields(failure: Failure) -> set[str]:
    return {d["field"] for d in failure.details}


def test_valid_register_returns_command():
    command = validate("register", {
        "email": "ana@example.com",
        "password": "correct9horse",
        "preferredLanguageId": "pt-BR",
    })
    assert isinstance(command, RegisterCommand)
    assert command.preferred_language_id == "pt-BR"


def test_register_reports_all_violations_together():
    failure = validate("register", {
        "email": "not-an-email",
        "password": "short",
        "preferredLanguageId": "ENGLISH",
    })
    assert isinstance(failure, Failure)
    assert failure.kind is FailureKind.VALIDATION
    assert _fields(failure) == {"email", "password", "preferredLanguageId"}
    assert all({"field", "message", "type"} <= d.keys() for d in failure.details)


def test_missing_fields_reported():
    failure = validate("login", {})
    assert _fields(failure) == {"email", "password"}


def test_unknown_fields_ignored():
    command = validate("login", {
        "email": "ana@example.com", "password": "x", "isAdmin": True,
    })
    assert not isinstance(command, Failure)
    assert not hasattr(command, "isAdmin")


@pytest.mark.parametrize("raw", [None, [], "text", 42])
def test_non_object_input_fails_on_body(raw):
    failure = validate("register", raw)
    assert isinstance(failure, Failure)
    assert _fields(failure) == {"body"}


def test_languages_scope_defaults_to_all():
    query = validate("languages_query", {})
    assert isinstance(query, LanguagesQuery)
    assert query.scope is LanguageScope.ALL


def test_languages_scope_rejects_unknown_value():
    failure = validate("languages_query", {"scope": "everything"})
    assert _fields(failure) == {"scope"}


def test_pagination_defaults_and_coercion():
    query = validate("learning_languages_query", {"pageSize": "25"})
    assert isinstance(query, LearningLanguagesQuery)
    assert (query.page, query.page_size) == (1, 25)


def test_pagination_bounds_all_reported():
    failure = validate("learning_languages_query", {"page": "0", "pageSize": "51"})
    assert _fields(failure) == {"page", "pageSize"}


@pytest.mark.parametrize("schema_name", [
    "learning_languages_query",
    "categories_query",
    "category_words_query",
    "search_words_query",
    "vocabulary_overview_query",
])
def test_page_has_an_upper_bound(schema_name):
    failure = validate(schema_name, {"page": "100000000000000000000"})
    assert isinstance(failure, Failure)
    assert _fields(failure) == {"page"}

    query = validate(schema_name, {"page": str(MAX_PAGE)})
    assert query.page == MAX_PAGE


def test_delete_params_require_uuid():
    failure = validate("delete_learning_language", {"learningLanguageId": "abc"})
    assert _fields(failure) == {"learningLanguageId"}

    uid = "3f2b8a7e-1c4d-4e5f-9a6b-7c8d9e0f1a2b"
    params = validate("delete_learning_language", {"learningLanguageId": uid})
    assert params.learning_language_id == UUID(uid)


def test_include_stats_only_literal_true():
    assert validate("learning_languages_query", {"includeStats": "true"}).include_stats
    assert not validate("learning_languages_query", {"includeStats": "yes"}).include_stats
    assert not validate("learning_languages_query", {}).include_stats


def test_word_page_size_depends_on_view():
    failure = validate("category_words_query", {"pageSize": "80"})
    assert _fields(failure) == {"pageSize"}

    query = validate("category_words_query", {"view": "slider", "pageSize": "80"})
    assert isinstance(query, CategoryWordsQuery)
    assert query.page_size == 80

    failure = validate("category_words_query", {"view": "slider", "pageSize": "101"})
    assert _fields(failure) == {"pageSize"}


def test_word_order_and_direction_defaults():
    query = validate("category_words_query", {})
    assert (query.view.value, query.order_by.value, query.direction.value) == (
        "table", "createdAt", "desc",
    )
    assert _fields(validate("category_words_query", {"orderBy": "length"})) == {"orderBy"}


def test_search_filters_require_uuids():
    failure = validate("search_words_query", {
        "learningLanguageId": "x", "categoryId": "y", "search": "a" * 201,
    })
    assert _fields(failure) == {"learningLanguageId", "categoryId", "search"}


def test_create_word_defaults_examples():
    command = validate("create_word", {"term": "Hund", "translation": "dog"})
    assert command.examples_md == ""
    assert _fields(validate("create_word", {"term": "", "translation": "dog"})) == {"term"}


def test_update_word_needs_a_field():
    failure = validate("update_word", {"colour": "red"})
    assert _fields(failure) == {"body"}
    assert failure.details[0]["message"].endswith("At least one field must be provided")

    assert _fields(validate("update_word", {"term": None})) == {"body"}

    command = validate("update_word", {"translation": "hound"})
    assert isinstance(command, UpdateWordCommand)
    assert command.changes() == {"translation": "hound"}


def test_category_name_length():
    assert _fields(validate("create_category", {"name": ""})) == {"name"}
    assert _fields(validate("update_category", {"name": "x" * 151})) == {"name"}


def test_display_name_is_stripped():
    command = validate("update_profile", {"displayName": "  Ana  "})
    assert isinstance(command, UpdateProfileCommand)
    assert command.display_name == "Ana"


def test_blank_display_name_rejected():
    failure = validate("update_profile", {"displayName": "   "})
    assert _fields(failure) == {"displayName"}


def test_empty_update_leaves_nothing_set():
    command = validate("update_profile", {})
    assert command.model_dump(exclude_unset=True) == {}


def test_reset_requires_admin_token():
    failure = validate("test_reset", {})
    assert _fields(failure) == {"adminToken"}


def test_unknown_schema_is_key_error():
    assert "nope" not in COMMAND_SCHEMAS
    with pytest.raises(KeyError):
        validate("nope", {})
