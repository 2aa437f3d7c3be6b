"""Command Validator — one generic entry point that turns raw input into a command.

Invariants:
    - validate() never raises for bad client input: Command or Failure
    - All violated fields are reported in a single Failure (never just the first)
    - Non-object input (invalid JSON, arrays, scalars) fails on field "body"
    - An unknown schema name is a programming error (KeyError)

Design Decisions:
    - Explicit name → model registry over passing classes around: routes
      read like the endpoint table, and the registry doubles as documentation
    - Field paths use the wire (camelCase) names the client sent
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from wordbank.core.errors import Failure, field_failure, validation_failure
from wordbank.schemas.commands import (
    CategoriesQuery,
    CategoryNameCommand,
    CategoryParams,
    CategoryWordsQuery,
    Command,
    CreateLearningLanguageCommand,
    CreateWordCommand,
    DeleteLearningLanguageParams,
    LanguagesQuery,
    LearningLanguagesQuery,
    LoginCommand,
    RegisterCommand,
    SearchWordsQuery,
    TestResetCommand,
    UpdateProfileCommand,
    UpdateWordCommand,
    VocabularyOverviewQuery,
    WordParams,
)

COMMAND_SCHEMAS: dict[str, type[Command]] = {
    "register": RegisterCommand,
    "login": LoginCommand,
    "languages_query": LanguagesQuery,
    "learning_languages_query": LearningLanguagesQuery,
    "create_learning_language": CreateLearningLanguageCommand,
    "delete_learning_language": DeleteLearningLanguageParams,
    "learning_language_params": DeleteLearningLanguageParams,
    "categories_query": CategoriesQuery,
    "create_category": CategoryNameCommand,
    "update_category": CategoryNameCommand,
    "category_params": CategoryParams,
    "category_words_query": CategoryWordsQuery,
    "search_words_query": SearchWordsQuery,
    "create_word": CreateWordCommand,
    "update_word": UpdateWordCommand,
    "word_params": WordParams,
    "vocabulary_overview_query": VocabularyOverviewQuery,
    "update_profile": UpdateProfileCommand,
    "test_reset": TestResetCommand,
}


def validate(schema_name: str, raw_input: Any) -> Command | Failure:
    """Validate raw body/query/path input against a named command schema."""
    schema = COMMAND_SCHEMAS[schema_name]
    if not isinstance(raw_input, Mapping):
        return field_failure(
            "body", "Expected a JSON object", "model_attributes_type",
        )
    try:
        return schema.model_validate(dict(raw_input))
    except ValidationError as exc:
        return validation_failure(
            "Invalid request data", field_errors(exc.errors()),
        )


def field_errors(errors: list[dict]) -> list[dict]:
    """Flatten pydantic errors into {field, message, type} entries."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]) or "body",
            "message": e["msg"],
            "type": e["type"],
        }
        for e in errors
    ]
