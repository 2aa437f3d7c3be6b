"""Command Schemas — declarative input shapes for every endpoint.

Invariants:
    - A command instance exists only after validation (see schemas/validate.py)
    - Unknown fields are ignored, never rejected
    - Defaults (scope, page, pageSize, orderBy, direction) are resolved here,
      not in services
    - Wire names are camelCase; Python attributes are snake_case
    - page is bounded above so the computed OFFSET always fits a 64-bit integer

Design Decisions:
    - Pydantic models as the schema description: field → type + constraint,
      interpreted by one generic validate() instead of per-route checks
    - EmailStr for email format (pydantic[email])
"""

from uuid import UUID

from pydantic import (
    BaseModel, ConfigDict, EmailStr, Field, ValidationInfo,
    field_validator, model_validator,
)
from pydantic.alias_generators import to_camel

from wordbank.core.domain_types import (
    CategoryOrder, LanguageScope, OverviewOrder, SortDirection,
    WordOrder, WordSearchOrder, WordView,
)

LANGUAGE_CODE_PATTERN = r"^[a-z]{2,3}(-[A-Z]{2})?$"
MAX_PAGE = 10_000

# Largest pageSize per category word view
VIEW_PAGE_SIZE_LIMITS = {WordView.TABLE: 50, WordView.SLIDER: 100}


def page_field():
    return Field(1, ge=1, le=MAX_PAGE)


class Command(BaseModel):
    """Base for all validated commands."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


# --- Auth ---------------------------------------------------------------------

class RegisterCommand(Command):
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    preferred_language_id: str = Field(
        min_length=2, max_length=10, pattern=LANGUAGE_CODE_PATTERN,
    )


class LoginCommand(Command):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


# --- Languages ----------------------------------------------------------------

class LanguagesQuery(Command):
    scope: LanguageScope = LanguageScope.ALL


# --- Learning languages -------------------------------------------------------

class LearningLanguagesQuery(Command):
    page: int = page_field()
    page_size: int = Field(10, ge=1, le=50)
    include_stats: bool = False

    @field_validator("include_stats", mode="before")
    @classmethod
    def only_literal_true(cls, v):
        # Query strings: anything but "true" means no stats
        if isinstance(v, str):
            return v == "true"
        return v


class CreateLearningLanguageCommand(Command):
    language_id: str = Field(
        min_length=2, max_length=10, pattern=LANGUAGE_CODE_PATTERN,
    )


class DeleteLearningLanguageParams(Command):
    learning_language_id: UUID


# --- Categories ---------------------------------------------------------------

class CategoriesQuery(Command):
    search: str | None = Field(None, max_length=150)
    page: int = page_field()
    page_size: int = Field(10, ge=1, le=50)
    order_by: CategoryOrder = CategoryOrder.CREATED_AT
    direction: SortDirection = SortDirection.DESC


class CategoryNameCommand(Command):
    """Create and rename share one shape."""
    name: str = Field(min_length=1, max_length=150)


class CategoryParams(Command):
    category_id: UUID


# --- Words --------------------------------------------------------------------

class CategoryWordsQuery(Command):
    view: WordView = WordView.TABLE
    order_by: WordOrder = WordOrder.CREATED_AT
    direction: SortDirection = SortDirection.DESC
    page: int = page_field()
    page_size: int = Field(10, ge=1, le=100)

    @field_validator("page_size")
    @classmethod
    def fits_view(cls, v: int, info: ValidationInfo) -> int:
        view = info.data.get("view")
        if view is not None and v > VIEW_PAGE_SIZE_LIMITS[view]:
            raise ValueError(
                "Page size must be ≤50 for table view, ≤100 for slider view",
            )
        return v


class SearchWordsQuery(Command):
    learning_language_id: UUID | None = None
    category_id: UUID | None = None
    search: str | None = Field(None, max_length=200)
    page: int = page_field()
    page_size: int = Field(10, ge=1, le=50)
    order_by: WordSearchOrder = WordSearchOrder.CREATED_AT
    direction: SortDirection = SortDirection.DESC


class CreateWordCommand(Command):
    term: str = Field(min_length=1, max_length=500)
    translation: str = Field(min_length=1, max_length=500)
    examples_md: str = Field("", max_length=2000)


class UpdateWordCommand(Command):
    term: str | None = Field(None, min_length=1, max_length=500)
    translation: str | None = Field(None, min_length=1, max_length=500)
    examples_md: str | None = Field(None, max_length=2000)

    @model_validator(mode="after")
    def something_to_change(self):
        if not self.changes():
            raise ValueError("At least one field must be provided")
        return self

    def changes(self) -> dict:
        """Fields the client actually set; an explicit null counts as absent."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class WordParams(Command):
    word_id: UUID


# --- Vocabulary overview ------------------------------------------------------

class VocabularyOverviewQuery(Command):
    learning_language_id: UUID | None = None
    category_id: UUID | None = None
    order_by: OverviewOrder = OverviewOrder.CREATED_AT
    direction: SortDirection = SortDirection.DESC
    page: int = page_field()
    page_size: int = Field(20, ge=1, le=100)


# --- Profile ------------------------------------------------------------------

class UpdateProfileCommand(Command):
    display_name: str | None = Field(None, min_length=1, max_length=100)

    @field_validator("display_name")
    @classmethod
    def strip_display_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("displayName cannot be empty or whitespace")
        return v


# --- Testing ------------------------------------------------------------------

class TestResetCommand(Command):
    admin_token: str = Field(min_length=1)
