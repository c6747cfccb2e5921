from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class IdeaRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    template: str = Field(
        ...,
        validation_alias=AliasChoices("template", "templateKey", "templateId", "templateLabel"),
        description="Content template name, e.g. 'Fakta fredag'.",
    )
    count: int | None = Field(
        default=None,
        validation_alias=AliasChoices("count", "n"),
        description="Requested number of ideas. Invalid values fall back to the configured default.",
    )
    context: str | None = Field(default=None, description="Brand/domain context the ideas must be anchored to.")
    tone: str | None = Field(default=None, description="neutral/witty/professional/technical/relatable.")
    lang: str | None = Field(
        default=None,
        validation_alias=AliasChoices("lang", "language"),
        description="'en' for English, anything else for Norwegian (bokmål).",
    )
    audience: str | None = None
    purpose: str | None = None

    @field_validator("count", mode="before")
    @classmethod
    def _coerce_count(cls, value: Any) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        try:
            number = int(value) if isinstance(value, (int, float)) else int(str(value).strip())
        except (TypeError, ValueError, OverflowError):
            return None
        return number if number > 0 else None

    @field_validator("context", "tone", "lang", "audience", "purpose", mode="before")
    @classmethod
    def _stringify_optional(cls, value: Any) -> str | None:
        if value is None:
            return None
        return str(value)


class IdeaResponse(BaseModel):
    ideas: list[str]


class ErrorDetail(BaseModel):
    code: str
    message: str
    upstream_status: int | None = None


class ErrorResponse(BaseModel):
    error: ErrorDetail
