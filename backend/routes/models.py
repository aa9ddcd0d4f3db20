"""Pydantic request models for API endpoints."""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field


class ConvertBody(BaseModel):
    # "citizensData" is the field name older clients send
    document: dict[str, Any] | None = Field(
        default=None, validation_alias=AliasChoices("document", "citizensData")
    )
    source_format: str = Field(
        default="citizens", validation_alias=AliasChoices("sourceFormat", "source_format")
    )


class ConvertFileBody(BaseModel):
    filename: str
    content: str
    source_format: str = Field(
        default="citizens", validation_alias=AliasChoices("sourceFormat", "source_format")
    )


class ParseBody(BaseModel):
    content: str
