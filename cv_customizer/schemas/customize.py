from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CustomizeRequest(BaseModel):
    """Both fields are optional here so that missing input surfaces as a 400, not a 422."""

    model_config = ConfigDict(populate_by_name=True)

    current_resume: Any = Field(default=None, alias="currentResume")
    job_description: Any = Field(default=None, alias="jobDescription")


class CustomizeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    tailored_resume: str = Field(alias="tailoredResume")
    cover_letter: str = Field(alias="coverLetter")


class ExportRequest(BaseModel):
    text: Any = None
    filename: str | None = Field(default=None, max_length=255)


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
