"""
Lead-capture submission schemas.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResumeFile(BaseModel):
    model_config = ConfigDict(frozen=True)

    filename: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def extension(self) -> str:
        """Text after the last dot, or the whole name when there is none."""
        return self.filename.rsplit(".", 1)[-1]


class Submission(BaseModel):
    """One form submission. Built once on submit and never mutated."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Visitor's full name.")
    email: str = Field(..., description="Unique key of the user record.")
    job_url: str = Field(..., description="LinkedIn job posting link.")
    resume: Optional[ResumeFile] = None


class SubmissionResult(BaseModel):
    success: bool
    error: Optional[str] = None
    resume_url: Optional[str] = None
    updated_existing: Optional[bool] = None


class SubmitResponse(BaseModel):
    success: bool
    error: Optional[str] = None


class JobUrlValidationResponse(BaseModel):
    valid: bool
    error: Optional[str] = None


__all__ = [
    "ResumeFile",
    "Submission",
    "SubmissionResult",
    "SubmitResponse",
    "JobUrlValidationResponse",
]
