"""
Upload relay response schemas.
"""

from typing import Optional

from pydantic import BaseModel


class RelayData(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    linkedinUrl: Optional[str] = None
    resumeFile: Optional[str] = None


class RelayResponse(BaseModel):
    message: str
    data: RelayData


class RelayErrorResponse(BaseModel):
    error: str
    message: str


__all__ = ["RelayData", "RelayResponse", "RelayErrorResponse"]
