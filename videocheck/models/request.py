"""Inbound request models"""

from pydantic import BaseModel, Field


class CheckVideoRequest(BaseModel):
    """Body of a check request"""

    url: str = Field(..., description="URL of the video to check")
