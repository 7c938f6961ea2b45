"""Transcript data models"""

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

from ..config import TranscriptProviderName


class Transcript(BaseModel):
    """Flattened transcript for a single video"""

    video_id: str = Field(..., description="YouTube video ID")
    provider: TranscriptProviderName = Field(..., description="Provider the transcript came from")
    text: str = Field(..., description="Caption text joined into a single line")

    @field_validator("text")
    @classmethod
    def single_line(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("Transcript text must not contain line breaks")
        return value

    @computed_field
    @property
    def character_count(self) -> int:
        """Total character count"""
        return len(self.text)

    @computed_field
    @property
    def word_count(self) -> int:
        """Approximate word count"""
        return len(self.text.split())


class ClippedTranscript(Transcript):
    """Transcript cut down to the configured maximum length"""

    max_length: int = Field(..., ge=1, description="Limit the text was clipped to")
    original_length: int = Field(..., ge=0, description="Length before clipping")

    @model_validator(mode="after")
    def within_limit(self) -> "ClippedTranscript":
        if len(self.text) > self.max_length:
            raise ValueError("Clipped transcript is longer than max_length")
        return self

    @computed_field
    @property
    def clipped(self) -> bool:
        """Whether any text was cut off"""
        return self.original_length > len(self.text)
