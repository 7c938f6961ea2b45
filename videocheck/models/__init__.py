"""Data models for transcript checking"""

from .transcript import Transcript, ClippedTranscript
from .request import CheckVideoRequest

__all__ = [
    "Transcript",
    "ClippedTranscript",
    "CheckVideoRequest",
]
