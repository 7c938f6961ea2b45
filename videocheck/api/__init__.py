"""Clients for transcript providers and the content classifier"""

from .base import ProviderClient
from .youtube_transcript import YoutubeTranscriptClient
from .captions_grabber import CaptionsGrabberClient
from .content_classifier import ContentClassifier

__all__ = [
    "ProviderClient",
    "YoutubeTranscriptClient",
    "CaptionsGrabberClient",
    "ContentClassifier",
]
