"""Provider selection"""

import logging
from typing import Optional

from ..api.base import ProviderClient
from ..api.captions_grabber import CaptionsGrabberClient
from ..api.youtube_transcript import YoutubeTranscriptClient
from ..config import Config, TranscriptProviderName
from ..models.transcript import Transcript

logger = logging.getLogger(__name__)


class TranscriptProvider:
    """Route transcript requests to the configured provider"""

    def __init__(
        self,
        provider: TranscriptProviderName,
        youtube_transcript_client: Optional[YoutubeTranscriptClient] = None,
        captions_grabber_client: Optional[CaptionsGrabberClient] = None,
    ):
        self.provider = provider
        self.youtube_transcript_client = youtube_transcript_client or YoutubeTranscriptClient()
        self.captions_grabber_client = captions_grabber_client or CaptionsGrabberClient()

    @classmethod
    def from_config(cls, config: Config) -> "TranscriptProvider":
        """Build a provider with both clients configured"""
        return cls(
            provider=config.transcript_provider,
            youtube_transcript_client=YoutubeTranscriptClient(
                base_url=config.youtube_transcript_base_url,
                timeout_seconds=config.timeout_seconds,
            ),
            captions_grabber_client=CaptionsGrabberClient(
                base_url=config.captions_grabber_base_url,
                timeout_seconds=config.timeout_seconds,
            ),
        )

    @property
    def client(self) -> ProviderClient:
        """Client for the configured provider

        Anything other than captionsgrabber goes to youtube-transcript.
        """
        if self.provider == TranscriptProviderName.CAPTIONS_GRABBER:
            return self.captions_grabber_client
        return self.youtube_transcript_client

    def get_captions(self, video_url: str) -> Transcript:
        """Fetch the transcript of a video from the configured provider"""
        client = self.client
        logger.info(f"Using transcript provider: {client.name.value}")
        return client.get_transcript(video_url)
