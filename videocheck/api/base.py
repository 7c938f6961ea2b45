"""Shared HTTP handling for transcript providers"""

import logging

import requests

from ..config import TranscriptProviderName
from ..errors import InvalidVideoUrl, UpstreamTimeout
from ..models.transcript import Transcript
from ..utils import extract_video_id

logger = logging.getLogger(__name__)


class ProviderClient:
    """Base class for transcript provider clients

    Subclasses set ``name`` and implement ``build_url`` and ``parse``.
    """

    name: TranscriptProviderName

    def __init__(self, base_url: str, timeout_seconds: int = 30):
        """Initialize provider client

        Args:
            base_url: Scheme and host of the provider, without trailing slash
            timeout_seconds: Deadline for the HTTP request
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds

    def build_url(self, video_id: str) -> str:
        raise NotImplementedError

    def parse(self, body: str) -> str:
        raise NotImplementedError

    def fetch_body(self, url: str) -> str:
        """GET a provider URL and return the response body as text

        Raises:
            UpstreamTimeout: If the provider does not answer in time
            requests.RequestException: On connection or HTTP errors
        """
        logger.info(f"About to fetch captions from: {url}")
        try:
            response = requests.get(url, timeout=self.timeout_seconds)
        except requests.Timeout:
            raise UpstreamTimeout(self.name.value, self.timeout_seconds)
        response.raise_for_status()

        body = response.text
        logger.debug(f"Provider response: {body}")
        return body

    def get_transcript(self, video_url: str) -> Transcript:
        """Fetch and flatten the transcript of a video

        Args:
            video_url: URL of the video

        Returns:
            Transcript object

        Raises:
            InvalidVideoUrl: If no video id can be extracted from the URL
            TranscriptNotFound: If the provider has no transcript for the video
        """
        logger.info(f"About to extract video ID from url: {video_url}")
        video_id = extract_video_id(video_url)
        if video_id is None:
            raise InvalidVideoUrl(video_url)

        body = self.fetch_body(self.build_url(video_id))
        text = self.parse(body)

        return Transcript(video_id=video_id, provider=self.name, text=text)
