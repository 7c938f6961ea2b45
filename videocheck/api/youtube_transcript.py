"""youtubetranscript.com client"""

from ..config import TranscriptProviderName
from ..errors import TranscriptNotFound
from ..processors.transcript_parser import parse_xml_response
from .base import ProviderClient


class YoutubeTranscriptClient(ProviderClient):
    """Client for the youtube-transcript provider

    The provider answers with pseudo-XML holding one <text> element per
    caption.
    """

    name = TranscriptProviderName.YOUTUBE_TRANSCRIPT

    def __init__(self, base_url: str = "https://youtubetranscript.com", timeout_seconds: int = 30):
        super().__init__(base_url, timeout_seconds)

    def build_url(self, video_id: str) -> str:
        return f"{self.base_url}/?server_vid={video_id}"

    def parse(self, body: str) -> str:
        text = parse_xml_response(body)
        if not text:
            raise TranscriptNotFound("No caption text found in the transcript response")
        return text
