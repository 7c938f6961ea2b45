"""captionsgrabber.com client"""

from ..config import TranscriptProviderName
from ..errors import TranscriptNotFound
from ..processors.transcript_parser import extract_element_text, remove_new_lines
from .base import ProviderClient

TEXT_ELEMENT_ID = "text"


class CaptionsGrabberClient(ProviderClient):
    """Client for the captionsgrabber provider

    The provider serves an HTML page with the whole transcript inside the
    element with id "text". Its content is used as-is apart from line
    breaks; no entity decoding is applied.
    """

    name = TranscriptProviderName.CAPTIONS_GRABBER

    def __init__(self, base_url: str = "https://www.captionsgrabber.com", timeout_seconds: int = 30):
        super().__init__(base_url, timeout_seconds)

    def build_url(self, video_id: str) -> str:
        return f"{self.base_url}/8302/get-captions.00.php?id={video_id}"

    def parse(self, body: str) -> str:
        text = extract_element_text(body, TEXT_ELEMENT_ID)
        if text is None:
            raise TranscriptNotFound("Text element not found on the page")
        text = remove_new_lines(text)
        if not text.strip():
            raise TranscriptNotFound("No caption text found on the page")
        return text
