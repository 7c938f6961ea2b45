"""Exceptions raised by the transcript pipeline"""


class VideoCheckError(Exception):
    """Base class for pipeline failures"""


class InvalidVideoUrl(VideoCheckError):
    """No video id could be extracted from the URL"""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Could not extract a YouTube video id from URL: {url}")


class TranscriptNotFound(VideoCheckError):
    """The provider answered but returned no transcript content"""


class UpstreamTimeout(VideoCheckError):
    """An outbound call did not finish within the configured deadline"""

    def __init__(self, service: str, timeout_seconds: int):
        self.service = service
        self.timeout_seconds = timeout_seconds
        super().__init__(f"{service} did not respond within {timeout_seconds}s")


class ClassificationError(VideoCheckError):
    """The classifier returned no usable content"""
