"""Transcript to classification pipeline"""

import logging
from typing import Optional

from ..api.content_classifier import ContentClassifier
from ..config import Config
from ..models.transcript import ClippedTranscript
from .clipper import clip_transcript
from .transcript_provider import TranscriptProvider

logger = logging.getLogger(__name__)


class VideoChecker:
    """Acquire, clip and classify the transcript of a video"""

    def __init__(
        self,
        config: Config,
        transcript_provider: Optional[TranscriptProvider] = None,
        classifier: Optional[ContentClassifier] = None,
    ):
        """Initialize video checker

        Args:
            config: Application configuration
            transcript_provider: Provider dispatcher (built from config if omitted)
            classifier: Content classifier (built from config if omitted)
        """
        self.config = config
        self.transcript_provider = transcript_provider or TranscriptProvider.from_config(config)
        self._classifier = classifier

    @property
    def classifier(self) -> ContentClassifier:
        """Get or create the content classifier"""
        if self._classifier is None:
            self._classifier = ContentClassifier(
                api_key=self.config.openai_api_key,
                model=self.config.openai_model,
                timeout_seconds=self.config.timeout_seconds,
            )
        return self._classifier

    def get_transcript(self, video_url: str) -> ClippedTranscript:
        """Fetch a transcript and clip it to the configured maximum length"""
        logger.info(f"About to get video transcript for video Url: {video_url}")
        transcript = self.transcript_provider.get_captions(video_url)

        max_length = self.config.max_transcript_length
        text = clip_transcript(transcript.text, max_length)

        return ClippedTranscript(
            video_id=transcript.video_id,
            provider=transcript.provider,
            text=text,
            max_length=max_length,
            original_length=transcript.character_count,
        )

    def check(self, video_url: str) -> str:
        """Run the whole pipeline for a video

        Args:
            video_url: URL of the video

        Returns:
            Classifier output, passed through verbatim
        """
        transcript = self.get_transcript(video_url)
        logger.info(
            f"Classifying transcript for {transcript.video_id} "
            f"({transcript.character_count} chars, clipped={transcript.clipped})"
        )
        return self.classifier.classify(transcript.text)
