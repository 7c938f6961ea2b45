"""Transcript length policy"""

import logging

logger = logging.getLogger(__name__)


def clip_transcript(transcript: str, max_length: int) -> str:
    """Cut a transcript down to at most max_length characters

    Args:
        transcript: Transcript text
        max_length: Maximum number of characters to keep

    Returns:
        The transcript unchanged if it fits, else its first max_length
        characters (may split a word)
    """
    logger.info(f"Transcript length: {len(transcript)}")
    if len(transcript) <= max_length:
        return transcript

    logger.info(f"Transcript is too long, clipping to: {max_length}")
    return transcript[:max_length]
