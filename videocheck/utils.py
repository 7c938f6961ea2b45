"""URL helpers"""

import re
from typing import Optional

# youtu.be/<id>, youtube.com/embed/<id>, youtube.com/v/<id>,
# youtube.com/watch?v=<id> and youtube.com/watch?...&v=<id>
VIDEO_ID_PATTERN = re.compile(
    r"(?:youtu\.be/|youtube\.com/(?:embed/|v/|watch\?v=|watch\?.+&v=))([^?&]+)"
)


def extract_video_id(url: str) -> Optional[str]:
    """Extract the video ID from a YouTube URL

    Args:
        url: Video URL

    Returns:
        The identifier up to the next '?' or '&', or None if the URL
        is not a recognized YouTube URL
    """
    match = VIDEO_ID_PATTERN.search(url)
    return match.group(1) if match else None
