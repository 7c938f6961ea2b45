"""Parse provider markup into flat transcript text"""

import logging
import re
from typing import List, Optional

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

# Order matters: &amp; goes last so "&amp;lt;" decodes to "&lt;", not "<"
HTML_ENTITIES = [
    ("&apos;", "'"),
    ("&quot;", '"'),
    ("&gt;", ">"),
    ("&lt;", "<"),
    ("&amp;", "&"),
]

NEW_LINES = re.compile(r"\r\n|\n|\r")


def decode_entities(text: str) -> str:
    """Decode the handful of HTML entities captions are escaped with"""
    for entity, char in HTML_ENTITIES:
        text = text.replace(entity, char)
    return text


def remove_new_lines(text: str) -> str:
    """Remove all line breaks (\\r\\n, \\n, \\r)"""
    return NEW_LINES.sub("", text)


def normalize_text(text: str) -> str:
    """Decode entities and remove line breaks"""
    return remove_new_lines(decode_entities(text))


def parse_xml_response(xml_response: str) -> str:
    """Flatten every <text> element of a transcript response

    Args:
        xml_response: Raw response body (pseudo-XML served as HTML)

    Returns:
        Normalized element texts joined by single spaces, in document
        order. Empty string if the response has no <text> elements.
    """
    soup = BeautifulSoup(xml_response, "lxml")

    texts: List[str] = [
        normalize_text(element.get_text()) for element in soup.find_all("text")
    ]
    logger.debug(f"Found {len(texts)} <text> elements")

    return " ".join(texts).strip()


def extract_element_text(html: str, element_id: str) -> Optional[str]:
    """Text content of the element with the given id, or None if absent"""
    soup = BeautifulSoup(html, "lxml")
    element = soup.find(id=element_id)
    if element is None:
        return None
    return element.get_text()
