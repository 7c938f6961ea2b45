"""OpenAI chat-completion based content classification"""

import logging

from openai import APITimeoutError, OpenAI

from ..errors import ClassificationError, UpstreamTimeout

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "Imagine you are a parent of an impressionable tween. I am going to provide "
    "the transcript of a youtube video and I want you to review the content and "
    "provide the following bits of information formatted as a json object "
    "a) summary: a brief summary of the content "
    "b) bad_language: a number from 0 to 10 where 0 means the transcript contains "
    "no swearing at all and 10 is a lot of really bad swearing "
    "c) sexual_content: a number from 0 to 10 where 0 is no sexual content at all "
    "and 10 is loads of sexual content "
    "d) coercion: a number from 0 to 10 indicating how much coercion occurred "
    "(i.e. the host is trying to get the viewer to do something in particular) "
    "e) min_age_rating: the minimum age of a child that should be watching such a video "
    "f) notes: an array containing any interesting or weird things that might be "
    "of interest to a parent. Transcript follows. "
    "IMPORTANT: your response must be a JSON string."
)


class ContentClassifier:
    """Score a transcript for parental review using an OpenAI chat model"""

    def __init__(self, api_key: str, model: str, timeout_seconds: int = 30):
        """Initialize classifier

        Args:
            api_key: OpenAI API key
            model: Chat model name
            timeout_seconds: Deadline for the completion request
        """
        self.model = model
        self.timeout_seconds = timeout_seconds
        self.client = OpenAI(api_key=api_key, timeout=timeout_seconds)

    def classify(self, transcript: str) -> str:
        """Classify a transcript

        Args:
            transcript: Clipped transcript text

        Returns:
            The model's reply, expected to be a JSON object string. It is
            passed through without validation.

        Raises:
            UpstreamTimeout: If the completion request times out
            ClassificationError: If the model returns no content
        """
        logger.info(f"Requesting classification from {self.model}")
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                temperature=0,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": transcript},
                ],
            )
        except APITimeoutError:
            raise UpstreamTimeout("OpenAI", self.timeout_seconds)

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise ClassificationError("Classifier returned an empty response")

        logger.debug(f"Classifier response: {content}")
        return content
