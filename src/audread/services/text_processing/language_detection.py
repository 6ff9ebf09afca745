"""Language detection for imported text."""

import logging
from typing import Optional

from langdetect import DetectorFactory, detect
from langdetect.lang_detect_exception import LangDetectException

logger = logging.getLogger(__name__)

# Texts shorter than this are reported as undetermined.
MIN_DETECTION_LENGTH = 10

# langdetect is randomised; a fixed seed keeps results stable across runs.
DetectorFactory.seed = 0


def detect_language(text: str) -> Optional[str]:
    """
    Return the ISO 639-1 code of the text's language, or None if undetermined.

    Args:
        text: Plain text content.
    """
    sample = " ".join(text.split())
    if len(sample) < MIN_DETECTION_LENGTH:
        return None
    try:
        return detect(sample)
    except LangDetectException as e:
        logger.debug("Language detection failed: %s", e)
        return None
