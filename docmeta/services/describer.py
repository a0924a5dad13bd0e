"""Length-bounded description strings derived from page excerpts."""

from typing import Optional

from docmeta.config import DEFAULT_DESCRIPTION_LENGTH

# A full stop followed by a space marks the end of the first sentence
SENTENCE_DELIMITER = ". "
ELLIPSIS = "..."


def truncate(value: Optional[str], length: int, marker: Optional[str] = ELLIPSIS) -> Optional[str]:
    """Cut *value* down to at most *length* characters.

    When the text is too long, the last ``len(marker)`` characters of the
    allowed length are replaced by *marker*.  If *marker* itself does not fit
    in *length*, the text is hard-cut with no marker.
    """
    if value is None:
        return None
    if not value:
        return value
    if marker is None or len(marker) > length:
        return value[:length]
    if len(value) > length:
        return value[: length - len(marker)] + marker
    return value


def derive_description(text: Optional[str], length: int = DEFAULT_DESCRIPTION_LENGTH) -> Optional[str]:
    """Derive a meta description of at most about *length* characters from *text*.

    If the first sentence ends within *length* characters, the description is
    that sentence.  Otherwise the whole text is truncated with an ellipsis.
    """
    if not text:
        return text

    boundary = text.find(SENTENCE_DELIMITER)
    if 0 < boundary <= length:
        return text[: boundary + len(SENTENCE_DELIMITER)].strip()
    return truncate(text, length, ELLIPSIS)
