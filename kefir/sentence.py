"""Sentence assembly: a subject followed by its predicate."""
from kefir.core.config import get_settings


def sentence(subject: str, predicate: str, delimiter: str | None = None) -> str:
    """Join ``subject`` and ``predicate``; the delimiter defaults to KEFIR_SENTENCE_DELIMITER."""
    if delimiter is None:
        delimiter = get_settings().SENTENCE_DELIMITER
    return delimiter.join((subject, predicate))
