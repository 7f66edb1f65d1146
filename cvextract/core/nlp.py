"""
Thin adapter around the spaCy named-entity recognizer.

The pipeline is loaded lazily once per process. When the model package is not
installed the adapter logs a warning and every lookup returns no entities, so
the name and location strategies simply fall through to the next one.
"""

import logging
from functools import lru_cache
from typing import Iterable, List

import spacy

from cvextract.core.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_pipeline():
    """Load the configured spaCy model, or None when it is unavailable."""
    model = get_settings().spacy_model
    try:
        return spacy.load(model, disable=["parser", "lemmatizer"])
    except OSError:
        logger.warning(f"spaCy model '{model}' is not installed; named-entity strategies disabled")
        return None


def find_entities(text: str, labels: Iterable[str]) -> List[str]:
    """
    Entity texts with one of the given labels, in document order.

    Examples:
        find_entities("Jane Doe lives in Colombo", {"PERSON"}) -> ["Jane Doe"]
    """
    nlp = get_pipeline()
    if nlp is None or not text:
        return []

    wanted = set(labels)
    doc = nlp(text[:get_settings().nlp_max_chars])
    return [ent.text.strip() for ent in doc.ents if ent.label_ in wanted and ent.text.strip()]
