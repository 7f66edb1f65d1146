"""
Shared fixtures.

The spaCy pipeline is switched off for every test so results do not depend on
which model (if any) is installed. Tests for the entity-based strategies inject
a fake pipeline with fake_ner().
"""

from types import SimpleNamespace

import pytest

from cvextract.core import nlp


@pytest.fixture(autouse=True)
def no_spacy(monkeypatch):
    monkeypatch.setattr(nlp, "get_pipeline", lambda: None)


@pytest.fixture
def fake_ner(monkeypatch):
    """Install a fake pipeline returning the given (text, label) entities."""
    def install(*entities):
        doc = SimpleNamespace(ents=[SimpleNamespace(text=t, label_=label) for t, label in entities])
        monkeypatch.setattr(nlp, "get_pipeline", lambda: (lambda text: doc))
    return install
