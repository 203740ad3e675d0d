from __future__ import annotations

import pytest

from rdfVocab.config import VocabConfig
from rdfVocab.vocab.registry import Registry, set_registry


@pytest.fixture
def registry() -> Registry:
    """A fresh registry with the built-in vocabularies registered lazily."""

    return Registry(VocabConfig())


@pytest.fixture
def shared_registry(registry: Registry):
    """Install ``registry`` as the process-wide default for the test."""

    previous = set_registry(registry)
    try:
        yield registry
    finally:
        set_registry(previous)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep user configuration files out of the test run."""

    monkeypatch.setenv("RDFVOCAB_CONFIG", str(tmp_path / "missing-vocab.yml"))
