from __future__ import annotations

from pathlib import Path

import pytest

from rdfVocab.config import BUILTIN_VOCABULARIES, VocabConfig, default_config_path, load_config
from rdfVocab.vocab.namespace import Namespace, Policy
from rdfVocab.vocab.registry import Registry


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "absent.yml")
    assert cfg == VocabConfig()
    assert cfg.default_policy == "open"
    assert cfg.default_language == "en"
    assert cfg.builtin_vocabularies == list(BUILTIN_VOCABULARIES)
    assert cfg.logging.level == "WARNING"


def test_yaml_overrides_are_coerced(tmp_path: Path) -> None:
    path = tmp_path / "vocab.yml"
    path.write_text(
        """
default_policy: CLOSED
default_language: FR
builtin_vocabularies: [rdfs, unknown, SKOS]
logging:
  level: debug
  max_details_bytes: "128"
""",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.default_policy == "closed"
    assert cfg.default_language == "fr"
    assert cfg.builtin_vocabularies == ["rdfs", "skos"]
    assert cfg.logging.level == "DEBUG"
    assert cfg.logging.max_details_bytes == 128


def test_invalid_policy_falls_back_to_open(tmp_path: Path) -> None:
    path = tmp_path / "vocab.yml"
    path.write_text("default_policy: sometimes\n", encoding="utf-8")
    assert load_config(path).default_policy == "open"


def test_non_mapping_config_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "vocab.yml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_env_var_selects_config_file(monkeypatch, tmp_path: Path) -> None:
    path = tmp_path / "custom.yml"
    path.write_text("default_language: de\n", encoding="utf-8")
    monkeypatch.setenv("RDFVOCAB_CONFIG", str(path))
    assert default_config_path() == path
    assert load_config().default_language == "de"


def test_packaged_defaults_are_used_without_env(monkeypatch) -> None:
    monkeypatch.delenv("RDFVOCAB_CONFIG", raising=False)
    path = default_config_path()
    assert path.name == "vocab.yml"
    assert path.exists()
    assert load_config() == VocabConfig()


def test_registry_applies_config() -> None:
    reg = Registry(VocabConfig(default_policy="closed", builtin_vocabularies=["owl"]))
    assert reg.pending() == ["owl"]
    ns = Namespace("http://example/ns#", "EX", registry=reg)
    assert ns.policy is Policy.CLOSED
