from __future__ import annotations

"""Loader for registry configuration shared by the library and the CLI."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

CONFIG_ENV = "RDFVOCAB_CONFIG"

POLICIES = ("open", "closed")

BUILTIN_VOCABULARIES: tuple[str, ...] = (
    "rdfs",
    "owl",
    "xsd",
    "dc",
    "foaf",
    "skos",
    "prov",
)


@dataclass(slots=True)
class LoggingConfig:
    """Settings for the structured JSON logger."""

    level: str = "WARNING"
    max_details_bytes: int = 4096


@dataclass(slots=True)
class VocabConfig:
    """Runtime defaults for namespaces, imports and logging."""

    default_policy: str = "open"
    default_language: str = "en"
    builtin_vocabularies: list[str] = field(default_factory=lambda: list(BUILTIN_VOCABULARIES))
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _coerce_int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _coerce_policy(value: Any, default: str = "open") -> str:
    text = str(value or "").strip().lower()
    return text if text in POLICIES else default


def _coerce_vocabularies(value: Any) -> list[str]:
    if value is None:
        return list(BUILTIN_VOCABULARIES)
    if isinstance(value, str):
        value = value.split(",")
    names = [str(v).strip().lower() for v in value if str(v).strip()]
    return [n for n in names if n in BUILTIN_VOCABULARIES]


def _load_logging(data: Mapping[str, Any] | None) -> LoggingConfig:
    if not data:
        return LoggingConfig()
    return LoggingConfig(
        level=str(data.get("level") or "WARNING").upper(),
        max_details_bytes=max(0, _coerce_int(data.get("max_details_bytes"), 4096)),
    )


def default_config_path() -> Path:
    env = os.getenv(CONFIG_ENV)
    if env:
        return Path(env)
    return Path(__file__).resolve().parent / "data" / "vocab.yml"


def config_from_mapping(raw: Mapping[str, Any]) -> VocabConfig:
    language = str(raw.get("default_language") or "en").strip().lower()
    return VocabConfig(
        default_policy=_coerce_policy(raw.get("default_policy")),
        default_language=language,
        builtin_vocabularies=_coerce_vocabularies(raw.get("builtin_vocabularies")),
        logging=_load_logging(raw.get("logging")),
    )


def load_config(path: Path | None = None) -> VocabConfig:
    """Load registry settings from YAML with safe defaults."""

    if path is None:
        path = default_config_path()
    if not path.exists():
        return VocabConfig()
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, Mapping):
        raise ValueError(f"Vocabulary config must be a mapping: {path}")
    return config_from_mapping(raw)


__all__ = [
    "CONFIG_ENV",
    "BUILTIN_VOCABULARIES",
    "LoggingConfig",
    "VocabConfig",
    "config_from_mapping",
    "default_config_path",
    "load_config",
]
