from __future__ import annotations

"""Structured JSON logger used by the registry and the projector."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, MutableMapping

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def level_from_name(name: str | int | None, default: int = logging.WARNING) -> int:
    if isinstance(name, int):
        return name
    if not name:
        return default
    return _LEVEL_MAP.get(str(name).upper(), default)


def _sanitize(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {str(k): _sanitize(v) for k, v in obj.items() if v is not None}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [_sanitize(v) for v in obj]
    if isinstance(obj, (int, float, bool)):
        return obj
    if obj is None:
        return None
    # Terms, URIRefs and Literals all render through str().
    return str(obj)


def _truncate(details: Mapping[str, Any] | Iterable[Any], max_bytes: int) -> Any:
    if max_bytes <= 0:
        return details
    serialized = json.dumps(details, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
    blob = serialized.encode("utf-8")
    if len(blob) <= max_bytes:
        return details
    preview = blob[:max_bytes].decode("utf-8", errors="ignore")
    return {"note": "truncated", "preview": preview}


class JsonLogger:
    """Emit structured JSON events with consistent keys."""

    def __init__(
        self,
        service: str,
        *,
        logger: logging.Logger | None = None,
        level: str | int | None = None,
        max_details_bytes: int = 4096,
    ) -> None:
        self._service = service
        self._logger = logger or logging.getLogger(f"rdfvocab.{service}.json")
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self._logger.addHandler(handler)
            self._logger.propagate = False
        if level is not None:
            self._logger.setLevel(level_from_name(level))
        self._max_details_bytes = max(0, int(max_details_bytes))

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def debug(self, event: str, **fields: Any) -> dict[str, Any] | None:
        return self._emit("DEBUG", event, fields)

    def info(self, event: str, **fields: Any) -> dict[str, Any] | None:
        return self._emit("INFO", event, fields)

    def warning(self, event: str, **fields: Any) -> dict[str, Any] | None:
        return self._emit("WARNING", event, fields)

    def error(self, event: str, **fields: Any) -> dict[str, Any] | None:
        return self._emit("ERROR", event, fields)

    def emit(self, level: str, event: str, **fields: Any) -> dict[str, Any] | None:
        return self._emit(level.upper(), event, dict(fields))

    def _emit(self, level: str, event: str, fields: MutableMapping[str, Any]) -> dict[str, Any] | None:
        numeric = _LEVEL_MAP.get(level.upper(), logging.INFO)
        if not self._logger.isEnabledFor(numeric):
            return None
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": level.upper(),
            "service": self._service,
            "event": event,
        }
        for key in ("namespace", "prefix", "count"):
            value = fields.pop(key, None)
            if value is not None:
                entry[key] = _sanitize(value)
        details = fields.pop("details", None)
        if details is not None:
            entry["details"] = _truncate(_sanitize(details), self._max_details_bytes)
        if fields:
            residual = _truncate(_sanitize(fields), self._max_details_bytes)
            if "details" in entry and isinstance(entry["details"], dict) and isinstance(residual, dict):
                entry["details"].update(residual)
            else:
                entry["details"] = residual
        payload = json.dumps(entry, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
        self._logger.log(numeric, payload)
        return entry


__all__ = ["JsonLogger", "level_from_name"]
