from __future__ import annotations

"""IRI grammar checks and small string helpers shared by terms and namespaces.

The grammar check follows RFC 3987 closely enough to reject the usual
offenders (spaces, angle brackets, missing scheme) without pulling in a
full parser.
"""

import re

_UCSCHAR = (
    "\u00a0-\ud7ff\uf900-\ufdcf\ufdf0-\uffef"
    "\U00010000-\U0001fffd\U00020000-\U0002fffd\U00030000-\U0003fffd"
    "\U00040000-\U0004fffd\U00050000-\U0005fffd\U00060000-\U0006fffd"
    "\U00070000-\U0007fffd\U00080000-\U0008fffd\U00090000-\U0009fffd"
    "\U000a0000-\U000afffd\U000b0000-\U000bfffd\U000c0000-\U000cfffd"
    "\U000d0000-\U000dfffd\U000e1000-\U000efffd"
)
_IUNRESERVED = rf"A-Za-z0-9\-._~{_UCSCHAR}"
_SUB_DELIMS = r"!$&'()*+,;="
_PCT = r"%[0-9A-Fa-f]{2}"
_IPCHAR = rf"(?:[{_IUNRESERVED}{_SUB_DELIMS}:@]|{_PCT})"
_IPRIVATE = "\ue000-\uf8ff\U000f0000-\U000ffffd\U00100000-\U0010fffd"

_IRI_RE = re.compile(
    r"^[A-Za-z][A-Za-z0-9+.\-]*:"  # scheme
    rf"(?:{_IPCHAR}|/)*"  # ihier-part (authority and path collapsed)
    rf"(?:\?(?:{_IPCHAR}|[/?{_IPRIVATE}])*)?"  # iquery
    rf"(?:#(?:{_IPCHAR}|[/?])*)?$"  # ifragment
)

_SEGMENT_SPLIT_RE = re.compile(r"[/#]")


def is_valid_iri(value: object) -> bool:
    """Return ``True`` when ``value`` matches the IRI grammar."""

    try:
        text = str(value)
    except Exception:  # pragma: no cover - exotic __str__ implementations
        return False
    if not text:
        return False
    return _IRI_RE.match(text) is not None


def last_segment(iri: str) -> str:
    """Return the trailing path or fragment segment of ``iri``.

    Empty segments are ignored so ``http://a/b/`` yields ``b``.
    """

    parts = [p for p in _SEGMENT_SPLIT_RE.split(str(iri)) if p]
    return parts[-1] if parts else str(iri)


def local_name(iri: str, base: str) -> str | None:
    """Strip ``base`` from ``iri``; ``None`` when ``iri`` is not under it."""

    raw = str(iri)
    base = str(base)
    if not base or not raw.startswith(base):
        return None
    return raw[len(base) :]


__all__ = ["is_valid_iri", "last_segment", "local_name"]
