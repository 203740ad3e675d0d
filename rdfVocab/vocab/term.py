from __future__ import annotations

"""Interned, attribute-bearing vocabulary terms."""

import weakref
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping

from rdflib import URIRef

from .iri import is_valid_iri, last_segment

if TYPE_CHECKING:  # pragma: no cover
    from .namespace import Namespace
    from .registry import Registry

# Attribute keys whose values name other resources and resolve through the
# registry when read back.
RELATIONAL_KEYS = ("type", "subClassOf", "subPropertyOf", "domain", "range")
LITERAL_KEYS = ("label", "comment")
WELL_KNOWN_KEYS = LITERAL_KEYS + RELATIONAL_KEYS


class Term:
    """An IRI carrying the attributes it was declared with.

    Terms are only created through :meth:`Term.intern`, which caches one
    instance per IRI in the namespace's registry. The namespace that first
    interns an IRI owns the term (``vocab`` and ``name``); later namespaces
    whose base also covers it get the same object back.

    Two terms compare equal only when they are the same object. Plain strings
    compare by IRI text and share the hash. Like rdflib identifiers of
    different types, a term never equals a :class:`~rdflib.URIRef`; convert
    with :meth:`to_uri` first.
    """

    __slots__ = ("_iri", "_name", "_attributes", "_vocab", "__weakref__")

    def __init__(self, iri: str, name: str, namespace: "Namespace | None" = None) -> None:
        self._iri = str(iri)
        self._name = str(name)
        self._attributes: dict[str, Any] = {}
        self._vocab = weakref.ref(namespace) if namespace is not None else None

    @classmethod
    def intern(cls, namespace: "Namespace", name: str) -> "Term":
        """Return the registry-wide term for ``namespace.base + name``, creating it once."""

        key = str(name)
        iri = f"{namespace.base}{key}"
        cache = namespace.registry._interned
        term = cache.get(iri)
        if term is None:
            term = cls(iri, key, namespace)
            cache[iri] = term
        return term

    # identifier capability -------------------------------------------------

    def __str__(self) -> str:
        return self._iri

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._iri!r})"

    def __hash__(self) -> int:
        return hash(self._iri)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Term):
            return self is other
        if isinstance(other, URIRef):
            return False
        if isinstance(other, str):
            return self._iri == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    @property
    def name(self) -> str:
        """Local name relative to the owning namespace."""

        return self._name

    def to_uri(self) -> URIRef:
        return URIRef(self._iri)

    to_iri = to_uri

    def n3(self) -> str:
        return f"<{self._iri}>"

    def startswith(self, prefix: str) -> bool:
        return self._iri.startswith(str(prefix))

    def valid(self) -> bool:
        """Whether the IRI text matches the IRI grammar. Never raises."""

        return is_valid_iri(self._iri)

    # attributes ------------------------------------------------------------

    @property
    def vocab(self) -> "Namespace | None":
        return self._vocab() if self._vocab is not None else None

    @property
    def attributes(self) -> Mapping[str, Any]:
        return MappingProxyType(self._attributes)

    def has(self, key: str) -> bool:
        return key in self._attributes

    def get(self, key: str, default: Any = None) -> Any:
        return self._attributes.get(key, default)

    def _declare(self, attributes: Mapping[str, Any]) -> None:
        self._attributes = dict(attributes)

    @property
    def label(self) -> Any:
        return self._attributes.get("label", last_segment(self._iri))

    @property
    def comment(self) -> Any:
        return self._attributes.get("comment", "")

    @property
    def type(self) -> Any:
        return self._resolved("type")

    @property
    def sub_class_of(self) -> Any:
        return self._resolved("subClassOf")

    @property
    def sub_property_of(self) -> Any:
        return self._resolved("subPropertyOf")

    @property
    def domain(self) -> Any:
        return self._resolved("domain")

    @property
    def range(self) -> Any:
        return self._resolved("range")

    def _registry(self) -> "Registry":
        vocab = self.vocab
        if vocab is not None:
            return vocab.registry
        from .registry import get_registry

        return get_registry()

    def _resolved(self, key: str) -> Any:
        raw = self._attributes.get(key)
        if raw is None:
            return None
        registry = self._registry()
        if isinstance(raw, (list, tuple)):
            return [registry.resolve_value(v) for v in raw]
        return registry.resolve_value(raw)

    # classification --------------------------------------------------------

    def _type_text(self) -> str:
        resolved = self.type
        if resolved is None:
            return ""
        if isinstance(resolved, list):
            return " ".join(str(v) for v in resolved)
        return str(resolved)

    @property
    def is_class(self) -> bool:
        return "Class" in self._type_text()

    @property
    def is_property(self) -> bool:
        return "Property" in self._type_text()

    @property
    def is_datatype(self) -> bool:
        return "Datatype" in self._type_text()

    @property
    def is_other(self) -> bool:
        text = self._type_text()
        return not any(marker in text for marker in ("Class", "Property", "Datatype"))


__all__ = ["Term", "RELATIONAL_KEYS", "LITERAL_KEYS", "WELL_KNOWN_KEYS"]
