from __future__ import annotations

"""Vocabulary namespaces: a base IRI, its declared terms and a lookup policy."""

from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, Mapping

from rdflib import URIRef

from .term import Term

if TYPE_CHECKING:  # pragma: no cover
    from .registry import Registry


class Policy(str, Enum):
    """Whether undeclared names resolve (``OPEN``) or fail (``CLOSED``)."""

    OPEN = "open"
    CLOSED = "closed"

    @classmethod
    def coerce(cls, value: "Policy | str | None", default: "Policy | None" = None) -> "Policy":
        if isinstance(value, cls):
            return value
        if value is None:
            return default or cls.OPEN
        return cls(str(value).strip().lower())


class ClosedNamespaceLookup(KeyError):
    """Raised when a closed namespace is asked for a name it never declared."""

    def __init__(self, name: str, namespace: "Namespace") -> None:
        super().__init__(name)
        self.name = name
        self.namespace = namespace

    def __str__(self) -> str:
        return f"{self.name!r} is not a term of closed namespace <{self.namespace.base}>"


class InvalidNamespace(ValueError):
    """Raised when resolving against a namespace with no base IRI."""


def _derive_prefix(name: str | None) -> str | None:
    if not name:
        return None
    return str(name).rsplit(".", 1)[-1].lower() or None


class Namespace:
    """A vocabulary rooted at ``base``.

    Terms are declared with :meth:`declare` and looked up with
    :meth:`resolve`, ``ns[name]`` or ``ns.name``. Attribute access is a
    convenience only: names that collide with methods (``label_for``,
    ``prefix`` and so on) must be looked up by subscript.

    Every namespace registers itself with ``registry`` (the shared default
    registry unless one is passed) when constructed.
    """

    def __init__(
        self,
        base: str | URIRef | None,
        name: str | None = None,
        *,
        policy: Policy | str | None = None,
        registry: "Registry | None" = None,
    ) -> None:
        if registry is None:
            from .registry import get_registry

            registry = get_registry()
        self._base = str(base or "")
        self._vocab_name = name
        self._prefix = _derive_prefix(name)
        self._policy = Policy.coerce(policy, Policy.coerce(registry.config.default_policy))
        self._registry = registry
        self._declared: dict[str, Term] = {}
        registry.register(self)

    # identity --------------------------------------------------------------

    @property
    def base(self) -> str:
        return self._base

    @property
    def vocab_name(self) -> str | None:
        return self._vocab_name

    @property
    def prefix(self) -> str | None:
        return self._prefix

    @property
    def policy(self) -> Policy:
        return self._policy

    @property
    def is_closed(self) -> bool:
        return self._policy is Policy.CLOSED

    @property
    def registry(self) -> "Registry":
        return self._registry

    def to_uri(self) -> URIRef:
        return URIRef(self._base)

    to_iri = to_uri

    def __str__(self) -> str:
        return self._base

    def __repr__(self) -> str:
        label = f", name={self._vocab_name!r}" if self._vocab_name else ""
        return f"{type(self).__name__}({self._base!r}{label}, policy={self._policy.value!r})"

    # declaration -----------------------------------------------------------

    def declare(
        self,
        name: str | None = None,
        attributes: Mapping[str, Any] | None = None,
        **extra: Any,
    ) -> Term:
        """Declare ``name`` with ``attributes`` and return its term.

        Recognised keys are ``label``, ``comment``, ``type``, ``subClassOf``,
        ``subPropertyOf``, ``domain`` and ``range``; any other key is kept as a
        compact-name attribute (``"skos:note"``) and projected when exported.
        Keyword arguments are merged over ``attributes``.

        Called without arguments, returns the term literally named
        ``property`` without declaring anything.
        """

        if name is None:
            if attributes or extra:
                raise TypeError("declare() needs a name when attributes are given")
            return Term.intern(self, "property")
        merged: dict[str, Any] = dict(attributes or {})
        merged.update(extra)
        term = Term.intern(self, str(name))
        term._declare(merged)
        self._declared[str(name)] = term
        return term

    term = declare

    def declare_all(self, definitions: Mapping[str, Mapping[str, Any] | None]) -> list[Term]:
        return [self.declare(name, attrs or {}) for name, attrs in definitions.items()]

    # lookup ----------------------------------------------------------------

    def resolve(self, name: str) -> Term:
        """Return the term for ``name``.

        Declared names always resolve. Undeclared names resolve on open
        namespaces and raise :class:`ClosedNamespaceLookup` on closed ones.
        """

        if not self._base:
            raise InvalidNamespace(f"namespace {self._vocab_name or '<anonymous>'} has no base IRI")
        key = str(name)
        declared = self._declared.get(key)
        if declared is not None:
            return declared
        if self._policy is Policy.CLOSED:
            raise ClosedNamespaceLookup(key, self)
        return Term.intern(self, key)

    def __getitem__(self, name: str) -> Term:
        return self.resolve(name)

    def __getattr__(self, name: str) -> Term:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self.resolve(name)
        except (ClosedNamespaceLookup, InvalidNamespace) as exc:
            raise AttributeError(str(exc)) from exc

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Term):
            return any(term is name for term in self._declared.values())
        return str(name) in self._declared

    def __iter__(self) -> Iterator[Term]:
        return iter(list(self._declared.values()))

    def __len__(self) -> int:
        return len(self._declared)

    def __bool__(self) -> bool:
        return True

    def terms(self) -> list[Term]:
        """Declared terms in declaration order."""

        return list(self._declared.values())

    def declarations(self) -> dict[Term, dict[str, Any]]:
        return {term: dict(term.attributes) for term in self._declared.values()}

    def label_for(self, name: str) -> Any:
        return self.resolve(name).get("label", "")

    def comment_for(self, name: str) -> Any:
        return self.resolve(name).get("comment", "")

    property = declare


__all__ = ["Namespace", "Policy", "ClosedNamespaceLookup", "InvalidNamespace"]
