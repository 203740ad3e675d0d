from __future__ import annotations

"""Catalogue of known namespaces with compact-name expansion and reverse lookup.

A :class:`Registry` is an ordinary value. Code that does not care which one
it uses goes through :func:`get_registry`, which builds a shared instance on
first use; tests and embedding applications can swap it with
:func:`set_registry`.

Registries are single-writer: declarations and lazy materialization mutate
shared state without locking, so callers with concurrent writers must
serialize them.
"""

from typing import Any, Callable, Iterator

from rdflib import URIRef

from rdfVocab.config import VocabConfig, load_config
from rdfVocab.utils.log_json import JsonLogger

from .iri import local_name
from .namespace import ClosedNamespaceLookup, Namespace
from .term import Term

CORE_PREFIX = "rdf"

NamespaceFactory = Callable[["Registry"], Namespace]


class Registry:
    """Ordered collection of namespaces plus factories for ones not built yet.

    Also holds the term intern table, keyed by full IRI, shared by every
    namespace registered here.
    """

    def __init__(
        self,
        config: VocabConfig | None = None,
        *,
        builtins: bool = True,
        logger: JsonLogger | None = None,
    ) -> None:
        self.config = config or VocabConfig()
        self.log = logger or JsonLogger(
            "vocab",
            level=self.config.logging.level,
            max_details_bytes=self.config.logging.max_details_bytes,
        )
        self._namespaces: list[Namespace] = []
        self._factories: dict[str, NamespaceFactory] = {}
        self._materialized: dict[str, Namespace] = {}
        self._interned: dict[str, Term] = {}
        self.core: Namespace | None = None
        if builtins:
            from . import builtin

            self.core = builtin.install(self, self.config.builtin_vocabularies)

    # registration ----------------------------------------------------------

    def register(self, namespace: Namespace) -> Namespace:
        """Record ``namespace``; called once from ``Namespace.__init__``."""

        if any(ns is namespace for ns in self._namespaces):
            return namespace
        self._namespaces.append(namespace)
        self.log.debug(
            "vocab.namespace.registered",
            namespace=namespace.base,
            prefix=namespace.prefix,
            policy=namespace.policy.value,
        )
        return namespace

    def register_factory(self, name: str, factory: NamespaceFactory) -> None:
        """Make ``name`` known without building its namespace yet."""

        key = str(name).lower()
        if key in self._materialized:
            return
        self._factories[key] = factory

    def pending(self) -> list[str]:
        """Names known through factories but not materialized."""

        return [name for name in self._factories if name not in self._materialized]

    def materialize(self, name: str) -> Namespace:
        """Build the namespace registered under ``name`` once and memoize it."""

        key = str(name).lower()
        existing = self._materialized.get(key)
        if existing is not None:
            return existing
        try:
            factory = self._factories[key]
        except KeyError as exc:
            raise KeyError(f"no vocabulary factory registered for {name!r}") from exc
        namespace = factory(self)
        self._materialized[key] = namespace
        self.log.debug(
            "vocab.namespace.materialized",
            namespace=namespace.base,
            prefix=namespace.prefix,
            count=len(namespace),
        )
        return namespace

    def materialize_all(self) -> None:
        for name in self.pending():
            self.materialize(name)

    # enumeration -----------------------------------------------------------

    def namespaces(self, *, materialize: bool = True) -> list[Namespace]:
        """All known namespaces in registration order.

        With ``materialize`` (the default) every pending factory is built
        first, so namespaces known only by name are not silently skipped.
        """

        if materialize:
            self.materialize_all()
        return list(self._namespaces)

    def __iter__(self) -> Iterator[Namespace]:
        return iter(self.namespaces())

    def __len__(self) -> int:
        return len(self._namespaces)

    def __bool__(self) -> bool:
        return True

    def for_prefix(self, prefix: str) -> Namespace | None:
        key = str(prefix)
        for namespace in self._namespaces:
            if namespace.base and namespace.prefix == key:
                return namespace
        factory_key = key.lower()
        if factory_key in self._factories and factory_key not in self._materialized:
            self.materialize(factory_key)
        for namespace in self.namespaces():
            if namespace.base and namespace.prefix == key:
                return namespace
        return None

    # expansion and lookup --------------------------------------------------

    def expand_pname(self, text: str) -> Term | URIRef | None:
        """Expand ``prefix:local`` into a term.

        An empty local part yields the namespace base. Unknown prefixes yield
        ``None``; closed namespaces raise :class:`ClosedNamespaceLookup` for
        undeclared local parts.
        """

        if isinstance(text, Term):
            return text
        prefix, sep, suffix = str(text).partition(":")
        if not sep:
            suffix = ""
        if prefix == CORE_PREFIX and self.core is not None:
            return self.core.resolve(suffix) if suffix else self.core.to_uri()
        namespace = self.for_prefix(prefix)
        if namespace is None:
            return None
        return namespace.resolve(suffix) if suffix else namespace.to_uri()

    def find_namespace(self, iri: str) -> Namespace | None:
        """First registered namespace whose base is a prefix of ``iri``."""

        text = str(iri)
        for namespace in self.namespaces():
            if namespace.base and text.startswith(namespace.base):
                return namespace
        return None

    def find_term(self, iri: str | Term) -> Term | None:
        if isinstance(iri, Term):
            return iri
        namespace = self.find_namespace(iri)
        if namespace is None:
            return None
        name = local_name(str(iri), namespace.base)
        if not name:
            return None
        return namespace.resolve(name)

    def pname(self, iri: str | Term) -> str:
        """Compact ``iri`` to ``prefix:local`` when a named namespace covers it."""

        text = str(iri)
        for namespace in self.namespaces():
            if namespace.prefix and namespace.base and text.startswith(namespace.base):
                return f"{namespace.prefix}:{text[len(namespace.base):]}"
        return text

    def resolve_value(self, value: Any) -> Term | URIRef:
        """Resolve an attribute value naming a resource.

        Tries compact-name expansion, then an existing term, then falls back to
        the raw IRI. Closed-namespace misses fall back instead of raising.
        """

        if isinstance(value, Term):
            return value
        try:
            expanded = self.expand_pname(str(value))
        except ClosedNamespaceLookup:
            expanded = None
        if expanded is not None:
            return expanded
        try:
            found = self.find_term(str(value))
        except ClosedNamespaceLookup:
            found = None
        if found is not None:
            return found
        return URIRef(str(value))


_default_registry: Registry | None = None


def get_registry() -> Registry:
    """Return the shared registry, building it from configuration on first use."""

    global _default_registry
    if _default_registry is None:
        _default_registry = Registry(load_config())
    return _default_registry


def set_registry(registry: Registry | None) -> Registry | None:
    """Install ``registry`` as the shared one and return the previous value."""

    global _default_registry
    previous = _default_registry
    _default_registry = registry
    return previous


def reset_registry() -> None:
    set_registry(None)


__all__ = [
    "CORE_PREFIX",
    "Registry",
    "get_registry",
    "set_registry",
    "reset_registry",
]
