"""Project vocabulary declarations to rdflib triples and rebuild them from triples."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping, Sequence, Tuple

from rdflib import RDF, RDFS, Graph, Literal, URIRef
from rdflib.term import Node

from .iri import local_name
from .namespace import ClosedNamespaceLookup, Namespace, Policy
from .registry import Registry, get_registry
from .term import RELATIONAL_KEYS, Term

Statement = Tuple[URIRef, URIRef, Node]

# Canonical predicates for the well-known attribute keys.
PREDICATES: dict[str, URIRef] = {
    "label": RDFS.label,
    "comment": RDFS.comment,
    "type": RDF.type,
    "subClassOf": RDFS.subClassOf,
    "subPropertyOf": RDFS.subPropertyOf,
    "domain": RDFS.domain,
    "range": RDFS.range,
}
_KEY_FOR_PREDICATE = {str(pred): key for key, pred in PREDICATES.items()}


def _as_node(value: Any) -> Node:
    if isinstance(value, Term):
        return value.to_uri()
    if isinstance(value, Node):
        return value
    return URIRef(str(value))


def _expand(registry: Registry, text: Any) -> Term | URIRef | None:
    if isinstance(text, Term):
        return text
    if not isinstance(text, str) or isinstance(text, Literal):
        return None
    try:
        return registry.expand_pname(text)
    except ClosedNamespaceLookup:
        return None


def _values(raw: Any) -> list[Any]:
    if isinstance(raw, (list, tuple, set, frozenset)):
        return list(raw)
    return [raw]


def _literal(value: Any) -> Literal:
    if isinstance(value, Literal):
        return value
    return Literal(value)


def each_statement(namespace: Namespace) -> Iterator[Statement]:
    """Yield one triple per declared term, attribute and value.

    Relational keys expand as compact names and fall back to the raw IRI.
    ``label`` and ``comment`` become literals. Other keys name the predicate
    by compact name and are skipped when they do not expand; their values
    expand when possible and are otherwise kept as literals.
    """

    registry = namespace.registry
    for term in namespace.terms():
        subject = term.to_uri()
        for key, raw in term.attributes.items():
            predicate: Node | None = PREDICATES.get(key)
            if predicate is None:
                expanded_key = _expand(registry, key)
                if expanded_key is None:
                    registry.log.debug(
                        "vocab.export.skipped_key",
                        namespace=namespace.base,
                        details={"term": term, "key": key},
                    )
                    continue
                predicate = _as_node(expanded_key)
            for value in _values(raw):
                if value is None:
                    continue
                if key in RELATIONAL_KEYS:
                    obj = _as_node(_expand(registry, value) or value)
                elif key in ("label", "comment"):
                    obj = _literal(value)
                else:
                    expanded = _expand(registry, value)
                    obj = _as_node(expanded) if expanded is not None else _literal(value)
                yield subject, predicate, obj


def graph_with_prefixes(
    namespaces: Iterable[Namespace] = (),
    *,
    graph: Graph | None = None,
) -> Graph:
    """Return a graph with a prefix bound for each named namespace."""

    g = graph if graph is not None else Graph()
    for namespace in namespaces:
        if namespace.prefix and namespace.base:
            g.bind(namespace.prefix, URIRef(namespace.base), override=True)
    return g


def to_graph(namespace: Namespace, graph: Graph | None = None) -> Graph:
    """Collect :func:`each_statement` into an rdflib graph."""

    statements = list(each_statement(namespace))
    used: list[Namespace] = [namespace]
    registry = namespace.registry
    for triple in statements:
        for node in triple:
            if isinstance(node, URIRef):
                found = registry.find_namespace(node)
                if found is not None and all(found is not ns for ns in used):
                    used.append(found)
    g = graph_with_prefixes(used, graph=graph)
    for triple in statements:
        g.add(triple)
    return g


def write_sorted_ttl(graph: Graph, out_path: Path) -> Path:
    """Write ``graph`` as Turtle with prefixes and statements sorted."""

    out_path.parent.mkdir(parents=True, exist_ok=True)
    lines: list[str] = []
    nm = graph.namespace_manager
    for s, p, o in graph:
        lines.append(f"{s.n3(nm)} {p.n3(nm)} {o.n3(nm)} .")
    lines.sort()
    # n3() may bind generated prefixes, so collect them afterwards.
    prefixes = sorted(nm.namespaces(), key=lambda x: x[0])
    with out_path.open("w", encoding="utf-8") as f:
        for prefix, ns in prefixes:
            f.write(f"@prefix {prefix}: <{ns}> .\n")
        f.write("\n")
        for line in lines:
            f.write(line + "\n")
    return out_path


def _object_value(registry: Registry, obj: Node, language: str) -> str | None:
    if isinstance(obj, URIRef):
        return registry.pname(obj)
    if isinstance(obj, Literal):
        lang = (obj.language or language).lower()
        if lang != language:
            return None
        return str(obj)
    return None


def _merge_extra(
    discovered: dict[str, dict[str, Any]],
    extra: Sequence[str] | Mapping[str, Mapping[str, Any]] | None,
) -> dict[str, dict[str, Any]]:
    if not extra:
        return discovered
    if isinstance(extra, Mapping):
        base = {str(name): dict(attrs or {}) for name, attrs in extra.items()}
    else:
        base = {str(name): {"label": str(name)} for name in extra}
    base.update(discovered)
    return base


def import_statements(
    base: str,
    statements: Iterable[Statement],
    *,
    extra: Sequence[str] | Mapping[str, Mapping[str, Any]] | None = None,
    name: str | None = None,
    policy: Policy | str | None = None,
    registry: Registry | None = None,
) -> Namespace:
    """Build a new namespace at ``base`` from ``statements``.

    Only subjects under ``base`` contribute. Well-known predicates map back to
    their attribute keys, other predicates are kept under their compact name.
    IRIs are stored as compact names; literals are kept when untagged or in
    the configured default language. Terms named in ``extra`` are declared
    too, but anything found in ``statements`` wins.
    """

    registry = registry or get_registry()
    base = str(base)
    language = registry.config.default_language.lower()
    # Registered before scanning so IRIs under the new base compact to its prefix.
    namespace = Namespace(base, name, policy=policy, registry=registry)
    pending: dict[str, dict[str, list[str]]] = {}
    seen = 0
    for subject, predicate, obj in statements:
        if not isinstance(subject, URIRef):
            continue
        local = local_name(subject, base)
        if not local:
            continue
        seen += 1
        key = _KEY_FOR_PREDICATE.get(str(predicate)) or registry.pname(predicate)
        value = _object_value(registry, obj, language)
        attrs = pending.setdefault(local, {})
        if value is None:
            continue
        attrs.setdefault(key, []).append(value)

    discovered: dict[str, dict[str, Any]] = {}
    for local, attrs in pending.items():
        discovered[local] = {k: v[0] if len(v) == 1 else v for k, v in attrs.items()}
    definitions = _merge_extra(discovered, extra)

    namespace.declare_all(definitions)
    registry.log.info(
        "vocab.import.complete",
        namespace=base,
        prefix=namespace.prefix,
        count=len(namespace),
        statements=seen,
    )
    return namespace


def load(
    iri: str,
    *,
    source: Any = None,
    extra: Sequence[str] | Mapping[str, Mapping[str, Any]] | None = None,
    name: str | None = None,
    format: str | None = None,
    policy: Policy | str | None = None,
    registry: Registry | None = None,
) -> Namespace:
    """Load a vocabulary rooted at ``iri``.

    ``source`` may be a :class:`~rdflib.Graph`, an iterable of triples, or
    anything :meth:`rdflib.Graph.parse` accepts (path, URL, file object);
    it defaults to ``iri`` itself.
    """

    registry = registry or get_registry()
    location = iri if source is None else source
    if isinstance(location, Graph) or (
        not isinstance(location, (str, Path)) and not hasattr(location, "read")
    ):
        statements = location
    else:
        registry.log.info("vocab.load.start", namespace=iri, source=str(location))
        if isinstance(location, Path):
            location = str(location)
        statements = Graph().parse(location, format=format)
    return import_statements(
        iri,
        statements,
        extra=extra,
        name=name,
        policy=policy,
        registry=registry,
    )


__all__ = [
    "PREDICATES",
    "Statement",
    "each_statement",
    "graph_with_prefixes",
    "to_graph",
    "write_sorted_ttl",
    "import_statements",
    "load",
]
