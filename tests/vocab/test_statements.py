from __future__ import annotations

from pathlib import Path

import rdflib
from rdflib import RDF, RDFS, Graph, Literal, URIRef

from rdfVocab.config import VocabConfig
from rdfVocab.vocab.builtin import RDFS_NS, SKOS_NS
from rdfVocab.vocab.namespace import Namespace, Policy
from rdfVocab.vocab.registry import Registry
from rdfVocab.vocab.statements import (
    each_statement,
    import_statements,
    load,
    to_graph,
    write_sorted_ttl,
)

EX = "http://example/ns#"


def _widget_namespace(registry: Registry) -> Namespace:
    ns = Namespace(EX, "EX", registry=registry)
    ns.declare("Widget", label="A widget", type="rdfs:Class")
    return ns


def test_export_maps_well_known_keys(registry) -> None:
    ns = Namespace(EX, "EX", registry=registry)
    ns.declare(
        "size",
        label="Size",
        comment="How big",
        type="rdf:Property",
        domain="ex:Widget",
        range="http://www.w3.org/2001/XMLSchema#integer",
        subPropertyOf="http://other.example/measure",
    )
    triples = set(each_statement(ns))
    subject = URIRef(f"{EX}size")
    assert (subject, RDFS.label, Literal("Size")) in triples
    assert (subject, RDFS.comment, Literal("How big")) in triples
    assert (subject, RDF.type, RDF.Property) in triples
    assert (subject, RDFS.domain, URIRef(f"{EX}Widget")) in triples
    assert (subject, RDFS.range, URIRef("http://www.w3.org/2001/XMLSchema#integer")) in triples
    assert (subject, RDFS.subPropertyOf, URIRef("http://other.example/measure")) in triples
    assert len(triples) == 6


def test_export_multi_valued_attributes(registry) -> None:
    ns = Namespace(EX, "EX", registry=registry)
    ns.declare("Widget", subClassOf=["ex:Thing", "ex:Part"], label=["Widget", "Gizmo"])
    triples = list(each_statement(ns))
    parents = [o for _, p, o in triples if p == RDFS.subClassOf]
    labels = [o for _, p, o in triples if p == RDFS.label]
    assert parents == [URIRef(f"{EX}Thing"), URIRef(f"{EX}Part")]
    assert labels == [Literal("Widget"), Literal("Gizmo")]


def test_export_other_keys_expand_or_are_skipped(registry) -> None:
    ns = Namespace(EX, "EX", registry=registry)
    ns.declare(
        "Widget",
        {
            "skos:note": "Handle with care",
            "skos:broader": "ex:Thing",
            "http://full.example/iri": "dropped",
            "nope:key": "dropped",
        },
    )
    triples = set(each_statement(ns))
    subject = URIRef(f"{EX}Widget")
    assert (subject, URIRef(f"{SKOS_NS}note"), Literal("Handle with care")) in triples
    assert (subject, URIRef(f"{SKOS_NS}broader"), URIRef(f"{EX}Thing")) in triples
    assert len(triples) == 2


def test_export_is_lazy(registry) -> None:
    ns = _widget_namespace(registry)
    stream = each_statement(ns)
    assert iter(stream) is stream
    assert len(list(stream)) == 2
    assert list(stream) == []
    assert len(list(each_statement(ns))) == 2


def test_round_trip_reconstructs_declarations(registry) -> None:
    ns = _widget_namespace(registry)
    statements = list(each_statement(ns))

    fresh = Registry(VocabConfig())
    imported = import_statements(EX, statements, name="EX", registry=fresh)
    widget = imported["Widget"]
    assert widget.get("label") == "A widget"
    assert widget.get("type") == "rdfs:Class"
    assert str(widget.type) == str(ns.Widget.type)
    assert widget.label == ns.Widget.label
    assert widget.is_class


def test_import_into_same_registry_keeps_first_namespace_for_lookup(registry) -> None:
    ns = _widget_namespace(registry)
    imported = import_statements(EX, each_statement(ns), registry=registry)
    assert imported is not ns
    assert imported.prefix is None
    assert registry.find_namespace(f"{EX}Widget") is ns
    assert imported["Widget"].get("label") == "A widget"


def test_import_into_same_registry_reuses_interned_terms(registry) -> None:
    ns = _widget_namespace(registry)
    imported = import_statements(EX, each_statement(ns), name="EX", registry=registry)
    widget = imported.resolve("Widget")
    assert widget is ns.resolve("Widget")
    assert registry.find_term(f"{EX}Widget") is widget
    assert widget in imported and widget in ns
    assert widget.get("type") == "rdfs:Class"


def test_import_filters_subjects_and_languages(registry) -> None:
    g = Graph()
    widget = URIRef(f"{EX}Widget")
    g.add((widget, RDFS.label, Literal("Widget", lang="en")))
    g.add((widget, RDFS.label, Literal("Bidule", lang="fr")))
    g.add((widget, RDFS.comment, Literal("Plain text")))
    g.add((widget, RDFS.comment, Literal("Nur Deutsch", lang="de")))
    g.add((widget, URIRef(f"{SKOS_NS}note"), Literal("A note")))
    g.add((widget, URIRef("http://unknown.example/prop"), URIRef(f"{RDFS_NS}Resource")))
    g.add((URIRef(f"{EX}OnlyFrench"), RDFS.label, Literal("Seulement", lang="fr")))
    g.add((URIRef("http://elsewhere.example/Other"), RDFS.label, Literal("Other")))
    g.add((rdflib.BNode(), RDFS.label, Literal("blank")))

    ns = import_statements(EX, g, name="EX", registry=registry)
    assert sorted(t.name for t in ns.terms()) == ["OnlyFrench", "Widget"]
    attrs = dict(ns["Widget"].attributes)
    assert attrs["label"] == "Widget"
    assert attrs["comment"] == "Plain text"
    assert attrs["skos:note"] == "A note"
    assert attrs["http://unknown.example/prop"] == "rdfs:Resource"
    assert dict(ns["OnlyFrench"].attributes) == {}


def test_import_default_language_is_configurable() -> None:
    reg = Registry(VocabConfig(default_language="fr"))
    g = Graph()
    g.add((URIRef(f"{EX}Widget"), RDFS.label, Literal("Widget", lang="en")))
    g.add((URIRef(f"{EX}Widget"), RDFS.label, Literal("Bidule", lang="fr")))
    ns = import_statements(EX, g, registry=reg)
    assert ns["Widget"].get("label") == "Bidule"


def test_import_collects_repeated_values(registry) -> None:
    widget = URIRef(f"{EX}Widget")
    statements = [
        (widget, RDFS.subClassOf, URIRef(f"{EX}Thing")),
        (widget, RDFS.subClassOf, URIRef(f"{EX}Part")),
    ]
    Namespace(EX, "EX", registry=registry)
    ns = import_statements(EX, statements, registry=registry)
    assert ns["Widget"].get("subClassOf") == ["ex:Thing", "ex:Part"]


def test_extra_terms_have_lower_precedence(registry) -> None:
    statements = [(URIRef(f"{EX}Widget"), RDFS.label, Literal("From graph"))]
    ns = import_statements(
        EX,
        statements,
        extra={"Widget": {"label": "From extra"}, "Gadget": {"comment": "extra only"}},
        registry=registry,
    )
    assert ns["Widget"].get("label") == "From graph"
    assert ns["Gadget"].get("comment") == "extra only"

    listed = import_statements(EX, statements, extra=["Gizmo"], registry=registry)
    assert listed["Gizmo"].get("label") == "Gizmo"
    assert listed["Widget"].get("label") == "From graph"


def test_import_policy_is_honoured(registry) -> None:
    statements = [(URIRef(f"{EX}Widget"), RDFS.label, Literal("Widget"))]
    ns = import_statements(EX, statements, policy=Policy.CLOSED, registry=registry)
    assert ns.is_closed
    assert ns.Widget.get("label") == "Widget"
    assert not hasattr(ns, "Gadget")


def test_load_parses_turtle_source(tmp_path: Path, registry) -> None:
    ttl = tmp_path / "vocab.ttl"
    ttl.write_text(
        """
@prefix rdfs: <http://www.w3.org/2000/01/rdf-schema#> .
@prefix ex: <http://example/ns#> .

ex:Widget a rdfs:Class ;
    rdfs:label "A widget" ;
    rdfs:comment "Something useful"@en .
ex:size a <http://www.w3.org/1999/02/22-rdf-syntax-ns#Property> ;
    rdfs:domain ex:Widget .
""",
        encoding="utf-8",
    )
    ns = load(EX, source=ttl, name="EX", format="turtle", registry=registry)
    assert ns.prefix == "ex"
    assert ns.Widget.is_class
    assert ns.Widget.comment == "Something useful"
    assert ns.size.is_property
    assert ns.size.get("domain") == "ex:Widget"


def test_load_accepts_a_graph(registry) -> None:
    g = Graph()
    g.add((URIRef(f"{EX}Widget"), RDFS.label, Literal("A widget")))
    ns = load(EX, source=g, registry=registry)
    assert ns.label_for("Widget") == "A widget"


def test_to_graph_and_sorted_turtle(tmp_path: Path, registry) -> None:
    ns = _widget_namespace(registry)
    ns.declare("size", type="rdf:Property", domain="ex:Widget")
    graph = to_graph(ns)
    assert len(graph) == 4
    out = write_sorted_ttl(graph, tmp_path / "out" / "ex.ttl")
    text = out.read_text(encoding="utf-8")
    assert "@prefix ex: <http://example/ns#> ." in text
    body = [line for line in text.splitlines() if line and not line.startswith("@prefix")]
    assert body == sorted(body)
    assert any(line.startswith("ex:Widget ") for line in body)

    reparsed = Graph().parse(out, format="turtle")
    assert len(reparsed) == 4
