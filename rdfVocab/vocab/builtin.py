from __future__ import annotations

"""Built-in vocabularies.

RDF itself is built eagerly with every registry because the ``rdf`` prefix is
reserved for it. The others are registered as factories and only built when
something asks for them (prefix expansion, reverse lookup, enumeration).
"""

from typing import Any, Callable, Iterable, Mapping

from .namespace import Namespace, Policy

RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS_NS = "http://www.w3.org/2000/01/rdf-schema#"
OWL_NS = "http://www.w3.org/2002/07/owl#"
XSD_NS = "http://www.w3.org/2001/XMLSchema#"
DC_NS = "http://purl.org/dc/terms/"
FOAF_NS = "http://xmlns.com/foaf/0.1/"
SKOS_NS = "http://www.w3.org/2004/02/skos/core#"
PROV_NS = "http://www.w3.org/ns/prov#"

Definitions = Mapping[str, Mapping[str, Any]]


def _cls(comment: str, *parents: str) -> dict[str, Any]:
    attrs: dict[str, Any] = {"type": "rdfs:Class", "comment": comment}
    if parents:
        attrs["subClassOf"] = parents[0] if len(parents) == 1 else list(parents)
    return attrs


def _prop(comment: str, domain: str | None = None, range_: str | None = None, kind: str = "rdf:Property") -> dict[str, Any]:
    attrs: dict[str, Any] = {"type": kind, "comment": comment}
    if domain:
        attrs["domain"] = domain
    if range_:
        attrs["range"] = range_
    return attrs


def _dt(comment: str) -> dict[str, Any]:
    return {"type": "rdfs:Datatype", "comment": comment}


RDF_TERMS: Definitions = {
    "Property": _cls("The class of RDF properties.", "rdfs:Resource"),
    "Statement": _cls("The class of RDF statements.", "rdfs:Resource"),
    "Bag": _cls("The class of unordered containers.", "rdfs:Container"),
    "Seq": _cls("The class of ordered containers.", "rdfs:Container"),
    "Alt": _cls("The class of containers of alternatives.", "rdfs:Container"),
    "List": _cls("The class of RDF Lists.", "rdfs:Resource"),
    "XMLLiteral": _dt("The datatype of XML literal values."),
    "HTML": _dt("The datatype of RDF literals storing fragments of HTML content."),
    "langString": _dt("The datatype of language-tagged string values."),
    "PlainLiteral": _dt("The class of plain (i.e. untyped) literal values."),
    "type": _prop("The subject is an instance of a class.", "rdfs:Resource", "rdfs:Class"),
    "subject": _prop("The subject of the subject RDF statement.", "rdf:Statement", "rdfs:Resource"),
    "predicate": _prop("The predicate of the subject RDF statement.", "rdf:Statement", "rdfs:Resource"),
    "object": _prop("The object of the subject RDF statement.", "rdf:Statement", "rdfs:Resource"),
    "value": _prop("Idiomatic property used for structured values.", "rdfs:Resource", "rdfs:Resource"),
    "first": _prop("The first item in the subject RDF list.", "rdf:List", "rdfs:Resource"),
    "rest": _prop("The rest of the subject RDF list after the first item.", "rdf:List", "rdf:List"),
    "nil": {"type": "rdf:List", "comment": "The empty list, with no items in it."},
}

RDFS_TERMS: Definitions = {
    "Resource": _cls("The class resource, everything."),
    "Class": _cls("The class of classes.", "rdfs:Resource"),
    "Literal": _cls("The class of literal values, eg. textual strings and integers.", "rdfs:Resource"),
    "Datatype": _cls("The class of RDF datatypes.", "rdfs:Class"),
    "Container": _cls("The class of RDF containers.", "rdfs:Resource"),
    "ContainerMembershipProperty": _cls("The class of container membership properties.", "rdf:Property"),
    "label": _prop("A human-readable name for the subject.", "rdfs:Resource", "rdfs:Literal"),
    "comment": _prop("A description of the subject resource.", "rdfs:Resource", "rdfs:Literal"),
    "domain": _prop("A domain of the subject property.", "rdf:Property", "rdfs:Class"),
    "range": _prop("A range of the subject property.", "rdf:Property", "rdfs:Class"),
    "subClassOf": _prop("The subject is a subclass of a class.", "rdfs:Class", "rdfs:Class"),
    "subPropertyOf": _prop("The subject is a subproperty of a property.", "rdf:Property", "rdf:Property"),
    "member": _prop("A member of the subject resource.", "rdfs:Resource", "rdfs:Resource"),
    "seeAlso": _prop("Further information about the subject resource.", "rdfs:Resource", "rdfs:Resource"),
    "isDefinedBy": _prop("The definition of the subject resource.", "rdfs:Resource", "rdfs:Resource"),
}

OWL_TERMS: Definitions = {
    "Class": _cls("The class of OWL classes.", "rdfs:Class"),
    "Thing": {"type": "owl:Class", "comment": "The class of OWL individuals."},
    "Nothing": {"type": "owl:Class", "comment": "This is the empty class."},
    "Ontology": _cls("The class of ontologies.", "rdfs:Resource"),
    "ObjectProperty": _cls("The class of object properties.", "rdf:Property"),
    "DatatypeProperty": _cls("The class of data properties.", "rdf:Property"),
    "AnnotationProperty": _cls("The class of annotation properties.", "rdf:Property"),
    "FunctionalProperty": _cls("The class of functional properties.", "rdf:Property"),
    "TransitiveProperty": _cls("The class of transitive properties.", "owl:ObjectProperty"),
    "Restriction": _cls("The class of property restrictions.", "owl:Class"),
    "OntologyProperty": _cls("The class of ontology properties.", "rdf:Property"),
    "sameAs": _prop("The property that determines that two given individuals are equal.", "owl:Thing", "owl:Thing"),
    "equivalentClass": _prop("The property that determines that two given classes are equivalent.", "rdfs:Class", "rdfs:Class"),
    "equivalentProperty": _prop("The property that determines that two given properties are equivalent.", "rdf:Property", "rdf:Property"),
    "inverseOf": _prop("The property that determines that two given properties are inverse.", "owl:ObjectProperty", "owl:ObjectProperty"),
    "onProperty": _prop("The property that determines the property that a property restriction refers to.", "owl:Restriction", "rdf:Property"),
    "versionInfo": _prop("The annotation property that provides version information.", kind="owl:AnnotationProperty"),
    "imports": _prop("The property that is used for importing other ontologies.", "owl:Ontology", "owl:Ontology", kind="owl:OntologyProperty"),
}

XSD_TERMS: Definitions = {
    name: _dt(f"XML Schema {name} datatype.")
    for name in (
        "string",
        "boolean",
        "decimal",
        "integer",
        "int",
        "long",
        "short",
        "byte",
        "nonNegativeInteger",
        "positiveInteger",
        "float",
        "double",
        "date",
        "dateTime",
        "dateTimeStamp",
        "time",
        "duration",
        "gYear",
        "anyURI",
        "language",
        "token",
        "normalizedString",
        "base64Binary",
        "hexBinary",
    )
}

DC_TERMS: Definitions = {
    "Agent": _cls("A resource that acts or has the power to act."),
    "title": _prop("A name given to the resource."),
    "description": _prop("An account of the resource."),
    "creator": _prop("An entity responsible for making the resource.", range_="dc:Agent"),
    "contributor": _prop("An entity responsible for making contributions to the resource.", range_="dc:Agent"),
    "publisher": _prop("An entity responsible for making the resource available.", range_="dc:Agent"),
    "created": _prop("Date of creation of the resource.", range_="rdfs:Literal"),
    "modified": _prop("Date on which the resource was changed.", range_="rdfs:Literal"),
    "source": _prop("A related resource from which the described resource is derived."),
    "identifier": _prop("An unambiguous reference to the resource within a given context.", range_="rdfs:Literal"),
    "license": _prop("A legal document giving official permission to do something with the resource."),
}

FOAF_TERMS: Definitions = {
    "Agent": _cls("An agent (eg. person, group, software or physical artifact)."),
    "Person": _cls("A person.", "foaf:Agent"),
    "Organization": _cls("An organization.", "foaf:Agent"),
    "Document": _cls("A document."),
    "name": _prop("A name for some thing.", "owl:Thing", "rdfs:Literal", kind="owl:DatatypeProperty"),
    "mbox": _prop("A personal mailbox.", "foaf:Agent", "owl:Thing", kind="owl:ObjectProperty"),
    "knows": _prop("A person known by this person.", "foaf:Person", "foaf:Person", kind="owl:ObjectProperty"),
    "homepage": _prop("A homepage for some thing.", "owl:Thing", "foaf:Document", kind="owl:ObjectProperty"),
}

SKOS_TERMS: Definitions = {
    "Concept": _cls("An idea or notion; a unit of thought."),
    "ConceptScheme": _cls("A set of concepts, optionally including statements about semantic relationships."),
    "Collection": _cls("A meaningful collection of concepts."),
    "prefLabel": _prop("The preferred lexical label for a resource, in a given language.", range_="rdfs:Literal", kind="owl:AnnotationProperty"),
    "altLabel": _prop("An alternative lexical label for a resource.", range_="rdfs:Literal", kind="owl:AnnotationProperty"),
    "definition": _prop("A statement or formal explanation of the meaning of a concept.", kind="owl:AnnotationProperty"),
    "note": _prop("A general note, for any purpose.", kind="owl:AnnotationProperty"),
    "broader": _prop("Relates a concept to a concept that is more general in meaning.", kind="owl:ObjectProperty"),
    "narrower": _prop("Relates a concept to a concept that is more specific in meaning.", kind="owl:ObjectProperty"),
    "inScheme": _prop("Relates a resource to a concept scheme in which it is included.", range_="skos:ConceptScheme", kind="owl:ObjectProperty"),
}

PROV_TERMS: Definitions = {
    "Entity": _cls("A physical, digital, conceptual, or other kind of thing."),
    "Activity": _cls("Something that occurs over a period of time and acts upon or with entities."),
    "Agent": _cls("Something that bears some form of responsibility for an activity."),
    "wasGeneratedBy": _prop("Generation is the completion of production of a new entity by an activity.", "prov:Entity", "prov:Activity", kind="owl:ObjectProperty"),
    "wasDerivedFrom": _prop("A derivation is a transformation of an entity into another.", "prov:Entity", "prov:Entity", kind="owl:ObjectProperty"),
    "wasAttributedTo": _prop("Attribution is the ascribing of an entity to an agent.", "prov:Entity", "prov:Agent", kind="owl:ObjectProperty"),
    "used": _prop("Usage is the beginning of utilizing an entity by an activity.", "prov:Activity", "prov:Entity", kind="owl:ObjectProperty"),
    "generatedAtTime": _prop("Generation is the completion of production of a new entity.", "prov:Entity", "xsd:dateTime", kind="owl:DatatypeProperty"),
}


def _factory(base: str, name: str, policy: Policy, terms: Definitions) -> Callable[..., Namespace]:
    def build(registry) -> Namespace:
        namespace = Namespace(base, name, policy=policy, registry=registry)
        namespace.declare_all(terms)
        return namespace

    build.__name__ = f"build_{name.lower()}"
    return build


FACTORIES: dict[str, Callable[..., Namespace]] = {
    "rdfs": _factory(RDFS_NS, "RDFS", Policy.CLOSED, RDFS_TERMS),
    "owl": _factory(OWL_NS, "OWL", Policy.CLOSED, OWL_TERMS),
    "xsd": _factory(XSD_NS, "XSD", Policy.CLOSED, XSD_TERMS),
    "dc": _factory(DC_NS, "DC", Policy.OPEN, DC_TERMS),
    "foaf": _factory(FOAF_NS, "FOAF", Policy.OPEN, FOAF_TERMS),
    "skos": _factory(SKOS_NS, "SKOS", Policy.OPEN, SKOS_TERMS),
    "prov": _factory(PROV_NS, "PROV", Policy.OPEN, PROV_TERMS),
}


def build_rdf(registry) -> Namespace:
    """Build the core RDF vocabulary. Open, so container membership properties resolve."""

    namespace = Namespace(RDF_NS, "RDF", policy=Policy.OPEN, registry=registry)
    namespace.declare_all(RDF_TERMS)
    return namespace


def install(registry, names: Iterable[str] | None = None) -> Namespace:
    """Build RDF on ``registry`` and register factories for ``names``."""

    core = build_rdf(registry)
    for name in names if names is not None else FACTORIES:
        factory = FACTORIES.get(str(name).lower())
        if factory is not None:
            registry.register_factory(name, factory)
    return core


__all__ = [
    "RDF_NS",
    "RDFS_NS",
    "OWL_NS",
    "XSD_NS",
    "DC_NS",
    "FOAF_NS",
    "SKOS_NS",
    "PROV_NS",
    "FACTORIES",
    "build_rdf",
    "install",
]
