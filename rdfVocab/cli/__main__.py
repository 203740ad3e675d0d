from __future__ import annotations

"""Top-level CLI for inspecting and exporting registered vocabularies."""

import json
import sys
from pathlib import Path

import click

from rdfVocab import __version__
from rdfVocab.vocab import (
    ClosedNamespaceLookup,
    InvalidNamespace,
    get_registry,
    load as load_vocab,
    to_graph,
    write_sorted_ttl,
)
from rdfVocab.vocab.term import Term


def _term_summary(term: Term) -> dict:
    vocab = term.vocab
    value = term.type
    if isinstance(value, list):
        types = [str(v) for v in value]
    else:
        types = [str(value)] if value is not None else []
    return {
        "iri": str(term),
        "namespace": vocab.base if vocab is not None else None,
        "label": str(term.label),
        "comment": str(term.comment),
        "type": types,
        "class": term.is_class,
        "property": term.is_property,
        "datatype": term.is_datatype,
        "valid": term.valid(),
    }


def _emit_graph(graph, out: Path | None) -> None:
    if out is None:
        click.echo(graph.serialize(format="turtle"))
        return
    write_sorted_ttl(graph, out)
    click.echo(f"Wrote {len(graph)} statements to {out}")


@click.group()
@click.version_option(__version__)
def cli() -> None:  # pragma: no cover - simple wrapper
    """rdfVocab command line."""


@cli.command(name="list")
def list_cmd() -> None:
    """Print every known namespace as JSON."""

    rows = [
        {
            "prefix": ns.prefix,
            "base": ns.base,
            "policy": ns.policy.value,
            "terms": len(ns),
        }
        for ns in get_registry().namespaces()
    ]
    click.echo(json.dumps(rows, indent=2))


@cli.command()
@click.argument("curie")
def expand(curie: str) -> None:
    """Expand a compact name such as ``rdfs:label``."""

    try:
        result = get_registry().expand_pname(curie)
    except ClosedNamespaceLookup as exc:
        raise click.ClickException(str(exc)) from exc
    if result is None:
        raise click.ClickException(f"Unknown prefix in {curie!r}")
    click.echo(str(result))


@cli.command()
@click.argument("iri")
def find(iri: str) -> None:
    """Describe the vocabulary term for a full IRI."""

    try:
        term = get_registry().find_term(iri)
    except (ClosedNamespaceLookup, InvalidNamespace) as exc:
        raise click.ClickException(str(exc)) from exc
    if term is None:
        raise click.ClickException(f"No vocabulary covers {iri}")
    click.echo(json.dumps(_term_summary(term), sort_keys=True, indent=2))


@cli.command()
@click.argument("prefix")
@click.option(
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write sorted Turtle to this file instead of stdout.",
)
def export(prefix: str, out: Path | None) -> None:
    """Export the declarations of the namespace bound to PREFIX."""

    namespace = get_registry().for_prefix(prefix)
    if namespace is None:
        raise click.ClickException(f"Unknown prefix: {prefix}")
    _emit_graph(to_graph(namespace), out)


@cli.command()
@click.argument("iri")
@click.option("--source", default=None, help="Path or URL to read instead of IRI.")
@click.option("--name", default=None, help="Vocabulary name; its lower-case form becomes the prefix.")
@click.option("--format", "fmt", default=None, help="rdflib parser format (turtle, xml, nt, ...).")
@click.option("--strict", is_flag=True, help="Build a closed namespace.")
@click.option(
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the re-exported vocabulary as sorted Turtle.",
)
def load(iri: str, source: str | None, name: str | None, fmt: str | None, strict: bool, out: Path | None) -> None:
    """Load a vocabulary rooted at IRI and re-export it."""

    try:
        namespace = load_vocab(
            iri,
            source=source,
            name=name,
            format=fmt,
            policy="closed" if strict else None,
        )
    except Exception as exc:
        raise click.ClickException(f"Failed to load {source or iri}: {exc}") from exc
    if out is not None:
        _emit_graph(to_graph(namespace), out)
    summary = {
        "base": namespace.base,
        "prefix": namespace.prefix,
        "policy": namespace.policy.value,
        "terms": [t.name for t in namespace.terms()],
    }
    click.echo(json.dumps(summary, indent=2))


def main() -> None:  # pragma: no cover - console entry point
    cli(prog_name="rdfVocab")


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
