"""Vocabulary terms, namespaces, the registry and the statement projector."""

__all__ = [
    "Term",
    "Namespace",
    "Policy",
    "ClosedNamespaceLookup",
    "InvalidNamespace",
    "Registry",
    "get_registry",
    "set_registry",
    "reset_registry",
    "each_statement",
    "to_graph",
    "write_sorted_ttl",
    "import_statements",
    "load",
]

from .term import Term
from .namespace import ClosedNamespaceLookup, InvalidNamespace, Namespace, Policy
from .registry import Registry, get_registry, reset_registry, set_registry
from .statements import each_statement, import_statements, load, to_graph, write_sorted_ttl
