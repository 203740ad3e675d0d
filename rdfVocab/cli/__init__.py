"""Command line interface for rdfVocab."""
