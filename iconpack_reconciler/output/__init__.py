"""Serialisation of documents and results."""
