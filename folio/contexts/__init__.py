"""Bounded contexts: ingest, templating, composition."""
