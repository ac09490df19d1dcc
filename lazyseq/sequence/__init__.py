"""Sequence pipelines: generic, list-backed, primitive and entry sequences."""
