"""Pair and argument checks."""
