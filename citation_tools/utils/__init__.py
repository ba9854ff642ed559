"""Identifier matching, citation rendering and history helpers."""
