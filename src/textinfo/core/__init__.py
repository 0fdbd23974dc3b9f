"""Protocols, errors, result types and text utilities."""
