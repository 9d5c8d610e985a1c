"""Storage layer.

This module persists versioned collection documents and exposes the
validated, read-only tables consumed by lookup code.
"""
