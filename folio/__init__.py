"""Folio: content backend for a single-admin portfolio site."""
