"""Operator CLIs."""
