"""Biomotor test catalog and norm table."""
