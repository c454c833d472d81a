"""Measurement helpers shared by the catalog and clone sessions."""
