"""Callers around the parser: ingestion and talent-record mapping."""
