"""
Core domain logic.

Ingestion pipeline, orchestration graphs and the exception hierarchy.
"""
