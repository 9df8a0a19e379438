"""CSV ingestion pipeline.

This module reads CSV sources, tokenizes them into flat records,
and hands persistable users to the store layer.
"""
