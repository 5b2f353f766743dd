# gleam_finder/parser/__init__.py
"""HTML parsers for search result listings and giveaway pages."""
