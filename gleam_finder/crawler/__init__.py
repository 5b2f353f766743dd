# gleam_finder/crawler/__init__.py
"""HTTP fetching and link extraction."""
