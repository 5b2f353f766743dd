# File: gleam_finder/report/__init__.py
"""gleam_finder.report: JSON output of links and giveaways used by the CLI."""

from gleam_finder.report.json_report import dumps, render_json, to_jsonable

__all__ = ["dumps", "render_json", "to_jsonable"]
