# gleam_finder/report/json_report.py

"""
JSON output of GleamFinder results.

Links are written as strings, giveaways through :meth:`Giveaway.to_dict`.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Union

from gleam_finder.gleam import Giveaway


def to_jsonable(items: Iterable[Any]) -> list[Any]:
    """Turn links and Giveaway records into plain JSON values."""
    return [item.to_dict() if isinstance(item, Giveaway) else item for item in items]


def dumps(items: Iterable[Any], pretty: bool = False) -> str:
    return json.dumps(to_jsonable(items), ensure_ascii=False, indent=2 if pretty else None)


def render_json(items: Iterable[Any], output_path: Union[Path, str], pretty: bool = True) -> Path:
    """
    Save *items* as JSON at *output_path* and return the path.

    Example:
    ```python
    from gleam_finder.report.json_report import render_json
    report_path = render_json(links, 'reports/links.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dumps(items, pretty=pretty), encoding="utf-8")
    return output
