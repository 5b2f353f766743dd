# === FILE: gleam_finder/config.py ===
"""
Loading and validation of the GleamFinder configuration.
Pydantic describes the schema and checks the values.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
)

DEFAULT_USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64; rv:78.0) Gecko/20100101 Firefox/78.0"


class FinderConfig(BaseModel):
    """Settings shared by search, resolver and giveaway fetcher."""
    model_config = ConfigDict(extra="forbid", frozen=True, validate_default=True)

    search_url: HttpUrl = Field(
        "https://www.google.com/search", description="Search provider endpoint."
    )
    query: str = Field('"gleam.io"', min_length=1, description="Search query (q=).")
    time_filter: str = Field("qdr:h", description="Recency filter (tbs=), qdr:h = last hour.")
    results_per_page: int = Field(10, ge=1, description="Offset step between result pages.")
    pages: int = Field(4, ge=1, le=10, description="Result pages walked by the find command.")
    giveaway_host: str = Field("gleam.io", min_length=1, description="Giveaway platform host.")
    timeout: float = Field(10.0, gt=0, description="Timeout of a single request (seconds).")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="User-Agent header.")

    @field_validator("giveaway_host", mode="before")
    def _lower_host(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> FinderConfig:
    """
    Read YAML or JSON and return a validated FinderConfig.
    Without *path* the default file is used when present, built-in defaults otherwise.
    An explicit path that does not exist raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return FinderConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return FinderConfig(**data)
