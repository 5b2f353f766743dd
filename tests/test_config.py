# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError
from gleam_finder.config import FinderConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("pages: 2\ntimeout: 5", ".yaml", None),
        (json.dumps({"pages": 2, "timeout": 5}), ".json", None),
        ("pages: 0", ".yaml", ValidationError),
        ("unknown_key: 1", ".yaml", ValidationError),
        ("key: [unclosed", ".yaml", ValueError),
        ("- just\n- a list", ".yaml", TypeError),
        ("[1, 2]", ".json", TypeError),
        ("{broken", ".json", ValueError),
        ("pages = 2", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, FinderConfig)
        assert cfg.pages == 2
        assert cfg.timeout == 5.0
        assert cfg.query == '"gleam.io"'


def test_load_config_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert cfg == FinderConfig()
    assert cfg.time_filter == "qdr:h"


def test_load_config_reads_default_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("pages: 3\n", encoding="utf-8")
    assert load_config(None).pages == 3


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_shipped_default_config_is_valid():
    shipped = Path(__file__).parent.parent / "configs" / "default.yaml"
    assert load_config(shipped) == FinderConfig()


def test_config_is_frozen():
    cfg = FinderConfig()
    with pytest.raises(ValidationError):
        cfg.pages = 9


def test_default_search_url_is_validated():
    default = FinderConfig()
    loaded = FinderConfig(search_url="https://www.google.com/search")
    assert type(default.search_url) is type(loaded.search_url)
    assert not isinstance(default.search_url, str)
    assert default.search_url == loaded.search_url
    assert default.model_dump_json() == loaded.model_dump_json()
