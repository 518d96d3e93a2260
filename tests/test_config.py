# File: tests/test_config.py
import json
from pathlib import Path

import pytest

from page_digest.config import DigestConfig, build_config, load_config
from page_digest.errors import ConfigurationError
from page_digest.sources import load_stopwords, load_urls


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults(targets_file):
    cfg = build_config(targets=targets_file)
    assert isinstance(cfg, DigestConfig)
    assert (cfg.top_words, cfg.workers, cfg.summary_sentences) == (10, 10, 3)
    assert cfg.exclude is None
    assert cfg.job_timeout is None


def test_missing_targets_is_configuration_error():
    with pytest.raises(ConfigurationError):
        build_config(top_words=5)


def test_targets_file_must_exist(tmp_path):
    with pytest.raises(ConfigurationError, match="targets"):
        build_config(targets=tmp_path / "missing.txt")


def test_exclude_file_must_exist(targets_file, tmp_path):
    with pytest.raises(ConfigurationError, match="exclude"):
        build_config(targets=targets_file, exclude=tmp_path / "nope.txt")


@pytest.mark.parametrize(
    "field,value",
    [
        ("summary_sentences", 0),
        ("summary_sentences", -1),
        ("top_words", 0),
        ("workers", 0),
        ("timeout", 0),
        ("job_timeout", -5),
    ],
)
def test_invalid_numbers_rejected(targets_file, field, value):
    with pytest.raises(ConfigurationError, match=field):
        build_config(targets=targets_file, **{field: value})


def test_config_is_frozen(targets_file):
    cfg = build_config(targets=targets_file)
    with pytest.raises(Exception):
        cfg.workers = 3


@pytest.mark.parametrize("suffix", [".yaml", ".json"])
def test_load_config_file_and_overrides(tmp_path, targets_file, suffix):
    data = {"targets": str(targets_file), "top_words": 4, "workers": 2}
    content = json.dumps(data) if suffix == ".json" else "\n".join(f"{k}: {v}" for k, v in data.items())
    path = write_file(tmp_path, content, suffix)

    cfg = load_config(path, workers=7, summary_sentences=None)
    assert cfg.top_words == 4
    assert cfg.workers == 7
    assert cfg.summary_sentences == 3


@pytest.mark.parametrize(
    "content,suffix",
    [
        ("- just\n- a list", ".yaml"),
        ("key: [unclosed", ".yaml"),
        ("{broken", ".json"),
        ("targets = 'x'", ".toml"),
    ],
)
def test_load_config_bad_files(tmp_path, content, suffix):
    path = write_file(tmp_path, content, suffix)
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        load_config(tmp_path / "absent.yaml")


def test_unknown_keys_are_rejected(tmp_path, targets_file):
    path = write_file(tmp_path, json.dumps({"targets": str(targets_file), "depth": 3}), ".json")
    with pytest.raises(ConfigurationError, match="depth"):
        load_config(path)


def test_load_urls_skips_blank_lines(targets_file):
    assert load_urls(targets_file) == ["example.com", "http://example.org/page"]


def test_load_stopwords_lowercases(stopwords_file):
    assert load_stopwords(stopwords_file) == frozenset({"the", "and"})


def test_load_stopwords_without_file_is_empty():
    assert load_stopwords(None) == frozenset()


def test_missing_input_file_is_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        load_urls(tmp_path / "missing.txt")
