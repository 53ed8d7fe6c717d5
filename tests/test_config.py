import os

import pytest

from fastabuf import config


@pytest.fixture
def clean_environ(monkeypatch):
    env = {key: value for key, value in os.environ.items() if not key.startswith("FASTABUF_")}
    monkeypatch.setattr(os, "environ", env)
    return env


def test_defaults():
    cfg = config.FastaConfig()
    assert cfg.wrap_width == config.DEFAULT_WRAP_WIDTH
    assert cfg.encoding == "utf-8"
    assert cfg.skip_comments is False


def test_from_env_reads_overrides():
    cfg = config.FastaConfig.from_env(
        {"FASTABUF_WRAP_WIDTH": "60", "FASTABUF_ENCODING": "latin-1", "FASTABUF_SKIP_COMMENTS": "yes"}
    )
    assert cfg.wrap_width == 60
    assert cfg.encoding == "latin-1"
    assert cfg.skip_comments is True
    assert cfg.as_dict()["FASTABUF_WRAP_WIDTH"] == "60"


@pytest.mark.parametrize(
    "env",
    [
        {"FASTABUF_WRAP_WIDTH": "wide"},
        {"FASTABUF_WRAP_WIDTH": "0"},
        {"FASTABUF_SKIP_COMMENTS": "maybe"},
    ],
)
def test_from_env_rejects_invalid_values(env):
    with pytest.raises(ValueError):
        config.FastaConfig.from_env(env)


def test_load_config_reads_nearest_env_file(tmp_path, clean_environ):
    (tmp_path / ".env").write_text("FASTABUF_WRAP_WIDTH=60\nFASTABUF_SKIP_COMMENTS=true\n", encoding="utf-8")
    nested_dir = tmp_path / "nested" / "deeper"
    nested_dir.mkdir(parents=True)

    assert config.find_env_file(nested_dir) == (tmp_path / ".env").resolve()
    cfg = config.load_config(start_path=nested_dir)

    assert cfg.wrap_width == 60
    assert cfg.skip_comments is True


def test_load_config_does_not_override_existing_environment(tmp_path, clean_environ):
    (tmp_path / ".env").write_text("FASTABUF_WRAP_WIDTH=60\n", encoding="utf-8")
    clean_environ["FASTABUF_WRAP_WIDTH"] = "70"

    cfg = config.load_config(start_path=tmp_path)

    assert cfg.wrap_width == 70


def test_default_config_is_cached(tmp_path, monkeypatch, clean_environ):
    monkeypatch.chdir(tmp_path)
    config.get_default_config.cache_clear()
    try:
        clean_environ["FASTABUF_WRAP_WIDTH"] = "50"
        first = config.get_default_config()
        clean_environ["FASTABUF_WRAP_WIDTH"] = "90"
        assert config.get_default_config() is first
        assert first.wrap_width == 50
    finally:
        config.get_default_config.cache_clear()


def test_default_config_sources_env_file(tmp_path, monkeypatch, clean_environ):
    (tmp_path / ".env").write_text("FASTABUF_WRAP_WIDTH=64\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    config.get_default_config.cache_clear()
    try:
        assert config.get_default_config().wrap_width == 64
    finally:
        config.get_default_config.cache_clear()
