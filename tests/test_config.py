import os

import pytest
from utils.config import AppConfig, load_config, parse_token_values

KEYS = ["ATTN_TOKEN_VALUES", "ATTN_BIAS_SCALE", "ATTN_SHUFFLE_SEED", "ATTN_LOG_LEVEL"]


@pytest.fixture
def clean_env(monkeypatch):
    for key in KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    # load_dotenv가 추가한 키 정리
    for key in KEYS:
        os.environ.pop(key, None)


def test_defaults_without_env_file(clean_env, tmp_path):
    config = load_config(tmp_path / "missing.env")
    assert config == AppConfig()
    assert dict(config.default_values) == {"A": 1, "B": 2, "C": 3}
    assert config.bias_scale == 0.1
    assert config.shuffle_seed is None
    assert config.log_level == "INFO"


def test_env_file_values(clean_env, tmp_path):
    env_file = tmp_path / "config.env"
    env_file.write_text(
        "ATTN_TOKEN_VALUES=A=5,C=-2\n"
        "ATTN_BIAS_SCALE=0.2\n"
        "ATTN_SHUFFLE_SEED=42\n"
        "ATTN_LOG_LEVEL=debug\n"
    )
    config = load_config(env_file)
    assert dict(config.default_values) == {"A": 5, "B": 2, "C": -2}
    assert config.default_value("C") == -2
    assert config.bias_scale == 0.2
    assert config.shuffle_seed == 42
    assert config.log_level == "DEBUG"


def test_environment_overrides_env_file(clean_env, monkeypatch, tmp_path):
    env_file = tmp_path / "config.env"
    env_file.write_text("ATTN_BIAS_SCALE=0.2\n")
    monkeypatch.setenv("ATTN_BIAS_SCALE", "0.3")
    assert load_config(env_file).bias_scale == 0.3


def test_malformed_values_fall_back(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("ATTN_BIAS_SCALE", "lots")
    monkeypatch.setenv("ATTN_SHUFFLE_SEED", "abc")
    config = load_config(tmp_path / "missing.env")
    assert config.bias_scale == 0.1
    assert config.shuffle_seed is None


@pytest.mark.parametrize("text, expected", [
    (None, {"A": 1, "B": 2, "C": 3}),
    ("", {"A": 1, "B": 2, "C": 3}),
    ("A=7, B = x ,C=3", {"A": 7, "B": 0, "C": 3}),
    ("D=4,B,C=9,", {"A": 1, "B": 2, "C": 9}),
])
def test_parse_token_values(text, expected):
    assert parse_token_values(text) == expected


@pytest.mark.parametrize("seed", ["-5", "²", "9" * 5000, "1.5"])
def test_invalid_seed_is_ignored(clean_env, monkeypatch, tmp_path, seed):
    monkeypatch.setenv("ATTN_SHUFFLE_SEED", seed)
    assert load_config(tmp_path / "missing.env").shuffle_seed is None


def test_config_is_hashable(clean_env, tmp_path):
    config = load_config(tmp_path / "missing.env")
    assert hash(config) == hash(AppConfig())
    assert config.default_value("B") == 2
    assert config.default_value("Z") == 0
