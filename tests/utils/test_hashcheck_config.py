import configparser
import pytest
from pydantic import ValidationError
from models.algorithm import Algorithm, CaseMode
from utils.hashcheck_config import (
    HashingSettings,
    apply_env_overrides,
    get_config_value,
    load_configuration,
    load_hashing_settings,
    normalize_config,
)


def test_defaults_when_file_missing(tmp_path, clean_env):
    settings = load_hashing_settings(str(tmp_path / "missing.ini"))
    assert settings == HashingSettings()
    assert settings.algorithms == "crc32,md5,sha1"
    assert settings.case is CaseMode.LOWERCASE
    assert settings.read_chunk_size == 1_048_576
    assert settings.parallel is False


def test_defaults_when_no_path(clean_env):
    assert load_hashing_settings(None) == HashingSettings()


def test_load_from_file(test_config_path, clean_env):
    settings = load_hashing_settings(str(test_config_path))
    assert settings.algorithms == "md5,sha1"
    assert settings.case is CaseMode.UPPERCASE
    assert settings.read_chunk_size == 4096
    assert settings.parallel is False
    assert list(settings.algorithm_set) == [Algorithm.MD5, Algorithm.SHA1]


def test_env_overrides_file(test_config_path, clean_env, monkeypatch):
    monkeypatch.setenv("HASHCHECK_ALGORITHMS", "ALL")
    monkeypatch.setenv("HASHCHECK_CASE", "Lowercase")
    monkeypatch.setenv("HASHCHECK_READ_CHUNK_SIZE", "65536")
    monkeypatch.setenv("HASHCHECK_PARALLEL", "yes")
    settings = load_hashing_settings(str(test_config_path))
    assert settings.algorithms == "all"
    assert settings.algorithm_set.mask == 0x3F
    assert settings.case is CaseMode.LOWERCASE
    assert settings.read_chunk_size == 65536
    assert settings.parallel is True


def test_blank_env_var_ignored(test_config_path, clean_env, monkeypatch):
    monkeypatch.setenv("HASHCHECK_ALGORITHMS", "   ")
    assert load_hashing_settings(str(test_config_path)).algorithms == "md5,sha1"


def test_invalid_algorithm_rejected(tmp_path, clean_env):
    path = tmp_path / "bad.ini"
    path.write_text("[Hashing]\nalgorithms = md5,whirlpool\n")
    with pytest.raises(ValidationError):
        load_hashing_settings(str(path))


def test_invalid_case_rejected(clean_env, monkeypatch):
    monkeypatch.setenv("HASHCHECK_CASE", "mixed")
    with pytest.raises(ValidationError):
        load_hashing_settings(None)


def test_non_positive_chunk_size_rejected(clean_env, monkeypatch):
    monkeypatch.setenv("HASHCHECK_READ_CHUNK_SIZE", "0")
    with pytest.raises(ValidationError):
        load_hashing_settings(None)


def test_non_integer_chunk_size_rejected(clean_env, monkeypatch):
    monkeypatch.setenv("HASHCHECK_READ_CHUNK_SIZE", "big")
    with pytest.raises(ValueError):
        load_hashing_settings(None)


def test_section_names_are_case_insensitive(tmp_path):
    path = tmp_path / "mixed.ini"
    path.write_text("[HASHING]\ncase = uppercase\n")
    config = load_configuration(str(path))
    assert get_config_value(config, "Hashing", "case") == "uppercase"
    assert normalize_config(config) == {"hashing": {"case": "uppercase"}}


def test_get_config_value_conversions():
    config = {"hashing": {"parallel": "On", "read_chunk_size": "10", "case": "  "}}
    assert get_config_value(config, "hashing", "parallel", value_type=bool) is True
    assert get_config_value(config, "hashing", "read_chunk_size", value_type=int) == 10
    assert get_config_value(config, "hashing", "case", fallback="lowercase") == "lowercase"
    assert get_config_value(config, "missing", "key", fallback=3) == 3
    assert get_config_value(None, "hashing", "case", fallback="x") == "x"


def test_apply_env_overrides_creates_section(clean_env, monkeypatch):
    monkeypatch.setenv("HASHCHECK_PARALLEL", "true")
    assert apply_env_overrides({}) == {"hashing": {"parallel": "true"}}


def test_settings_validate_assignment():
    settings = HashingSettings()
    with pytest.raises(ValidationError):
        settings.read_chunk_size = -1


def test_get_config_value_returns_fallback_unconverted():
    config = {"hashing": {"case": "uppercase"}}
    assert get_config_value(config, "hashing", "read_chunk_size", fallback=4096) == 4096
    assert get_config_value(config, "hashing", "parallel", fallback=None) is None
    assert get_config_value(config, "other", "key", fallback=[1, 2]) == [1, 2]
