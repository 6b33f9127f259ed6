import os
import sys
import configparser
import pytest
from click.testing import CliRunner

# Add project root to sys.path for local imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from services.hash_engines.list_hash_engine import ED2K_CHUNK_SIZE
from services.hashing_service import HashingService
from utils.hashcheck_config import HashingSettings
from tests.hash_vectors import pattern_bytes

# ────────────────────────────────────────────────
# DATA FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture(scope="session")
def chunk_size():
    return ED2K_CHUNK_SIZE


@pytest.fixture(scope="session")
def large_data(chunk_size):
    """Two full ED2K chunks plus a 12345 byte tail."""
    return pattern_bytes(2 * chunk_size + 12345)


@pytest.fixture(scope="function")
def sample_file(tmp_path):
    """A small file containing b'abc'."""
    path = tmp_path / "abc.bin"
    path.write_bytes(b"abc")
    return path


@pytest.fixture(scope="function")
def binary_file(tmp_path):
    """A 300 KiB file of patterned bytes."""
    path = tmp_path / "pattern.bin"
    path.write_bytes(pattern_bytes(300 * 1024 + 7))
    return path


# ────────────────────────────────────────────────
# CONFIGURATION FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture(scope="function")
def test_config_path(tmp_path):
    """Create a temporary configuration file for hashcheck tests."""
    config_path = tmp_path / "hashcheck_config.ini"
    config = configparser.ConfigParser()
    config["Hashing"] = {
        "algorithms": "md5,sha1",
        "case": "uppercase",
        "read_chunk_size": "4096",
        "parallel": "false",
    }
    with config_path.open("w") as config_file:
        config.write(config_file)
    return config_path


@pytest.fixture(scope="function")
def clean_env(monkeypatch):
    """Remove HASHCHECK_* overrides inherited from the environment."""
    for var in ("HASHCHECK_ALGORITHMS", "HASHCHECK_CASE", "HASHCHECK_READ_CHUNK_SIZE", "HASHCHECK_PARALLEL"):
        monkeypatch.delenv(var, raising=False)


# ────────────────────────────────────────────────
# CLI FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture
def runner():
    """Fixture providing a Click CliRunner instance."""
    return CliRunner()


@pytest.fixture
def cli_obj():
    """Context object equivalent to what the CLI group builds from default settings."""
    settings = HashingSettings()
    return {
        "settings": settings,
        "hashing": HashingService(
            chunk_size=settings.read_chunk_size,
            case_mode=settings.case,
            parallel=settings.parallel,
        ),
    }
