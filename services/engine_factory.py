"""
This module provides a factory for creating hash engine instances by algorithm.
"""
import logging
from models.algorithm import Algorithm
from services.hash_engines.engine_interface import HashEngineInterface
from services.hash_engines.crc32_engine import CRC32Engine
from services.hash_engines.md4_engine import MD4Engine
from services.hash_engines.hashlib_engine import HashlibEngine, HASHLIB_NAMES
from services.hash_engines.list_hash_engine import ChunkedListHasher

logger = logging.getLogger(__name__)


def create_hash_engine(algorithm: Algorithm) -> HashEngineInterface:
    """
    Create a fresh, initialized engine for a single algorithm.

    Args:
        algorithm (Algorithm): A single algorithm flag.

    Returns:
        HashEngineInterface: A new engine owned by the caller.

    Raises:
        ValueError: If the algorithm is not supported or is a combined mask.
    """
    try:
        algorithm = Algorithm(algorithm)
    except ValueError:
        raise ValueError(f"Unsupported algorithm: {algorithm!r}")

    if algorithm == Algorithm.CRC32:
        return CRC32Engine()

    elif algorithm == Algorithm.MD4:
        return MD4Engine()

    elif algorithm in HASHLIB_NAMES:
        return HashlibEngine(algorithm)

    elif algorithm == Algorithm.ED2K:
        return ChunkedListHasher()

    else:
        raise ValueError(f"Unsupported algorithm: {algorithm!r}")
