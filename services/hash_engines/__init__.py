"""
Incremental hash engines sharing the HashEngineInterface contract.
"""

from .engine_interface import HashEngineInterface
from .crc32_engine import CRC32Engine
from .md4_engine import MD4Engine
from .hashlib_engine import HashlibEngine
from .list_hash_engine import ChunkedListHasher, ResultSelector, ED2K_CHUNK_SIZE

__all__ = [
    "HashEngineInterface",
    "CRC32Engine",
    "MD4Engine",
    "HashlibEngine",
    "ChunkedListHasher",
    "ResultSelector",
    "ED2K_CHUNK_SIZE",
]
