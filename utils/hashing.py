"""
Functional hashing helpers. Use services.hashing_service.HashingService for anything
beyond one-off calls.

Each helper delegates to HashingService with a 1 MiB default read size.
"""

from __future__ import annotations

from typing import Dict, Iterable, Union

from models.algorithm import AlgorithmSet, CaseMode
from services.digest_session import DigestSession
from services.hashing_service import HashingService


def calculate_crc32(file_path: str, chunk_size: int = 1_048_576) -> str:
    return HashingService(chunk_size=chunk_size).calculate_crc32(file_path)


def calculate_md5(file_path: str, chunk_size: int = 1_048_576) -> str:
    return HashingService(chunk_size=chunk_size).calculate_md5(file_path)


def sha1sum(file_path: str, chunk_size: int = 1_048_576) -> str:
    return HashingService(chunk_size=chunk_size).calculate_sha1(file_path)


def ed2k_hash(file_path: str, chunk_size: int = 1_048_576) -> str:
    return HashingService(chunk_size=chunk_size).calculate_ed2k(file_path)


def digest_bytes(
    data: bytes,
    algorithms: Union[str, Iterable[str]] = "all",
    case_mode: CaseMode = CaseMode.LOWERCASE,
) -> Dict[str, str]:
    """Hash an in-memory buffer, returning digests keyed by lowercase algorithm name."""
    session = DigestSession(AlgorithmSet.from_names(algorithms), case_mode=case_mode)
    session.update(data)
    return session.finish().as_dict()
