"""
HashingService: streaming file hashing with configurable read size.

Defaults to a 1 MiB read size for large file efficiency. Every file is read once,
however many algorithms are requested.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Optional, Union

from models.algorithm import Algorithm, AlgorithmSet, CaseMode, digest_size
from models.digest_result import DigestResult
from services.digest_session import DigestSession
from utils.hex_codec import byte_to_hex, hex_to_byte

logger = logging.getLogger(__name__)


class ReferenceHashError(ValueError):
    """Raised when a user-supplied reference digest is not valid hex of the right length."""
    pass


class HashingService:
    """
    Provides streaming hashing operations for large files.

    - CRC32 output is an 8-character uppercase hex string
    - MD5, SHA1 and ED2K outputs are lowercase hex strings
    - hash_file() renders every digest in the configured case
    """

    def __init__(
        self,
        chunk_size: int = 1_048_576,
        case_mode: CaseMode = CaseMode.LOWERCASE,
        parallel: bool = False,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be a positive number of bytes")
        self.chunk_size = chunk_size
        self.case_mode = CaseMode(case_mode)
        self.parallel = parallel

    def new_session(self, algorithms: Union[AlgorithmSet, int], case_mode: Optional[CaseMode] = None) -> DigestSession:
        return DigestSession(
            algorithms,
            case_mode=case_mode or self.case_mode,
            parallel=self.parallel,
        )

    def hash_stream(
        self,
        stream: BinaryIO,
        algorithms: Union[AlgorithmSet, int],
        case_mode: Optional[CaseMode] = None,
    ) -> DigestResult:
        """
        Hash everything readable from a binary stream.

        Args:
            stream (BinaryIO): Open binary file object, read until EOF.
            algorithms: Algorithms to compute.
            case_mode (Optional[CaseMode]): Overrides the service case mode.

        Returns:
            DigestResult: Hex digests for every requested algorithm.
        """
        with self.new_session(algorithms, case_mode) as session:
            while True:
                data = stream.read(self.chunk_size)
                if not data:
                    break
                session.update(data)
            return session.finish()

    def hash_file(
        self,
        file_path: str,
        algorithms: Union[AlgorithmSet, int],
        case_mode: Optional[CaseMode] = None,
    ) -> DigestResult:
        """
        Hash a file with every requested algorithm in a single read pass.

        Raises:
            FileNotFoundError, OSError: Propagated from opening or reading the file.
        """
        if not isinstance(algorithms, AlgorithmSet):
            algorithms = AlgorithmSet(algorithms)
        logger.info(f"Hashing {file_path} with {', '.join(algorithms.names())}")
        with open(file_path, "rb") as f:
            result = self.hash_stream(f, algorithms, case_mode)
        logger.debug(f"Digests for {file_path}: {result.as_dict()}")
        return result

    def _single(self, file_path: str, algorithm: Algorithm, case_mode: CaseMode) -> str:
        return self.hash_file(file_path, AlgorithmSet.of(algorithm), case_mode)[algorithm]

    def calculate_crc32(self, file_path: str) -> str:
        return self._single(file_path, Algorithm.CRC32, CaseMode.UPPERCASE)

    def calculate_md5(self, file_path: str) -> str:
        return self._single(file_path, Algorithm.MD5, CaseMode.LOWERCASE)

    def calculate_sha1(self, file_path: str) -> str:
        return self._single(file_path, Algorithm.SHA1, CaseMode.LOWERCASE)

    def calculate_ed2k(self, file_path: str) -> str:
        return self._single(file_path, Algorithm.ED2K, CaseMode.LOWERCASE)

    def verify_file(self, file_path: str, algorithm: Algorithm, reference: str) -> bool:
        """
        Compare a file's digest against a reference hex string.

        The reference is parsed case-insensitively and surrounding whitespace is
        ignored.

        Args:
            file_path (str): File to hash.
            algorithm (Algorithm): Algorithm the reference was produced with.
            reference (str): Expected digest as hex text.

        Returns:
            bool: True when the digests match.

        Raises:
            ReferenceHashError: If the reference is not a hex digest of the right length.
        """
        algorithm = Algorithm(algorithm)
        reference = reference.strip()
        size = digest_size(algorithm)
        expected = hex_to_byte(reference, size) if len(reference) == size * 2 else None
        if expected is None:
            raise ReferenceHashError(
                f"Reference {algorithm.name} digest must be {size * 2} hex digits, got {reference!r}"
            )

        actual = self.hash_file(file_path, AlgorithmSet.of(algorithm), CaseMode.LOWERCASE)[algorithm]
        matched = actual == byte_to_hex(expected, CaseMode.LOWERCASE)
        if matched:
            logger.info(f"{algorithm.name} verified for {file_path}")
        else:
            logger.warning(f"{algorithm.name} mismatch for {file_path}: expected {reference.lower()}, got {actual}")
        return matched
