"""
DigestSession: drive several independent hash engines over one byte stream.

Every selected engine sees the same bytes in the same order. Engines never share
state, so with ``parallel=True`` each one is advanced on its own worker thread;
each update() still waits for every engine before returning, which keeps each
engine's input in stream order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Dict, Optional, Union

from models.algorithm import Algorithm, AlgorithmSet, CaseMode
from models.digest_result import DigestResult
from services.engine_factory import create_hash_engine
from services.hash_engines.engine_interface import HashEngineInterface, BytesLike
from utils.hex_codec import byte_to_hex

logger = logging.getLogger(__name__)


class DigestSessionError(RuntimeError):
    """Raised when a session is used outside its init/update/finish lifecycle."""
    pass


class DigestSession:
    """
    Multiplexes one input stream to an engine per selected algorithm.

    Args:
        algorithms (Union[AlgorithmSet, int]): Algorithms to compute. An int is
            treated as a bitmask.
        case_mode (CaseMode): Letter case for every hex digest of this session.
        parallel (bool): Advance engines on worker threads, one per algorithm.

    Usage:
        session = DigestSession(AlgorithmSet.of(Algorithm.MD5, Algorithm.SHA1))
        for block in blocks:
            session.update(block)
        result = session.finish()
    """

    def __init__(
        self,
        algorithms: Union[AlgorithmSet, int],
        case_mode: CaseMode = CaseMode.LOWERCASE,
        parallel: bool = False,
    ) -> None:
        if not isinstance(algorithms, AlgorithmSet):
            algorithms = AlgorithmSet(algorithms)

        self.algorithms = algorithms
        self.case_mode = CaseMode(case_mode)
        self.parallel = parallel
        self.bytes_processed = 0
        self._result: Optional[DigestResult] = None
        self._engines: Dict[Algorithm, HashEngineInterface] = {
            algorithm: create_hash_engine(algorithm) for algorithm in algorithms
        }
        self._executor: Optional[ThreadPoolExecutor] = None
        if parallel and len(self._engines) > 1:
            self._executor = ThreadPoolExecutor(
                max_workers=len(self._engines),
                thread_name_prefix="digest-engine",
            )

        logger.debug(
            f"Digest session initialized: algorithms={algorithms.names()}, "
            f"case={self.case_mode.value}, parallel={self._executor is not None}"
        )

    @property
    def finished(self) -> bool:
        return self._result is not None

    def update(self, data: BytesLike) -> None:
        """
        Feed the next piece of the stream to every selected engine.

        Args:
            data: Bytes in stream order. Zero-length input is accepted.

        Raises:
            DigestSessionError: If the session has already been finished.
        """
        if self.finished:
            raise DigestSessionError("Cannot update a digest session after finish()")

        if self._executor is not None:
            futures = [self._executor.submit(engine.update, data) for engine in self._engines.values()]
            self._wait_all(futures)
        else:
            for engine in self._engines.values():
                engine.update(data)

        self.bytes_processed += memoryview(data).nbytes

    def finish(self) -> DigestResult:
        """
        Finalize every engine and render the digests as hex.

        Returns:
            DigestResult: One hex digest per selected algorithm.

        Raises:
            DigestSessionError: If the session has already been finished.
        """
        if self.finished:
            raise DigestSessionError("Digest session has already been finished")

        try:
            if self._executor is not None:
                futures = {
                    algorithm: self._executor.submit(engine.final)
                    for algorithm, engine in self._engines.items()
                }
                self._wait_all(list(futures.values()))
                raw = {algorithm: future.result() for algorithm, future in futures.items()}
            else:
                raw = {algorithm: engine.final() for algorithm, engine in self._engines.items()}
        finally:
            self.close()

        self._result = DigestResult(
            algorithms=self.algorithms,
            case_mode=self.case_mode,
            digests={algorithm: byte_to_hex(digest, self.case_mode) for algorithm, digest in raw.items()},
        )
        logger.debug(f"Digest session finished after {self.bytes_processed} bytes")
        return self._result

    @property
    def result(self) -> DigestResult:
        """The result of finish(); raises if the session is still open."""
        if self._result is None:
            raise DigestSessionError("Digest session has not been finished")
        return self._result

    def close(self) -> None:
        """Shut down worker threads, if any. Safe to call more than once."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    @staticmethod
    def _wait_all(futures) -> None:
        wait(futures)
        # Surface the first engine failure to the caller
        for future in futures:
            future.result()

    def __enter__(self) -> "DigestSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<DigestSession algorithms={self.algorithms.names()} finished={self.finished}>"
