"""
Engines for the algorithms provided by the standard library's hashlib.
"""
import hashlib
import logging
from models.algorithm import Algorithm
from services.hash_engines.engine_interface import HashEngineInterface, BytesLike

logger = logging.getLogger(__name__)

HASHLIB_NAMES = {
    Algorithm.MD5: "md5",
    Algorithm.SHA1: "sha1",
    Algorithm.SHA256: "sha256",
    Algorithm.SHA512: "sha512",
}


class HashlibEngine(HashEngineInterface):
    """
    Wraps a hashlib constructor behind the engine interface.

    Args:
        algorithm (Algorithm): One of MD5, SHA1, SHA256 or SHA512.

    Raises:
        ValueError: If hashlib does not back the given algorithm.
    """

    def __init__(self, algorithm: Algorithm) -> None:
        if algorithm not in HASHLIB_NAMES:
            raise ValueError(f"hashlib does not provide {Algorithm(algorithm).name}")
        self.algorithm = Algorithm(algorithm)
        super().__init__()

    def init(self) -> None:
        self._hash = hashlib.new(HASHLIB_NAMES[self.algorithm])

    def update(self, data: BytesLike) -> None:
        self._hash.update(data)

    def final(self) -> bytes:
        return self._hash.digest()
