"""
MD4 engine backed by pycryptodome.

OpenSSL 3 moved MD4 to its legacy provider, so hashlib.new("md4") is not
available on most current interpreters.
"""
import logging
from Crypto.Hash import MD4
from models.algorithm import Algorithm
from services.hash_engines.engine_interface import HashEngineInterface, BytesLike

logger = logging.getLogger(__name__)


class MD4Engine(HashEngineInterface):
    """Incremental MD4."""

    algorithm = Algorithm.MD4

    def init(self) -> None:
        self._hash = MD4.new()

    def update(self, data: BytesLike) -> None:
        self._hash.update(data)

    def final(self) -> bytes:
        return self._hash.digest()
