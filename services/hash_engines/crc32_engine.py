"""
CRC32 engine (IEEE 802.3 polynomial) built on binascii.crc32.
"""
import binascii
import logging
from models.algorithm import Algorithm
from services.hash_engines.engine_interface import HashEngineInterface, BytesLike

logger = logging.getLogger(__name__)


class CRC32Engine(HashEngineInterface):
    """
    Running CRC32 accumulator.

    The state is held as an unsigned 32-bit integer; final() reports it as a
    big-endian byte sequence so that its hex rendering matches the conventional
    8-digit CRC32 presentation.
    """

    algorithm = Algorithm.CRC32

    def init(self) -> None:
        self.state = 0

    def update(self, data: BytesLike) -> None:
        self.state = binascii.crc32(data, self.state)

    def final(self) -> bytes:
        return (self.state & 0xFFFFFFFF).to_bytes(4, "big")
