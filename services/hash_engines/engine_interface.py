from abc import ABC, abstractmethod
from typing import Union
import logging
from models.algorithm import Algorithm, DIGEST_SIZES

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


class HashEngineInterface(ABC):
    """
    Abstract base class defining the incremental hash engine contract used by digest sessions.

    Every engine exposes the same three-step lifecycle regardless of algorithm, so
    sessions never look at algorithm-specific state.

    Attributes:
        algorithm (Algorithm): The algorithm this engine computes.

    Methods:
        init(): Reset the engine to a fresh state.
        update(data): Feed the next piece of the stream. Zero-length data is allowed.
        final(): Finish the computation and return the raw digest bytes. Must be
            called exactly once per init().
        digest_size: Length in bytes of the digest returned by final().
    """

    algorithm: Algorithm

    def __init__(self) -> None:
        self.init()

    @property
    def digest_size(self) -> int:
        return DIGEST_SIZES[self.algorithm]

    @property
    def name(self) -> str:
        return self.algorithm.name

    @abstractmethod
    def init(self) -> None:
        """Reset the engine to a fresh state."""
        pass

    @abstractmethod
    def update(self, data: BytesLike) -> None:
        """Feed the next piece of the stream."""
        pass

    @abstractmethod
    def final(self) -> bytes:
        """Finish the computation and return the raw digest bytes."""
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"
