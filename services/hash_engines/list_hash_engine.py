"""
ED2K list hash: a two-level MD4 over fixed-size chunks.

Streams shorter than one chunk hash to a plain MD4 of the data. Longer streams
hash to MD4 over the concatenated MD4 digests of every chunk, including a
trailing empty chunk when the length is an exact multiple of the chunk size.
"""
import logging
from enum import Enum
from models.algorithm import Algorithm
from services.hash_engines.engine_interface import HashEngineInterface, BytesLike
from services.hash_engines.md4_engine import MD4Engine

logger = logging.getLogger(__name__)

# 9500 KiB
ED2K_CHUNK_SIZE = 9500 * 1024


class ResultSelector(Enum):
    """Which digest the list hasher reports when finished."""
    CHUNK_DIGEST = "chunk"
    LIST_DIGEST = "list"


class ChunkedListHasher(HashEngineInterface):
    """
    Computes the ED2K hash of a stream delivered in arbitrary pieces.

    Attributes:
        selector (ResultSelector): CHUNK_DIGEST until the first chunk boundary is
            crossed, LIST_DIGEST from then on.
        remaining (int): Bytes left before the current chunk is complete.
        chunk_count (int): Chunk digests folded into the list hash so far.
    """

    algorithm = Algorithm.ED2K
    chunk_size = ED2K_CHUNK_SIZE

    def init(self) -> None:
        self._chunk = MD4Engine()
        self._list = MD4Engine()
        self.remaining = self.chunk_size
        self.selector = ResultSelector.CHUNK_DIGEST
        self.chunk_count = 0

    def update(self, data: BytesLike) -> None:
        view = memoryview(data).cast("B")
        # One push may complete any number of chunks
        while len(view):
            if len(view) < self.remaining:
                self._chunk.update(view)
                self.remaining -= len(view)
                return

            self._chunk.update(view[:self.remaining])
            view = view[self.remaining:]
            self._fold_chunk()
            self._chunk.init()
            self.remaining = self.chunk_size
            self.selector = ResultSelector.LIST_DIGEST

    def _fold_chunk(self) -> bytes:
        chunk_digest = self._chunk.final()
        self._list.update(chunk_digest)
        self.chunk_count += 1
        logger.debug(f"ED2K chunk {self.chunk_count} complete: {chunk_digest.hex()}")
        return chunk_digest

    def final(self) -> bytes:
        # The open chunk is folded even when empty
        chunk_digest = self._fold_chunk()
        list_digest = self._list.final()
        if self.selector is ResultSelector.LIST_DIGEST:
            return list_digest
        return chunk_digest
