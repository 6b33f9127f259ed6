import pytest
from services.hash_engines.list_hash_engine import ChunkedListHasher, ED2K_CHUNK_SIZE, ResultSelector
from tests.hash_vectors import MD4_EMPTY, md4, pattern_bytes


def ed2k(pieces) -> bytes:
    hasher = ChunkedListHasher()
    for piece in pieces:
        hasher.update(piece)
    return hasher.final()


def test_chunk_size_is_9500_kib():
    assert ED2K_CHUNK_SIZE == 9_728_000


def test_empty_input_is_md4_of_empty():
    assert ed2k([]).hex() == MD4_EMPTY


def test_zero_length_updates_are_harmless():
    assert ed2k([b"", b"abc", b""]) == md4(b"abc")


@pytest.mark.parametrize("size", [1, 63, 64, 65, 100_000])
def test_short_input_is_plain_md4(size):
    data = pattern_bytes(size)
    assert ed2k([data]) == md4(data)


def test_one_byte_short_of_a_chunk_is_plain_md4(chunk_size):
    data = pattern_bytes(chunk_size - 1)
    hasher = ChunkedListHasher()
    hasher.update(data)
    assert hasher.selector is ResultSelector.CHUNK_DIGEST
    assert hasher.remaining == 1
    assert hasher.final() == md4(data)


def test_exact_chunk_includes_trailing_empty_chunk(chunk_size):
    data = pattern_bytes(chunk_size)
    hasher = ChunkedListHasher()
    hasher.update(data)
    assert hasher.selector is ResultSelector.LIST_DIGEST
    assert hasher.remaining == chunk_size
    assert hasher.final() == md4(md4(data) + md4(b""))
    assert hasher.chunk_count == 2


def test_chunk_plus_tail(large_data, chunk_size):
    data = large_data[:chunk_size + 1000]
    expected = md4(md4(data[:chunk_size]) + md4(data[chunk_size:]))
    assert ed2k([data]) == expected


def test_multi_chunk_single_push(large_data, chunk_size):
    c1 = large_data[:chunk_size]
    c2 = large_data[chunk_size:2 * chunk_size]
    rest = large_data[2 * chunk_size:]
    expected = md4(md4(c1) + md4(c2) + md4(rest))

    hasher = ChunkedListHasher()
    hasher.update(large_data)
    assert hasher.chunk_count == 2
    assert hasher.remaining == chunk_size - len(rest)
    assert hasher.final() == expected


def test_two_exact_chunks_in_one_push(large_data, chunk_size):
    data = large_data[:2 * chunk_size]
    expected = md4(md4(data[:chunk_size]) + md4(data[chunk_size:]) + md4(b""))
    assert ed2k([data]) == expected


def test_streaming_matches_single_push(large_data):
    step = 1_000_003
    pieces = [large_data[i:i + step] for i in range(0, len(large_data), step)]
    assert ed2k(pieces) == ed2k([large_data])


def test_split_exactly_on_boundary(large_data, chunk_size):
    pieces = [large_data[:chunk_size], large_data[chunk_size:]]
    assert ed2k(pieces) == ed2k([large_data])


def test_selector_never_switches_back(chunk_size):
    hasher = ChunkedListHasher()
    hasher.update(pattern_bytes(chunk_size))
    hasher.update(b"x")
    assert hasher.selector is ResultSelector.LIST_DIGEST


def test_accepts_bytearray_and_memoryview():
    data = pattern_bytes(5000)
    assert ed2k([bytearray(data[:10]), memoryview(data)[10:]]) == md4(data)


def test_digest_size():
    assert ChunkedListHasher().digest_size == 16
