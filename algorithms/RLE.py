"""RLE Encoding and Decoding"""

from typing import BinaryIO, Iterator, List, Tuple

import numpy as np

from algorithms.errors import MalformedInput
from compressor_ABC import Compressor

# The count of a (count, value) pair is a single byte
MAX_RUN = 255


def _as_array(data) -> np.ndarray:
    return np.frombuffer(bytes(data), dtype=np.uint8)


def _run_bounds(arr: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Finds maximal runs of equal bytes.

    Returns:
        (starts, lengths) arrays, one entry per run
    """
    # uint8 differences wrap around, but are zero only for equal neighbours
    starts = np.concatenate(([0], np.flatnonzero(np.diff(arr)) + 1))
    lengths = np.diff(np.append(starts, arr.size))
    return starts, lengths


def iter_runs(data) -> Iterator[Tuple[int, int]]:
    """Yields (value, length) for every maximal run, lengths not capped."""
    arr = _as_array(data)
    if arr.size == 0:
        return
    starts, lengths = _run_bounds(arr)
    for start, length in zip(starts, lengths):
        yield int(arr[start]), int(length)


def encode(data) -> bytes:
    """
    Encodes bytes as (count, value) byte pairs.

    A run longer than MAX_RUN is split into (255, v) pairs followed by a
    final pair holding the remainder, so every count fits in one byte.

    Args:
        data: Any bytes-like object

    Returns:
        Run-code bytes, always of even length
    """
    arr = _as_array(data)
    if arr.size == 0:
        return b""

    starts, lengths = _run_bounds(arr)
    pieces = (lengths + MAX_RUN - 1) // MAX_RUN

    counts = np.full(int(pieces.sum()), MAX_RUN, dtype=np.int64)
    last = np.cumsum(pieces) - 1
    counts[last] = lengths - MAX_RUN * (pieces - 1)

    encoded = np.empty(2 * counts.size, dtype=np.uint8)
    encoded[0::2] = counts
    encoded[1::2] = np.repeat(arr[starts], pieces)
    return encoded.tobytes()


def _check_even(encoded: bytes):
    if len(encoded) % 2:
        raise MalformedInput(
            f"Run-code sequence has odd length {len(encoded)}: "
            f"byte at offset {len(encoded) - 1} has no value"
        )


def decode(encoded) -> bytes:
    """
    Expands (count, value) byte pairs back into raw bytes.

    A zero count contributes nothing.

    Raises:
        MalformedInput: if the sequence has an odd length
    """
    encoded = bytes(encoded)
    _check_even(encoded)
    arr = _as_array(encoded)
    return np.repeat(arr[1::2], arr[0::2]).tobytes()


def pairs(encoded) -> List[Tuple[int, int]]:
    """Splits run-code bytes into a list of (count, value) tuples."""
    encoded = bytes(encoded)
    _check_even(encoded)
    return list(zip(encoded[0::2], encoded[1::2]))


def size_log(input_size: int, output_size: int) -> str:
    diff = input_size - output_size
    if diff > 0:
        ratio = diff / input_size * 100
        return f"Size reduced by {diff} bytes ({ratio:.1f}% total saving)"
    if diff < 0:
        return f"Size increased by {-diff} bytes"
    return "Size unchanged"


class RLECompressor(Compressor):
    """A class for RLE encoding and decoding of binary streams."""

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        data = input_stream.read()
        encoded = encode(data)
        output_stream.write(encoded)
        return size_log(len(data), len(encoded))

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        encoded = input_stream.read()
        decoded = decode(encoded)
        output_stream.write(decoded)
        return (
            f"Expanded {len(encoded) // 2} runs into {len(decoded)} bytes"
        )
