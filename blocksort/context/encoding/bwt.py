"""
Burrows-Wheeler Transform (BWT)

The BWT rearranges a block of bytes so that bytes sharing a context end up
next to each other. It loses no information: the last column of the sorted
rotation matrix plus the row of the original buffer is enough to rebuild it.

Algorithm:
1. Sort all rotations of the input (CircularSuffixArray)
2. Last column: the byte circularly preceding each sorted rotation
3. First: the sorted row holding the unrotated input

Inverse:
1. Stable counting sort of the last column gives the first column
2. The same placement records, for every sorted row, the row whose last
   byte it carries (the `next` chain)
3. Walk the chain from `first`, emitting first-column bytes

Wire format:
    [first: 4 bytes, big-endian][column: N bytes]
"""

import struct

from blocksort.models import BWTBlock
from blocksort.context.encoding.suffix_array import CircularSuffixArray

# Alphabet size (extended ASCII / raw bytes)
R = 256

_HEADER = struct.Struct('>I')


def bwt_encode(text: bytes) -> BWTBlock:
    """
    Apply the Burrows-Wheeler Transform to a single block

    Args:
        text: Input bytes, at least one byte long

    Returns:
        BWTBlock(first, column)

    Examples:
        >>> bwt_encode(b'ABRACADABRA!')
        BWTBlock(first=3, column=b'ARD!RCAAAABB')
    """
    if not text:
        raise ValueError("Cannot apply BWT to an empty buffer")

    csa = CircularSuffixArray(text)
    n = csa.length()

    column = bytearray(n)
    first = 0
    for i in range(n):
        offset = csa.rank_to_offset(i)
        if offset == 0:
            first = i
            column[i] = text[n - 1]
        else:
            column[i] = text[offset - 1]

    return BWTBlock(first, bytes(column))


def bwt_decode(first: int, column: bytes) -> bytes:
    """
    Reverse the Burrows-Wheeler Transform of a single block

    Args:
        first: Row of the original buffer in the sorted rotation matrix
        column: Last column of the sorted rotation matrix

    Returns:
        Original bytes

    Examples:
        >>> bwt_decode(3, b'ARD!RCAAAABB')
        b'ABRACADABRA!'
    """
    n = len(column)
    if n == 0:
        raise ValueError("Cannot invert BWT of an empty buffer")
    if first < 0 or first >= n:
        raise ValueError(f"First row {first} out of range for length {n}")

    # Key-indexed counting: count[c + 1] holds occurrences of byte c
    count = [0] * (R + 1)
    for c in column:
        count[c + 1] += 1

    # count[c] becomes the first row whose first-column byte is c
    for r in range(R):
        count[r + 1] += count[r]

    # Scanning in column order keeps the placement stable, which is what
    # makes next[] point at the right row for repeated bytes
    sorted_first = bytearray(n)
    next_row = [0] * n
    for i, c in enumerate(column):
        target = count[c]
        sorted_first[target] = c
        next_row[target] = i
        count[c] += 1

    result = bytearray(n)
    idx = first
    result[0] = sorted_first[idx]
    for k in range(1, n):
        idx = next_row[idx]
        result[k] = sorted_first[idx]

    return bytes(result)


def pack_bwt(block: BWTBlock) -> bytes:
    """Serialize a BWT block as [first][column]"""
    return _HEADER.pack(block.first) + block.column


def unpack_bwt(data: bytes) -> BWTBlock:
    """
    Parse a serialized BWT block

    Raises:
        ValueError: if the header is truncated or no column follows it
    """
    if len(data) < _HEADER.size:
        raise ValueError(f"Expected {_HEADER.size}-byte BWT header, got {len(data)} bytes")
    first, = _HEADER.unpack_from(data, 0)
    column = bytes(data[_HEADER.size:])
    if not column:
        raise ValueError("BWT stream has a header but no column")
    return BWTBlock(first, column)
