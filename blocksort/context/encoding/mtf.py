"""
Move-to-Front (MTF) coding

Keeps every symbol of the alphabet in an ordered list. Each input symbol is
replaced by its current position, then moved to the front. Runs of the same
byte (which BWT output is full of) turn into runs of zeros:

    move-to-front    in   out
    -------------    ---  ---
     A B C D E F      C    2
     C A B D E F      A    1
     A C B D E F      A    0
     A C B D E F      A    0
     A C B D E F      B    2
     B A C D E F      C    2
     C B A D E F      C    0
     C B A D E F      C    0
     C B A D E F      A    2
     A C B D E F      C    1
     C A B D E F      C    0
     C A B D E F      F    5

Both directions apply the same update to the same (symbol, rank) pair, so the
encoder and decoder state stay in lockstep.
"""

from typing import Iterable, List, Optional, Sequence

# Alphabet size (extended ASCII / raw bytes)
R = 256


def _initial_state(alphabet: Optional[Sequence[int]]) -> List[int]:
    if alphabet is None:
        return list(range(R))
    state = list(alphabet)
    if len(set(state)) != len(state):
        raise ValueError("MTF alphabet contains duplicate symbols")
    if any(not 0 <= s < R for s in state):
        raise ValueError("MTF alphabet symbols must be byte values")
    return state


def mtf_encode(text: Iterable[int], alphabet: Optional[Sequence[int]] = None) -> bytes:
    """
    Move-to-Front encode

    Args:
        text: Input bytes
        alphabet: Initial symbol order (defaults to 0..255)

    Returns:
        One rank per input byte

    Examples:
        >>> list(mtf_encode(b'CAAABCCCACCF', alphabet=b'ABCDEF'))
        [2, 1, 0, 0, 2, 2, 0, 0, 2, 1, 0, 5]
    """
    state = _initial_state(alphabet)
    result = bytearray()
    for c in text:
        try:
            p = state.index(c)
        except ValueError:
            raise ValueError(f"Symbol {c} is not in the MTF alphabet") from None
        result.append(p)
        # Move to front
        state.pop(p)
        state.insert(0, c)
    return bytes(result)


def mtf_decode(codes: Iterable[int], alphabet: Optional[Sequence[int]] = None) -> bytes:
    """
    Move-to-Front decode

    Args:
        codes: Ranks produced by mtf_encode
        alphabet: Initial symbol order (defaults to 0..255)

    Returns:
        Original bytes

    Examples:
        >>> mtf_decode([2, 1, 0, 0, 2, 2, 0, 0, 2, 1, 0, 5], alphabet=b'ABCDEF')
        b'CAAABCCCACCF'
    """
    state = _initial_state(alphabet)
    result = bytearray()
    for p in codes:
        if not 0 <= p < len(state):
            raise ValueError(f"MTF rank {p} out of range for alphabet of {len(state)}")
        c = state.pop(p)
        result.append(c)
        state.insert(0, c)
    return bytes(result)
