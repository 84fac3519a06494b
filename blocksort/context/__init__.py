"""
Context layer - transform implementations.
"""

from blocksort.context.encoding import (
    CircularSuffixArray,
    BurrowsWheeler,
    MoveToFront,
    get_transform,
)

__all__ = [
    'CircularSuffixArray',
    'BurrowsWheeler',
    'MoveToFront',
    'get_transform',
]
