"""
Encoding context for block-sorting transforms.
"""

from blocksort.context.encoding.suffix_array import CircularSuffixArray
from blocksort.context.encoding.bwt import bwt_encode, bwt_decode, pack_bwt, unpack_bwt
from blocksort.context.encoding.mtf import mtf_encode, mtf_decode
from blocksort.context.encoding.transforms import BurrowsWheeler, MoveToFront, get_transform

__all__ = [
    'CircularSuffixArray',
    'bwt_encode',
    'bwt_decode',
    'pack_bwt',
    'unpack_bwt',
    'mtf_encode',
    'mtf_decode',
    'BurrowsWheeler',
    'MoveToFront',
    'get_transform',
]
