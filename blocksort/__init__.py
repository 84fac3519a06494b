"""
blocksort - Block-sorting transforms for bzip2-style compression

Implements the two reversible stages that sit in front of an entropy coder:
the Burrows-Wheeler Transform (built on a circular suffix array) and
Move-to-Front coding.

Architecture:
- Models: Pure data structures (BWTBlock, PipelineSettings, TransformStats)
- Protocols: Interface contracts (TransformProtocol)
- Context: Transform implementations (CircularSuffixArray, BWT, MTF)
- Services: Application orchestration (BlockSortPipeline, analyze)
- CLI: User interface (bwt, mtf, compress, decompress, analyze commands)
"""

__version__ = "1.0.0"
__license__ = "MIT"

from blocksort import models, protocols
from blocksort.models import BWTBlock, PipelineSettings, TransformStats, RedundancyReport
from blocksort.context.encoding import (
    CircularSuffixArray,
    bwt_encode,
    bwt_decode,
    mtf_encode,
    mtf_decode,
    BurrowsWheeler,
    MoveToFront,
    get_transform,
)
from blocksort.services import BlockSortPipeline, analyze

__all__ = [
    'models',
    'protocols',
    'BWTBlock',
    'PipelineSettings',
    'TransformStats',
    'RedundancyReport',
    'CircularSuffixArray',
    'bwt_encode',
    'bwt_decode',
    'mtf_encode',
    'mtf_decode',
    'BurrowsWheeler',
    'MoveToFront',
    'get_transform',
    'BlockSortPipeline',
    'analyze',
]
