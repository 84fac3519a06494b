"""
Services layer - application orchestration.
"""

from blocksort.services.pipeline import BlockSortPipeline
from blocksort.services.metrics import analyze, shannon_entropy, zstd_size

__all__ = [
    'BlockSortPipeline',
    'analyze',
    'shannon_entropy',
    'zstd_size',
]
