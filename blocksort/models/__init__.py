"""
Data models and settings for blocksort.

This module contains pure data structures with no transform logic.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import List, Tuple

__all__ = [
    'BWTBlock',
    'PipelineSettings',
    'TransformStats',
    'RedundancyReport',
]

# bzip2 block sizes come in multiples of 100k
DEFAULT_BLOCK_SIZE = 100_000


@dataclass(frozen=True)
class BWTBlock:
    """Burrows-Wheeler output: row of the original buffer plus the last column."""
    first: int
    column: bytes

    def __iter__(self):
        # Allows `first, column = bwt_encode(data)`
        return iter((self.first, self.column))


@dataclass
class PipelineSettings:
    """Block pipeline configuration."""
    block_size: int = DEFAULT_BLOCK_SIZE
    stages: Tuple[str, ...] = ('bwt', 'mtf')
    zstd_level: int = 19  # Only used by the redundancy analysis

    def __post_init__(self):
        if self.block_size < 1:
            raise ValueError(f"Block size must be positive, got {self.block_size}")
        if not 1 <= self.zstd_level <= 22:
            raise ValueError(f"Zstd level must be in 1..22, got {self.zstd_level}")
        self.stages = tuple(self.stages)


@dataclass
class TransformStats:
    """Statistics gathered while running the block pipeline."""
    original_size: int
    transformed_size: int
    block_count: int
    stages: List[str] = dataclass_field(default_factory=list)
    elapsed: float = 0.0
    zero_fraction: float = 0.0  # Share of rank 0 in the MTF stage output, 0.0 without MTF


@dataclass
class RedundancyReport:
    """How much redundancy the transforms expose to an entropy coder."""
    original_size: int
    transformed_size: int
    raw_entropy: float          # bits per byte, order-0
    transformed_entropy: float  # bits per byte, order-0
    zero_fraction: float
    raw_zstd_size: int
    transformed_zstd_size: int

    @property
    def zstd_gain(self) -> float:
        """Ratio of zstd output sizes, raw over transformed"""
        if self.transformed_zstd_size == 0:
            return 0.0
        return self.raw_zstd_size / self.transformed_zstd_size
