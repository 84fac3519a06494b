"""
Redundancy metrics for block-sorted output.

The transforms do not shrink anything on their own; they reshape the data so a
downstream entropy coder does better. These metrics quantify that:
1. Order-0 entropy: bits per byte before and after the pipeline
2. Zero fraction: share of MTF rank 0 (runs of repeated context)
3. Zstandard size: a real general-purpose coder on raw vs transformed bytes
"""

import math
from collections import Counter
from typing import Optional

import zstandard as zstd

from blocksort.models import PipelineSettings, RedundancyReport
from blocksort.services.pipeline import BlockSortPipeline


def shannon_entropy(data: bytes) -> float:
    """
    Order-0 Shannon entropy in bits per byte

    Examples:
        >>> shannon_entropy(b'')
        0.0
        >>> shannon_entropy(b'aaaa')
        0.0
        >>> shannon_entropy(b'abab')
        1.0
    """
    if not data:
        return 0.0
    total = len(data)
    entropy = 0.0
    for count in Counter(data).values():
        p = count / total
        entropy -= p * math.log2(p)
    return entropy


def zstd_size(data: bytes, level: int = 19) -> int:
    """Size of data after Zstandard compression"""
    return len(zstd.ZstdCompressor(level=level).compress(data))


def analyze(data: bytes, settings: Optional[PipelineSettings] = None) -> RedundancyReport:
    """
    Run the block pipeline over data and measure the redundancy it exposes

    Args:
        data: Raw input bytes
        settings: Pipeline configuration (block size, stages, zstd level)

    Returns:
        RedundancyReport comparing raw and transformed bytes
    """
    settings = settings or PipelineSettings()
    pipeline = BlockSortPipeline(settings)
    payload, stats = pipeline.compress(data)

    return RedundancyReport(
        original_size=stats.original_size,
        transformed_size=stats.transformed_size,
        raw_entropy=shannon_entropy(data),
        transformed_entropy=shannon_entropy(payload),
        zero_fraction=stats.zero_fraction,
        raw_zstd_size=zstd_size(data, settings.zstd_level),
        transformed_zstd_size=zstd_size(payload, settings.zstd_level),
    )
