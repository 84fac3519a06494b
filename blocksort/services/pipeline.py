"""
Block pipeline: bzip2-style block sorting ahead of an entropy coder

The input is cut into fixed-size blocks and each block is pushed through the
configured stages (BWT then MTF by default). The container records which
stages were applied, so decompression rebuilds them from the header and runs
them in reverse order.

Format (block counts and sizes are 4 bytes, big-endian):
    [num_stages: 1 byte][stage_id: 1 byte] * num_stages
    [num_blocks]
    [block1_size][block1_data: block1_size bytes]
    [block2_size][block2_data: block2_size bytes]
    ...
"""

import struct
import time
from typing import List, Optional, Tuple

from blocksort.models import PipelineSettings, TransformStats
from blocksort.protocols import TransformProtocol
from blocksort.context.encoding.transforms import get_transform, stage_id, stage_name

_U32 = struct.Struct('>I')


class BlockSortPipeline:
    """Runs a chain of reversible transforms over a buffer, block by block"""

    def __init__(self, settings: Optional[PipelineSettings] = None):
        self.settings = settings or PipelineSettings()
        self.stages: List[TransformProtocol] = [get_transform(name) for name in self.settings.stages]

    def compress(self, data: bytes, verbose: bool = False) -> Tuple[bytes, TransformStats]:
        """
        Transform data block by block

        Args:
            data: Raw input bytes (may be empty)
            verbose: Print progress for each block

        Returns:
            (payload, stats)
        """
        start = time.time()
        block_size = self.settings.block_size
        num_blocks = (len(data) + block_size - 1) // block_size

        if verbose:
            stage_names = ' -> '.join(s.name for s in self.stages) or '(none)'
            print(f"Transforming {len(data):,} bytes in {num_blocks} block(s): {stage_names}")

        result = bytearray([len(self.stages)])
        result.extend(stage_id(s.name) for s in self.stages)
        result.extend(_U32.pack(num_blocks))

        zeros = 0
        ranks = 0

        for i in range(num_blocks):
            block = data[i * block_size:(i + 1) * block_size]
            encoded = block
            for stage in self.stages:
                encoded = stage.encode(encoded)
                if stage.name == 'mtf':
                    zeros += encoded.count(0)
                    ranks += len(encoded)

            result.extend(_U32.pack(len(encoded)))
            result.extend(encoded)

            if verbose:
                print(f"  Block {i + 1}/{num_blocks}: {len(block):,} -> {len(encoded):,} bytes")

        stats = TransformStats(
            original_size=len(data),
            transformed_size=len(result),
            block_count=num_blocks,
            stages=[s.name for s in self.stages],
            elapsed=time.time() - start,
            zero_fraction=zeros / ranks if ranks else 0.0,
        )
        return bytes(result), stats

    def decompress(self, payload: bytes, verbose: bool = False) -> bytes:
        """
        Reverse compress(), using the stages recorded in the payload

        Raises:
            ValueError: on an unknown stage id, a truncated payload or
                trailing bytes
        """
        stages, offset = self._read_stages(payload)

        if offset + _U32.size > len(payload):
            raise ValueError(f"Expected {_U32.size}-byte block count at offset {offset}")
        num_blocks, = _U32.unpack_from(payload, offset)
        offset += _U32.size
        result = bytearray()

        if verbose:
            stage_names = ' -> '.join(s.name for s in stages) or '(none)'
            print(f"Restoring {num_blocks} block(s): {stage_names}")

        for i in range(num_blocks):
            if offset + _U32.size > len(payload):
                raise ValueError(f"Truncated header for block {i} at offset {offset}")
            size, = _U32.unpack_from(payload, offset)
            offset += _U32.size

            if offset + size > len(payload):
                raise ValueError(f"Truncated data for block {i}: need {size} bytes at offset {offset}")
            decoded = payload[offset:offset + size]
            offset += size

            for stage in reversed(stages):
                decoded = stage.decode(decoded)
            result.extend(decoded)

            if verbose:
                print(f"  Block {i + 1}/{num_blocks}: {size:,} -> {len(decoded):,} bytes")

        if offset != len(payload):
            raise ValueError(f"{len(payload) - offset} trailing bytes after last block")

        return bytes(result)

    @staticmethod
    def _read_stages(payload: bytes) -> Tuple[List[TransformProtocol], int]:
        if not payload:
            raise ValueError("Empty payload has no stage header")
        count = payload[0]
        if 1 + count > len(payload):
            raise ValueError(f"Truncated stage header: expected {count} stage id(s)")
        stages = [get_transform(stage_name(b)) for b in payload[1:1 + count]]
        return stages, 1 + count
