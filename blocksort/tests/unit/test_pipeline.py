"""
Unit tests for transform stages, settings and the block pipeline
"""

import pytest
import struct
from blocksort.models import PipelineSettings
from blocksort.protocols import TransformProtocol
from blocksort.context.encoding.transforms import (
    BurrowsWheeler, MoveToFront, get_transform, stage_id, stage_name,
)
from blocksort.context.encoding.mtf import mtf_encode
from blocksort.services import BlockSortPipeline
from blocksort.services.metrics import analyze, shannon_entropy


class TestTransformStages:
    """Stages behind TransformProtocol"""

    def test_lookup_by_name(self):
        assert isinstance(get_transform('bwt'), BurrowsWheeler)
        assert isinstance(get_transform('mtf'), MoveToFront)
        assert all(isinstance(get_transform(n), TransformProtocol) for n in ('bwt', 'mtf'))

    def test_unknown_stage(self):
        with pytest.raises(ValueError):
            get_transform('huffman')

    def test_bwt_stage_wire_format(self, abra):
        encoded = BurrowsWheeler().encode(abra)
        assert encoded == b"\x00\x00\x00\x03ARD!RCAAAABB"
        assert BurrowsWheeler().decode(encoded) == abra

    def test_mtf_stage_round_trip(self, abra):
        stage = MoveToFront()
        assert stage.decode(stage.encode(abra)) == abra

    def test_stage_ids(self):
        assert stage_name(stage_id('bwt')) == 'bwt'
        assert stage_name(stage_id('mtf')) == 'mtf'
        assert stage_id('bwt') != stage_id('mtf')

    def test_unknown_stage_id(self):
        with pytest.raises(ValueError):
            stage_name(99)


class TestPipelineSettings:
    """Configuration validation"""

    def test_defaults(self):
        settings = PipelineSettings()
        assert settings.block_size == 100_000
        assert settings.stages == ('bwt', 'mtf')

    @pytest.mark.parametrize("block_size", [0, -5])
    def test_invalid_block_size(self, block_size):
        with pytest.raises(ValueError):
            PipelineSettings(block_size=block_size)

    def test_invalid_zstd_level(self):
        with pytest.raises(ValueError):
            PipelineSettings(zstd_level=0)

    def test_stages_normalized_to_tuple(self):
        assert PipelineSettings(stages=['bwt']).stages == ('bwt',)


class TestBlockSortPipeline:
    """Multi-block container"""

    def test_round_trip_single_block(self, sample_text):
        pipeline = BlockSortPipeline()
        payload, stats = pipeline.compress(sample_text)
        assert stats.block_count == 1
        assert pipeline.decompress(payload) == sample_text

    def test_round_trip_many_blocks(self, sample_text):
        pipeline = BlockSortPipeline(PipelineSettings(block_size=64))
        payload, stats = pipeline.compress(sample_text)
        assert stats.block_count == (len(sample_text) + 63) // 64
        assert pipeline.decompress(payload) == sample_text

    def test_empty_input(self):
        pipeline = BlockSortPipeline()
        payload, stats = pipeline.compress(b"")
        assert payload == b"\x02\x01\x02\x00\x00\x00\x00"
        assert stats.block_count == 0
        assert pipeline.decompress(payload) == b""

    def test_container_layout(self, abra):
        pipeline = BlockSortPipeline(PipelineSettings(stages=('bwt',)))
        payload, _ = pipeline.compress(abra)
        assert payload[:2] == b"\x01\x01"  # one stage: bwt
        count, size = struct.unpack('>II', payload[2:10])
        assert count == 1
        assert size == 4 + len(abra)
        assert payload[10:] == b"\x00\x00\x00\x03ARD!RCAAAABB"

    def test_stats(self, sample_text):
        payload, stats = BlockSortPipeline().compress(sample_text)
        assert stats.original_size == len(sample_text)
        assert stats.transformed_size == len(payload)
        assert stats.stages == ['bwt', 'mtf']
        # Clustered contexts give MTF far more repeats than raw text does
        raw_zeros = mtf_encode(sample_text).count(0) / len(sample_text)
        assert raw_zeros < stats.zero_fraction <= 1.0

    def test_verbose_prints_progress(self, abra, capsys):
        pipeline = BlockSortPipeline(PipelineSettings(block_size=5))
        payload, _ = pipeline.compress(abra, verbose=True)
        pipeline.decompress(payload, verbose=True)
        out = capsys.readouterr().out
        assert "3 block(s)" in out
        assert "Block 3/3" in out

    @pytest.mark.parametrize("cut", [0, 2, 5, 9, 14])
    def test_truncated_payload(self, abra, cut):
        pipeline = BlockSortPipeline()
        payload, _ = pipeline.compress(abra)
        with pytest.raises(ValueError):
            pipeline.decompress(payload[:cut])

    def test_trailing_bytes(self, abra):
        pipeline = BlockSortPipeline()
        payload, _ = pipeline.compress(abra)
        with pytest.raises(ValueError):
            pipeline.decompress(payload + b"\x00")

    def test_stages_come_from_payload(self, abra):
        # Written without MTF, read back by a default (BWT + MTF) pipeline
        data = abra * 3
        payload, _ = BlockSortPipeline(PipelineSettings(stages=('bwt',))).compress(data)
        assert BlockSortPipeline().decompress(payload) == data

        payload, _ = BlockSortPipeline().compress(data)
        assert BlockSortPipeline(PipelineSettings(stages=('bwt',))).decompress(payload) == data

    def test_unknown_stage_in_payload(self, abra):
        payload, _ = BlockSortPipeline().compress(abra)
        corrupt = payload[:1] + b"\x07" + payload[2:]
        with pytest.raises(ValueError):
            BlockSortPipeline().decompress(corrupt)

    def test_zero_fraction_counts_mtf_ranks_only(self, abra):
        _, stats = BlockSortPipeline(PipelineSettings(stages=('bwt',))).compress(abra)
        assert stats.zero_fraction == 0.0

        # MTF of the BWT wire bytes 00 00 00 03 A R D ! R C A A A A B B
        _, stats = BlockSortPipeline().compress(abra)
        expected = mtf_encode(b"\x00\x00\x00\x03ARD!RCAAAABB").count(0) / 16
        assert stats.zero_fraction == pytest.approx(expected)


class TestRedundancyMetrics:
    """Entropy and zstd measurements"""

    def test_entropy_of_uniform_bytes(self):
        assert shannon_entropy(bytes(range(256))) == pytest.approx(8.0)

    def test_transform_lowers_entropy(self, sample_text):
        report = analyze(sample_text)
        assert report.transformed_entropy < report.raw_entropy
        assert report.zero_fraction > mtf_encode(sample_text).count(0) / len(sample_text)
        assert report.raw_zstd_size > 0
        assert report.transformed_zstd_size > 0
        assert report.zstd_gain > 0
