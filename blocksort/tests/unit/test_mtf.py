"""
Unit tests for Move-to-Front coding
"""

import pytest
from blocksort.context.encoding.mtf import mtf_encode, mtf_decode

SIX = b"ABCDEF"
RANKS = [2, 1, 0, 0, 2, 2, 0, 0, 2, 1, 0, 5]


class TestMTFEncode:
    """Forward coding"""

    def test_six_symbol_alphabet(self):
        assert list(mtf_encode(b"CAAABCCCACCF", alphabet=SIX)) == RANKS

    def test_identity_alphabet(self):
        # 'A' is 65 in the full byte alphabet
        assert mtf_encode(b"AAAB") == bytes([65, 0, 0, 66])

    def test_same_length_as_input(self, sample_buffers):
        for text in sample_buffers:
            assert len(mtf_encode(text)) == len(text)

    def test_empty_input(self):
        assert mtf_encode(b"") == b""

    def test_runs_become_zeros(self):
        assert mtf_encode(b"\x05" * 6) == b"\x05" + b"\x00" * 5

    def test_state_resets_between_calls(self):
        assert mtf_encode(b"z") == mtf_encode(b"z") == bytes([ord("z")])

    def test_symbol_outside_alphabet(self):
        with pytest.raises(ValueError):
            mtf_encode(b"G", alphabet=SIX)

    def test_duplicate_alphabet_rejected(self):
        with pytest.raises(ValueError):
            mtf_encode(b"A", alphabet=b"AAB")


class TestMTFDecode:
    """Inverse coding"""

    def test_six_symbol_alphabet(self):
        assert mtf_decode(RANKS, alphabet=SIX) == b"CAAABCCCACCF"

    def test_round_trip(self, sample_buffers):
        for text in sample_buffers:
            assert mtf_decode(mtf_encode(text)) == text

    def test_empty_input(self):
        assert mtf_decode(b"") == b""

    def test_single_byte(self):
        assert mtf_decode(mtf_encode(b"\x80")) == b"\x80"

    def test_encode_of_decode(self):
        codes = bytes([0, 255, 3, 3, 0, 128, 1, 1, 1, 254])
        assert mtf_encode(mtf_decode(codes)) == codes

    def test_rank_past_alphabet(self):
        with pytest.raises(ValueError):
            mtf_decode([6], alphabet=SIX)
