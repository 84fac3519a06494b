"""
Pytest configuration and shared fixtures for blocksort tests
"""

import pytest
import random
from typing import List

ABRA = b"ABRACADABRA!"

@pytest.fixture
def abra() -> bytes:
    """The classic BWT example"""
    return ABRA

@pytest.fixture
def sample_text() -> bytes:
    """English-like text with plenty of repeated context"""
    return (
        b"It was the best of times, it was the worst of times, "
        b"it was the age of wisdom, it was the age of foolishness, "
        b"it was the epoch of belief, it was the epoch of incredulity, "
        b"it was the season of Light, it was the season of Darkness, "
        b"it was the spring of hope, it was the winter of despair, "
        b"we had everything before us, we had nothing before us, "
        b"we were all going direct to Heaven, "
        b"we were all going direct the other way.\n"
    )

@pytest.fixture
def sample_buffers() -> List[bytes]:
    """Edge-case and random buffers for round-trip checks"""
    rng = random.Random(274)
    return [
        b"a",
        b"\x00",
        b"\xff",
        b"ab",
        b"ba",
        b"banana",
        b"mississippi",
        ABRA,
        b"a" * 8,
        b"ab" * 16,
        b"abc" * 11,
        b"\x00\xff" * 7 + b"\x00",
        bytes(range(256)),
        bytes(rng.randrange(256) for _ in range(500)),
        bytes(rng.choice(b"ACGT") for _ in range(400)),
    ]

@pytest.fixture
def sample_file(tmp_path, sample_text):
    """Text file on disk for CLI tests"""
    path = tmp_path / "sample.txt"
    path.write_bytes(sample_text)
    return path
