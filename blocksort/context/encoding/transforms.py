"""
Pipeline stages wrapping the BWT and MTF codecs behind TransformProtocol.
"""

from typing import Dict, Type

from blocksort.protocols import TransformProtocol
from blocksort.context.encoding.bwt import bwt_encode, bwt_decode, pack_bwt, unpack_bwt
from blocksort.context.encoding.mtf import mtf_encode, mtf_decode


class BurrowsWheeler(TransformProtocol):
    """BWT stage; output is [first: 4 bytes big-endian][column]"""

    def encode(self, data: bytes) -> bytes:
        return pack_bwt(bwt_encode(data))

    def decode(self, data: bytes) -> bytes:
        first, column = unpack_bwt(data)
        return bwt_decode(first, column)

    @property
    def name(self) -> str:
        return 'bwt'


class MoveToFront(TransformProtocol):
    """MTF stage; flat rank stream with no header"""

    def encode(self, data: bytes) -> bytes:
        return mtf_encode(data)

    def decode(self, data: bytes) -> bytes:
        return mtf_decode(data)

    @property
    def name(self) -> str:
        return 'mtf'


TRANSFORMS: Dict[str, Type[TransformProtocol]] = {
    'bwt': BurrowsWheeler,
    'mtf': MoveToFront,
}


def get_transform(name: str) -> TransformProtocol:
    """Instantiate a stage by name ('bwt' or 'mtf')"""
    try:
        return TRANSFORMS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown transform {name!r} (expected one of {', '.join(sorted(TRANSFORMS))})"
        ) from None


# One-byte stage ids stored in the block container header
STAGE_IDS: Dict[str, int] = {
    'bwt': 1,
    'mtf': 2,
}


def stage_id(name: str) -> int:
    """Container id for a stage name"""
    try:
        return STAGE_IDS[name]
    except KeyError:
        raise ValueError(f"Unknown transform {name!r}") from None


def stage_name(stage: int) -> str:
    """Stage name for a container id"""
    for name, value in STAGE_IDS.items():
        if value == stage:
            return name
    raise ValueError(f"Unknown stage id {stage}")
