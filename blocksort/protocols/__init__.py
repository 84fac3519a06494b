"""
Protocols (interfaces) for blocksort components.

This module defines abstract contracts that implementations must follow.
"""

from abc import ABC, abstractmethod

__all__ = [
    'TransformProtocol',
]


class TransformProtocol(ABC):
    """Protocol for a reversible byte-to-byte transform stage."""

    @abstractmethod
    def encode(self, data: bytes) -> bytes:
        """
        Apply the forward transform.

        Args:
            data: Raw input block

        Returns:
            Serialized transform output
        """
        pass

    @abstractmethod
    def decode(self, data: bytes) -> bytes:
        """
        Apply the inverse transform.

        Args:
            data: Serialized transform output

        Returns:
            Original block
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return stage name for reporting."""
        pass
