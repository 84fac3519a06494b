"""
Command-line interface for blocksort.
"""

from blocksort.cli.commands import bwt, mtf, compress, decompress, analyze

__all__ = ['bwt', 'mtf', 'compress', 'decompress', 'analyze']
