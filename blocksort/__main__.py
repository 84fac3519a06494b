"""
Entry point for python -m blocksort
"""

import click
from blocksort.cli import bwt, mtf, compress, decompress, analyze

@click.group()
@click.version_option(version='1.0.0')
def cli():
    """blocksort - Burrows-Wheeler and Move-to-Front transforms"""
    pass

cli.add_command(bwt)
cli.add_command(mtf)
cli.add_command(compress)
cli.add_command(decompress)
cli.add_command(analyze)

if __name__ == '__main__':
    cli()
