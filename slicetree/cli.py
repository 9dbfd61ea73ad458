"""Slicetree CLI
---

Command line application that evaluates a postorder slicing tree file and writes
its structure, region dimensions and block placements.
"""

import click
from wasabi import msg

from .core.parser import ParserException


@click.command()
@click.argument(
    "in_file", type=click.Path(exists=True, dir_okay=False, readable=True)
)
@click.argument("out_file1", type=click.Path(dir_okay=False))
@click.argument("out_file2", type=click.Path(dir_okay=False))
@click.argument("out_file3", type=click.Path(dir_okay=False))
def cli(in_file: str, out_file1: str, out_file2: str, out_file3: str):
    """
    Evaluate the slicing tree in IN_FILE, given in postorder with one node per
    line: "label(width,height)" for a block, "H" or "V" for a cut.

    Writes the preorder structure to OUT_FILE1, the dimensions of every node to
    OUT_FILE2 and the placement of every block to OUT_FILE3.
    """
    from .api import Floorplan

    floorplan = Floorplan()
    try:
        result = floorplan.run(in_file, out_file1, out_file2, out_file3)
    except ParserException as error:
        msg.fail(f"Invalid input in {in_file}", str(error), exits=1)
    except UnicodeDecodeError as error:
        msg.fail(f"Cannot decode {in_file}", str(error), exits=1)
    except OSError as error:
        msg.fail("Cannot read or write files", str(error), exits=1)
    measure = result.measurement
    msg.good(
        f"Placed {measure.blocks} blocks in a {measure.width} x {measure.height} "
        "floorplan"
    )


if __name__ == "__main__":
    cli()
