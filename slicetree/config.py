from pydantic import BaseModel, Field

from .core.parser import DEFAULT_MAX_NODES
from .core.tokenizer import DEFAULT_MAX_LINE_LENGTH


class FloorplanConfig(BaseModel):
    # The most nodes (blocks and cuts) an input tree may have
    max_nodes: int = Field(DEFAULT_MAX_NODES, ge=1)
    # The longest accepted input line, not counting the line terminator
    max_line_length: int = Field(DEFAULT_MAX_LINE_LENGTH, ge=1)
    # Where the bottom-left corner of the whole floorplan is placed
    origin_x: int = 0
    origin_y: int = 0
    # Text encoding of the input and output files
    encoding: str = "utf8"
    # Print each pipeline stage and a table of the placed blocks
    verbose: bool = False
