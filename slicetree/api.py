import errno
import os
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from wasabi import msg, table

from .config import FloorplanConfig
from .core.emitters import to_dimension_lines, to_placement_lines, to_structure_lines
from .core.layout import FloorplanLayout, FloorplanMeasurement
from .core.nodes import BlockNode, SlicingNode
from .core.parser import SlicingTreeParser

PathLike = Union[str, Path]


@dataclass
class FloorplanAPIState:
    config: FloorplanConfig


@dataclass
class FloorplanResult:
    """Everything produced from one input: the evaluated tree, the three dumps
    and a summary of the placement."""

    root: SlicingNode
    structure: List[str]
    dimensions: List[str]
    placements: List[str]
    measurement: FloorplanMeasurement


class Floorplan:
    """The standard interface for evaluating slicing tree floorplans."""

    state: FloorplanAPIState

    def __init__(
        self, *, config: Optional[FloorplanConfig] = None, silent: bool = False,
    ):
        self.silent = silent
        if config is None:
            config = FloorplanConfig()
        if not isinstance(config, FloorplanConfig):
            raise ValueError("config must be a FloorplanConfig instance")
        self.state = FloorplanAPIState(config=config)

    @property
    def verbose(self) -> bool:
        return self.state.config.verbose and not self.silent

    def evaluate(self, lines: Iterable[str]) -> FloorplanResult:
        """Run the whole pipeline over lines of postorder input.

        Nothing is written anywhere, so any input error is raised before output
        files are involved."""
        config = self.state.config
        parser = SlicingTreeParser(
            max_nodes=config.max_nodes, max_line_length=config.max_line_length
        )
        root = parser.parse_lines(lines)
        if self.verbose:
            msg.info(f"Parsed a tree with {parser.node_count} nodes")
        structure = to_structure_lines(root)

        layout = FloorplanLayout()
        layout.measure(root)
        dimensions = to_dimension_lines(root)
        if self.verbose:
            msg.info(f"Measured floorplan: {root.width} x {root.height}")

        measurement = layout.transform(root, config.origin_x, config.origin_y)
        placements = to_placement_lines(root)
        if self.verbose:
            msg.info(
                f"Placed {measurement.blocks} blocks "
                f"({measurement.utilization:.1%} utilization)"
            )
            self.print_placements(root)

        return FloorplanResult(
            root=root,
            structure=structure,
            dimensions=dimensions,
            placements=placements,
            measurement=measurement,
        )

    def evaluate_file(self, input_path: PathLike) -> FloorplanResult:
        with Path(input_path).open("r", encoding=self.state.config.encoding) as file:
            return self.evaluate(file)

    def write(
        self,
        result: FloorplanResult,
        structure_path: PathLike,
        dimension_path: PathLike,
        placement_path: PathLike,
    ) -> None:
        """Write the three dumps of `result`, one record per line. Every path is
        checked before any file is opened, and all of the files are opened before
        any of them is written."""
        encoding = self.state.config.encoding
        outputs = [
            (structure_path, result.structure),
            (dimension_path, result.dimensions),
            (placement_path, result.placements),
        ]
        for path, _ in outputs:
            self.check_writable(path)
        with ExitStack() as stack:
            files = [
                stack.enter_context(Path(path).open("w", encoding=encoding))
                for path, _ in outputs
            ]
            for file, (_, lines) in zip(files, outputs):
                file.writelines(f"{line}\n" for line in lines)
        if self.verbose:
            for path, lines in outputs:
                msg.info(f"wrote {len(lines)} records: {path}")

    def run(
        self,
        input_path: PathLike,
        structure_path: PathLike,
        dimension_path: PathLike,
        placement_path: PathLike,
    ) -> FloorplanResult:
        """Evaluate the input file and write the three dumps.

        Input errors, and output paths that cannot be written, are raised before
        any output file is opened."""
        result = self.evaluate_file(input_path)
        self.write(result, structure_path, dimension_path, placement_path)
        return result

    def check_writable(self, path: PathLike) -> None:
        """Raise an OSError if `path` cannot be opened for writing. Nothing is
        created or truncated."""
        target = Path(path)
        if target.is_dir():
            raise IsADirectoryError(errno.EISDIR, "Output is a directory", str(path))
        folder = target.parent
        if not folder.is_dir():
            raise FileNotFoundError(errno.ENOENT, "No such directory", str(folder))
        checked = target if target.exists() else folder
        if not os.access(checked, os.W_OK):
            raise PermissionError(errno.EACCES, "Permission denied", str(checked))

    def print_placements(self, root: SlicingNode) -> None:
        header = ("Block", "Width", "Height", "X", "Y")
        data = []

        def visit_fn(node, depth, _):
            if isinstance(node, BlockNode):
                data.append((node.label, node.width, node.height, node.x, node.y))

        root.visit_preorder(visit_fn)
        aligns = ("l", "r", "r", "r", "r")
        print(table(data, header=header, divider=True, aligns=aligns))
