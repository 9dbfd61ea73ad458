from typing import Iterable, Iterator, List

from .nodes import CUT_TYPES, BlockNode, SlicingNode
from .tokenizer import (
    DEFAULT_MAX_LINE_LENGTH,
    InvalidToken,
    LineTooLong,
    ParserException,
    Token,
    TokenBlock,
    TokenCut,
    TokenEOF,
    Tokenizer,
)

# The most nodes a tree may have by default
DEFAULT_MAX_NODES = 1000

__all__ = [
    "CapacityExceeded",
    "DEFAULT_MAX_NODES",
    "EmptyTree",
    "InvalidToken",
    "LineTooLong",
    "MissingOperands",
    "ParserException",
    "SlicingTreeParser",
    "TokenSet",
    "TrailingNodes",
]


class EmptyTree(ParserException):
    pass


class MissingOperands(ParserException):
    pass


class TrailingNodes(ParserException):
    pass


class CapacityExceeded(ParserException):
    pass


class TokenSet:
    """TokenSet objects are bitmask combinations for checking to see
    if a token is part of a valid set. """

    tokens: int

    def __init__(self, source: int):
        self.tokens = source

    def contains(self, type: int) -> bool:
        """Returns true if the given type is part of this set"""
        return (self.tokens & type) != 0


_IS_BLOCK: TokenSet = TokenSet(TokenBlock)
_IS_CUT: TokenSet = TokenSet(TokenCut)
_IS_EOF: TokenSet = TokenSet(TokenEOF)


class SlicingTreeParser:
    """Parser for converting postorder text into slicing trees.

    ### Input

    One node per line, children before their parent:
    ```
    label(width,height)  == a block
    H...                 == a horizontal cut of the two most recent subtrees
    V...                 == a vertical cut of the two most recent subtrees
    ```

    The most recently completed subtree becomes the `right` child of a cut and
    the one before it the `left` child. When the input is exhausted exactly one
    subtree must remain, which is the root of the tree.

    The parse state is stored on the instance, so an instance must not be shared
    between threads while a parse is running.
    """

    def __init__(
        self,
        max_nodes: int = DEFAULT_MAX_NODES,
        max_line_length: int = DEFAULT_MAX_LINE_LENGTH,
    ):
        if max_nodes < 1:
            raise ValueError("max_nodes must be at least 1")
        self.max_nodes = max_nodes
        self.tokenizer = Tokenizer(max_line_length=max_line_length)

    def tokenize(self, lines: Iterable[str]) -> Iterator[Token]:
        return self.tokenizer.tokenize(lines)

    def parse(self, input_text: str) -> SlicingNode:
        """Parse a multi-line string of postorder input into a slicing tree.

        Returns : The root node of the tree.
        """
        return self.parse_lines(input_text.splitlines())

    def parse_lines(self, lines: Iterable[str]) -> SlicingNode:
        """Parse lines of postorder input, e.g. an open text file."""
        return self.parse_tokens(self.tokenize(lines))

    def parse_tokens(self, tokens: Iterable[Token]) -> SlicingNode:
        """Rebuild the tree whose postorder traversal is `tokens`"""
        self.stack: List[SlicingNode] = []
        self.node_count = 0
        for token in tokens:
            if _IS_EOF.contains(token.type):
                break
            if _IS_BLOCK.contains(token.type):
                self.push(
                    BlockNode(token.label, token.width, token.height), token.line
                )
            elif _IS_CUT.contains(token.type):
                self.reduce(token)
            else:
                raise InvalidToken(f"Unexpected token: {token}", token.line)

        if len(self.stack) == 0:
            raise EmptyTree("Cannot build a tree from empty input")
        if len(self.stack) > 1:
            raise TrailingNodes(
                "Input describes {} disconnected subtrees instead of one tree".format(
                    len(self.stack)
                )
            )
        root = self.stack.pop()
        return root

    def push(self, node: SlicingNode, line: int) -> None:
        """Push a completed subtree, enforcing the node limit."""
        if self.node_count >= self.max_nodes:
            raise CapacityExceeded(
                f"Input has more than the maximum of {self.max_nodes} nodes", line
            )
        self.node_count += 1
        self.stack.append(node)

    def reduce(self, token: Token) -> None:
        """Combine the two most recent subtrees under a new cut."""
        if len(self.stack) < 2:
            raise MissingOperands(
                "Cut {} needs two subtrees but only {} {} available".format(
                    token.value,
                    len(self.stack),
                    "is" if len(self.stack) == 1 else "are",
                ),
                token.line,
            )
        right = self.stack.pop()
        left = self.stack.pop()
        self.push(CUT_TYPES[token.value](left, right), token.line)
