import re
from typing import Dict, Iterable, Iterator, Optional

# # Tokenizer

# ##Constants

# Define the known types of tokens for the Tokenizer.
TokensMap: Dict[str, int] = {
    "None": 1 << 0,
    "Block": 1 << 1,
    "Horizontal": 1 << 2,
    "Vertical": 1 << 3,
    "EOF": 1 << 4,
}

TokenNone = TokensMap["None"]
TokenBlock = TokensMap["Block"]
TokenHorizontal = TokensMap["Horizontal"]
TokenVertical = TokensMap["Vertical"]
TokenEOF = TokensMap["EOF"]

# Either kind of cut
TokenCut = TokenHorizontal | TokenVertical

# The longest line (without its terminator) accepted by default
DEFAULT_MAX_LINE_LENGTH = 128

# label(width,height), e.g. "3(10,20)", ASCII digits and whitespace only
_BLOCK_LINE = re.compile(
    r"^\s*([+-]?[0-9]+)\s*\(\s*([0-9]+)\s*,\s*([0-9]+)\s*\)\s*$", re.ASCII
)


class ParserException(Exception):
    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line

    def __str__(self):
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class InvalidToken(ParserException):
    pass


class LineTooLong(ParserException):
    pass


class Token:
    """A single line of input. Cut tokens only carry their marker in `value`,
    block tokens also carry the parsed label and size."""

    value: str
    type: int
    line: int
    label: int
    width: int
    height: int

    def __init__(
        self,
        value: str,
        type: int,
        *,
        line: int = 0,
        label: int = 0,
        width: int = 0,
        height: int = 0,
    ):
        self.value = value
        self.type = type
        self.line = line
        self.label = label
        self.width = width
        self.height = height

    def __str__(self):
        return "[type={}],[value={}]".format(self.type, self.value)


class Tokenizer:
    """The Tokenizer produces a stream of tokens from lines of postorder input.

    Each non-empty line is one token: a line starting with `H` or `V` is a cut
    (anything after the marker is ignored), and every other line must be a block
    in the form `label(width,height)`."""

    def __init__(self, max_line_length: int = DEFAULT_MAX_LINE_LENGTH):
        if max_line_length < 1:
            raise ValueError("max_line_length must be at least 1")
        self.max_line_length = max_line_length

    # ###Token Utilities

    def is_cut(self, c: str) -> bool:
        """Is this character a cut marker"""
        return c == "H" or c == "V"

    def is_blank(self, text: str) -> bool:
        return text.strip() == ""

    def tokenize(self, lines: Iterable[str]) -> Iterator[Token]:
        """Lazily yield a `Token` for each non-empty line of `lines`, followed
        by a final `TokenEOF` token.

        Raises `LineTooLong` or `InvalidToken` when a line is reached that cannot
        be tokenized. Tokens for earlier lines have already been yielded by then."""
        line_number = 0
        for line_number, raw in enumerate(lines, start=1):
            text = raw.rstrip("\r\n")
            if len(text) > self.max_line_length:
                raise LineTooLong(
                    f"line is {len(text)} characters long, the limit is "
                    f"{self.max_line_length}",
                    line_number,
                )
            if self.is_blank(text):
                continue
            token = self.identify_cut(text, line_number) or self.identify_block(
                text, line_number
            )
            yield token

        yield Token("", TokenEOF, line=line_number)

    def identify_cut(self, text: str, line: int) -> Optional[Token]:
        """Identify and tokenize a cut line."""
        ch = text[0]
        if not self.is_cut(ch):
            return None
        return Token(ch, TokenHorizontal if ch == "H" else TokenVertical, line=line)

    def identify_block(self, text: str, line: int) -> Token:
        """Identify and tokenize a block line. This throws if the line is not a
        well formed block."""
        match = _BLOCK_LINE.match(text)
        if match is None:
            raise InvalidToken(
                f'expected a cut marker or "label(width,height)", got "{text}"', line
            )
        try:
            label, width, height = (int(group) for group in match.groups())
        except ValueError as error:
            # e.g. more digits than int() will convert
            raise InvalidToken(f"cannot read block numbers: {error}", line) from error
        if width <= 0 or height <= 0:
            raise InvalidToken(
                f'block dimensions must be positive, got "{text.strip()}"', line
            )
        return Token(
            text.strip(), TokenBlock, line=line, label=label, width=width, height=height
        )
