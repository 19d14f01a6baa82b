"""
Grouper: folds matched braces of a flat token sequence into nested groups.

    server { listen 80 ; }   ->   Leaf(server) Group(Leaf(listen) Leaf(80) Leaf(;))

The braces themselves are dropped; a Group keeps its opening brace token
only for error reporting.
"""

from dataclasses import dataclass, field
from typing import Sequence, Union

from ..const import DEFAULT_MAX_DEPTH
from ..logging import get_logger
from .errors import NestingTooDeep, UnmatchedClosingBrace, UnmatchedOpeningBrace
from .lexer import Token, TokenType


logger = get_logger("config.grouper")


@dataclass(frozen=True)
class Leaf:
    """A non-brace token in the grouped tree."""

    token: Token

    def __repr__(self) -> str:
        return f"Leaf({self.token.type.name}, {self.token.value!r})"


@dataclass(frozen=True)
class Group:
    """The nodes between a matched pair of braces."""

    children: tuple["GroupedNode", ...] = ()
    opening: Token | None = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"Group({list(self.children)!r})"

    def __len__(self) -> int:
        return len(self.children)


GroupedNode = Union[Leaf, Group]


def _group_level(
    tokens: Sequence[Token],
    pos: int,
    depth: int,
    max_depth: int | None,
) -> tuple[list[GroupedNode], int]:
    """
    Group tokens starting at pos until a closing brace or end of input.

    Returns the grouped nodes and the position where grouping stopped,
    which is either len(tokens) or the index of an unconsumed '}'.
    """
    output: list[GroupedNode] = []

    while pos < len(tokens):
        token = tokens[pos]

        if token.is_a(TokenType.RBRACE):
            break

        if token.is_a(TokenType.LBRACE):
            if max_depth is not None and depth >= max_depth:
                raise NestingTooDeep(f"Braces nested deeper than {max_depth} levels", token)

            try:
                children, pos = _group_level(tokens, pos + 1, depth + 1, max_depth)
            except RecursionError as e:
                # Without max_depth the interpreter's stack is the limit
                raise NestingTooDeep("Braces nested deeper than the interpreter allows", token) from e
            if pos >= len(tokens):
                raise UnmatchedOpeningBrace("No matching closing brace for '{'", token)

            output.append(Group(tuple(children), opening=token))
            pos += 1  # consume '}'
        else:
            output.append(Leaf(token))
            pos += 1

    return output, pos


def group(tokens: Sequence[Token], max_depth: int | None = DEFAULT_MAX_DEPTH) -> list[GroupedNode]:
    """
    Fold a flat token sequence into a tree of leaves and groups.

    Args:
        tokens: Tokens from the lexer
        max_depth: Maximum brace nesting depth, or None for no limit

    Returns:
        Top-level grouped nodes

    Raises:
        UnmatchedOpeningBrace: A '{' is never closed
        UnmatchedClosingBrace: A '}' has no matching '{'
        NestingTooDeep: Nesting exceeds max_depth or the recursion limit
    """
    nodes, pos = _group_level(tokens, 0, 0, max_depth)

    if pos < len(tokens):
        raise UnmatchedClosingBrace("Unexpected '}' without matching '{'", tokens[pos])

    logger.debug(f"Grouped {len(tokens)} tokens into {len(nodes)} top-level nodes")
    return nodes
