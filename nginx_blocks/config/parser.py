"""
Block builder for nginx-like configuration syntax.

Interprets grouped nodes from the grouper as directives:

    Block      := Directive*
    Directive  := STRING Arg* ( ';' | '{' Block '}' )
    Arg        := STRING

and wires the whole lexer -> grouper -> builder pipeline together.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Sequence

from ..const import DEFAULT_FILENAME, DEFAULT_MAX_DEPTH
from ..logging import get_logger
from .errors import (
    ExpectedDirectiveName,
    ExpectedTerminatorOrBlock,
    NestingTooDeep,
    ParseError,
    UnterminatedDirective,
)
from .grouper import Group, GroupedNode, Leaf, group
from .lexer import Token, TokenType, tokenize


logger = get_logger("config.parser")


@dataclass
class Directive:
    """
    A configuration directive with a name, arguments and optional body.

    Examples:
        listen 80;              -> Directive(name="listen", args=["80"])
        server { listen 80; }   -> Directive(name="server", body=Block([...]))
    """
    name: str
    args: list[str] = field(default_factory=list)
    body: "Block | None" = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        if self.body is None:
            return f"Directive({self.name}, {self.args})"
        return f"Directive({self.name}, {self.args}, body={len(self.body)})"

    @property
    def value(self) -> str | None:
        """Get single argument (first) or None."""
        return self.args[0] if self.args else None

    @property
    def has_body(self) -> bool:
        return self.body is not None


@dataclass
class Block:
    """An ordered sequence of directives: the root config or a directive body."""
    directives: list[Directive] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Block({self.directives!r})"

    def __iter__(self) -> Iterator[Directive]:
        return iter(self.directives)

    def __len__(self) -> int:
        return len(self.directives)

    def __getitem__(self, index: int) -> Directive:
        return self.directives[index]

    def append(self, directive: Directive) -> None:
        self.directives.append(directive)

    def get_directive(self, name: str) -> Directive | None:
        """Get first directive with given name."""
        for d in self.directives:
            if d.name == name:
                return d
        return None

    def get_directives(self, name: str) -> list[Directive]:
        """Get all directives with given name."""
        return [d for d in self.directives if d.name == name]

    def get_value(self, name: str, default: Any = None) -> Any:
        """Get first argument of the first directive with given name."""
        directive = self.get_directive(name)
        if directive and directive.args:
            return directive.args[0]
        return default

    def get_block(self, name: str) -> "Block | None":
        """Get the body of the first directive with given name that has one."""
        for d in self.directives:
            if d.name == name and d.body is not None:
                return d.body
        return None


def _node_token(node: GroupedNode) -> Token | None:
    """Token used to locate a node in error messages."""
    if isinstance(node, Leaf):
        return node.token
    return node.opening


def _describe(node: GroupedNode) -> str:
    if isinstance(node, Group):
        return "'{'"
    return f"{node.token.value!r}"


def _is_leaf(node: GroupedNode, token_type: TokenType) -> bool:
    return isinstance(node, Leaf) and node.token.is_a(token_type)


def _build(nodes: Sequence[GroupedNode], depth: int, max_depth: int | None) -> Block:
    block = Block()
    pos = 0

    while pos < len(nodes):
        # Expect directive name
        node = nodes[pos]
        if not _is_leaf(node, TokenType.STRING):
            raise ExpectedDirectiveName(
                f"Expected directive name, got {_describe(node)}",
                _node_token(node),
            )
        name_token = node.token  # type: ignore[union-attr]
        directive = Directive(
            name=name_token.value,
            line=name_token.line,
            column=name_token.column,
        )
        pos += 1

        # Expect arguments, then ';' or a block
        while pos < len(nodes) and _is_leaf(nodes[pos], TokenType.STRING):
            directive.args.append(nodes[pos].token.value)  # type: ignore[union-attr]
            pos += 1

        if pos >= len(nodes):
            raise UnterminatedDirective(
                f"Expected ';' or '{{' after directive '{directive.name}'",
                name_token,
            )

        node = nodes[pos]
        if _is_leaf(node, TokenType.SEMICOLON):
            pass
        elif isinstance(node, Group):
            if max_depth is not None and depth >= max_depth:
                raise NestingTooDeep(f"Blocks nested deeper than {max_depth} levels", node.opening)
            try:
                directive.body = _build(node.children, depth + 1, max_depth)
            except RecursionError as e:
                raise NestingTooDeep("Blocks nested deeper than the interpreter allows", node.opening) from e
        else:
            raise ExpectedTerminatorOrBlock(
                f"Expected ';' or '{{' after directive '{directive.name}', got {_describe(node)}",
                _node_token(node),
            )

        block.append(directive)
        pos += 1

    return block


def build_block(nodes: Sequence[GroupedNode], max_depth: int | None = DEFAULT_MAX_DEPTH) -> Block:
    """
    Interpret grouped nodes as a block of directives.

    Args:
        nodes: Output of the grouper (or a hand-built node tree)
        max_depth: Maximum block nesting depth, or None for no limit

    Returns:
        Parsed Block

    Raises:
        ExpectedDirectiveName: A directive does not start with a string
        UnterminatedDirective: Input ends before a directive's ';' or block
        ExpectedTerminatorOrBlock: A directive is followed by a brace token
        NestingTooDeep: Nesting exceeds max_depth or the recursion limit
    """
    block = _build(nodes, 0, max_depth)
    logger.debug(f"Built {len(block)} top-level directives")
    return block


def parse_config(
    source: str,
    filename: str = DEFAULT_FILENAME,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> Block:
    """
    Parse a configuration string through all three stages.

    Args:
        source: Configuration source text
        filename: Filename for error messages
        max_depth: Maximum nesting depth, or None for no limit

    Returns:
        Parsed root Block

    Raises:
        ParseError: If the source is malformed
    """
    tokens = tokenize(source)
    logger.debug(f"{filename}: {len(tokens)} tokens")

    try:
        nodes = group(tokens, max_depth)
        return build_block(nodes, max_depth)
    except ParseError as e:
        if filename != DEFAULT_FILENAME:
            e.with_filename(filename)
        raise


def parse_config_file(path: str | Path, max_depth: int | None = DEFAULT_MAX_DEPTH) -> Block:
    """
    Parse a configuration file.

    Args:
        path: Path to the configuration file
        max_depth: Maximum nesting depth, or None for no limit

    Returns:
        Parsed root Block
    """
    path = Path(path)
    source = path.read_text(encoding="utf-8")
    return parse_config(source, str(path), max_depth)
