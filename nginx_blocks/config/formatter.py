"""
Render parsed structures back to text.

format_block() produces configuration text that parses back to an equal
Block; format_tokens() and format_nodes() give one-line debug views of
the intermediate pipeline stages.
"""

from typing import Iterable

from ..const import DEFAULT_INDENT
from .grouper import Group, GroupedNode, Leaf
from .lexer import Token, TokenType
from .parser import Block, Directive


def _format_token(token: Token) -> str:
    if token.is_a(TokenType.STRING):
        return f"'{token.value}'"
    return token.value


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render a token sequence on one line, e.g. "'server' { 'listen' '80' ; }"."""
    return " ".join(_format_token(t) for t in tokens)


def _format_node(node: GroupedNode) -> str:
    if isinstance(node, Leaf):
        return _format_token(node.token)
    return format_nodes(node.children, wrap=True)


def format_nodes(nodes: Iterable[GroupedNode], wrap: bool = False) -> str:
    """Render grouped nodes on one line, with groups shown as ( ... )."""
    text = " ".join(_format_node(n) for n in nodes)
    if wrap:
        return f"( {text} )" if text else "( )"
    return text


def _format_directive(directive: Directive, depth: int, indent: str, lines: list[str]) -> None:
    prefix = indent * depth
    head = " ".join([directive.name, *directive.args])

    if directive.body is None:
        lines.append(f"{prefix}{head};")
        return

    lines.append(f"{prefix}{head} {{")
    for child in directive.body:
        _format_directive(child, depth + 1, indent, lines)
    lines.append(f"{prefix}}}")


def format_block(block: Block, indent: str = DEFAULT_INDENT) -> str:
    """
    Render a block as nginx-style configuration text.

    Args:
        block: Block to render
        indent: Indentation unit for nested blocks

    Returns:
        Configuration text, newline-terminated unless the block is empty
    """
    lines: list[str] = []
    for directive in block:
        _format_directive(directive, 0, indent, lines)
    return "".join(f"{line}\n" for line in lines)
