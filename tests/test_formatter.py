"""
Tests for text rendering of tokens, grouped nodes and blocks.
"""

from nginx_blocks.config.formatter import format_block, format_nodes, format_tokens
from nginx_blocks.config.grouper import group
from nginx_blocks.config.lexer import tokenize
from nginx_blocks.config.parser import Block, Directive, parse_config


def test_format_tokens() -> None:
    """Test the one-line token rendering."""
    tokens = tokenize("server { listen 80; }")

    assert format_tokens(tokens) == "'server' { 'listen' '80' ; }"


def test_format_nodes() -> None:
    """Test the one-line grouped-node rendering."""
    nodes = group(tokenize("{{ hello }} { hello2 } {}"))

    assert format_nodes(nodes) == "( ( 'hello' ) ) ( 'hello2' ) ( )"


def test_format_block() -> None:
    """Test nginx-style rendering of nested blocks."""
    block = parse_config("server a b { listen 13; location / { index index.html; } } apples {}")

    assert format_block(block) == (
        "server a b {\n"
        "\tlisten 13;\n"
        "\tlocation / {\n"
        "\t\tindex index.html;\n"
        "\t}\n"
        "}\n"
        "apples {\n"
        "}\n"
    )


def test_format_block_custom_indent() -> None:
    """Test rendering with a custom indent unit."""
    block = Block([Directive("events", body=Block([Directive("worker_connections", ["1024"])]))])

    assert format_block(block, indent="    ") == "events {\n    worker_connections 1024;\n}\n"


def test_format_empty_block() -> None:
    """Test that an empty block renders as empty text."""
    assert format_block(Block()) == ""


def test_formatted_output_parses_back(sample_source: str) -> None:
    """Test that rendered text parses back to an equal block."""
    block = parse_config(sample_source)

    assert parse_config(format_block(block)) == block
