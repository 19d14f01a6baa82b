"""
Parsing pipeline for nginx-like configuration syntax.
"""

from .errors import (
    ErrorKind,
    ExpectedDirectiveName,
    ExpectedTerminatorOrBlock,
    NestingTooDeep,
    ParseError,
    UnmatchedClosingBrace,
    UnmatchedOpeningBrace,
    UnterminatedDirective,
)
from .formatter import format_block, format_nodes, format_tokens
from .grouper import Group, GroupedNode, Leaf, group
from .lexer import Lexer, Token, TokenType, tokenize
from .loader import ConfigError, ConfigLoader
from .parser import Block, Directive, build_block, parse_config, parse_config_file

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "Leaf",
    "Group",
    "GroupedNode",
    "group",
    "Block",
    "Directive",
    "build_block",
    "parse_config",
    "parse_config_file",
    "format_block",
    "format_nodes",
    "format_tokens",
    "ConfigError",
    "ConfigLoader",
    "ErrorKind",
    "ParseError",
    "UnmatchedOpeningBrace",
    "UnmatchedClosingBrace",
    "ExpectedDirectiveName",
    "UnterminatedDirective",
    "ExpectedTerminatorOrBlock",
    "NestingTooDeep",
]
