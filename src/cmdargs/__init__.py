"""cmdargs — delimiter- and quote-aware argument access for command text."""

from cmdargs.args import Args, Parser
from cmdargs.config import ArgsConfig, load_config
from cmdargs.errors import PARSE_ERRORS, ArgsError, EndOfInput, ParseFailure
from cmdargs.iterators import ArgIter, QuotedArgIter
from cmdargs.tokenizer import Token, TokenKind, build_delimiters, tokenize

__all__ = [
    # Tokenizer
    "Token",
    "TokenKind",
    "build_delimiters",
    "tokenize",
    # Args
    "Args",
    "Parser",
    # Iterators
    "ArgIter",
    "QuotedArgIter",
    # Errors
    "ArgsError",
    "EndOfInput",
    "ParseFailure",
    "PARSE_ERRORS",
    # Config
    "ArgsConfig",
    "load_config",
]
