"""tinybasic - a small line-numbered BASIC interpreter."""

from .errors import BasicRuntimeError, BasicSyntaxError
from .interpreter import Interpreter
from .parser import parse_line, parse_program_line, parse_statement
from .tokenizer import Token, tokenize

__version__ = "0.1.0"
