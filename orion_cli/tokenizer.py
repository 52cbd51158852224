"""Console input tokenizer."""

import re
import shlex
from typing import List, NamedTuple, Optional

_INTEGER = re.compile(r"[+-]?\d+")


class InputToken(NamedTuple):
    """One word of console input."""

    text: str
    value: Optional[int] = None

    def __str__(self) -> str:
        return self.text


def parse_token(text: str) -> InputToken:
    value = int(text) if _INTEGER.fullmatch(text) else None

    return InputToken(text, value)


def tokenize(line: str) -> List[InputToken]:
    """
    Split a console line into tokens.

    Args:
        line: Raw input line

    Returns:
        Tokens in input order

    Raises:
        ValueError: On unbalanced quotes
    """
    return [parse_token(word) for word in shlex.split(line)]
