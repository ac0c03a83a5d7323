# word_index/context/__init__.py
# text input side: reading files into lines and lines into words

from .line_source import read_lines  # file -> list of lines, or None
from .tokenizer import is_word, split_tokens, tokenize  # line -> words

__all__ = [
    "read_lines",
    "is_word",
    "split_tokens",
    "tokenize",
]
