# word_index/context/tokenizer.py
# splits raw lines into candidate words and filters out everything that is not a plain ASCII word

import re

# separators: non-word characters and digits, ascii classes only
# ('abc123' -> 'abc', 'café' -> 'caf', 'a_b' stays whole and is dropped later)
_split_re = re.compile(r"[\W\d]+", re.ASCII)
_word_re = re.compile(r"[A-Za-z]+")


def split_tokens(line: str):
    """
    Split on any run of separator characters.
    Empty and underscore-joined fragments survive here, is_word() drops them.
    """
    if not line:
        return []
    return _split_re.split(line)


def is_word(token) -> bool:
    """True for non-empty tokens made only of ASCII letters."""
    if not token:
        return False
    return _word_re.fullmatch(token) is not None


def tokenize(line: str):
    """Valid words of a line, in the order they appear (repeats kept)."""
    return [t for t in split_tokens(line) if is_word(t)]
