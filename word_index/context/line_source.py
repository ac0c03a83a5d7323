# word_index/context/line_source.py
# reads a text file into raw lines for the indexer

import os
import re
from typing import List, Optional

from ..utils.logger_utils import log

# line terminators after universal-newline translation: \n, NEL and the unicode
# line/paragraph separators. Form feeds and other control chars stay inside a line.
_line_break_re = re.compile(r"[\n\x85\u2028\u2029]")


def read_lines(path: str, encoding: str = "latin-1") -> Optional[List[str]]:
    """
    Return the file's lines without line endings.
    Missing, empty or unreadable files give None (and a warning), never an exception,
    so callers can treat them as "nothing to index".
    Latin-1 maps every byte to a character, so decoding itself cannot fail.
    """
    if not path or not os.path.isfile(path):
        log.warning(f"cannot find the file: {path}")
        return None
    if os.path.getsize(path) == 0:
        log.warning(f"file is empty: {path}")
        return None

    try:
        with open(path, "r", encoding=encoding, newline=None) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        log.warning(f"cannot read {path}: {e}")
        return None

    lines = _line_break_re.split(text)
    # a trailing terminator ends the last line, it doesn't open a new one
    if lines and lines[-1] == "":
        lines.pop()
    return lines
