# markov_textgen/context/tokenizer.py
# turns raw input text into the token sequence fed to MarkovModel.init

import re
from typing import List

_NEWLINES = re.compile(r"\s*\n[\s\n]*")


def char_tokenize(text: str) -> List[str]:
    """Every character is one token, whitespace included."""
    if not text:
        return []
    return list(text)


def normalize_text(text: str, strip_newlines: bool = False) -> str:
    """
    Without strip_newlines the text is returned as is. With it, each run of
    line breaks (and the spaces around it) becomes a single space and
    trailing whitespace is dropped, so the model learns one continuous
    stream instead of line endings.
    """
    if not text:
        return ""
    if not strip_newlines:
        return text
    return _NEWLINES.sub(" ", text).rstrip()
