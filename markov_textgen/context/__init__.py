# markov_textgen/context/__init__.py
# input preparation helpers used before building a model

from .tokenizer import char_tokenize, normalize_text

__all__ = [
    "char_tokenize",
    "normalize_text",
]
