"""
Streaming letter-substitution encodings.

This module provides:
- Substitution alphabets (ROT13, Atbash, Caesar rotations, keyed)
- Composable readers that apply an alphabet lazily to any byte source
"""

from .alphabet import (
    SubstitutionAlphabet,
    UnknownAlphabetError,
    atbash,
    available_alphabets,
    compose,
    get_alphabet,
    keyed,
    register_alphabet,
    rot13,
    rotation,
)
from .reader import (
    EndOfStreamError,
    ShortReadError,
    SubstitutionReader,
    new_atbash_reader,
    new_reader,
    new_rot13_reader,
    read_full,
)

__all__ = [
    'SubstitutionAlphabet',
    'UnknownAlphabetError',
    'atbash',
    'available_alphabets',
    'compose',
    'get_alphabet',
    'keyed',
    'register_alphabet',
    'rot13',
    'rotation',
    'EndOfStreamError',
    'ShortReadError',
    'SubstitutionReader',
    'new_atbash_reader',
    'new_reader',
    'new_rot13_reader',
    'read_full',
]
