"""
cipherstream: composable streaming substitution ciphers.

Wrap any byte source in a reader that applies a letter-substitution cipher
lazily as bytes are read. Readers nest, so ciphers can be chained.

Basic Usage:
    >>> import io
    >>> from cipherstream import new_rot13_reader, new_atbash_reader
    >>>
    >>> reader = new_atbash_reader(new_rot13_reader(io.BytesIO(b"ABC")))
    >>> reader.read()
    b'MLK'
"""

__version__ = "0.1.0"

from .encoding.alphabet import (
    SubstitutionAlphabet,
    UnknownAlphabetError,
    atbash,
    compose,
    get_alphabet,
    rot13,
    rotation,
)
from .encoding.reader import (
    EndOfStreamError,
    ShortReadError,
    SubstitutionReader,
    new_atbash_reader,
    new_reader,
    new_rot13_reader,
    read_full,
)
from .crypto.rsa_oaep import RSAOAEPCipher, RSADecryptionError, generate_key_pair
from .config import CipherStreamConfig, ConfigError

__all__ = [
    '__version__',

    # Alphabets
    'SubstitutionAlphabet',
    'UnknownAlphabetError',
    'atbash',
    'compose',
    'get_alphabet',
    'rot13',
    'rotation',

    # Readers
    'EndOfStreamError',
    'ShortReadError',
    'SubstitutionReader',
    'new_atbash_reader',
    'new_reader',
    'new_rot13_reader',
    'read_full',

    # Asymmetric encryption
    'RSAOAEPCipher',
    'RSADecryptionError',
    'generate_key_pair',

    # Configuration
    'CipherStreamConfig',
    'ConfigError',
]
