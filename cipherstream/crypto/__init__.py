"""
Asymmetric encryption helpers for cipherstream.

RSA-OAEP key generation, encryption and decryption built on the
``cryptography`` package.
"""

from .rsa_oaep import (
    RSAOAEPCipher,
    RSADecryptionError,
    generate_key_pair,
    quick_decrypt,
    quick_encrypt,
)

__all__ = [
    'RSAOAEPCipher',
    'RSADecryptionError',
    'generate_key_pair',
    'quick_encrypt',
    'quick_decrypt',
]
