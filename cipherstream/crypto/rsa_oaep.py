"""
RSA-OAEP asymmetric encryption.

Thin wrapper over the ``cryptography`` RSA primitives: key generation and
OAEP encryption/decryption with MGF1 and an optional label. No padding or
encryption scheme is implemented here.
"""

from typing import Optional, Tuple

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

DEFAULT_KEY_SIZE = 4096
DEFAULT_PUBLIC_EXPONENT = 65537

_HASHES = {
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


class RSADecryptionError(Exception):
    """Exception raised when RSA-OAEP decryption fails."""
    pass


def generate_key_pair(key_size: int = DEFAULT_KEY_SIZE,
                      public_exponent: int = DEFAULT_PUBLIC_EXPONENT
                      ) -> Tuple[rsa.RSAPrivateKey, rsa.RSAPublicKey]:
    """
    Generate an RSA key pair.

    Args:
        key_size: Modulus size in bits
        public_exponent: Public exponent

    Returns:
        Tuple of (private_key, public_key)
    """
    private_key = rsa.generate_private_key(
        public_exponent=public_exponent,
        key_size=key_size,
    )
    return private_key, private_key.public_key()


class RSAOAEPCipher:
    """
    RSA-OAEP cipher bound to a hash algorithm and label.
    """

    def __init__(self, label: Optional[bytes] = None, hash_name: str = "sha256"):
        """
        Initialize RSA-OAEP cipher.

        Args:
            label: OAEP label; must match between encryption and decryption
            hash_name: One of sha1, sha256, sha384, sha512

        Raises:
            ValueError: If the hash is not supported
        """
        try:
            self._hash_cls = _HASHES[hash_name.lower()]
        except KeyError:
            raise ValueError(f"Unsupported OAEP hash: {hash_name}") from None

        self.label = label
        self.hash_name = hash_name.lower()

    def _padding(self) -> padding.OAEP:
        return padding.OAEP(
            mgf=padding.MGF1(algorithm=self._hash_cls()),
            algorithm=self._hash_cls(),
            label=self.label,
        )

    def max_plaintext_size(self, public_key: rsa.RSAPublicKey) -> int:
        """
        Largest plaintext OAEP can carry for this key.

        Args:
            public_key: Recipient public key

        Returns:
            Size limit in bytes
        """
        return public_key.key_size // 8 - 2 * self._hash_cls.digest_size - 2

    def encrypt(self, public_key: rsa.RSAPublicKey, plaintext: bytes) -> bytes:
        """
        Encrypt plaintext for the holder of the matching private key.

        Args:
            public_key: Recipient public key
            plaintext: Data to encrypt

        Returns:
            Ciphertext, the size of the key modulus

        Raises:
            ValueError: If plaintext exceeds max_plaintext_size
        """
        limit = self.max_plaintext_size(public_key)
        if len(plaintext) > limit:
            raise ValueError(
                f"Plaintext too long for RSA-OAEP: {len(plaintext)} > {limit} bytes"
            )
        return public_key.encrypt(plaintext, self._padding())

    def decrypt(self, private_key: rsa.RSAPrivateKey, ciphertext: bytes) -> bytes:
        """
        Decrypt an RSA-OAEP ciphertext.

        Args:
            private_key: Recipient private key
            ciphertext: Encrypted data

        Returns:
            Decrypted plaintext

        Raises:
            RSADecryptionError: If the ciphertext, key or label do not match
        """
        try:
            return private_key.decrypt(ciphertext, self._padding())
        except ValueError as e:
            raise RSADecryptionError("RSA-OAEP decryption failed") from e

    @property
    def algorithm_name(self) -> str:
        return f"RSA-OAEP-{self.hash_name.upper()}"


def quick_encrypt(public_key: rsa.RSAPublicKey, plaintext: bytes,
                  label: Optional[bytes] = None) -> bytes:
    """
    Quick encryption function for simple use cases.

    Args:
        public_key: Recipient public key
        plaintext: Data to encrypt
        label: Optional OAEP label

    Returns:
        Ciphertext
    """
    return RSAOAEPCipher(label=label).encrypt(public_key, plaintext)


def quick_decrypt(private_key: rsa.RSAPrivateKey, ciphertext: bytes,
                  label: Optional[bytes] = None) -> bytes:
    """
    Quick decryption function for simple use cases.

    Args:
        private_key: Recipient private key
        ciphertext: Encrypted data
        label: OAEP label used at encryption

    Returns:
        Decrypted plaintext
    """
    return RSAOAEPCipher(label=label).decrypt(private_key, ciphertext)
