"""
Monoalphabetic substitution alphabets over the 26-letter Latin alphabet.

An alphabet is stored as the 26-letter image of ``A..Z`` and compiled into a
256-entry byte translation table, so transforming a block is a single
``bytes.translate`` call. Lowercase letters follow the uppercase mapping with
case preserved; every other byte value maps to itself.
"""

import re
from typing import Callable, Dict, List

UPPERCASE = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = b"abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = 26

_ROTATION_NAME = re.compile(r"^rot(\d{1,2})$")


class UnknownAlphabetError(KeyError):
    """Raised when an alphabet name is not registered."""
    pass


class SubstitutionAlphabet:
    """
    Immutable letter-to-letter bijection with a precompiled byte table.
    """

    __slots__ = ("_name", "_mapping", "_table")

    def __init__(self, mapping: str, name: str = "custom"):
        """
        Initialize alphabet.

        Args:
            mapping: 26 letters, the images of A..Z in order (case-insensitive)
            name: Human-readable name used in reprs and logs

        Raises:
            ValueError: If mapping is not a permutation of A-Z
        """
        upper = mapping.upper()
        if len(upper) != ALPHABET_SIZE or sorted(upper) != list(UPPERCASE.decode("ascii")):
            raise ValueError("Mapping must be a permutation of the 26 letters A-Z")

        self._name = name
        self._mapping = upper
        target = upper.encode("ascii")
        self._table = bytes.maketrans(UPPERCASE + LOWERCASE, target + target.lower())

    @property
    def name(self) -> str:
        return self._name

    @property
    def mapping(self) -> str:
        """The images of A..Z as a 26-letter string."""
        return self._mapping

    @property
    def table(self) -> bytes:
        """256-byte translation table usable with ``bytes.translate``."""
        return self._table

    @property
    def is_involution(self) -> bool:
        """True if applying the alphabet twice is the identity."""
        return self.then(self).mapping == UPPERCASE.decode("ascii")

    def apply(self, data: bytes) -> bytes:
        """
        Transform a block of bytes.

        Args:
            data: Any bytes-like object

        Returns:
            Transformed bytes of the same length
        """
        return bytes(data).translate(self._table)

    def map_byte(self, value: int) -> int:
        """Transform a single byte value (0-255)."""
        return self._table[value]

    def then(self, other: "SubstitutionAlphabet") -> "SubstitutionAlphabet":
        """
        Return the alphabet equivalent to applying self, then other.

        Args:
            other: Alphabet applied second

        Returns:
            Combined SubstitutionAlphabet
        """
        combined = self.apply(UPPERCASE).translate(other.table)
        return SubstitutionAlphabet(combined.decode("ascii"), f"{self._name}+{other.name}")

    def inverse(self) -> "SubstitutionAlphabet":
        """Return the alphabet that undoes this one."""
        inverted = [""] * ALPHABET_SIZE
        for position, letter in enumerate(self._mapping):
            inverted[ord(letter) - ord("A")] = chr(ord("A") + position)
        return SubstitutionAlphabet("".join(inverted), f"inverse({self._name})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, SubstitutionAlphabet):
            return NotImplemented
        return self._mapping == other._mapping

    def __hash__(self) -> int:
        return hash(self._mapping)

    def __repr__(self) -> str:
        return f"SubstitutionAlphabet({self._mapping!r}, name={self._name!r})"


def rotation(shift: int) -> SubstitutionAlphabet:
    """
    Create a Caesar rotation alphabet.

    Args:
        shift: Number of positions to rotate (any integer, taken mod 26)

    Returns:
        SubstitutionAlphabet mapping position i to (i + shift) mod 26
    """
    shift %= ALPHABET_SIZE
    letters = UPPERCASE.decode("ascii")
    return SubstitutionAlphabet(letters[shift:] + letters[:shift], f"rot{shift}")


def rot13() -> SubstitutionAlphabet:
    """ROT13 alphabet: each letter shifted 13 positions. Self-inverse."""
    return rotation(13)


def atbash() -> SubstitutionAlphabet:
    """Atbash alphabet: each letter mapped to its mirror (A<->Z). Self-inverse."""
    return SubstitutionAlphabet(UPPERCASE.decode("ascii")[::-1], "atbash")


def keyed(key: str, name: str = "keyed") -> SubstitutionAlphabet:
    """
    Create an alphabet from an arbitrary 26-letter permutation.

    Args:
        key: Images of A..Z
        name: Alphabet name

    Returns:
        SubstitutionAlphabet
    """
    return SubstitutionAlphabet(key, name)


def compose(*alphabets: SubstitutionAlphabet) -> SubstitutionAlphabet:
    """
    Fold alphabets left to right into a single equivalent alphabet.

    Args:
        alphabets: Alphabets in application order

    Returns:
        Combined alphabet; the identity rotation when called with no arguments
    """
    if not alphabets:
        return rotation(0)

    result = alphabets[0]
    for alphabet in alphabets[1:]:
        result = result.then(alphabet)
    return result


# Name registry

_REGISTRY: Dict[str, Callable[[], SubstitutionAlphabet]] = {}


def register_alphabet(name: str, factory: Callable[[], SubstitutionAlphabet]) -> None:
    """
    Register an alphabet factory under a name.

    Args:
        name: Lookup name (case-insensitive)
        factory: Zero-argument callable returning a SubstitutionAlphabet
    """
    _REGISTRY[name.lower()] = factory


def get_alphabet(name: str) -> SubstitutionAlphabet:
    """
    Look up an alphabet by name.

    Registered names are tried first, then ``rotN`` for N in 0-25.

    Raises:
        UnknownAlphabetError: If the name cannot be resolved
    """
    key = name.lower()
    factory = _REGISTRY.get(key)
    if factory is not None:
        return factory()

    match = _ROTATION_NAME.match(key)
    if match and int(match.group(1)) < ALPHABET_SIZE:
        return rotation(int(match.group(1)))

    raise UnknownAlphabetError(name)


def available_alphabets() -> List[str]:
    """Names of registered alphabets, sorted."""
    return sorted(_REGISTRY)


register_alphabet("rot13", rot13)
register_alphabet("atbash", atbash)
