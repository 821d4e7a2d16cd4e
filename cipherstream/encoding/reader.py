"""
Streaming substitution readers.

A SubstitutionReader decorates any byte source exposing ``readinto`` or
``read`` and translates letters as bytes are pulled through it. Readers nest:
wrapping one reader in another applies both alphabets position by position
without buffering the stream.

End-of-stream is a zero-length read. Exceptions raised by the inner source
propagate to the caller untouched.
"""

import errno
import io
import logging
from typing import List, Optional

from .alphabet import SubstitutionAlphabet, atbash, compose, get_alphabet, rot13

logger = logging.getLogger(__name__)


class ShortReadError(EOFError):
    """Raised by read_full when the source ends before enough bytes arrive."""

    def __init__(self, partial: bytes, expected: int):
        super().__init__(
            f"stream ended after {len(partial)} of {expected} bytes"
        )
        self.partial = partial
        self.expected = expected

    @property
    def bytes_read(self) -> int:
        return len(self.partial)


class EndOfStreamError(ShortReadError):
    """Raised by read_full when the source is exhausted before any byte is read."""

    def __init__(self, expected: int):
        super().__init__(b"", expected)


def _read_into(source, view: memoryview) -> Optional[int]:
    """Fill view from source, preferring readinto over read."""
    readinto = getattr(source, "readinto", None)
    if readinto is not None:
        return readinto(view)

    data = source.read(len(view))
    if data is None:
        return None
    count = len(data)
    view[:count] = data
    return count


class SubstitutionReader(io.RawIOBase):
    """
    Raw reader applying a substitution alphabet to an inner byte source.

    Not safe for concurrent use from several threads; independent readers
    over independent sources share no state.
    """

    def __init__(self, inner, alphabet: SubstitutionAlphabet, close_inner: bool = False):
        """
        Initialize reader. No I/O is performed.

        Args:
            inner: Byte source with ``readinto(buffer)`` or ``read(n)``
            alphabet: Substitution applied to every letter read
            close_inner: Close the inner source when this reader is closed

        Raises:
            TypeError: If inner cannot be read from
        """
        super().__init__()
        self._close_inner = False
        if not (hasattr(inner, "readinto") or hasattr(inner, "read")):
            raise TypeError(f"{type(inner).__name__} is not a readable byte source")

        self._inner = inner
        self._alphabet = alphabet
        self._close_inner = close_inner
        logger.debug("Created %s reader over %s", alphabet.name, type(inner).__name__)

    @property
    def inner(self):
        return self._inner

    @property
    def alphabet(self) -> SubstitutionAlphabet:
        return self._alphabet

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> Optional[int]:
        """
        Read up to len(buffer) bytes from the inner source and translate them.

        Args:
            buffer: Writable bytes-like object

        Returns:
            Number of bytes produced, 0 at end-of-stream, or None if a
            non-blocking inner source has no data available
        """
        if self.closed:
            raise ValueError("I/O operation on closed reader")

        view = memoryview(buffer).cast("B")
        if not view:
            return 0

        count = _read_into(self._inner, view)
        if count is None:
            return None
        if count == 0:
            logger.debug("End of stream reached by %s reader", self._alphabet.name)
            return 0

        view[:count] = view[:count].tobytes().translate(self._alphabet.table)
        return count

    def alphabet_chain(self) -> List[SubstitutionAlphabet]:
        """
        Alphabets of this reader and every nested reader, innermost first.
        """
        chain = []
        reader = self
        while isinstance(reader, SubstitutionReader):
            chain.append(reader.alphabet)
            reader = reader.inner
        chain.reverse()
        return chain

    def combined_alphabet(self) -> SubstitutionAlphabet:
        """Single alphabet equivalent to the whole reader chain."""
        return compose(*self.alphabet_chain())

    def close(self) -> None:
        if not self.closed and self._close_inner:
            self._inner.close()
        super().close()

    def __repr__(self) -> str:
        names = "+".join(alphabet.name for alphabet in self.alphabet_chain())
        return f"<SubstitutionReader {names}>"


def new_rot13_reader(inner) -> SubstitutionReader:
    """Wrap inner in a ROT13 reader."""
    return SubstitutionReader(inner, rot13())


def new_atbash_reader(inner) -> SubstitutionReader:
    """Wrap inner in an Atbash reader."""
    return SubstitutionReader(inner, atbash())


def new_reader(inner, *names: str) -> SubstitutionReader:
    """
    Build a reader chain from registered alphabet names.

    Args:
        inner: Byte source
        names: Alphabet names, innermost first

    Returns:
        Outermost SubstitutionReader

    Raises:
        ValueError: If no names are given
        UnknownAlphabetError: If a name is not registered
    """
    if not names:
        raise ValueError("At least one alphabet name is required")

    reader = inner
    for name in names:
        reader = SubstitutionReader(reader, get_alphabet(name))
    return reader


def read_full(source, size: int) -> bytes:
    """
    Read exactly size bytes from source.

    Args:
        source: Byte source with ``readinto`` or ``read``
        size: Number of bytes required

    Returns:
        Exactly size bytes

    Raises:
        EndOfStreamError: If the source ends before any byte is read
        ShortReadError: If the source ends part way through
        BlockingIOError: If a non-blocking source has no data available
    """
    if size < 0:
        raise ValueError("size must be non-negative")

    buffer = bytearray(size)
    view = memoryview(buffer)
    total = 0

    while total < size:
        count = _read_into(source, view[total:])
        if count is None:
            raise BlockingIOError(errno.EAGAIN, "source has no data available", total)
        if count == 0:
            if total == 0:
                raise EndOfStreamError(size)
            raise ShortReadError(bytes(buffer[:total]), size)
        total += count

    return bytes(buffer)
