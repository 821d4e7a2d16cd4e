"""
Reader tests for cipherstream.

Tests streaming substitution, reader chaining, and end-of-stream and error
propagation from the inner source.
"""

import io

import pytest

from cipherstream.encoding.alphabet import UnknownAlphabetError, atbash, rot13
from cipherstream.encoding.reader import (
    EndOfStreamError,
    ShortReadError,
    SubstitutionReader,
    new_atbash_reader,
    new_reader,
    new_rot13_reader,
    read_full,
)

ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class EOFSource:
    """Source that is always at end-of-stream."""

    def readinto(self, buffer):
        return 0


class FooError(Exception):
    pass


ERR_FOO = FooError("ERRFOO")


class FailingSource:
    """Source that always fails with the same error."""

    def readinto(self, buffer):
        raise ERR_FOO


class ReadOnlySource:
    """Source exposing only read(n), handing out at most chunk bytes per call."""

    def __init__(self, data: bytes, chunk: int = 3):
        self._data = data
        self._chunk = chunk

    def read(self, size):
        size = min(size, self._chunk)
        data, self._data = self._data[:size], self._data[size:]
        return data


class NonBlockingSource:
    """Source with no data available yet."""

    def readinto(self, buffer):
        return None


class TestSubstitution:
    """Test single-reader substitution."""

    @pytest.mark.parametrize("name, factory, expected", [
        ("rot13", new_rot13_reader, b"NOPQRSTUVWXYZABCDEFGHIJKLM"),
        ("atbash", new_atbash_reader, b"ZYXWVUTSRQPONMLKJIHGFEDCBA"),
    ])
    def test_alphabet_encoding(self, name, factory, expected):
        """Test that the full alphabet is encoded as expected."""
        reader = factory(io.BytesIO(ALPHABET))

        assert read_full(reader, len(ALPHABET)) == expected

    def test_non_letters_pass_through(self):
        """Test that digits, punctuation and whitespace are unchanged."""
        data = b"0123456789 !?.,;:-_\t\n\x00\xff\x80"

        assert new_rot13_reader(io.BytesIO(data)).read() == data
        assert new_atbash_reader(io.BytesIO(data)).read() == data

    def test_lowercase_preserves_case(self):
        """Test that lowercase letters are transformed and stay lowercase."""
        reader = new_rot13_reader(io.BytesIO(b"Hello, World!"))

        assert reader.read() == b"Uryyb, Jbeyq!"

    def test_small_reads_stream(self):
        """Test that the stream can be consumed in small pieces."""
        reader = new_rot13_reader(io.BytesIO(ALPHABET))

        pieces = []
        while True:
            chunk = reader.read(5)
            if not chunk:
                break
            assert len(chunk) <= 5
            pieces.append(chunk)

        assert b"".join(pieces) == b"NOPQRSTUVWXYZABCDEFGHIJKLM"

    def test_readinto_counts(self):
        """Test that readinto reports the bytes produced."""
        reader = new_atbash_reader(io.BytesIO(b"ABC"))
        buffer = bytearray(8)

        assert reader.readinto(buffer) == 3
        assert bytes(buffer[:3]) == b"ZYX"
        assert reader.readinto(buffer) == 0

    def test_read_only_source(self):
        """Test inner sources exposing only read(n)."""
        reader = new_rot13_reader(ReadOnlySource(ALPHABET, chunk=4))

        assert reader.read() == b"NOPQRSTUVWXYZABCDEFGHIJKLM"

    def test_lines(self):
        """Test line iteration through the reader."""
        reader = new_rot13_reader(io.BytesIO(b"ABC\nXYZ\n"))

        assert list(reader) == [b"NOP\n", b"KLM\n"]

    def test_no_io_at_construction(self):
        """Test that constructing a reader does not touch the source."""
        SubstitutionReader(FailingSource(), rot13())

    def test_unreadable_source_rejected(self):
        """Test that objects without read methods are rejected."""
        with pytest.raises(TypeError):
            SubstitutionReader(object(), rot13())

    def test_readable_not_seekable(self):
        reader = new_rot13_reader(io.BytesIO(b""))

        assert reader.readable()
        assert not reader.seekable()


class TestChaining:
    """Test nested readers."""

    @pytest.mark.parametrize("reader", [
        new_atbash_reader(new_rot13_reader(io.BytesIO(ALPHABET))),
        new_rot13_reader(new_atbash_reader(io.BytesIO(ALPHABET))),
    ], ids=["rot13 + atbash", "atbash + rot13"])
    def test_chain_order_independent(self, reader):
        """Test that both chain orders give the same output."""
        assert read_full(reader, len(ALPHABET)) == b"MLKJIHGFEDCBAZYXWVUTSRQPON"

    def test_double_rot13_is_identity(self):
        """Test that ROT13 twice restores the input."""
        data = b"The Quick Brown Fox 42"
        reader = new_rot13_reader(new_rot13_reader(io.BytesIO(data)))

        assert reader.read() == data

    def test_chain_over_empty_source(self):
        """Test that a chain over an empty source ends immediately."""
        reader = new_rot13_reader(new_atbash_reader(io.BytesIO(b"")))

        assert reader.readinto(bytearray(4)) == 0
        assert reader.read(4) == b""

    def test_alphabet_chain(self):
        """Test chain introspection and the combined alphabet."""
        reader = new_atbash_reader(new_rot13_reader(io.BytesIO(ALPHABET)))

        assert reader.alphabet_chain() == [rot13(), atbash()]
        combined = reader.combined_alphabet()
        assert combined.apply(ALPHABET) == b"MLKJIHGFEDCBAZYXWVUTSRQPON"

    def test_new_reader_by_name(self):
        """Test building chains from registered names."""
        reader = new_reader(io.BytesIO(ALPHABET), "rot13", "atbash")

        assert reader.read() == b"MLKJIHGFEDCBAZYXWVUTSRQPON"

    def test_new_reader_rejects_bad_names(self):
        with pytest.raises(UnknownAlphabetError):
            new_reader(io.BytesIO(b""), "vigenere")
        with pytest.raises(ValueError):
            new_reader(io.BytesIO(b""))


class TestReaderErrors:
    """Test end-of-stream and error propagation."""

    def test_eof_source(self):
        """Test that an exhausted source yields zero bytes."""
        reader = SubstitutionReader(EOFSource(), rot13())

        assert reader.readinto(bytearray(1)) == 0
        assert reader.read(1) == b""

    def test_eof_source_read_full(self):
        """Test that read_full signals end-of-stream with nothing read."""
        reader = SubstitutionReader(EOFSource(), rot13())

        with pytest.raises(EndOfStreamError) as excinfo:
            read_full(reader, 1)

        assert excinfo.value.bytes_read == 0
        assert isinstance(excinfo.value, EOFError)

    def test_failing_source_error_identity(self):
        """Test that the inner error surfaces as the same object."""
        reader = SubstitutionReader(FailingSource(), atbash())

        with pytest.raises(FooError) as excinfo:
            read_full(reader, 1)

        assert excinfo.value is ERR_FOO

    def test_failing_source_through_chain(self):
        """Test that errors pass through several readers unchanged."""
        reader = new_rot13_reader(new_atbash_reader(FailingSource()))

        with pytest.raises(FooError) as excinfo:
            reader.readinto(bytearray(4))

        assert excinfo.value is ERR_FOO

    def test_short_read(self):
        """Test that read_full reports partial data."""
        reader = new_rot13_reader(io.BytesIO(b"AB"))

        with pytest.raises(ShortReadError) as excinfo:
            read_full(reader, 5)

        assert not isinstance(excinfo.value, EndOfStreamError)
        assert excinfo.value.partial == b"NO"
        assert excinfo.value.bytes_read == 2
        assert excinfo.value.expected == 5

    def test_read_full_zero(self):
        assert read_full(new_rot13_reader(EOFSource()), 0) == b""

    def test_non_blocking_source(self):
        """Test that a source with no data available is passed through."""
        reader = new_rot13_reader(NonBlockingSource())

        assert reader.readinto(bytearray(4)) is None
        with pytest.raises(BlockingIOError):
            read_full(reader, 4)

    def test_closed_reader(self):
        """Test that reading a closed reader fails."""
        reader = new_rot13_reader(io.BytesIO(ALPHABET))
        reader.close()

        with pytest.raises(ValueError):
            reader.read(1)

    def test_close_inner(self):
        """Test that the inner source is closed only when requested."""
        inner = io.BytesIO(ALPHABET)
        new_rot13_reader(inner).close()
        assert not inner.closed

        SubstitutionReader(inner, rot13(), close_inner=True).close()
        assert inner.closed
