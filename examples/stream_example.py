#!/usr/bin/env python3
"""
Streaming Substitution Readers - Example

Chains ROT13 and Atbash readers over an in-memory source, reads in small
pieces, and round-trips a short message through RSA-OAEP.
"""

import io
import logging
import sys
import os

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cipherstream.encoding.reader import new_rot13_reader, new_atbash_reader, read_full, EndOfStreamError
from cipherstream.crypto.rsa_oaep import RSAOAEPCipher, generate_key_pair


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("Streaming Substitution Readers - Example")
    print("=" * 50)

    source = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    print("1. Single readers...")
    print(f"   rot13:  {new_rot13_reader(io.BytesIO(source)).read().decode()}")
    print(f"   atbash: {new_atbash_reader(io.BytesIO(source)).read().decode()}")

    print("\n2. Chained reader, 8 bytes at a time...")
    reader = new_atbash_reader(new_rot13_reader(io.BytesIO(source)))
    print(f"   chain: {reader!r}")
    while True:
        chunk = reader.read(8)
        if not chunk:
            break
        print(f"   {chunk.decode()}")

    print("\n3. Exact reads...")
    reader = new_rot13_reader(io.BytesIO(b"Hello"))
    print(f"   {read_full(reader, 5)!r}")
    try:
        read_full(reader, 1)
    except EndOfStreamError as e:
        print(f"   end of stream after {e.bytes_read} bytes")

    print("\n4. RSA-OAEP round trip...")
    private_key, public_key = generate_key_pair(key_size=2048)
    cipher = RSAOAEPCipher(label=b"lebal")
    ciphertext = cipher.encrypt(public_key, b"TRENDev rules")
    print(f"   ciphertext: {ciphertext[:16].hex()}... ({len(ciphertext)} bytes)")
    print(f"   decrypted:  {cipher.decrypt(private_key, ciphertext)!r}")


if __name__ == "__main__":
    main()
