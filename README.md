# galois_aead

AES-GCM authenticated encryption (NIST SP 800-38D). The GHASH function and the
counter-mode logic are written in Python. The AES block encryption comes from
the `cryptography` library.

The package provides:

- `Aes128Gcm` and `Aes256Gcm`. They take a 16-byte or 32-byte key and use a
  12-byte (96-bit) nonce and a 16-byte (128-bit) tag.
- `AesGcm`, the generic class. It takes a 16, 24 or 32-byte AES key, any
  positive nonce size, and a tag size of 12 to 16 bytes.
- Combined output, where the tag is appended to the ciphertext, and detached
  tags.

## Installation

```
pip install galois_aead
```

## Usage

```python
from galois_aead.aes_gcm import Aes256Gcm, AeadError

key = Aes256Gcm.generate_key()
cipher = Aes256Gcm(key)
nonce = cipher.generate_nonce()  # 12 random bytes; use a new one for every message

ciphertext = cipher.encrypt(nonce, b"plaintext message", b"header")
plaintext = cipher.decrypt(nonce, ciphertext, b"header")
assert plaintext == b"plaintext message"

try:
    cipher.decrypt(nonce, ciphertext, b"another header")
except AeadError:
    print("authentication failed")
```

`generate_key()` is a class method. It returns random bytes from `os.urandom`
of the class's `key_size`:

- 16 for `Aes128Gcm`
- 32 for `Aes256Gcm` and `AesGcm`

`generate_nonce()` returns `nonce_size` random bytes.

The `associated_data` argument is optional and defaults to `b""`.

### Detached tags

```python
ciphertext, tag = cipher.encrypt_detached(nonce, b"data")
plaintext = cipher.decrypt_detached(nonce, ciphertext, tag)
```

### Other nonce and tag sizes

```python
from galois_aead.aes_gcm import AesGcm

cipher = AesGcm(bytes(16), nonce_size=16, tag_size=12)
```

A 12-byte nonce becomes the starting counter block once `00000001` is appended
to it. A nonce of any other length is hashed with GHASH to form that block, as
the standard describes. The tag is the full 16-byte GCM tag cut down to
`tag_size` bytes.

### Errors

`ValueError` is raised for these:

- a key of the wrong length
- a tag size outside 12 to 16
- a nonce size below 1
- a nonce that is not `nonce_size` bytes long
- a detached tag that is not `tag_size` bytes long

`AeadError` is raised for these:

- Associated data longer than 2^36 bytes.
- Plaintext longer than 2^36 bytes.
- Ciphertext longer than 2^36 + 16 bytes.
- A tag that does not match. The comparison runs in constant time.
- A combined ciphertext passed to `decrypt` that is shorter than the tag.

### GHASH

`galois_aead.ghash.GHash` is the universal hash that the mode uses. It takes a
16-byte key. Its methods are:

- `update(blocks)`: absorbs an iterable of 16-byte blocks.
- `update_padded(data)`: absorbs arbitrary bytes and zero-pads the last block.
- `copy()`: returns an independent hasher with the same key and state.
- `finalize()`: returns the 16-byte result.

## Limitations

The package is a library only. It has no command-line tool.

GHASH multiplication is done bit by bit in Python. Throughput is therefore far
below that of native AES-GCM implementations, and the GHASH code makes no claim
to run in constant time.

## Running the tests

```
pip install -e ".[test]"
pytest
```