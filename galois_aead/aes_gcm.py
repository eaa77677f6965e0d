"""AES-GCM authenticated encryption with configurable nonce and tag sizes."""

from __future__ import annotations

import hmac
import os

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from galois_aead.ghash import BLOCK_SIZE, GHash

A_MAX = 1 << 36
"""Maximum length of associated data."""

P_MAX = 1 << 36
"""Maximum length of plaintext."""

C_MAX = (1 << 36) + 16
"""Maximum length of ciphertext."""

TAG_SIZES = (12, 13, 14, 15, 16)
AES_KEY_SIZES = (16, 24, 32)


class AeadError(Exception):
    """Encryption or decryption failed (limits exceeded or authentication failure)."""


def _xor(a: bytes, b: bytes) -> bytes:
    if not a:
        return b""
    return (int.from_bytes(a, "big") ^ int.from_bytes(b, "big")).to_bytes(len(a), "big")


class AesGcm:
    """AES-GCM over an AES key of 16, 24 or 32 bytes."""

    key_size = 32

    def __init__(self, key, nonce_size: int = 12, tag_size: int = 16) -> None:
        key = bytes(key)
        if len(key) not in AES_KEY_SIZES:
            raise ValueError(f"AES key must be 16, 24 or 32 bytes, got {len(key)}")
        if tag_size not in TAG_SIZES:
            raise ValueError(f"tag size must be one of {TAG_SIZES}, got {tag_size}")
        if nonce_size < 1:
            raise ValueError("nonce size must be positive")
        self.nonce_size = nonce_size
        self.tag_size = tag_size
        self._ecb = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
        self._ghash = GHash(self._encrypt_blocks(bytes(BLOCK_SIZE)))

    @classmethod
    def generate_key(cls) -> bytes:
        """Return a fresh random key of this cipher's key size."""
        return os.urandom(cls.key_size)

    def generate_nonce(self) -> bytes:
        """Return a fresh random nonce of this cipher's nonce size."""
        return os.urandom(self.nonce_size)

    def _encrypt_blocks(self, data: bytes) -> bytes:
        return self._ecb.update(data)

    def _check_nonce(self, nonce) -> bytes:
        nonce = bytes(nonce)
        if len(nonce) != self.nonce_size:
            raise ValueError(f"nonce must be {self.nonce_size} bytes, got {len(nonce)}")
        return nonce

    def _init_ctr(self, nonce: bytes) -> tuple[bytes, bytes]:
        """Return the pre-counter block J0 and the tag mask E(K, J0)."""
        if self.nonce_size == 12:
            j0 = nonce + b"\x00\x00\x00\x01"
        else:
            ghash = self._ghash.copy()
            ghash.update_padded(nonce)
            ghash.update([bytes(8) + (len(nonce) * 8).to_bytes(8, "big")])
            j0 = ghash.finalize()
        return j0, self._encrypt_blocks(j0)

    def _apply_keystream(self, j0: bytes, data: bytes) -> bytes:
        if not data:
            return b""
        prefix = j0[:12]
        counter = int.from_bytes(j0[12:], "big")
        count = -(-len(data) // BLOCK_SIZE)
        counters = b"".join(
            prefix + ((counter + i) & 0xFFFFFFFF).to_bytes(4, "big") for i in range(1, count + 1)
        )
        return _xor(data, self._encrypt_blocks(counters)[: len(data)])

    def _compute_tag(self, mask: bytes, associated_data: bytes, ciphertext: bytes) -> bytes:
        ghash = self._ghash.copy()
        ghash.update_padded(associated_data)
        ghash.update_padded(ciphertext)
        ghash.update(
            [(len(associated_data) * 8).to_bytes(8, "big") + (len(ciphertext) * 8).to_bytes(8, "big")]
        )
        return _xor(ghash.finalize(), mask)

    def encrypt_detached(self, nonce, plaintext, associated_data=b"") -> tuple[bytes, bytes]:
        """Encrypt and return ``(ciphertext, tag)``."""
        nonce = self._check_nonce(nonce)
        plaintext = bytes(plaintext)
        associated_data = bytes(associated_data)
        if len(plaintext) > P_MAX or len(associated_data) > A_MAX:
            raise AeadError("input exceeds AES-GCM length limits")
        j0, mask = self._init_ctr(nonce)
        ciphertext = self._apply_keystream(j0, plaintext)
        tag = self._compute_tag(mask, associated_data, ciphertext)
        return ciphertext, tag[: self.tag_size]

    def decrypt_detached(self, nonce, ciphertext, tag, associated_data=b"") -> bytes:
        """Verify ``tag`` and return the plaintext; raise AeadError on failure."""
        nonce = self._check_nonce(nonce)
        ciphertext = bytes(ciphertext)
        tag = bytes(tag)
        associated_data = bytes(associated_data)
        if len(tag) != self.tag_size:
            raise ValueError(f"tag must be {self.tag_size} bytes, got {len(tag)}")
        if len(ciphertext) > C_MAX or len(associated_data) > A_MAX:
            raise AeadError("input exceeds AES-GCM length limits")
        j0, mask = self._init_ctr(nonce)
        expected = self._compute_tag(mask, associated_data, ciphertext)
        if not hmac.compare_digest(expected[: self.tag_size], tag):
            raise AeadError("authentication failed")
        return self._apply_keystream(j0, ciphertext)

    def encrypt(self, nonce, plaintext, associated_data=b"") -> bytes:
        """Encrypt and return the ciphertext with the tag appended."""
        ciphertext, tag = self.encrypt_detached(nonce, plaintext, associated_data)
        return ciphertext + tag

    def decrypt(self, nonce, ciphertext, associated_data=b"") -> bytes:
        """Decrypt a ciphertext that carries its tag at the end."""
        ciphertext = bytes(ciphertext)
        if len(ciphertext) < self.tag_size:
            raise AeadError("ciphertext shorter than the tag")
        split = len(ciphertext) - self.tag_size
        return self.decrypt_detached(nonce, ciphertext[:split], ciphertext[split:], associated_data)


class Aes128Gcm(AesGcm):
    """AES-GCM with a 128-bit key, 96-bit nonce and 128-bit tag."""

    key_size = 16

    def __init__(self, key) -> None:
        key = bytes(key)
        if len(key) != self.key_size:
            raise ValueError(f"key must be {self.key_size} bytes, got {len(key)}")
        super().__init__(key, 12, 16)


class Aes256Gcm(AesGcm):
    """AES-GCM with a 256-bit key, 96-bit nonce and 128-bit tag."""

    key_size = 32

    def __init__(self, key) -> None:
        key = bytes(key)
        if len(key) != self.key_size:
            raise ValueError(f"key must be {self.key_size} bytes, got {len(key)}")
        super().__init__(key, 12, 16)