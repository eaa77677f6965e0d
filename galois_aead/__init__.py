"""AES-GCM authenticated encryption (aes_gcm) built on a GHASH implementation (ghash)."""

__version__ = "0.1.0"
__all__ = ["aes_gcm", "ghash"]