"""Stream and in-memory AES-256-CBC wrappers."""

from .main import fedcrypt


CipherStream = fedcrypt.CipherStream


def encrypt_stream(source, dest, key: bytes, iv: bytes, *, chunk_size: int | None = None):
    return fedcrypt.encrypt_stream(source, dest, key, iv, chunk_size=chunk_size)


def decrypt_stream(source, dest, key: bytes, iv: bytes, *, chunk_size: int | None = None):
    return fedcrypt.decrypt_stream(source, dest, key, iv, chunk_size=chunk_size)


def encrypt_bytes(plaintext: bytes, key: bytes, iv: bytes):
    return fedcrypt.encrypt_bytes(plaintext, key, iv)


def decrypt_bytes(ciphertext: bytes, key: bytes, iv: bytes):
    return fedcrypt.decrypt_bytes(ciphertext, key, iv)


__all__ = [
    "CipherStream",
    "decrypt_bytes",
    "decrypt_stream",
    "encrypt_bytes",
    "encrypt_stream",
]
