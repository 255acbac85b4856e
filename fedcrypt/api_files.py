"""File-oriented convenience wrappers."""

from .main import fedcrypt


def run_encrypt(
    input_path,
    output_path,
    key_file=None,
    *,
    chunk_size: int | None = None,
    silent: bool = False,
):
    return fedcrypt.run_encrypt(
        input_path,
        output_path,
        key_file,
        chunk_size=chunk_size,
        silent=silent,
    )


def run_decrypt(
    input_path,
    output_path,
    key_file=None,
    *,
    chunk_size: int | None = None,
    silent: bool = False,
):
    return fedcrypt.run_decrypt(
        input_path,
        output_path,
        key_file,
        chunk_size=chunk_size,
        silent=silent,
    )


def encrypt_file(input_path, output_path, key_file=None, *, chunk_size: int | None = None):
    return fedcrypt.encrypt_file(input_path, output_path, key_file, chunk_size=chunk_size)


def decrypt_file(input_path, output_path, key_file=None, *, chunk_size: int | None = None):
    return fedcrypt.decrypt_file(input_path, output_path, key_file, chunk_size=chunk_size)


__all__ = [
    "decrypt_file",
    "encrypt_file",
    "run_decrypt",
    "run_encrypt",
]
