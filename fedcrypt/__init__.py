from .main import (
    CipherError,
    FedCryptError,
    FileTransformError,
    KeyFileError,
    RandomSourceError,
    cli,
    fedcrypt,
    main,
)
from .api_files import decrypt_file, encrypt_file, run_decrypt, run_encrypt
from .api_keys import (
    KeyMaterial,
    default_key_file,
    generate_key_material,
    load_key_material,
    save_key_material,
)
from .api_streams import (
    CipherStream,
    decrypt_bytes,
    decrypt_stream,
    encrypt_bytes,
    encrypt_stream,
)
from .version import __version__

__all__ = [
    "CipherError",
    "CipherStream",
    "FedCryptError",
    "FileTransformError",
    "KeyFileError",
    "KeyMaterial",
    "RandomSourceError",
    "__version__",
    "cli",
    "decrypt_bytes",
    "decrypt_file",
    "decrypt_stream",
    "default_key_file",
    "encrypt_bytes",
    "encrypt_file",
    "encrypt_stream",
    "fedcrypt",
    "generate_key_material",
    "load_key_material",
    "main",
    "run_decrypt",
    "run_encrypt",
    "save_key_material",
]
