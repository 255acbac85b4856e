"""Key/IV generation and key-file persistence wrappers."""

from .main import fedcrypt


KeyMaterial = fedcrypt.KeyMaterial


def generate_key_material():
    return fedcrypt.generate_key_material()


def save_key_material(path, material):
    return fedcrypt.save_key_material(path, material)


def load_key_material(path):
    return fedcrypt.load_key_material(path)


def default_key_file():
    return fedcrypt.default_key_file()


__all__ = [
    "KeyMaterial",
    "default_key_file",
    "generate_key_material",
    "load_key_material",
    "save_key_material",
]
