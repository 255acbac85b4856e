# FEDCRYPT FILE ENCRYPTION ENGINE ->

import os as _os_module

import colorama

colorama.init()  # Initialize colorama for cross-platform color support


class FedCryptError(Exception):
    """Base class for every failure raised by the engine."""


class RandomSourceError(FedCryptError):
    """The operating system could not supply random bytes."""


class KeyFileError(FedCryptError):
    """The key file could not be opened, read, written, or is truncated."""


class FileTransformError(FedCryptError):
    """The input or output file could not be opened."""


class CipherError(FedCryptError, ValueError):
    """AES-CBC initialization, update, finalize or padding failure."""


class fedcrypt:
    import os
    import pathlib
    import sys
    import typing
    from cryptography.hazmat.primitives import padding
    from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
    from cryptography.exceptions import AlreadyFinalized, UnsupportedAlgorithm

    @staticmethod
    def _env_int(name: str) -> "fedcrypt.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    ENGINE_VERSION = "1.0.0"
    KEY_LEN = 32  # AES-256
    BLOCK_SIZE = 16
    IV_LEN = BLOCK_SIZE
    KEY_FILE_LEN = KEY_LEN + IV_LEN
    PADDING_BITS = BLOCK_SIZE * 8
    MODE_ENCRYPT = "encrypt"
    MODE_DECRYPT = "decrypt"
    KEY_FILE_NAME = _os_module.getenv("FEDCRYPT_KEY_FILE") or "key_and_iv.bin"
    STREAM_CHUNK_SIZE = 1024
    _CHUNK_SIZE_ENV = _env_int("FEDCRYPT_CHUNK_SIZE")
    if _CHUNK_SIZE_ENV is not None:
        STREAM_CHUNK_SIZE = _CHUNK_SIZE_ENV
    _SILENT_MODE: typing.ClassVar[bool] = False

    @staticmethod
    def _report(message: str) -> None:
        if fedcrypt._SILENT_MODE:
            return
        print(message, file=fedcrypt.sys.stderr)

    @staticmethod
    def _resolve_chunk_size(chunk_size: "int | None") -> int:
        if chunk_size is None:
            return fedcrypt.STREAM_CHUNK_SIZE
        try:
            return max(1, int(chunk_size))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid chunk size: {chunk_size!r}") from exc

    @staticmethod
    def default_key_file() -> "fedcrypt.pathlib.Path":
        return fedcrypt.pathlib.Path(fedcrypt.KEY_FILE_NAME)

    @staticmethod
    def _resolve_key_file(key_file) -> "fedcrypt.pathlib.Path":
        if key_file is None:
            return fedcrypt.default_key_file()
        return fedcrypt.pathlib.Path(key_file)

    # KEY MATERIAL

    class KeyMaterial(typing.NamedTuple):
        """AES-256 key and CBC IV pair, serialized as ``key || iv``."""

        key: bytes
        iv: bytes

        @classmethod
        def create(cls, key, iv) -> "fedcrypt.KeyMaterial":
            key = bytes(key)
            iv = bytes(iv)
            if len(key) != fedcrypt.KEY_LEN:
                raise ValueError(f"AES-256 key must be {fedcrypt.KEY_LEN} bytes, got {len(key)}")
            if len(iv) != fedcrypt.IV_LEN:
                raise ValueError(f"CBC IV must be {fedcrypt.IV_LEN} bytes, got {len(iv)}")
            return cls(key, iv)

        @classmethod
        def from_bytes(cls, blob: bytes) -> "fedcrypt.KeyMaterial":
            blob = bytes(blob)
            if len(blob) < fedcrypt.KEY_FILE_LEN:
                raise KeyFileError(
                    f"Key file too short or corrupt: expected {fedcrypt.KEY_FILE_LEN} bytes, got {len(blob)}"
                )
            return cls(blob[:fedcrypt.KEY_LEN], blob[fedcrypt.KEY_LEN:fedcrypt.KEY_FILE_LEN])

        def to_bytes(self) -> bytes:
            return self.key + self.iv

    @staticmethod
    def generate_key_material() -> "fedcrypt.KeyMaterial":
        try:
            key = fedcrypt.os.urandom(fedcrypt.KEY_LEN)
        except (NotImplementedError, OSError) as exc:
            raise RandomSourceError("Error generating key") from exc
        try:
            iv = fedcrypt.os.urandom(fedcrypt.IV_LEN)
        except (NotImplementedError, OSError) as exc:
            raise RandomSourceError("Error generating IV") from exc
        return fedcrypt.KeyMaterial.create(key, iv)

    @staticmethod
    def save_key_material(path, material: "fedcrypt.KeyMaterial") -> "fedcrypt.pathlib.Path":
        target = fedcrypt.pathlib.Path(path)
        # rejects wrong lengths before the existing file is truncated
        material = fedcrypt.KeyMaterial.create(material.key, material.iv)
        try:
            with open(target, "wb") as handle:
                handle.write(material.key)
                handle.write(material.iv)
        except OSError as exc:
            raise KeyFileError(f"Unable to open key file: {target}") from exc
        return target

    @staticmethod
    def load_key_material(path) -> "fedcrypt.KeyMaterial":
        source = fedcrypt.pathlib.Path(path)
        try:
            with open(source, "rb") as handle:
                key = handle.read(fedcrypt.KEY_LEN)
                iv = handle.read(fedcrypt.IV_LEN)
        except OSError as exc:
            raise KeyFileError(f"Unable to open key file: {source}") from exc
        return fedcrypt.KeyMaterial.from_bytes(key + iv)

    # CIPHER STREAM

    class CipherStream:
        """Incremental AES-256-CBC transform with PKCS7 padding.

        ``update`` buffers partial blocks across calls, so the concatenated
        output never depends on how the input was split. ``finalize`` pads
        (encrypt) or strips and validates the padding (decrypt) and releases
        the underlying contexts.
        """

        def __init__(self, mode: str, key, iv) -> None:
            if mode not in (fedcrypt.MODE_ENCRYPT, fedcrypt.MODE_DECRYPT):
                raise ValueError(f"Unsupported cipher mode: {mode!r}")
            self.mode = mode
            self.bytes_in = 0
            self.bytes_out = 0
            self._ctx = None
            self._pad = None
            label = "encryption" if mode == fedcrypt.MODE_ENCRYPT else "decryption"
            try:
                material = fedcrypt.KeyMaterial.create(key, iv)
                cipher = fedcrypt.Cipher(
                    fedcrypt.algorithms.AES(material.key),
                    fedcrypt.modes.CBC(material.iv)
                )
                pkcs7 = fedcrypt.padding.PKCS7(fedcrypt.PADDING_BITS)
                if mode == fedcrypt.MODE_ENCRYPT:
                    self._ctx = cipher.encryptor()
                    self._pad = pkcs7.padder()
                else:
                    self._ctx = cipher.decryptor()
                    self._pad = pkcs7.unpadder()
            except (ValueError, fedcrypt.UnsupportedAlgorithm) as exc:
                raise CipherError(f"Failed to initialize {label}: {exc}") from exc

        @property
        def encrypting(self) -> bool:
            return self.mode == fedcrypt.MODE_ENCRYPT

        @property
        def finalized(self) -> bool:
            return self._ctx is None

        def _label(self) -> str:
            return "Encryption" if self.encrypting else "Decryption"

        def abort(self) -> None:
            self._ctx = None
            self._pad = None

        def update(self, chunk) -> bytes:
            if self._ctx is None:
                raise CipherError(f"{self._label()} context already finalized")
            data = bytes(chunk)
            try:
                if self.encrypting:
                    out = self._ctx.update(self._pad.update(data))
                else:
                    out = self._pad.update(self._ctx.update(data))
            except (ValueError, fedcrypt.AlreadyFinalized) as exc:
                self.abort()
                raise CipherError(f"{self._label()} failed during update.") from exc
            self.bytes_in += len(data)
            self.bytes_out += len(out)
            return out

        def finalize(self) -> bytes:
            if self._ctx is None:
                raise CipherError(f"{self._label()} context already finalized")
            try:
                if self.encrypting:
                    out = self._ctx.update(self._pad.finalize()) + self._ctx.finalize()
                else:
                    tail = self._pad.update(self._ctx.finalize())
                    out = tail + self._pad.finalize()
            except (ValueError, fedcrypt.AlreadyFinalized) as exc:
                raise CipherError(f"{self._label()} failed during finalization.") from exc
            finally:
                self.abort()
            self.bytes_out += len(out)
            return out

    @staticmethod
    def _pump(stream: "fedcrypt.CipherStream", source, dest, chunk_size: "int | None") -> int:
        chunk = fedcrypt._resolve_chunk_size(chunk_size)
        written = 0
        try:
            while True:
                buf = source.read(chunk)
                if not buf:
                    break
                out = stream.update(buf)
                if out:
                    dest.write(out)
                    written += len(out)
            tail = stream.finalize()
            if tail:
                dest.write(tail)
                written += len(tail)
        finally:
            stream.abort()
        dest.flush()
        return written

    @staticmethod
    def encrypt_stream(source, dest, key, iv, *, chunk_size: "int | None" = None) -> int:
        stream = fedcrypt.CipherStream(fedcrypt.MODE_ENCRYPT, key, iv)
        return fedcrypt._pump(stream, source, dest, chunk_size)

    @staticmethod
    def decrypt_stream(source, dest, key, iv, *, chunk_size: "int | None" = None) -> int:
        stream = fedcrypt.CipherStream(fedcrypt.MODE_DECRYPT, key, iv)
        return fedcrypt._pump(stream, source, dest, chunk_size)

    @staticmethod
    def encrypt_bytes(plaintext: bytes, key, iv) -> bytes:
        stream = fedcrypt.CipherStream(fedcrypt.MODE_ENCRYPT, key, iv)
        return stream.update(plaintext) + stream.finalize()

    @staticmethod
    def decrypt_bytes(ciphertext: bytes, key, iv) -> bytes:
        stream = fedcrypt.CipherStream(fedcrypt.MODE_DECRYPT, key, iv)
        return stream.update(ciphertext) + stream.finalize()

    # FILE TRANSFORM

    @staticmethod
    def _open_pair(input_path, output_path):
        src = fedcrypt.pathlib.Path(input_path)
        dst = fedcrypt.pathlib.Path(output_path)
        try:
            in_handle = open(src, "rb")
        except OSError as exc:
            raise FileTransformError(f"Unable to open input file: {src}") from exc
        try:
            out_handle = open(dst, "wb")
        except OSError as exc:
            in_handle.close()
            raise FileTransformError(f"Unable to open output file: {dst}") from exc
        return in_handle, out_handle

    @staticmethod
    def encrypt_file(
        input_path,
        output_path,
        key_file=None,
        *,
        chunk_size: "int | None" = None
    ) -> int:
        key_path = fedcrypt._resolve_key_file(key_file)
        in_handle, out_handle = fedcrypt._open_pair(input_path, output_path)
        with in_handle, out_handle:
            material = fedcrypt.generate_key_material()
            written = fedcrypt.encrypt_stream(
                in_handle,
                out_handle,
                material.key,
                material.iv,
                chunk_size=chunk_size
            )
        fedcrypt.save_key_material(key_path, material)
        return written

    @staticmethod
    def decrypt_file(
        input_path,
        output_path,
        key_file=None,
        *,
        chunk_size: "int | None" = None
    ) -> int:
        key_path = fedcrypt._resolve_key_file(key_file)
        in_handle, out_handle = fedcrypt._open_pair(input_path, output_path)
        with in_handle, out_handle:
            material = fedcrypt.load_key_material(key_path)
            return fedcrypt.decrypt_stream(
                in_handle,
                out_handle,
                material.key,
                material.iv,
                chunk_size=chunk_size
            )

    @staticmethod
    def _run(operation, input_path, output_path, key_file, chunk_size, silent: bool) -> bool:
        previous_silent = fedcrypt._SILENT_MODE
        fedcrypt._SILENT_MODE = silent
        try:
            chunk_size = fedcrypt._resolve_chunk_size(chunk_size)
            operation(input_path, output_path, key_file, chunk_size=chunk_size)
            return True
        except (FedCryptError, OSError, ValueError) as exc:
            fedcrypt._report(str(exc))
            cause = exc.__cause__
            if cause is not None and str(cause) and str(cause) not in str(exc):
                fedcrypt._report(f"  caused by: {cause}")
            return False
        finally:
            fedcrypt._SILENT_MODE = previous_silent

    @staticmethod
    def run_encrypt(
        input_path,
        output_path,
        key_file=None,
        *,
        chunk_size: "int | None" = None,
        silent: bool = False
    ) -> bool:
        return fedcrypt._run(fedcrypt.encrypt_file, input_path, output_path, key_file, chunk_size, silent)

    @staticmethod
    def run_decrypt(
        input_path,
        output_path,
        key_file=None,
        *,
        chunk_size: "int | None" = None,
        silent: bool = False
    ) -> bool:
        return fedcrypt._run(fedcrypt.decrypt_file, input_path, output_path, key_file, chunk_size, silent)


class _CliTheme:
    def __init__(self, plain: bool):
        self.plain = plain
        self.reset = "" if plain else colorama.Style.RESET_ALL
        self.bold = "" if plain else colorama.Style.BRIGHT
        self.red = "" if plain else colorama.Fore.RED
        self.green = "" if plain else colorama.Fore.GREEN
        self.yellow = "" if plain else colorama.Fore.YELLOW

    def _wrap(self, msg: str, color: str, emoji: "str | None" = None) -> str:
        if self.plain:
            return msg
        prefix = f"{emoji} " if emoji else ""
        return f"{self.bold}{color}{prefix}{msg}{self.reset}"

    def ok(self, msg: str) -> str:
        return self._wrap(msg, self.green, "✅")

    def warn(self, msg: str) -> str:
        return self._wrap(msg, self.yellow, "⚠️")

    def err(self, msg: str) -> str:
        return self._wrap(msg, self.red, "❌")


def _cli_plain_mode() -> bool:
    if _os_module.getenv("FEDCRYPT_CLI_PLAIN"):
        return True
    if _os_module.getenv("NO_COLOR"):
        return True
    return False


def cli(argv=None) -> int:
    import argparse

    theme = _CliTheme(_cli_plain_mode())

    parser = argparse.ArgumentParser(
        prog="fedcrypt",
        description="Encrypt or decrypt a file with AES-256-CBC and a side key file"
    )
    parser.add_argument(
        "mode",
        choices=[fedcrypt.MODE_ENCRYPT, fedcrypt.MODE_DECRYPT],
        help="encrypt: generate a fresh key/IV; decrypt: load them from the key file"
    )
    parser.add_argument("input", help="Input file path")
    parser.add_argument("output", help="Output file path (truncated, even on failure)")
    parser.add_argument(
        "-k", "--key-file",
        default=None,
        help=f"Key/IV file path (default: {fedcrypt.KEY_FILE_NAME} in the working directory)"
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=None,
        help=f"Read size in bytes (default: {fedcrypt.STREAM_CHUNK_SIZE})"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress engine error details"
    )
    args = parser.parse_args(argv)

    if args.chunk_size is not None and args.chunk_size <= 0:
        parser.error("--chunk-size must be a positive integer")

    if args.mode == fedcrypt.MODE_ENCRYPT:
        key_path = fedcrypt._resolve_key_file(args.key_file)
        if key_path.exists() and not args.quiet:
            print(theme.warn(f"Overwriting existing key file: {key_path}"), file=fedcrypt.sys.stderr)
        ok = fedcrypt.run_encrypt(
            args.input,
            args.output,
            args.key_file,
            chunk_size=args.chunk_size,
            silent=args.quiet
        )
        success_msg = "File encrypted successfully"
        failure_msg = "File encryption failed"
    else:
        ok = fedcrypt.run_decrypt(
            args.input,
            args.output,
            args.key_file,
            chunk_size=args.chunk_size,
            silent=args.quiet
        )
        success_msg = "File decrypted successfully"
        failure_msg = "File decryption failed"

    if ok:
        print(theme.ok(success_msg))
        return 0
    print(theme.err(failure_msg), file=fedcrypt.sys.stderr)
    return 1


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
