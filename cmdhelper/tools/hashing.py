"""MD5 / SHA-256 / SHA-512 digests for strings and files."""

import hashlib
from enum import Enum
from pathlib import Path
from typing import Optional

_CHUNK = 64 * 1024


class HashAlgorithm(str, Enum):
    MD5 = "md5"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def label(self) -> str:
        return self.value.upper()

    @classmethod
    def parse(cls, name: str) -> Optional["HashAlgorithm"]:
        try:
            return cls(name.strip().lower())
        except ValueError:
            return None


def hash_bytes(data: bytes, algorithm: HashAlgorithm = HashAlgorithm.SHA256) -> str:
    return hashlib.new(algorithm.value, data).hexdigest()


def hash_string(text: str, algorithm: HashAlgorithm = HashAlgorithm.SHA256) -> str:
    return hash_bytes(text.encode("utf-8"), algorithm)


def hash_file(path: str | Path, algorithm: HashAlgorithm = HashAlgorithm.SHA256) -> str:
    h = hashlib.new(algorithm.value)
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK), b""):
            h.update(chunk)
    return h.hexdigest()


def verify_file(path: str | Path, expected: str, algorithm: HashAlgorithm = HashAlgorithm.SHA256) -> tuple[bool, str]:
    """Compare case-insensitively. Returns (matches, calculated digest)."""
    calculated = hash_file(path, algorithm)
    return calculated.lower() == expected.strip().lower(), calculated


def hash_file_all(path: str | Path) -> dict[HashAlgorithm, str]:
    return {algo: hash_file(path, algo) for algo in HashAlgorithm}
