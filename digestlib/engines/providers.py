"""
Digest engine providers.

Each provider maps canonical algorithm names onto one hashing backend
and furnishes fresh engines for them. The registry queries providers in
order: the extended provider (pycryptodome, blake3) first when
installed, then the platform default (hashlib), then local
pseudo-digests.
"""

import functools
import hashlib
from abc import ABC, abstractmethod
from typing import Any

from ..core.exceptions import AlgorithmUnavailable
from ..encoding import bubblebabble
from .engine import Engine

try:
    import blake3 as _blake3

    blake3: Any | None = _blake3
except ImportError:
    blake3 = None

try:
    from Crypto.Hash import MD5 as _MD5
    from Crypto.Hash import RIPEMD160 as _RIPEMD160
    from Crypto.Hash import SHA1 as _SHA1
    from Crypto.Hash import SHA256 as _SHA256
    from Crypto.Hash import SHA384 as _SHA384
    from Crypto.Hash import SHA512 as _SHA512

    _CRYPTO_HASHES: dict[str, Any] = {
        "MD5": _MD5,
        "SHA1": _SHA1,
        "SHA-256": _SHA256,
        "SHA-384": _SHA384,
        "SHA-512": _SHA512,
        "RIPEMD160": _RIPEMD160,
    }
except ImportError:
    _CRYPTO_HASHES = {}


# Spellings accepted in addition to the canonical names
ALIASES = {
    "SHA-1": "SHA1",
    "SHA256": "SHA-256",
    "SHA384": "SHA-384",
    "SHA512": "SHA-512",
    "RMD160": "RIPEMD160",
    "RIPEMD-160": "RIPEMD160",
}


def canonical_name(algorithm: str) -> str:
    """Normalize an algorithm name to its canonical spelling."""
    upper = algorithm.upper()
    if upper == "BUBBLEBABBLE":
        return "BubbleBabble"
    return ALIASES.get(upper, upper)


class DigestProvider(ABC):
    """
    Abstract base class for engine providers.

    Implementations must provide:
    - name: Identifier used in logs and `digestlib algorithms`
    - algorithms: Canonical names the provider knows about
    - create_hasher(): Factory for raw hasher objects
    """

    # True for providers outside the platform default
    extended: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Return provider identifier (e.g., 'hashlib')."""
        pass

    @property
    @abstractmethod
    def algorithms(self) -> tuple[str, ...]:
        """Canonical algorithm names this provider may furnish."""
        pass

    @abstractmethod
    def create_hasher(self, algorithm: str) -> Any:
        """
        Create a raw hasher in its initial state.

        Raises:
            AlgorithmUnavailable: If the provider cannot furnish the algorithm
        """
        pass

    def create(self, algorithm: str) -> Engine:
        """Create an engine for a canonical algorithm name."""
        factory = functools.partial(self.create_hasher, algorithm)
        return Engine(algorithm, factory(), factory, self.name)


class HashlibProvider(DigestProvider):
    """Platform default provider backed by hashlib / OpenSSL."""

    HASHLIB_NAMES = {
        "MD2": "md2",
        "MD5": "md5",
        "SHA1": "sha1",
        "SHA-256": "sha256",
        "SHA-384": "sha384",
        "SHA-512": "sha512",
        "RIPEMD160": "ripemd160",
    }

    @property
    def name(self) -> str:
        return "hashlib"

    @property
    def algorithms(self) -> tuple[str, ...]:
        return tuple(self.HASHLIB_NAMES)

    def create_hasher(self, algorithm: str) -> Any:
        hashlib_name = self.HASHLIB_NAMES.get(algorithm)
        if hashlib_name is None:
            raise AlgorithmUnavailable(
                f"hashlib does not know {algorithm}", algorithm=algorithm
            )
        try:
            return hashlib.new(hashlib_name)
        except ValueError as e:
            # Unsupported by the linked OpenSSL, or blocked in FIPS mode
            raise AlgorithmUnavailable(
                f"hashlib cannot construct {algorithm}", algorithm=algorithm, cause=e
            ) from e


class ExtendedProvider(DigestProvider):
    """Optional provider backed by pycryptodome and blake3."""

    extended = True

    @property
    def name(self) -> str:
        return "extended"

    @property
    def algorithms(self) -> tuple[str, ...]:
        names = tuple(_CRYPTO_HASHES)
        if blake3 is not None:
            names += ("BLAKE3",)
        return names

    @property
    def installed(self) -> bool:
        """Whether any extended backend is importable."""
        return bool(_CRYPTO_HASHES) or blake3 is not None

    def create_hasher(self, algorithm: str) -> Any:
        if algorithm == "BLAKE3":
            if blake3 is None:
                raise AlgorithmUnavailable("blake3 package not installed", algorithm=algorithm)
            return blake3.blake3()

        module = _CRYPTO_HASHES.get(algorithm)
        if module is None:
            raise AlgorithmUnavailable(
                f"pycryptodome does not provide {algorithm}", algorithm=algorithm
            )
        return module.new()


class BufferHasher:
    """Pseudo-hasher that keeps its input and renders it as Bubble Babble."""

    block_size = 64

    def __init__(self, data: bytes = b"") -> None:
        self._buffer = bytearray(data)

    def update(self, data: bytes) -> None:
        self._buffer += data

    def digest(self) -> bytes:
        return bubblebabble(bytes(self._buffer)).encode("ascii")

    @property
    def digest_size(self) -> int:
        return len(self.digest())

    def copy(self) -> "BufferHasher":
        return BufferHasher(bytes(self._buffer))


class PseudoDigestProvider(DigestProvider):
    """Local provider for encodings exposed through the digest protocol."""

    @property
    def name(self) -> str:
        return "pseudo"

    @property
    def algorithms(self) -> tuple[str, ...]:
        return ("BubbleBabble",)

    def create_hasher(self, algorithm: str) -> Any:
        if algorithm != "BubbleBabble":
            raise AlgorithmUnavailable(f"no pseudo-digest named {algorithm}", algorithm=algorithm)
        return BufferHasher()
