"""
Digest algorithm registry.

Single source of truth for which digest algorithms exist, which of them may
be used, and how a digest is produced. All algorithms share one shape
(text in, bytes out), so dispatch is a lookup table over ``hashlib`` names
rather than a class per algorithm.
"""

import hashlib
import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass

from src.domain.entities.algorithm import AlgorithmInfo
from src.domain.enums import ErrorCode, PerformanceRating
from src.domain.exceptions import ConfigurationException, HashingException

logger = logging.getLogger(__name__)

_HEX_CHARS = "0123456789abcdef"


@dataclass(frozen=True)
class DigestDescriptor:
    """Registry entry: public metadata plus the hashlib constructor name"""

    info: AlgorithmInfo
    hashlib_name: str

    @property
    def name(self) -> str:
        return self.info.name

    def new(self):
        """Create a fresh digest object (raises ValueError if unavailable)"""
        return hashlib.new(self.hashlib_name)


DEFAULT_DESCRIPTORS: tuple[DigestDescriptor, ...] = (
    DigestDescriptor(
        AlgorithmInfo(
            name="SHA-256",
            secure=True,
            performance_rating=PerformanceRating.FAST,
            description=(
                "SHA-256: NIST-approved algorithm with excellent security-to-performance "
                "ratio. Recommended for general use with 256-bit output."
            ),
            aliases=frozenset({"SHA256"}),
        ),
        "sha256",
    ),
    DigestDescriptor(
        AlgorithmInfo(
            name="SHA-384",
            secure=True,
            performance_rating=PerformanceRating.MEDIUM,
            description=(
                "SHA-384: Truncated SHA-512 variant with 384-bit output, resistant to "
                "length-extension attacks."
            ),
            aliases=frozenset({"SHA384"}),
        ),
        "sha384",
    ),
    DigestDescriptor(
        AlgorithmInfo(
            name="SHA-512",
            secure=True,
            performance_rating=PerformanceRating.MEDIUM,
            description=(
                "SHA-512: High-security algorithm with 512-bit output and enhanced security "
                "margin. Performs well on 64-bit systems."
            ),
            aliases=frozenset({"SHA512"}),
        ),
        "sha512",
    ),
    DigestDescriptor(
        AlgorithmInfo(
            name="SHA3-256",
            secure=True,
            performance_rating=PerformanceRating.MEDIUM,
            description=(
                "SHA3-256: Keccak-based NIST standard with 256-bit output, structurally "
                "independent of the SHA-2 family."
            ),
            aliases=frozenset({"SHA-3-256"}),
        ),
        "sha3_256",
    ),
    DigestDescriptor(
        AlgorithmInfo(
            name="SHA3-384",
            secure=True,
            performance_rating=PerformanceRating.SLOW,
            description="SHA3-384: Keccak-based NIST standard with 384-bit output.",
            aliases=frozenset({"SHA-3-384"}),
        ),
        "sha3_384",
    ),
    DigestDescriptor(
        AlgorithmInfo(
            name="SHA3-512",
            secure=True,
            performance_rating=PerformanceRating.SLOW,
            description=(
                "SHA3-512: Keccak-based NIST standard with 512-bit output for the highest "
                "security margin."
            ),
            aliases=frozenset({"SHA-3-512"}),
        ),
        "sha3_512",
    ),
    DigestDescriptor(
        AlgorithmInfo(
            name="MD5",
            secure=False,
            performance_rating=PerformanceRating.FAST,
            description="MD5: Collision-broken. Rejected for all uses.",
        ),
        "md5",
    ),
    DigestDescriptor(
        AlgorithmInfo(
            name="SHA-1",
            secure=False,
            performance_rating=PerformanceRating.FAST,
            description="SHA-1: Collision-broken. Rejected for all uses.",
            aliases=frozenset({"SHA1"}),
        ),
        "sha1",
    ),
)


_DEFAULT_LOOKUP: dict[str, str] = {
    key.upper(): descriptor.name
    for descriptor in DEFAULT_DESCRIPTORS
    for key in (descriptor.name, *descriptor.info.aliases)
}

DEPRECATED_ALGORITHMS = frozenset(
    descriptor.name for descriptor in DEFAULT_DESCRIPTORS if not descriptor.info.secure
)


def canonical_algorithm_name(name: str) -> str:
    """
    Canonical spelling of a name or documented alias from the default table.

    Unknown names come back trimmed and uppercased so the registry can
    reject them with a configuration error.
    """
    key = name.strip().upper()
    return _DEFAULT_LOOKUP.get(key, key)


def to_hex(data: bytes) -> str:
    """Lowercase hex encoding, two characters per byte."""
    if data is None:
        raise ValueError("Byte array cannot be None")
    chars = []
    for byte in data:
        chars.append(_HEX_CHARS[byte >> 4])
        chars.append(_HEX_CHARS[byte & 0x0F])
    return "".join(chars)


class AlgorithmRegistry:
    """
    Gate for digest algorithms and the digest computation itself.

    The secure set is computed once at construction from the descriptor
    table, the optional ``enabled`` allow-list and what the running
    interpreter actually provides. It never changes afterwards.

    The only mutable state is the availability cache. It is bounded at
    ``MAX_CACHE_SIZE`` entries and cleared when full, because the names
    it is keyed on come from callers.
    """

    MAX_CACHE_SIZE = 100

    def __init__(
        self,
        descriptors: Iterable[DigestDescriptor] = DEFAULT_DESCRIPTORS,
        enabled: Iterable[str] | None = None,
    ):
        self._descriptors: dict[str, DigestDescriptor] = {}
        self._lookup: dict[str, str] = {}
        for descriptor in descriptors:
            canonical = descriptor.name.strip().upper()
            self._descriptors[canonical] = descriptor
            self._lookup[canonical] = canonical
            for alias in descriptor.info.aliases:
                self._lookup[alias.strip().upper()] = canonical

        self._deprecated = frozenset(
            name for name, descriptor in self._descriptors.items() if not descriptor.info.secure
        )

        candidates = {
            name for name, descriptor in self._descriptors.items() if descriptor.info.secure
        }
        if enabled is not None:
            candidates &= self._resolve_enabled(enabled)

        self._availability_cache: dict[str, bool] = {}
        self._cache_lock = threading.Lock()

        self._secure_algorithms = frozenset(
            name for name in candidates if self._constructible(self._descriptors[name])
        )
        if not self._secure_algorithms:
            raise ConfigurationException(
                "No secure digest algorithm is available on this platform",
                {"candidates": sorted(candidates)},
            )

        unavailable = sorted(candidates - self._secure_algorithms)
        if unavailable:
            logger.warning(f"Secure algorithms unavailable on this platform: {unavailable}")
        logger.info(f"Algorithm registry initialized: {sorted(self._secure_algorithms)}")

    def _resolve_enabled(self, enabled: Iterable[str]) -> set[str]:
        resolved = set()
        for name in enabled:
            canonical = self.resolve(name)
            if canonical is None:
                raise ConfigurationException(
                    f"Configured algorithm '{name}' is unknown", {"algorithm": name}
                )
            if canonical in self._deprecated:
                raise ConfigurationException(
                    f"Configured algorithm '{name}' is deprecated", {"algorithm": name}
                )
            resolved.add(canonical)
        return resolved

    @staticmethod
    def _normalize(name: str) -> str:
        if name is None:
            raise ValueError("Algorithm cannot be None")
        return name.strip().upper()

    @staticmethod
    def _constructible(descriptor: DigestDescriptor) -> bool:
        try:
            descriptor.new()
        except ValueError:
            return False
        return True

    def resolve(self, name: str) -> str | None:
        """Canonical name for ``name`` or one of its documented aliases."""
        if name is None:
            return None
        return self._lookup.get(self._normalize(name))

    def is_deprecated(self, name: str) -> bool:
        return self.resolve(name) in self._deprecated

    def is_secure(self, name: str) -> bool:
        if name is None:
            return False
        # Deprecated always wins, whatever the secure set says
        if self.is_deprecated(name):
            return False
        return self.resolve(name) in self._secure_algorithms

    def is_available(self, name: str) -> bool:
        """Whether the platform can construct a digest for ``name``."""
        key = self._normalize(name)

        with self._cache_lock:
            cached = self._availability_cache.get(key)
        if cached is not None:
            return cached

        canonical = self._lookup.get(key)
        available = canonical is not None and self._constructible(self._descriptors[canonical])

        with self._cache_lock:
            if len(self._availability_cache) >= self.MAX_CACHE_SIZE:
                self._availability_cache.clear()
            self._availability_cache[key] = available
        return available

    @property
    def cache_size(self) -> int:
        with self._cache_lock:
            return len(self._availability_cache)

    def compute_digest(self, name: str, text: str) -> bytes:
        """
        Digest the UTF-8 encoding of ``text`` with algorithm ``name``.

        Raises:
            HashingException: ALGORITHM_INSECURE for deprecated algorithms,
                ALGORITHM_NOT_SUPPORTED for anything outside the secure set,
                COMPUTATION_FAILED if the platform fails to produce the digest.
        """
        if text is None:
            raise ValueError("Input cannot be None")

        if self.is_deprecated(name):
            raise HashingException(
                ErrorCode.ALGORITHM_INSECURE,
                f"Algorithm '{name}' is deprecated and insecure",
                {"algorithm": name},
            )

        canonical = self.resolve(name)
        if canonical is None or canonical not in self._secure_algorithms:
            raise HashingException(
                ErrorCode.ALGORITHM_NOT_SUPPORTED,
                f"Algorithm '{name}' is not supported",
                {"algorithm": name, "supported": sorted(self._secure_algorithms)},
            )

        descriptor = self._descriptors[canonical]
        try:
            digest = descriptor.new()
            digest.update(text.encode("utf-8"))
            return digest.digest()
        except ValueError as e:
            raise HashingException(
                ErrorCode.COMPUTATION_FAILED,
                f"Digest creation failed for '{canonical}': {e}",
                {"algorithm": canonical},
            ) from e

    @staticmethod
    def to_hex(data: bytes) -> str:
        return to_hex(data)

    def list_secure_algorithms(self) -> frozenset[str]:
        return self._secure_algorithms

    def list_deprecated_algorithms(self) -> frozenset[str]:
        return self._deprecated

    def get_info(self, name: str) -> AlgorithmInfo | None:
        canonical = self.resolve(name)
        if canonical is None:
            return None
        return self._descriptors[canonical].info

    def list_algorithm_info(self) -> list[AlgorithmInfo]:
        """Metadata for every usable algorithm, sorted by name"""
        return [self._descriptors[name].info for name in sorted(self._secure_algorithms)]

    def digest_size(self, name: str) -> int:
        canonical = self.resolve(name)
        if canonical is None:
            raise HashingException(
                ErrorCode.ALGORITHM_NOT_SUPPORTED,
                f"Algorithm '{name}' is not supported",
                {"algorithm": name},
            )
        return self._descriptors[canonical].new().digest_size
