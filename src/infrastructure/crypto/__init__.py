"""Digest algorithm registry and hex encoding."""

from src.infrastructure.crypto.algorithm_registry import (DEFAULT_DESCRIPTORS,
                                                          AlgorithmRegistry,
                                                          DigestDescriptor,
                                                          to_hex)

__all__ = [
    "AlgorithmRegistry",
    "DigestDescriptor",
    "DEFAULT_DESCRIPTORS",
    "to_hex",
]
