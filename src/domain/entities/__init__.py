"""Domain entities."""

from src.domain.entities.algorithm import AlgorithmInfo
from src.domain.entities.hash_result import HashResult

__all__ = [
    "AlgorithmInfo",
    "HashResult",
]
