"""
Algorithm domain entity.

Describes one digest algorithm the service knows about. Instances are
built once at startup and shared read-only across requests.
"""

from dataclasses import dataclass, field

from src.domain.enums import PerformanceRating


@dataclass(frozen=True)
class AlgorithmInfo:
    """Metadata for a single digest algorithm"""

    name: str
    secure: bool
    performance_rating: PerformanceRating
    description: str
    aliases: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Algorithm name must be a non-empty string")
        if not isinstance(self.performance_rating, PerformanceRating):
            raise ValueError("Performance rating must be a PerformanceRating")
        if self.description is None:
            raise ValueError("Algorithm description cannot be None")
        # Accept any iterable of aliases but store it frozen
        object.__setattr__(self, "aliases", frozenset(self.aliases))
