"""
Hash result domain entity.

Outcome of one successful pipeline run, independent of how it is
rendered to the caller.
"""

import re
from dataclasses import dataclass
from datetime import UTC, datetime

_HEX_PATTERN = re.compile(r"^[0-9a-f]+$")


@dataclass(frozen=True)
class HashResult:
    """Digest of sanitized input plus computation metadata"""

    original_data: str
    algorithm: str
    hex_hash: str
    timestamp: datetime
    computation_time_ms: int

    def __post_init__(self):
        if self.original_data is None:
            raise ValueError("Original data cannot be None")
        if not isinstance(self.algorithm, str) or not self.algorithm:
            raise ValueError("Algorithm must be a non-empty string")
        if not isinstance(self.hex_hash, str) or not self.hex_hash:
            raise ValueError("Hex hash must be a non-empty string")
        if len(self.hex_hash) % 2 != 0 or not _HEX_PATTERN.match(self.hex_hash):
            raise ValueError("Hex hash must contain lowercase hexadecimal byte pairs")
        if self.timestamp is None:
            raise ValueError("Timestamp cannot be None")
        if self.computation_time_ms < 0:
            raise ValueError("Computation time cannot be negative")

        # Naive timestamps are treated as UTC
        if self.timestamp.tzinfo is None:
            object.__setattr__(self, "timestamp", self.timestamp.replace(tzinfo=UTC))

    @property
    def digest_size(self) -> int:
        """Digest length in bytes"""
        return len(self.hex_hash) // 2
