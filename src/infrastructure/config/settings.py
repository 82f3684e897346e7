from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.infrastructure.crypto.algorithm_registry import (
    DEPRECATED_ALGORITHMS, canonical_algorithm_name)


class Settings(BaseSettings):
    # App
    app_name: str = "Secure Hash Service"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"  # "production" enables HSTS on plain http

    # CORS - comma-separated list of allowed origins
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Hashing
    hash_default_algorithm: str = "SHA-256"
    hash_max_input_length: int = 10_000
    hash_min_input_length: int = 1  # Measured after trimming
    hash_secure_algorithms: str = "SHA-256,SHA-384,SHA-512,SHA3-256,SHA3-384,SHA3-512"
    hash_data_label: str = "Hash Service"  # Prefixed to caller data before hashing

    # Rate limiting
    rate_limit_enabled: bool = True
    rate_limit: str = "60/minute"

    @property
    def secure_algorithm_list(self) -> list[str]:
        """Configured secure algorithms, trimmed and uppercased"""
        return [
            name.strip().upper()
            for name in self.hash_secure_algorithms.split(",")
            if name.strip()
        ]

    @property
    def allowed_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    @model_validator(mode="after")
    def validate_hash_config(self) -> "Settings":
        """Validate hashing limits and the algorithm allow-list"""
        if self.hash_min_input_length < 0:
            raise ValueError("HASH_MIN_INPUT_LENGTH cannot be negative")
        if self.hash_min_input_length > self.hash_max_input_length:
            raise ValueError(
                "HASH_MIN_INPUT_LENGTH must not exceed HASH_MAX_INPUT_LENGTH "
                f"({self.hash_min_input_length} > {self.hash_max_input_length})"
            )

        algorithms = self.secure_algorithm_list
        if not algorithms:
            raise ValueError("HASH_SECURE_ALGORITHMS must name at least one algorithm")

        canonical = {canonical_algorithm_name(name) for name in algorithms}

        deprecated = sorted(DEPRECATED_ALGORITHMS & canonical)
        if deprecated:
            raise ValueError(
                f"HASH_SECURE_ALGORITHMS contains deprecated algorithms: {', '.join(deprecated)}"
            )

        # Aliases such as SHA256 count as their canonical algorithm
        if canonical_algorithm_name(self.hash_default_algorithm) not in canonical:
            raise ValueError(
                f"HASH_DEFAULT_ALGORITHM '{self.hash_default_algorithm}' "
                "must be one of HASH_SECURE_ALGORITHMS"
            )
        return self

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="allow", case_sensitive=False
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
