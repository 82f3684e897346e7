"""Tests for application settings"""
import pytest
from pydantic import ValidationError

from src.application.services.hash_service import HashService
from src.application.services.input_validator import SecurityInputValidator
from src.infrastructure.config.settings import Settings
from src.infrastructure.crypto.algorithm_registry import AlgorithmRegistry


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "HASH_DEFAULT_ALGORITHM",
        "HASH_MAX_INPUT_LENGTH",
        "HASH_MIN_INPUT_LENGTH",
        "HASH_SECURE_ALGORITHMS",
        "HASH_DATA_LABEL",
    ):
        monkeypatch.delenv(name, raising=False)


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_defaults():
    settings = _settings()

    assert settings.hash_default_algorithm == "SHA-256"
    assert settings.hash_max_input_length == 10_000
    assert settings.hash_min_input_length == 1
    assert settings.hash_data_label == "Hash Service"
    assert settings.secure_algorithm_list == [
        "SHA-256",
        "SHA-384",
        "SHA-512",
        "SHA3-256",
        "SHA3-384",
        "SHA3-512",
    ]


def test_algorithm_list_is_trimmed_and_uppercased():
    settings = _settings(hash_secure_algorithms=" sha-256 , sha-512,,")

    assert settings.secure_algorithm_list == ["SHA-256", "SHA-512"]


def test_environment_override(monkeypatch):
    monkeypatch.setenv("HASH_SECURE_ALGORITHMS", "SHA-512")
    monkeypatch.setenv("HASH_DEFAULT_ALGORITHM", "SHA-512")

    settings = _settings()

    assert settings.secure_algorithm_list == ["SHA-512"]
    assert settings.hash_default_algorithm == "SHA-512"


@pytest.mark.parametrize("algorithms", ["SHA-256,MD5", "SHA-256,sha1", "SHA-1,SHA-256"])
def test_rejects_deprecated_algorithms(algorithms):
    with pytest.raises(ValidationError):
        _settings(hash_secure_algorithms=algorithms)


def test_rejects_empty_algorithm_list():
    with pytest.raises(ValidationError):
        _settings(hash_secure_algorithms=" , ")


def test_default_must_be_in_secure_list():
    with pytest.raises(ValidationError):
        _settings(hash_secure_algorithms="SHA-512", hash_default_algorithm="SHA-256")


def test_min_length_cannot_exceed_max():
    with pytest.raises(ValidationError):
        _settings(hash_min_input_length=20, hash_max_input_length=10)


def test_min_length_cannot_be_negative():
    with pytest.raises(ValidationError):
        _settings(hash_min_input_length=-1)


def test_allowed_origin_list():
    settings = _settings(allowed_origins="https://a.example, https://b.example")

    assert settings.allowed_origin_list == ["https://a.example", "https://b.example"]


@pytest.mark.parametrize("default", ["SHA256", "sha256", " sha-256 "])
def test_default_may_use_an_alias(default):
    """
    GIVEN a default algorithm spelled as a documented alias
    WHEN settings are loaded with the standard allow-list
    THEN validation accepts it, as the registry does.
    """
    settings = _settings(hash_default_algorithm=default)

    assert settings.hash_default_algorithm == default


def test_allow_list_may_use_aliases():
    settings = _settings(
        hash_secure_algorithms="SHA256,SHA-3-512", hash_default_algorithm="SHA3-512"
    )

    assert settings.secure_algorithm_list == ["SHA256", "SHA-3-512"]


def test_alias_default_drives_the_hash_service():
    settings = _settings(hash_default_algorithm="SHA512")
    registry = AlgorithmRegistry(enabled=settings.secure_algorithm_list)

    service = HashService(
        registry,
        SecurityInputValidator(registry),
        default_algorithm=settings.hash_default_algorithm,
    )

    assert service.default_algorithm == "SHA-512"


@pytest.mark.parametrize("algorithms", ["SHA-256,md5", "SHA-256, Sha-1"])
def test_rejects_deprecated_in_any_spelling(algorithms):
    with pytest.raises(ValidationError):
        _settings(hash_secure_algorithms=algorithms)
