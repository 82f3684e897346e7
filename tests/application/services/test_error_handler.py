"""Tests for secure error handling"""
import logging
import re

import pytest

from src.application.services.error_handler import (GENERIC_ERROR_MESSAGE,
                                                    GENERIC_SERVICE_ERROR,
                                                    SecureErrorHandler)
from src.domain.enums import ErrorCode
from src.domain.exceptions import ConfigurationException, HashingException
from src.domain.value_objects import ValidationResult
from src.shared.context import (reset_client_address, reset_correlation_id,
                                set_client_address, set_correlation_id)

CORRELATION_ID = re.compile(r"^[0-9a-f]{24}$")


def test_correlation_ids_are_unique_hex(error_handler: SecureErrorHandler):
    ids = {error_handler.generate_correlation_id() for _ in range(500)}

    assert len(ids) == 500
    assert all(CORRELATION_ID.match(value) for value in ids)


@pytest.mark.parametrize(
    ("code", "status"),
    [
        (ErrorCode.ALGORITHM_NOT_SUPPORTED, 400),
        (ErrorCode.INPUT_VALIDATION_FAILED, 400),
        (ErrorCode.ALGORITHM_INSECURE, 403),
        (ErrorCode.COMPUTATION_FAILED, 500),
    ],
)
def test_hashing_failures_map_to_status(error_handler: SecureErrorHandler, code, status):
    error = error_handler.handle(HashingException(code, "internal detail: /etc/passwd"))

    assert error.status == status
    assert error.message == code.default_message
    assert "passwd" not in error.message
    assert CORRELATION_ID.match(error.correlation_id)


def test_configuration_failure_is_500(error_handler: SecureErrorHandler):
    error = error_handler.handle(ConfigurationException("registry empty"))

    assert error.status == 500
    assert error.message == ErrorCode.CONFIGURATION_ERROR.default_message


@pytest.mark.parametrize("failure", [ConnectionError("db down"), TimeoutError("slow")])
def test_unavailable_failures_are_503(error_handler: SecureErrorHandler, failure):
    error = error_handler.handle(failure)

    assert error.status == 503
    assert error.message == GENERIC_SERVICE_ERROR


def test_unknown_failure_is_generic_500(error_handler: SecureErrorHandler):
    error = error_handler.handle(KeyError("secret_key_name"))

    assert error.status == 500
    assert error.message == GENERIC_ERROR_MESSAGE
    assert "secret" not in error.message


def test_validation_failure_hides_rule_detail(error_handler: SecureErrorHandler):
    result = ValidationResult.failure(["Input contains null bytes which are not allowed"])

    error = error_handler.handle_validation_failure(result)

    assert error.status == 400
    assert error.message == ErrorCode.INPUT_VALIDATION_FAILED.default_message


def test_detail_is_logged_under_the_correlation_id(error_handler: SecureErrorHandler, caplog):
    """
    GIVEN a failure with internal detail during a traced request
    WHEN it is handled
    THEN the log line carries the detail, the failure ID and the request ID.
    """
    token = set_correlation_id("req-123")
    try:
        with caplog.at_level(logging.WARNING):
            error = error_handler.handle(
                HashingException(ErrorCode.ALGORITHM_NOT_SUPPORTED, "Algorithm 'FOO' is not supported")
            )
    finally:
        reset_correlation_id(token)

    assert error.correlation_id in caplog.text
    assert "req-123" in caplog.text
    assert "FOO" in caplog.text


def test_server_errors_log_traceback(error_handler: SecureErrorHandler, caplog):
    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        with caplog.at_level(logging.ERROR):
            error_handler.handle(exc)

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.exc_info is not None


STACK_FRAME = re.compile(r"\bat [\w.$]+\(|File \"|line \d+")


@pytest.mark.parametrize(
    "failure",
    [
        RuntimeError("NullPointerException at com.example.Hash(Hash.java:42)"),
        HashingException(ErrorCode.COMPUTATION_FAILED, "ValueError at com.x.Y(Y.java:1)"),
        ValueError('File "/srv/app.py", line 10, in compute'),
        TimeoutError("Exception while waiting"),
    ],
)
def test_message_never_leaks_internals(error_handler: SecureErrorHandler, failure):
    """
    GIVEN a failure whose text looks like an exception dump
    WHEN it is handled
    THEN the returned message contains none of it.
    """
    error = error_handler.handle(failure)

    assert "Exception" not in error.message
    assert "at com." not in error.message
    assert not STACK_FRAME.search(error.message)


def test_log_line_names_the_client_address(error_handler: SecureErrorHandler, caplog):
    """
    GIVEN a failure while serving a request from a known client
    WHEN it is handled
    THEN the log line carries the client address next to the request ID.
    """
    token = set_correlation_id("req-456")
    client_token = set_client_address("203.0.113.7")
    try:
        with caplog.at_level(logging.WARNING):
            error_handler.handle(HashingException(ErrorCode.ALGORITHM_INSECURE, "MD5 refused"))
            error_handler.handle_validation_failure(ValidationResult.failure(["too long"]))
    finally:
        reset_client_address(client_token)
        reset_correlation_id(token)

    assert len(caplog.records) == 2
    assert all("[requestId=req-456] [client=203.0.113.7]" in r.getMessage() for r in caplog.records)


def test_log_line_outside_a_request_uses_placeholders(error_handler: SecureErrorHandler, caplog):
    with caplog.at_level(logging.WARNING):
        error_handler.handle(HashingException(ErrorCode.ALGORITHM_NOT_SUPPORTED, "FOO"))

    assert "[requestId=-] [client=-]" in caplog.text


def test_hashing_failure_message_is_the_user_message(error_handler: SecureErrorHandler):
    exc = HashingException(ErrorCode.COMPUTATION_FAILED, "digest backend crashed")

    error = error_handler.handle(exc)

    assert error.message == exc.user_message
    assert "backend" not in error.message
