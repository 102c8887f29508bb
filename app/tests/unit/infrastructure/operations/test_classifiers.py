"""Unit tests for SMTP error classification."""

import smtplib
import socket

import pytest

from infrastructure.operations import OperationStatus, classify_smtp_error

pytestmark = pytest.mark.unit


def test_authentication_error_is_unauthorized():
    result = classify_smtp_error(
        smtplib.SMTPAuthenticationError(535, b"5.7.8 Authentication failed")
    )

    assert result.status == OperationStatus.UNAUTHORIZED
    assert result.error_code == "SMTP_AUTH_FAILED"


def test_recipients_refused_is_permanent():
    result = classify_smtp_error(
        smtplib.SMTPRecipientsRefused({"ops@example.com": (550, b"No such user")})
    )

    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "SMTP_RECIPIENT_REFUSED"
    assert "ops@example.com" in result.message


def test_sender_refused_is_permanent():
    result = classify_smtp_error(
        smtplib.SMTPSenderRefused(553, b"Sender rejected", "noreply@example.com")
    )

    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "SMTP_SENDER_REFUSED"


@pytest.mark.parametrize(
    "exc",
    [
        smtplib.SMTPServerDisconnected("Connection unexpectedly closed"),
        smtplib.SMTPConnectError(421, b"Service not available"),
    ],
)
def test_connection_errors_are_transient(exc):
    result = classify_smtp_error(exc)

    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "SMTP_CONNECTION_ERROR"


def test_4xx_reply_is_transient():
    result = classify_smtp_error(smtplib.SMTPDataError(451, b"Try again later"))

    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "SMTP_451"


def test_5xx_reply_is_permanent():
    result = classify_smtp_error(smtplib.SMTPDataError(554, b"Transaction failed"))

    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "SMTP_554"


def test_generic_smtp_error_is_permanent():
    result = classify_smtp_error(smtplib.SMTPNotSupportedError("STARTTLS"))

    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "SMTP_ERROR"


@pytest.mark.parametrize(
    "exc",
    [socket.timeout("timed out"), ConnectionRefusedError(111, "Connection refused")],
)
def test_socket_errors_are_transient(exc):
    result = classify_smtp_error(exc)

    assert result.status == OperationStatus.TRANSIENT_ERROR
    assert result.error_code == "CONNECTION_ERROR"


def test_unexpected_error_is_permanent():
    result = classify_smtp_error(ValueError("bad header"))

    assert result.status == OperationStatus.PERMANENT_ERROR
    assert result.error_code == "UNKNOWN_ERROR"
    assert "ValueError" in result.message
