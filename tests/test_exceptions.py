"""Tests for exceptions module - behavior focused."""

import pytest

from clink.exceptions import (
    ClinkError,
    DecodeError,
    MissingTransportError,
    ResponseBodyMissingError,
    ResponseMissingError,
)


class TestDefaultMessages:
    """Test that each exception names its cause."""

    def test_missing_transport_message(self):
        assert str(MissingTransportError()) == "no HTTP client configured"

    def test_response_missing_message(self):
        assert str(ResponseMissingError()) == "response is None"

    def test_body_missing_message(self):
        assert str(ResponseBodyMissingError()) == "response body is None"

    def test_decode_error_includes_reason(self):
        error = DecodeError("Expecting value")
        assert str(error) == "failed to decode response: Expecting value"
        assert error.reason == "Expecting value"

    def test_message_attribute(self):
        error = ClinkError("Something went wrong")
        assert error.message == "Something went wrong"


class TestExceptionInheritance:
    """Test that all exceptions inherit from ClinkError."""

    @pytest.mark.parametrize(
        "exception_class",
        [
            MissingTransportError,
            ResponseMissingError,
            ResponseBodyMissingError,
        ],
    )
    def test_inherits_from_base(self, exception_class):
        """All exception types should be catchable as ClinkError."""
        error = exception_class()
        assert isinstance(error, ClinkError)

    def test_decode_error_inherits_from_base(self):
        assert isinstance(DecodeError("bad"), ClinkError)
