"""Tests for API error message extraction."""

from portal.core.exceptions import (
    DEFAULT_ERROR_MESSAGE,
    PortalApiError,
    UnauthorizedError,
    extract_error_message,
)


class TestExtractErrorMessage:
    """Tests for extract_error_message precedence."""

    def test_error_key_wins(self) -> None:
        """Test ``error`` is preferred over ``detail``."""
        payload = {"detail": "generic", "error": "Instance is already running"}
        assert extract_error_message(payload) == "Instance is already running"

    def test_detail_key(self) -> None:
        """Test ``detail`` is used when ``error`` is absent."""
        assert extract_error_message({"detail": "Not found."}) == "Not found."

    def test_message_key(self) -> None:
        """Test ``message`` is used as a last named key."""
        assert extract_error_message({"message": "Quota exceeded"}) == "Quota exceeded"

    def test_blank_error_falls_through(self) -> None:
        """Test an empty ``error`` does not hide ``detail``."""
        assert extract_error_message({"error": "", "detail": "Denied"}) == "Denied"

    def test_field_errors(self) -> None:
        """Test the first message of a field-error payload is used."""
        payload = {"username": ["A user with that username already exists."]}
        assert (
            extract_error_message(payload)
            == "A user with that username already exists."
        )

    def test_plain_text_payload(self) -> None:
        """Test a text body is shown as-is."""
        assert extract_error_message("Bad gateway") == "Bad gateway"

    def test_fallback(self) -> None:
        """Test the fallback is used when nothing is usable."""
        assert extract_error_message(None, "Action failed") == "Action failed"
        assert extract_error_message({}, "Action failed") == "Action failed"
        assert extract_error_message([1, 2]) == DEFAULT_ERROR_MESSAGE


class TestPortalApiError:
    """Tests for PortalApiError construction."""

    def test_from_payload(self) -> None:
        """Test status code and payload are kept."""
        error = PortalApiError.from_payload(400, {"error": "Invalid name"})
        assert error.status_code == 400
        assert error.payload == {"error": "Invalid name"}
        assert error.message == "Invalid name"
        assert str(error) == "Invalid name"

    def test_from_payload_on_subclass(self) -> None:
        """Test the classmethod builds the subclass it is called on."""
        error = UnauthorizedError.from_payload(401, None, "Session expired")
        assert isinstance(error, UnauthorizedError)
        assert error.message == "Session expired"

    def test_message_or(self) -> None:
        """Test message_or prefers the server message."""
        assert PortalApiError("Server says no", payload={}).message_or("x") == (
            "Server says no"
        )
        assert PortalApiError("ignored").message_or("Fallback") == "Fallback"
        assert PortalApiError(DEFAULT_ERROR_MESSAGE, payload={}).message_or(
            "Fallback"
        ) == ("Fallback")
