"""Unit tests for the exception hierarchy."""

from __future__ import annotations

from connect_to_forge.exceptions import (
    ConfigurationError,
    ConnectToForgeError,
    DescriptorDownloadError,
    DescriptorParseError,
    OperatorAbort,
)


class TestConnectToForgeError:
    def test_message_only(self) -> None:
        err = ConnectToForgeError("boom")
        assert str(err) == "[CONNECT_TO_FORGE_ERROR] boom"
        assert err.context == {}
        assert "--debug" in err.get_recovery_hint()

    def test_none_context_values_are_dropped(self) -> None:
        err = ConnectToForgeError("boom", url="https://x", status_code=None)
        assert err.context == {"url": "https://x"}
        assert str(err) == "[CONNECT_TO_FORGE_ERROR] boom (url: https://x)"


class TestSubclasses:
    def test_download_error_code_and_context(self) -> None:
        err = DescriptorDownloadError("not found", url="https://x", status_code=404)
        assert err.error_code == "DESCRIPTOR_DOWNLOAD_ERROR"
        assert str(err) == (
            "[DESCRIPTOR_DOWNLOAD_ERROR] not found (url: https://x; status_code: 404)"
        )

    def test_download_error_without_status_hint(self) -> None:
        err = DescriptorDownloadError("timeout", url="https://x")
        assert "network" in err.get_recovery_hint()

    def test_parse_error_hint_names_field(self) -> None:
        err = DescriptorParseError("missing", field_name="baseUrl")
        assert "'baseUrl'" in err.get_recovery_hint()

    def test_configuration_error_stringifies_value(self) -> None:
        err = ConfigurationError("bad", field_name="http_timeout", actual_value=-1)
        assert err.context == {"field_name": "http_timeout", "actual_value": "-1"}

    def test_operator_abort_default_message(self) -> None:
        err = OperatorAbort()
        assert err.args[0] == "Aborting as requested!"
        assert err.error_code == "OPERATOR_ABORT"
        assert isinstance(err, ConnectToForgeError)
