"""Tests for custom exception hierarchy."""

from property_store.exceptions import (
    CodecError,
    ConfigurationError,
    PropertyStoreError,
    RecordStoreError,
    RemoteRequestError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_property_store_error_is_exception(self) -> None:
        assert isinstance(PropertyStoreError("test"), Exception)

    def test_configuration_error_is_property_store_error(self) -> None:
        assert isinstance(ConfigurationError("test"), PropertyStoreError)

    def test_codec_error_is_value_error(self) -> None:
        err = CodecError("test")
        assert isinstance(err, PropertyStoreError)
        assert isinstance(err, ValueError)

    def test_record_store_error_is_property_store_error(self) -> None:
        assert isinstance(RecordStoreError("test"), PropertyStoreError)

    def test_remote_request_error_carries_response(self) -> None:
        err = RemoteRequestError("Title is required", status=422)
        assert isinstance(err, RecordStoreError)
        assert err.response.data == {"message": "Title is required"}
        assert err.response.status == 422

    def test_exception_message(self) -> None:
        err = RecordStoreError("Record 7 not found")
        assert str(err) == "Record 7 not found"
