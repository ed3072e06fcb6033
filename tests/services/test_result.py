"""Tests for the ServiceResult envelope."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from riffcli.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_failure_shorthand(self) -> None:
        result = ServiceResult.failure("create_function", "INVALID_CHANNEL", "bad", channel="X")
        assert result.ok is False
        assert result.op == "create_function"
        assert result.data == {}
        assert result.error == ServiceError(
            code="INVALID_CHANNEL", message="bad", detail={"channel": "X"}
        )

    def test_failure_without_detail(self) -> None:
        result = ServiceResult.failure("create_function", "INVALID_NAMESPACE", "bad")
        assert result.error is not None
        assert result.error.detail == {}

    def test_json_has_no_meta_block(self) -> None:
        dumped = ServiceResult(ok=True, op="create_function").model_dump()
        assert set(dumped) == {"ok", "op", "data", "warnings", "error"}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="create_function")
        with pytest.raises(PydanticValidationError):
            result.ok = False  # type: ignore[misc]
