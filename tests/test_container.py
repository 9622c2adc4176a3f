"""Tests for pathparam.routing.container — per-request parameters."""

import logging
import uuid
from typing import Any

import pytest

from pathparam.config import ParamConfig
from pathparam.errors import RoutingError
from pathparam.routing.component import build_path
from pathparam.routing.container import Parameters, resolve_all
from pathparam.routing.params import UUID, Double, Int32, Parameter, String
from pathparam.routing.registry import default_registry

SAMPLE_UUID = "550e8400-e29b-41d4-a716-446655440000"


class Slug(Parameter):
    convertible = String

    @classmethod
    def resolve_parameter(cls, raw: str) -> Any:
        return raw.lower()


class TestParameters:
    def test_next_in_order(self) -> None:
        params = Parameters([("int32", "42"), ("uuid", SAMPLE_UUID)])
        assert params.next(Int32) == 42
        assert params.next(UUID) == uuid.UUID(SAMPLE_UUID)
        assert params.remaining == 0

    def test_len_and_raw_values(self) -> None:
        params = Parameters([("string", "a"), ("string", "b")])
        assert len(params) == 2
        assert params.raw_values() == [("string", "a"), ("string", "b")]
        params.next(String)
        assert len(params) == 2
        assert params.remaining == 1

    def test_peek(self) -> None:
        params = Parameters([("double", "1.5")])
        assert params.peek() == ("double", "1.5")
        params.next(Double)
        assert params.peek() is None

    def test_exhausted(self) -> None:
        params = Parameters()
        with pytest.raises(RoutingError) as exc_info:
            params.next(Int32)
        assert exc_info.value.identifier == "next"
        assert "int32" in exc_info.value.reason

    def test_wrong_type_does_not_consume(self) -> None:
        params = Parameters([("uuid", SAMPLE_UUID)])
        with pytest.raises(RoutingError) as exc_info:
            params.next(Int32)
        assert exc_info.value.identifier == "next"
        assert params.remaining == 1
        assert params.next(UUID) == uuid.UUID(SAMPLE_UUID)

    def test_conversion_failure_propagates(self) -> None:
        params = Parameters([("int32", "abc")])
        with pytest.raises(RoutingError) as exc_info:
            params.next(Int32)
        assert exc_info.value.identifier == "fwi"
        assert params.remaining == 0

    def test_custom_type(self) -> None:
        params = Parameters([("slug", "Hello-World")])
        assert params.next(Slug) == "hello-world"

    def test_repr(self) -> None:
        assert "consumed=0" in repr(Parameters([("string", "x")]))


class TestParametersLogging:
    def test_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="pathparam.routing")
        params = Parameters([("int32", "abc")])
        with pytest.raises(RoutingError):
            params.next(Int32)
        messages = [r.getMessage() for r in caplog.records if r.name == "pathparam.routing"]
        assert any("'int32'" in m and "'abc'" in m and "fwi" in m for m in messages)

    def test_success_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="pathparam.routing")
        Parameters([("int32", "1")]).next(Int32)
        assert not [r for r in caplog.records if r.name == "pathparam.routing"]

    def test_failure_logging_disabled(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="pathparam.routing")
        params = Parameters([("int32", "abc")], ParamConfig(log_failures=False))
        with pytest.raises(RoutingError):
            params.next(Int32)
        assert not [r for r in caplog.records if r.name == "pathparam.routing"]

    def test_custom_logger_name(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="myapp.params")
        params = Parameters([("uuid", "nope")], ParamConfig(logger_name="myapp.params"))
        with pytest.raises(RoutingError):
            params.next(UUID)
        assert any(r.name == "myapp.params" for r in caplog.records)


class TestResolveAll:
    def test_resolves_parameters(self) -> None:
        components = build_path("users", Int32, "posts", UUID)
        resolved = resolve_all(components, ["users", "42", "posts", SAMPLE_UUID])
        assert resolved == {"int32": 42, "uuid": uuid.UUID(SAMPLE_UUID)}

    def test_constants_only(self) -> None:
        assert resolve_all(build_path("health"), ["health"]) == {}

    def test_count_mismatch(self) -> None:
        with pytest.raises(RoutingError) as exc_info:
            resolve_all(build_path("users", Int32), ["users"])
        assert exc_info.value.identifier == "count"

    def test_constant_mismatch(self) -> None:
        with pytest.raises(RoutingError) as exc_info:
            resolve_all(build_path("users", Int32), ["posts", "1"])
        assert exc_info.value.identifier == "constant"

    def test_conversion_failure(self) -> None:
        with pytest.raises(RoutingError) as exc_info:
            resolve_all(build_path("users", Int32), ["users", "9999999999999999999999"])
        assert exc_info.value.identifier == "fwi"

    def test_custom_registry(self) -> None:
        registry = default_registry()
        registry.register(Slug)
        resolved = resolve_all(build_path("posts", Slug), ["posts", "ABC"], registry)
        assert resolved == {"slug": "abc"}
