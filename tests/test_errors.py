"""Tests for perch.errors — exception hierarchy and error messages."""

import pytest

from perch.errors import ConfigurationError, PerchError, RouteBuildError


class TestHierarchy:
    def test_configuration_error_is_perch_error(self) -> None:
        assert issubclass(ConfigurationError, PerchError)

    def test_route_build_error_is_perch_error(self) -> None:
        assert issubclass(RouteBuildError, PerchError)


class TestRouteBuildError:
    def test_message_includes_cause(self) -> None:
        err = RouteBuildError(ValueError("unknown controller"))
        assert str(err) == "Error building routes: unknown controller"

    def test_keeps_cause(self) -> None:
        cause = KeyError("users")
        assert RouteBuildError(cause).cause is cause

    def test_chained_when_raised_from(self) -> None:
        cause = RuntimeError("boom")
        with pytest.raises(RouteBuildError) as exc_info:
            raise RouteBuildError(cause) from cause
        assert exc_info.value.__cause__ is cause
