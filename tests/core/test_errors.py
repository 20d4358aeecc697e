"""Tests for error types and codes."""

import pytest

from codeintel.core.errors import (
    AnalysisError,
    CodeIntelError,
    ConfigError,
    ErrorCode,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.UNSUPPORTED_LANGUAGE, 3000),
            (ErrorCode.LANGUAGE_INIT_ERROR, 3000),
            (ErrorCode.QUERY_COMPILATION_ERROR, 3000),
            (ErrorCode.PARSE_FAILURE, 3000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000

    def test_only_raised_codes_exist(self) -> None:
        """Every code has a factory that raises it."""
        assert {code.name for code in ErrorCode} == {
            "CONFIG_PARSE_ERROR",
            "CONFIG_INVALID_VALUE",
            "UNSUPPORTED_LANGUAGE",
            "LANGUAGE_INIT_ERROR",
            "QUERY_COMPILATION_ERROR",
            "PARSE_FAILURE",
        }


class TestCodeIntelError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = CodeIntelError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_human_readable(self) -> None:
        """Error string representation is human readable."""
        # Given
        error = AnalysisError.parse_failure("go")

        # When
        result = str(error)

        # Then
        assert result == "[3004] PARSE_FAILURE: Parser produced no tree for go source"

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        """Typed errors propagate like any exception."""
        with pytest.raises(CodeIntelError) as exc_info:
            raise AnalysisError.unsupported_language("cobol")

        assert exc_info.value.code == ErrorCode.UNSUPPORTED_LANGUAGE


class TestConfigError:
    """ConfigError factory method tests."""

    @pytest.mark.parametrize(
        ("factory", "kwargs", "expected_code"),
        [
            (
                "parse_error",
                {"path": "/foo", "reason": "bad yaml"},
                ErrorCode.CONFIG_PARSE_ERROR,
            ),
            (
                "invalid_value",
                {"field": "analysis.scope_capture", "value": "", "reason": "empty"},
                ErrorCode.CONFIG_INVALID_VALUE,
            ),
        ],
    )
    def test_given_factory_when_called_then_correct_code(
        self, factory: str, kwargs: dict[str, object], expected_code: ErrorCode
    ) -> None:
        """Factory methods produce errors with correct error codes."""
        # Given
        factory_method = getattr(ConfigError, factory)

        # When
        error = factory_method(**kwargs)

        # Then
        assert error.code == expected_code


class TestAnalysisError:
    """AnalysisError factory method tests."""

    @pytest.mark.parametrize(
        ("factory", "args", "expected_code"),
        [
            ("unsupported_language", ("cobol",), ErrorCode.UNSUPPORTED_LANGUAGE),
            ("language_init", ("go", "ABI mismatch"), ErrorCode.LANGUAGE_INIT_ERROR),
            ("query_compilation", ("go", "Invalid node type"), ErrorCode.QUERY_COMPILATION_ERROR),
            ("parse_failure", ("go",), ErrorCode.PARSE_FAILURE),
        ],
    )
    def test_given_factory_when_called_then_correct_code(
        self, factory: str, args: tuple[str, ...], expected_code: ErrorCode
    ) -> None:
        """Each error kind has its own code and names the language."""
        # When
        error = getattr(AnalysisError, factory)(*args)

        # Then
        assert error.code == expected_code
        assert error.details["language"] == args[0]

    def test_given_query_compilation_when_created_then_keeps_diagnostic(self) -> None:
        """The compiler diagnostic is surfaced in message and details."""
        # Given
        reason = "Invalid node type at row 1, column 2: not_a_node"

        # When
        error = AnalysisError.query_compilation("go", reason)

        # Then
        assert error.details["reason"] == reason
        assert reason in error.message
