"""Tests for application/services/checker.py."""

import io
import logging

import pytest

from paramcheck.application.reporters.plain_text import PlainTextReporter
from paramcheck.application.services.checker import ParameterChecker
from paramcheck.domain.exceptions import (
    DuplicateParameterError,
    InvalidNameError,
    ReferenceResolutionError,
    SchemaValidationError,
)
from paramcheck.domain.model.check_result import CheckResult
from paramcheck.domain.model.context import ValidationContext
from paramcheck.domain.model.parameter import new_path_parameter, new_query_parameter
from paramcheck.domain.model.schema import Schema
from paramcheck.infrastructure.adapters.components_resolver import ComponentsResolver
from paramcheck.infrastructure.adapters.jsonschema_validator import JSONSchemaValidator
from tests.factories import make_collection, make_parameter, make_unresolved


class RecordingReporter:
    """ReporterProtocol stub collecting results."""

    def __init__(self) -> None:
        self.results: list[CheckResult] = []

    def report(self, result: CheckResult) -> None:
        self.results.append(result)


class ExplodingValidator:
    """SchemaValidatorProtocol stub raising a non-domain error."""

    def validate(self, schema: Schema) -> None:
        raise RuntimeError("validator crashed")


class TestParameterCheckerCreation:
    """Tests for construction and factories."""

    def test_default_context_is_empty(self) -> None:
        checker = ParameterChecker()
        assert checker.context == ValidationContext()

    def test_with_defaults_without_components(self) -> None:
        checker = ParameterChecker.with_defaults()
        assert isinstance(checker.context.schema_validator, JSONSchemaValidator)
        assert checker.context.resolver is None

    def test_with_defaults_with_components(self) -> None:
        checker = ParameterChecker.with_defaults({"parameters": {}})
        assert isinstance(checker.context.resolver, ComponentsResolver)


class TestParameterCheckerCheck:
    """Tests for check()."""

    def test_passing_collection(self) -> None:
        a = new_query_parameter("a")
        b = new_path_parameter("b")
        result = ParameterChecker().check(make_collection(a, b), subject="GET /x/{b}")
        assert result.passed
        assert result.subject == "GET /x/{b}"
        assert result.parameters == (a, b)
        assert result.unresolved == ()
        assert result.duration_ms >= 0

    def test_default_subject(self) -> None:
        assert ParameterChecker().check(make_collection()).subject == "parameters"

    def test_duplicate_captured(self) -> None:
        collection = make_collection(new_query_parameter("id"), new_query_parameter("id"))
        result = ParameterChecker().check(collection)
        assert not result.passed
        assert isinstance(result.error, DuplicateParameterError)

    def test_unresolved_without_resolver_captured(self) -> None:
        collection = make_collection(new_query_parameter("a"), make_unresolved("limit"))
        result = ParameterChecker().check(collection)
        assert isinstance(result.error, ReferenceResolutionError)
        assert result.unresolved == ("#/components/parameters/limit",)
        assert len(result.parameters) == 1

    def test_unresolved_resolved_through_components(self) -> None:
        components = {"parameters": {"limit": {"name": "limit", "in": "query", "schema": {"type": "integer"}}}}
        collection = make_collection(new_query_parameter("offset"), make_unresolved("limit"))
        result = ParameterChecker.with_defaults(components).check(collection)
        assert result.passed
        assert [p.name for p in result.parameters] == ["offset", "limit"]
        assert result.unresolved == ("#/components/parameters/limit",)

    def test_invalid_schema_captured(self) -> None:
        collection = make_collection(make_parameter(schema=Schema({"type": "strin"})))
        result = ParameterChecker.with_defaults().check(collection)
        assert isinstance(result.error, SchemaValidationError)
        assert result.error_type == "SchemaValidationError"

    def test_non_domain_error_propagates(self) -> None:
        checker = ParameterChecker(ValidationContext(schema_validator=ExplodingValidator()))
        collection = make_collection(make_parameter(schema=Schema({"type": "string"})))
        with pytest.raises(RuntimeError, match="validator crashed"):
            checker.check(collection)

    def test_reporter_called_with_result(self) -> None:
        reporter = RecordingReporter()
        result = ParameterChecker(reporter=reporter).check(make_collection(new_query_parameter("a")))
        assert reporter.results == [result]

    def test_plain_text_reporter_integration(self) -> None:
        output = io.StringIO()
        checker = ParameterChecker(reporter=PlainTextReporter(output))
        checker.check(make_collection(make_parameter(name="")), subject="GET /pets")
        assert "Error: InvalidNameError" in output.getvalue()

    def test_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        collection = make_collection(new_query_parameter("id"), new_query_parameter("id"))
        with caplog.at_level(logging.DEBUG, logger="paramcheck"):
            ParameterChecker().check(collection, subject="GET /pets")
        assert "GET /pets: DuplicateParameterError" in caplog.text


class TestParameterCheckerParameters:
    """Tests for CheckResult.parameters listing."""

    def test_only_references_listed_when_resolved(self) -> None:
        components = {
            "parameters": {
                "limit": {"name": "limit", "in": "query"},
                "offset": {"name": "offset", "in": "query"},
            }
        }
        collection = make_collection(make_unresolved("limit"), make_unresolved("offset"))
        result = ParameterChecker.with_defaults(components).check(collection)
        assert result.passed
        assert [p.name for p in result.parameters] == ["limit", "offset"]

    def test_unresolvable_reference_left_out(self) -> None:
        components = {"parameters": {"limit": {"name": "limit", "in": "query"}}}
        collection = make_collection(make_unresolved("limit"), make_unresolved("missing"))
        result = ParameterChecker.with_defaults(components).check(collection)
        assert isinstance(result.error, ReferenceResolutionError)
        assert [p.name for p in result.parameters] == ["limit"]
        assert len(result.unresolved) == 2


class TestParameterCheckerHelpers:
    """Tests for check_parameter() and check_all()."""

    def test_check_parameter_default_subject(self) -> None:
        result = ParameterChecker().check_parameter(new_path_parameter("id"))
        assert result.subject == "path:id"
        assert result.passed

    def test_check_parameter_error(self) -> None:
        result = ParameterChecker().check_parameter(make_parameter(name=""), subject="blank")
        assert result.subject == "blank"
        assert isinstance(result.error, InvalidNameError)

    def test_check_all_in_mapping_order(self) -> None:
        operations = {
            "GET /a": make_collection(new_query_parameter("q")),
            "GET /b": make_collection(new_query_parameter("q"), new_query_parameter("q")),
        }
        results = ParameterChecker().check_all(operations)
        assert [r.subject for r in results] == ["GET /a", "GET /b"]
        assert [r.passed for r in results] == [True, False]
