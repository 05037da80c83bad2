"""Tests for services/boundary_checker.py."""

import io
import logging
from collections.abc import Sequence

import pytest

from archbound.application.reporters.plain_text import PlainTextReporter
from archbound.application.services.boundary_checker import BoundaryChecker
from archbound.application.services.view_cache import ViewCache
from archbound.application.validators import DependencyValidator
from archbound.domain.exceptions import BoundaryViolationError, ViewConstructionError
from archbound.domain.model.boundary import Boundary
from archbound.domain.model.call import Call
from archbound.domain.model.configuration import CheckConfig
from archbound.domain.model.enums import ErrorKind
from archbound.domain.model.errors import (
    Cycle,
    NotExported,
    UnclassifiedModule,
    UnknownDependency,
)
from archbound.domain.model.module import ModuleInfo
from archbound.infrastructure.adapters.in_memory import InMemoryProvider
from tests.factories import DEFAULT_APP, make_boundary, make_call, owned_modules


def _provider() -> InMemoryProvider:
    """Two top-level boundaries calling each other, one unknown dependency."""
    a = make_boundary("a", deps=["b", "ghost"])
    b = make_boundary("b", deps=["a"])
    modules = (
        *owned_modules(a, "x"),
        *owned_modules(b, "y"),
        ModuleInfo(name="loose", app=DEFAULT_APP),
    )
    calls = (make_call("b.y", "a.x"), make_call("a.x", "b"))
    return InMemoryProvider(app=DEFAULT_APP, boundaries=(a, b), modules=modules, calls=calls)


class CountingProvider:
    """Provider wrapper counting how often boundaries are listed."""

    def __init__(self, inner: InMemoryProvider) -> None:
        self._inner = inner
        self.boundary_reads = 0

    @property
    def app(self) -> str:
        return self._inner.app

    def list_boundaries(self) -> Sequence[Boundary]:
        self.boundary_reads += 1
        return self._inner.list_boundaries()

    def list_modules(self) -> Sequence[ModuleInfo]:
        return self._inner.list_modules()

    def classify(self, module: str) -> str | None:
        return self._inner.classify(module)

    def unclassified_modules(self) -> Sequence[str]:
        return self._inner.unclassified_modules()

    def list_calls(self) -> Sequence[Call]:
        return self._inner.list_calls()


class TestBoundaryCheckerFactories:
    """Tests for factory methods."""

    def test_with_defaults_runs_every_validator(self) -> None:
        assert BoundaryChecker.with_defaults().validator_count == 7

    def test_from_config_drops_disabled_validators(self) -> None:
        config = CheckConfig(check_calls=False, check_cycles=False)

        assert BoundaryChecker.from_config(config).validator_count == 5

    def test_no_validators(self) -> None:
        result = BoundaryChecker().check(_provider())

        assert result.passed
        assert result.stats.validators_run == 0


class TestBoundaryCheckerCheck:
    """Tests for BoundaryChecker.check."""

    def test_errors_concatenated_in_validator_order(self) -> None:
        result = BoundaryChecker.with_defaults().check(_provider())

        assert [type(e) for e in result.errors] == [
            UnknownDependency,
            Cycle,
            UnclassifiedModule,
            NotExported,
        ]

    def test_error_details(self) -> None:
        result = BoundaryChecker.with_defaults().check(_provider())

        assert result.errors_of(ErrorKind.UNKNOWN_DEPENDENCY)[0].name == "ghost"
        assert result.errors_of(ErrorKind.CYCLE) == (Cycle(("a", "b")),)
        assert result.errors_of(ErrorKind.UNCLASSIFIED_MODULE) == (UnclassifiedModule("loose"),)

    def test_stats(self) -> None:
        result = BoundaryChecker.with_defaults().check(_provider())

        assert result.app == DEFAULT_APP
        assert result.stats.boundaries_checked == 2
        assert result.stats.modules_checked == 5
        assert result.stats.calls_checked == 2
        assert result.stats.validators_run == 7
        assert result.stats.analysis_time_ms >= 0

    def test_clean_app_passes(self) -> None:
        a = make_boundary("a", deps=["b"])
        b = make_boundary("b", exports=["b.api"])
        provider = InMemoryProvider(
            app=DEFAULT_APP,
            boundaries=(a, b),
            modules=(*owned_modules(a), *owned_modules(b, "api")),
            calls=(make_call("a", "b.api"),),
        )

        result = BoundaryChecker.with_defaults().check(provider)

        assert result.passed
        result.assert_passed()

    def test_assert_passed_raises_on_errors(self) -> None:
        result = BoundaryChecker.with_defaults().check(_provider())

        with pytest.raises(BoundaryViolationError, match="Found 4 boundary error"):
            result.assert_passed()

    def test_idempotent(self) -> None:
        checker = BoundaryChecker.with_defaults()

        assert checker.check(_provider()).errors == checker.check(_provider()).errors

    def test_custom_validators(self) -> None:
        checker = BoundaryChecker(validators=[DependencyValidator()])

        result = checker.check(_provider())

        assert [e.kind for e in result.errors] == [ErrorKind.UNKNOWN_DEPENDENCY]

    def test_view_construction_error_propagates(self) -> None:
        provider = InMemoryProvider(
            app=DEFAULT_APP,
            boundaries=(make_boundary("a"), make_boundary("a")),
        )

        with pytest.raises(ViewConstructionError, match="duplicate boundary"):
            BoundaryChecker.with_defaults().check(provider)

    def test_logs_summary(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="archbound"):
            BoundaryChecker.with_defaults().check(_provider())

        assert "boundary check of my_app: 4 error(s)" in caplog.text

    def test_logs_errors_per_validator(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="archbound"):
            BoundaryChecker.with_defaults().check(_provider())

        assert "dependencies: 1 error(s)" in caplog.text
        assert "calls: 1 error(s)" in caplog.text
        assert "built view of app my_app: 2 boundaries, 5 modules" in caplog.text


class TestBoundaryCheckerParallel:
    """Parallel execution yields the same result as sequential."""

    def test_same_errors_as_sequential(self) -> None:
        sequential = BoundaryChecker.from_config(CheckConfig())
        parallel = BoundaryChecker.from_config(CheckConfig(parallel=True, max_workers=4))

        assert parallel.check(_provider()).errors == sequential.check(_provider()).errors

    def test_single_worker(self) -> None:
        checker = BoundaryChecker.from_config(CheckConfig(parallel=True, max_workers=1))

        assert checker.check(_provider()).error_count == 4


class TestBoundaryCheckerCache:
    """Tests for view caching."""

    def test_view_built_once_per_app(self) -> None:
        provider = CountingProvider(_provider())
        cache = ViewCache()
        checker = BoundaryChecker.with_defaults(cache=cache)

        first = checker.check(provider)
        second = checker.check(provider)

        assert provider.boundary_reads == 1
        assert first.errors == second.errors
        assert DEFAULT_APP in cache

    def test_without_cache_view_rebuilt(self) -> None:
        provider = CountingProvider(_provider())
        checker = BoundaryChecker.with_defaults()

        checker.check(provider)
        checker.check(provider)

        assert provider.boundary_reads == 2

    def test_cache_shared_between_checkers(self) -> None:
        provider = CountingProvider(_provider())
        cache = ViewCache()

        BoundaryChecker.with_defaults(cache=cache).check(provider)
        BoundaryChecker.from_config(CheckConfig(check_calls=False), cache=cache).check(provider)

        assert provider.boundary_reads == 1

    def test_evicted_view_rebuilt(self) -> None:
        provider = CountingProvider(_provider())
        cache = ViewCache()
        checker = BoundaryChecker.with_defaults(cache=cache)

        checker.check(provider)
        cache.evict(DEFAULT_APP)
        checker.check(provider)

        assert provider.boundary_reads == 2


class TestBoundaryCheckerReporting:
    """Tests for reporter output."""

    def test_report_written_to_output(self) -> None:
        output = io.StringIO()
        checker = BoundaryChecker.from_config(
            CheckConfig(),
            reporter=PlainTextReporter(),
            output=output,
        )

        checker.check(_provider())

        text = output.getvalue()
        assert "Boundary Check Results: my_app" in text
        assert "FAILED" in text

    def test_no_reporter_no_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        BoundaryChecker.with_defaults().check(_provider())

        assert capsys.readouterr().out == ""

    def test_report_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        BoundaryChecker.with_defaults(reporter=PlainTextReporter()).check(_provider())

        assert "Boundary Check Results: my_app" in capsys.readouterr().out
