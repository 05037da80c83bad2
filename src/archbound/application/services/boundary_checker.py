"""Main facade for boundary checking.

BoundaryChecker is the primary entry point: it builds one immutable
BoundaryView per run, runs every enabled validator against it and the
observed calls, and concatenates their errors into a CheckResult.
"""

from __future__ import annotations

import logging
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Self, TextIO

from archbound.application.validators import validators_from_config
from archbound.domain.model.check_result import CheckResult
from archbound.domain.model.check_stats import CheckStats
from archbound.domain.model.configuration import CheckConfig
from archbound.domain.view import BoundaryView

if TYPE_CHECKING:
    from collections.abc import Sequence

    from archbound.application.services.view_cache import ViewCache
    from archbound.domain.model.call import Call
    from archbound.domain.model.errors import BoundaryError
    from archbound.domain.ports.provider import BoundaryProvider
    from archbound.domain.ports.reporter import ReporterProtocol
    from archbound.domain.ports.validator import ValidatorProtocol

logger = logging.getLogger(__name__)


class BoundaryChecker:
    """Main facade for boundary checking.

    Composition-based: accepts validators, reporter and view cache as
    dependencies. Validation is pure: the same input always yields the
    same errors in the same order, sequential or parallel.

    Factory methods:
    - with_defaults(): Validators enabled by CheckConfig()
    - from_config(): Validators based on a CheckConfig

    Example:
        checker = BoundaryChecker.with_defaults()
        result = checker.check(provider)
        if not result.passed:
            print(f"Errors: {result.error_count}")
    """

    def __init__(
        self,
        *,
        validators: Sequence[ValidatorProtocol] = (),
        config: CheckConfig | None = None,
        reporter: ReporterProtocol | None = None,
        output: TextIO | None = None,
        cache: ViewCache | None = None,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            validators: Validators to run, in report order
            config: Execution settings (parallel, max_workers)
            reporter: Optional reporter, output written after each check
            output: Report destination (default: sys.stdout)
            cache: Optional caller-owned view cache
        """
        self._validators = tuple(validators)
        self._config = config or CheckConfig()
        self._reporter = reporter
        self._output = output
        self._cache = cache

    @classmethod
    def with_defaults(
        cls,
        *,
        reporter: ReporterProtocol | None = None,
        cache: ViewCache | None = None,
    ) -> Self:
        """Create checker with default validators.

        Args:
            reporter: Optional reporter
            cache: Optional view cache

        Returns:
            BoundaryChecker with default validators
        """
        return cls.from_config(CheckConfig(), reporter=reporter, cache=cache)

    @classmethod
    def from_config(
        cls,
        config: CheckConfig,
        *,
        reporter: ReporterProtocol | None = None,
        output: TextIO | None = None,
        cache: ViewCache | None = None,
    ) -> Self:
        """Create checker with validators based on config.

        Args:
            config: Check configuration
            reporter: Optional reporter
            output: Report destination
            cache: Optional view cache

        Returns:
            BoundaryChecker with config-based validators
        """
        return cls(
            validators=validators_from_config(config),
            config=config,
            reporter=reporter,
            output=output,
            cache=cache,
        )

    def build_view(self, provider: BoundaryProvider) -> BoundaryView:
        """Build the boundary view of the provider's app, or reuse a cached one.

        Raises:
            ViewConstructionError: If provider data cannot form a view
        """
        if self._cache is not None:
            cached = self._cache.get(provider.app)
            if cached is not None:
                return cached

        view = BoundaryView.build(
            provider.app,
            provider.list_boundaries(),
            provider.list_modules(),
            provider.unclassified_modules(),
        )
        logger.debug(
            "built view of app %s: %d boundaries, %d modules",
            view.app,
            len(view.boundaries),
            len(view.modules),
        )

        if self._cache is not None:
            self._cache.put(view)
        return view

    def check(self, provider: BoundaryProvider) -> CheckResult:
        """Run all validators against the provider's data.

        Args:
            provider: Module/call provider for the app under check

        Returns:
            CheckResult with all errors and stats

        Raises:
            ViewConstructionError: If provider data cannot form a view
        """
        view = self.build_view(provider)
        return self.check_view(view, tuple(provider.list_calls()))

    def check_view(self, view: BoundaryView, calls: Sequence[Call]) -> CheckResult:
        """Run all validators against an already built view.

        Args:
            view: Boundary view
            calls: Observed calls

        Returns:
            CheckResult with all errors and stats
        """
        start_time = time.perf_counter()

        errors = self._run_validators(view, calls)

        elapsed = time.perf_counter() - start_time
        result = CheckResult(
            app=view.app,
            errors=errors,
            stats=CheckStats(
                boundaries_checked=len(view.boundaries),
                modules_checked=len(view.modules),
                calls_checked=len(calls),
                validators_run=len(self._validators),
                analysis_time_ms=elapsed * 1000,
            ),
        )
        logger.info(
            "boundary check of %s: %d error(s) from %d validator(s) in %.1f ms",
            view.app,
            result.error_count,
            len(self._validators),
            result.stats.analysis_time_ms,
        )

        if self._reporter is not None:
            output = self._output if self._output is not None else sys.stdout
            output.write(self._reporter.report(result))

        return result

    def _run_validators(
        self,
        view: BoundaryView,
        calls: Sequence[Call],
    ) -> tuple[BoundaryError, ...]:
        """Run all validators and concatenate errors in validator order."""
        if self._config.parallel and len(self._validators) > 1:
            with ThreadPoolExecutor(max_workers=self._config.max_workers) as pool:
                results = list(pool.map(lambda v: v.validate(view, calls), self._validators))
        else:
            results = [validator.validate(view, calls) for validator in self._validators]

        all_errors: list[BoundaryError] = []
        for validator, errors in zip(self._validators, results, strict=True):
            name = getattr(validator, "name", type(validator).__name__)
            logger.debug("%s: %d error(s)", name, len(errors))
            all_errors.extend(errors)

        return tuple(all_errors)

    @property
    def validator_count(self) -> int:
        """Number of configured validators."""
        return len(self._validators)
