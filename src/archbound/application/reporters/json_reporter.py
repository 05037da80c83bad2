"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from archbound.domain.model.errors import (
    AncestorWithIgnoredChecks,
    CheckInDisabledDependency,
    Cycle,
    ExportNotInBoundary,
    ForbiddenCall,
    ForbiddenDependency,
    InvalidConfig,
    InvalidExternalDependencyCall,
    InvalidIgnores,
    NotExported,
    RuntimeDependencyMismatch,
    UnclassifiedModule,
    UnknownDependency,
    UnknownExport,
)

if TYPE_CHECKING:
    from archbound.domain.model.check_result import CheckResult
    from archbound.domain.model.errors import BoundaryError


class JSONReporter:
    """JSON reporter for CI/CD integration and parsing by other tools."""

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation (default: 2, None for compact)
        """
        self._indent = indent

    def report(self, result: CheckResult) -> str:
        """Format check result as JSON.

        Args:
            result: Complete check result

        Returns:
            JSON document, newline terminated
        """
        return json.dumps(self._result_to_dict(result), indent=self._indent) + "\n"

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        by_kind = sorted(result.count_by_kind().items(), key=lambda kv: kv[0].value)
        return {
            "app": result.app,
            "passed": result.passed,
            "summary": {
                "error_count": result.error_count,
                "by_kind": {kind.value: n for kind, n in by_kind},
            },
            "errors": [self._error_to_dict(e) for e in result.errors],
            "stats": {
                "boundaries_checked": result.stats.boundaries_checked,
                "modules_checked": result.stats.modules_checked,
                "calls_checked": result.stats.calls_checked,
                "validators_run": result.stats.validators_run,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
        }

    def _error_to_dict(self, error: BoundaryError) -> dict[str, object]:
        data: dict[str, object] = {
            "kind": error.kind.value,
            "message": error.message,
            "location": (
                {"file": str(error.location.file), "line": error.location.line}
                if error.location is not None
                else None
            ),
        }
        data.update(self._details(error))
        return data

    def _details(self, error: BoundaryError) -> dict[str, object]:
        """Kind-specific payload."""
        match error:
            case InvalidConfig():
                return {"boundary": error.boundary, "reason": error.reason}
            case InvalidIgnores():
                return {"boundary": error.boundary}
            case AncestorWithIgnoredChecks():
                return {"boundary": error.boundary, "ancestor": error.ancestor}
            case UnknownDependency() | CheckInDisabledDependency() | ForbiddenDependency():
                return {"dependency": error.name}
            case UnknownExport():
                return {"module": error.module}
            case ExportNotInBoundary():
                return {"module": error.module, "boundary": error.boundary}
            case Cycle():
                return {"boundaries": list(error.boundaries)}
            case UnclassifiedModule():
                return {"module": error.module}
            case (
                InvalidExternalDependencyCall()
                | ForbiddenCall()
                | RuntimeDependencyMismatch()
                | NotExported()
            ):
                return {
                    "from_boundary": error.from_boundary,
                    "to_boundary": error.to_boundary,
                    "caller": error.call.caller_module,
                    "callee": str(error.call.callee),
                    "mode": error.call.mode.name.lower(),
                }
