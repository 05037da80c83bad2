"""Plain text reporter.

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archbound.domain.model.check_result import CheckResult
    from archbound.domain.model.errors import BoundaryError


class PlainTextReporter:
    """Plain text reporter: one numbered entry per error."""

    def report(self, result: CheckResult) -> str:
        """Format check result as plain text.

        Args:
            result: Complete check result

        Returns:
            Report text, newline terminated
        """
        lines: list[str] = []
        lines.extend(self._header(result))
        lines.extend(self._summary(result))
        if result.errors:
            lines.extend(self._errors(result.errors))
        lines.extend(self._footer(result))
        return "\n".join(lines) + "\n"

    def _header(self, result: CheckResult) -> list[str]:
        return [
            "=" * 70,
            f"Boundary Check Results: {result.app}",
            "=" * 70,
        ]

    def _summary(self, result: CheckResult) -> list[str]:
        stats = result.stats
        lines = [
            "",
            "Summary:",
            f"  Boundaries: {stats.boundaries_checked}",
            f"  Modules: {stats.modules_checked}",
            f"  Calls: {stats.calls_checked}",
            f"  Errors: {result.error_count}",
        ]
        for kind, count in sorted(result.count_by_kind().items(), key=lambda kv: kv[0].value):
            lines.append(f"    {kind.value}: {count}")
        lines.append(f"  Status: {'PASS' if result.passed else 'FAIL'}")
        return lines

    def _errors(self, errors: tuple[BoundaryError, ...]) -> list[str]:
        lines = ["", "-" * 70, f"Errors ({len(errors)}):", "-" * 70]
        for i, error in enumerate(errors, start=1):
            lines.append("")
            lines.append(f"{i}. [{error.kind.value}] {error.message}")
            if error.location is not None:
                lines.append(f"   at {error.location}")
        return lines

    def _footer(self, result: CheckResult) -> list[str]:
        status = "PASSED" if result.passed else "FAILED"
        return ["", "=" * 70, f"Result: {status}", "=" * 70]
