"""Cross-boundary call legality engine.

For every observed call, resolves the candidate target boundaries and
decides whether the call is permitted under the hierarchical dependency
and export rules. Enabled when config.check_calls is set.

Resolution:
    caller module → from boundary (check_out disabled: call skipped)
    callee module → to boundary, plus parent(to) when the callee is the
    root module of `to` (a parent may re-export its child's root module)

A call is legal if any candidate accepts it. Otherwise the error of the
first candidate is reported (primary target before re-exporting parent).
"""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Self, assert_never

from archbound.application.validators._base import BaseValidator
from archbound.domain.exports import exports_module
from archbound.domain.model.enums import DependencyKind, ExportMatching
from archbound.domain.model.errors import (
    ForbiddenCall,
    InvalidExternalDependencyCall,
    NotExported,
    RuntimeDependencyMismatch,
)

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from archbound.domain.model.boundary import Boundary
    from archbound.domain.model.call import Call
    from archbound.domain.model.configuration import CheckConfig
    from archbound.domain.model.errors import BoundaryError, CallError
    from archbound.domain.view import BoundaryView


class Relation(Enum):
    """How a caller boundary relates to a distinct target boundary."""

    CHILD = auto()  # target is a direct child of caller
    NEIGHBOR = auto()  # sibling, or target is caller's parent
    IMPLICIT_EXTERNAL = auto()  # other app, not under external checking
    GENERAL = auto()  # everything else: inherited dependencies decide


def external_checked(view: BoundaryView, from_: Boundary, app: str, mode: DependencyKind) -> bool:
    """Check if calls from `from_` into `app` require explicit permission.

    Strict boundaries check every external app. Otherwise the (app, mode)
    pair must be listed by `from_` or an ancestor in its policy chain.
    """
    if from_.is_strict:
        return True
    return any(b.checks_external(app, mode) for b in view.policy_chain(from_))


def relation(view: BoundaryView, from_: Boundary, to: Boundary, mode: DependencyKind) -> Relation:
    """Classify the caller → target relationship for a call of the given mode."""
    if view.parents.get(to.name) == from_.name:
        return Relation.CHILD
    if view.siblings(from_, to) or view.parents.get(from_.name) == to.name:
        return Relation.NEIGHBOR
    if to.app != from_.app and not external_checked(view, from_, to.app, mode):
        return Relation.IMPLICIT_EXTERNAL
    return Relation.GENERAL


class CallValidator(BaseValidator):
    """Call legality engine.

    Per candidate `to`, for caller `from`:
    - to.check_in disabled, or to == from: legal
    - otherwise the relation decides which dependencies may authorize it,
      then `to` must export the callee module

    Error selection when no dependency authorizes the call:
    - RuntimeDependencyMismatch: runtime call, `from` itself declares only
      compile edges to `to` (ancestor edges never count here)
    - ForbiddenCall: otherwise
    """

    name = "calls"

    def __init__(self, matching: ExportMatching = ExportMatching.PREFIX) -> None:
        """Initialize with export matching mode.

        Args:
            matching: How subtree export rules match modules
        """
        self._matching = matching

    def validate(
        self,
        view: BoundaryView,
        calls: Sequence[Call],
    ) -> tuple[BoundaryError, ...]:
        errors: list[BoundaryError] = []
        for call in calls:
            error = self.check_call(view, call)
            if error is not None:
                errors.append(error)
        return tuple(errors)

    def check_call(self, view: BoundaryView, call: Call) -> CallError | None:
        """Check a single call.

        Args:
            view: Boundary view
            call: Observed call

        Returns:
            First error found, or None if the call is legal
        """
        from_ = view.boundary_for(call.caller_module)
        if from_ is None or not from_.check_out:
            return None

        first_error: CallError | None = None
        resolved = False

        for to in self._candidates(view, call):
            resolved = True
            error = self._check_candidate(view, call, from_, to)
            if error is None:
                return None
            if first_error is None:
                first_error = error

        if not resolved:
            return self._check_unresolved(view, call, from_)
        return first_error

    def _candidates(self, view: BoundaryView, call: Call) -> Iterator[Boundary]:
        """Yield target candidates lazily: primary, then re-exporting parent."""
        to = view.boundary_for(call.callee_module)
        if to is None:
            return
        yield to

        if call.callee_module == to.name:
            parent = view.parent_of(to)
            if parent is not None:
                yield parent

    def _check_unresolved(
        self,
        view: BoundaryView,
        call: Call,
        from_: Boundary,
    ) -> CallError | None:
        """Callee in no boundary: only strictly checked external apps fail."""
        callee_app = view.app_of(call.callee_module)
        if callee_app is None or callee_app == from_.app:
            return None
        if external_checked(view, from_, callee_app, call.mode):
            return InvalidExternalDependencyCall(call, from_.name)
        return None

    def _check_candidate(
        self,
        view: BoundaryView,
        call: Call,
        from_: Boundary,
        to: Boundary,
    ) -> CallError | None:
        if not to.check_in or to.name == from_.name:
            return None

        error = self._cross_call_error(view, call, from_, to)
        if error is not None:
            return error

        if not exports_module(to, call.callee_module, self._matching):
            return NotExported(call, from_.name, to.name)
        return None

    def _cross_call_error(
        self,
        view: BoundaryView,
        call: Call,
        from_: Boundary,
        to: Boundary,
    ) -> CallError | None:
        match relation(view, from_, to, call.mode):
            case Relation.CHILD | Relation.IMPLICIT_EXTERNAL:
                return None
            case Relation.NEIGHBOR:
                scope: tuple[Boundary, ...] = (from_,)
            case Relation.GENERAL:
                scope = view.policy_chain(from_)
            case unreachable:
                assert_never(unreachable)

        edges = [dep for boundary in scope for dep in boundary.dependencies_on(to.name)]
        macro = view.is_macro(call.callee)
        if any(dep.authorizes(call.mode, macro=macro) for dep in edges):
            return None

        # Unauthorized, so any own edge to `to` is COMPILE only
        if call.mode is DependencyKind.RUNTIME and from_.dependencies_on(to.name):
            return RuntimeDependencyMismatch(call, from_.name, to.name)
        return ForbiddenCall(call, from_.name, to.name)

    @classmethod
    def from_config(cls, config: CheckConfig) -> Self | None:
        """Create if call checking is enabled."""
        if not config.check_calls:
            return None
        return cls(config.export_matching)
