"""Export membership test."""

from __future__ import annotations

from typing import TYPE_CHECKING

from archbound.domain.model.boundary import ExactExport, SubtreeExport
from archbound.domain.model.enums import ExportMatching

if TYPE_CHECKING:
    from archbound.domain.model.boundary import Boundary, ExportRule


def is_under(module: str, root: str, matching: ExportMatching = ExportMatching.PREFIX) -> bool:
    """Check if module lies under root in the module hierarchy.

    PREFIX is a raw string-prefix test on the dotted path: root "app.Ba"
    matches "app.Bar". SEGMENT only matches root itself or root + "." paths.
    """
    match matching:
        case ExportMatching.PREFIX:
            return module.startswith(root)
        case ExportMatching.SEGMENT:
            return module == root or module.startswith(root + ".")


def rule_matches(
    rule: ExportRule,
    module: str,
    matching: ExportMatching = ExportMatching.PREFIX,
) -> bool:
    """Check if a single export rule exports module."""
    match rule:
        case ExactExport(module=exported):
            return exported == module
        case SubtreeExport(root=root, except_=excluded):
            return is_under(module, root, matching) and module not in excluded


def exports_module(
    boundary: Boundary,
    module: str,
    matching: ExportMatching = ExportMatching.PREFIX,
) -> bool:
    """Check if boundary exports module.

    A boundary exports its own root module, everything when implicit,
    and whatever one of its export rules matches.
    """
    if boundary.implicit or module == boundary.name:
        return True
    return any(rule_matches(rule, module, matching) for rule in boundary.exports)
