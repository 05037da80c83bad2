"""Tests for validators/cycle_validator.py."""

import pytest

from archbound.application.validators.cycle_validator import CycleValidator
from archbound.domain.model.configuration import CheckConfig
from archbound.domain.model.errors import Cycle
from tests.factories import COMPILE, make_boundary, make_view


class TestCycleValidatorFromConfig:
    """Tests for CycleValidator.from_config."""

    def test_enabled_by_default(self) -> None:
        assert isinstance(CycleValidator.from_config(CheckConfig()), CycleValidator)

    def test_disabled(self) -> None:
        assert CycleValidator.from_config(CheckConfig(check_cycles=False)) is None

    def test_invalid_max_length_raises(self) -> None:
        with pytest.raises(ValueError, match="max_length must be >= 2"):
            CycleValidator(max_length=1)


class TestCycleValidatorValidate:
    """Tests for CycleValidator.validate."""

    def test_no_cycles(self) -> None:
        view = make_view(make_boundary("a", deps=["b"]), make_boundary("b", deps=["c"]), make_boundary("c"))

        assert CycleValidator().validate(view, ()) == ()

    def test_triangle_reported_once(self) -> None:
        view = make_view(
            make_boundary("a", deps=["b"]),
            make_boundary("b", deps=["c"]),
            make_boundary("c", deps=["a"]),
        )

        result = CycleValidator().validate(view, ())

        assert len(result) == 1
        assert isinstance(result[0], Cycle)
        assert result[0].vertex_set == frozenset({"a", "b", "c"})

    def test_edge_kind_irrelevant(self) -> None:
        view = make_view(make_boundary("a", deps=[("b", COMPILE)]), make_boundary("b", deps=["a"]))

        result = CycleValidator().validate(view, ())

        assert result == (Cycle(("a", "b")),)

    def test_self_dependency_is_a_cycle(self) -> None:
        view = make_view(make_boundary("a", deps=["a"]), make_boundary("b"))

        assert CycleValidator().validate(view, ()) == (Cycle(("a", "a")),)

    def test_self_dependency_within_larger_cycle(self) -> None:
        view = make_view(make_boundary("a", deps=["a", "b"]), make_boundary("b", deps=["a"]))

        result = CycleValidator().validate(view, ())

        assert result == (Cycle(("a", "a")), Cycle(("b", "a")))

    def test_unknown_dependency_ignored(self) -> None:
        view = make_view(make_boundary("a", deps=["ghost"]))

        assert CycleValidator().validate(view, ()) == ()

    def test_max_length(self) -> None:
        view = make_view(
            make_boundary("a", deps=["b"]),
            make_boundary("b", deps=["c"]),
            make_boundary("c", deps=["a"]),
        )

        assert CycleValidator(max_length=2).validate(view, ()) == ()

    def test_idempotent(self) -> None:
        view = make_view(
            make_boundary("a", deps=["b"]),
            make_boundary("b", deps=["a", "c"]),
            make_boundary("c", deps=["b"]),
        )
        validator = CycleValidator()

        assert validator.validate(view, ()) == validator.validate(view, ())
