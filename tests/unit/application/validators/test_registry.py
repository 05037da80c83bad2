"""Tests for validators/_registry.py."""

from archbound.application.validators import (
    CallValidator,
    ConfigValidator,
    CycleValidator,
    DependencyValidator,
    ExportValidator,
    IgnoresValidator,
    UnclassifiedValidator,
    default_validators,
    validators_from_config,
)
from archbound.domain.model.configuration import CheckConfig


def _types(validators: tuple[object, ...]) -> list[type]:
    return [type(v) for v in validators]


class TestDefaultValidators:
    """Tests for default_validators."""

    def test_all_enabled_in_report_order(self) -> None:
        """Declaration checks come first, call checks last."""
        assert _types(default_validators()) == [
            ConfigValidator,
            IgnoresValidator,
            DependencyValidator,
            ExportValidator,
            CycleValidator,
            UnclassifiedValidator,
            CallValidator,
        ]


class TestValidatorsFromConfig:
    """Tests for validators_from_config."""

    def test_everything_optional_disabled(self) -> None:
        config = CheckConfig(
            check_exports=False,
            check_cycles=False,
            check_unclassified=False,
            check_calls=False,
        )

        assert _types(validators_from_config(config)) == [
            ConfigValidator,
            IgnoresValidator,
            DependencyValidator,
        ]

    def test_only_calls_disabled(self) -> None:
        validators = validators_from_config(CheckConfig(check_calls=False))

        assert CallValidator not in _types(validators)
        assert len(validators) == 6

    def test_cycle_length_passed_through(self) -> None:
        validators = validators_from_config(CheckConfig(max_cycle_length=3))

        cycle = next(v for v in validators if isinstance(v, CycleValidator))
        assert cycle.max_length == 3

    def test_fresh_instances_per_call(self) -> None:
        first = validators_from_config(CheckConfig())
        second = validators_from_config(CheckConfig())

        assert all(a is not b for a, b in zip(first, second, strict=True))
