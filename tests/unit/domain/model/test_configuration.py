"""Tests for domain/model/configuration.py."""

import pytest

from archbound.domain.model.configuration import CheckConfig
from archbound.domain.model.enums import ExportMatching


class TestCheckConfig:
    """Tests for CheckConfig."""

    def test_defaults(self) -> None:
        config = CheckConfig()

        assert config.check_exports
        assert config.check_cycles
        assert config.check_unclassified
        assert config.check_calls
        assert config.max_cycle_length is None
        assert config.export_matching is ExportMatching.PREFIX
        assert not config.parallel

    def test_max_cycle_length_below_two_raises(self) -> None:
        with pytest.raises(ValueError, match="max_cycle_length must be >= 2"):
            CheckConfig(max_cycle_length=1)

    def test_max_workers_zero_raises(self) -> None:
        with pytest.raises(ValueError, match="max_workers must be >= 1"):
            CheckConfig(parallel=True, max_workers=0)

    def test_max_workers_without_parallel_raises(self) -> None:
        with pytest.raises(ValueError, match="requires parallel"):
            CheckConfig(max_workers=4)

    def test_is_frozen(self) -> None:
        config = CheckConfig()
        with pytest.raises(AttributeError):
            config.parallel = True  # type: ignore[misc]
