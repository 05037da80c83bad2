"""Tests for validators/unclassified_validator.py."""

from archbound.application.validators.unclassified_validator import UnclassifiedValidator
from archbound.domain.model.configuration import CheckConfig
from archbound.domain.model.errors import UnclassifiedModule
from archbound.domain.model.module import ModuleInfo
from tests.factories import DEFAULT_APP, make_boundary, make_view


class TestUnclassifiedValidator:
    """Tests for UnclassifiedValidator."""

    def test_disabled(self) -> None:
        assert UnclassifiedValidator.from_config(CheckConfig(check_unclassified=False)) is None

    def test_reports_loose_modules(self) -> None:
        view = make_view(
            make_boundary("a"),
            modules=[ModuleInfo(name="loose", app=DEFAULT_APP)],
        )

        assert UnclassifiedValidator().validate(view, ()) == (UnclassifiedModule("loose"),)

    def test_protocol_impls_skipped(self) -> None:
        view = make_view(modules=[ModuleInfo(name="impl", app=DEFAULT_APP, protocol_impl=True)])

        assert UnclassifiedValidator().validate(view, ()) == ()

    def test_other_apps_skipped(self) -> None:
        view = make_view(modules=[ModuleInfo(name="ext.x", app="ext")])

        assert UnclassifiedValidator().validate(view, ()) == ()
