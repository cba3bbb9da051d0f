from pathlib import Path

import pytest

from matcher_generator.models import OptionsField, SourceRootCandidate, ValidationCode
from matcher_generator.options import NoCandidateRootsError, OptionsModel, OptionsValidationError


def test_defaults_from_data_source(data_source_factory) -> None:
    source = data_source_factory()
    model = OptionsModel(source)
    assert model.class_name == "WidgetMatcher"
    assert model.package_name == "com.example.matchers"
    assert model.extensible is False
    assert model.extends_superclass is False
    assert model.super_class_text == ""
    assert model.get_super_class_name() is None


def test_abstract_class_forces_extensible_and_disables_article(data_source_factory) -> None:
    model = OptionsModel(data_source_factory("Animal", abstract=True, default_is_extensible=False))
    assert model.extensible is True
    assert model.article_choice_enabled is False
    assert model.uses_an is False
    with pytest.raises(ValueError):
        model.uses_an = True


def test_concrete_class_uses_default_extensible(data_source_factory) -> None:
    assert OptionsModel(data_source_factory(default_is_extensible=False)).extensible is False
    assert OptionsModel(data_source_factory(default_is_extensible=True)).extensible is True


def test_article_choice_from_matched_name(data_source_factory) -> None:
    model = OptionsModel(data_source_factory("Order"))
    assert model.article_choice_enabled
    assert model.uses_an is True
    assert model.article_choices() == ("a Order", "an Order")
    model.uses_an = False
    assert model.uses_an is False
    assert OptionsModel(data_source_factory("Widget")).uses_an is False


def test_default_root_selected_by_identity(data_source_factory, roots) -> None:
    model = OptionsModel(data_source_factory(default_root=roots[1]))
    assert model.selected_root is roots[1]


def test_unknown_default_root_falls_back_to_first(data_source_factory, roots) -> None:
    lookalike = SourceRootCandidate(roots[1].path, roots[1].label, roots[1].kind)
    assert OptionsModel(data_source_factory(default_root=lookalike)).selected_root is roots[0]
    assert OptionsModel(data_source_factory(default_root=None)).selected_root is roots[0]


def test_no_candidate_roots_is_an_error(data_source_factory) -> None:
    with pytest.raises(NoCandidateRootsError):
        OptionsModel(data_source_factory(candidate_roots=[], default_root=None))


def test_select_root_requires_candidate(data_source_factory, roots) -> None:
    model = OptionsModel(data_source_factory())
    model.select_root(roots[2])
    assert model.selected_root is roots[2]
    with pytest.raises(ValueError):
        model.select_root(SourceRootCandidate(Path("/elsewhere"), "elsewhere"))


def test_superclass_text_survives_toggling(data_source_factory) -> None:
    model = OptionsModel(data_source_factory())
    model.extends_superclass = True
    model.super_class_text = "com.example.Base"
    model.extends_superclass = False
    assert model.get_super_class_name() is None
    assert model.super_class_text == "com.example.Base"
    model.extends_superclass = True
    assert model.get_super_class_name() == "com.example.Base"


def test_superclass_name_is_trimmed_and_may_be_blank(data_source_factory) -> None:
    model = OptionsModel(data_source_factory())
    model.extends_superclass = True
    assert model.get_super_class_name() == ""
    model.super_class_text = "  com.example.Base \t"
    assert model.get_super_class_name() == "com.example.Base"


def test_extends_listeners_notified_on_change_only(data_source_factory) -> None:
    model = OptionsModel(data_source_factory())
    events = []
    model.add_extends_listener(events.append)
    model.extends_superclass = True
    model.extends_superclass = True
    model.extends_superclass = False
    assert events == [True, False]
    assert model.super_class_enabled is False

    model.remove_extends_listener(events.append)
    model.extends_superclass = True
    assert events == [True, False]


def test_do_validate_is_idempotent(data_source_factory) -> None:
    model = OptionsModel(data_source_factory())
    model.class_name = "   "
    first = model.do_validate()
    assert first is not None
    assert first.code == ValidationCode.EMPTY_NAME
    assert model.do_validate() == first

    model.class_name = "123Bad"
    assert model.do_validate().code == ValidationCode.INVALID_IDENTIFIER


def test_do_validate_uses_injected_checker(data_source_factory) -> None:
    model = OptionsModel(data_source_factory(), identifier_checker=lambda text: text.islower())
    assert model.do_validate().code == ValidationCode.INVALID_IDENTIFIER
    model.class_name = "lower"
    assert model.do_validate() is None


def test_finalize_trims_and_snapshots(data_source_factory, roots) -> None:
    model = OptionsModel(data_source_factory("Order"))
    model.class_name = "  OrderMatcher  "
    model.extends_superclass = True
    model.super_class_text = " com.example.Base "
    options = model.finalize()
    assert model.class_name == "  OrderMatcher  "
    assert options.class_name == "OrderMatcher"
    assert options.package_name == "com.example.matchers"
    assert options.source_root is roots[1]
    assert options.extensible is False
    assert options.uses_an is True
    assert options.super_class_name == "com.example.Base"


def test_finalize_without_superclass(data_source_factory) -> None:
    assert OptionsModel(data_source_factory()).finalize().super_class_name is None


def test_finalize_raises_on_invalid_name(data_source_factory) -> None:
    model = OptionsModel(data_source_factory())
    model.class_name = ""
    with pytest.raises(OptionsValidationError) as excinfo:
        model.finalize()
    assert excinfo.value.info.field == OptionsField.CLASS_NAME
    assert str(excinfo.value) == "Class name is empty"
