from dataclasses import FrozenInstanceError

import pytest

from basestr.config import DEFAULT_CONFIGURATION, Configuration
from basestr.names import default_ignored_type_order


def test_defaults():
    assert DEFAULT_CONFIGURATION.ignored_type_names == frozenset(("Error", "RegExp", "URL", "URLSearchParams"))
    assert DEFAULT_CONFIGURATION.reject_functions is False
    assert tuple(default_ignored_type_order) == ("Error", "RegExp", "URL", "URLSearchParams")


def test_from_options_none_and_empty_mapping_keep_defaults():
    assert Configuration.from_options(None) == DEFAULT_CONFIGURATION
    assert Configuration.from_options({}) == DEFAULT_CONFIGURATION


def test_given_name_list_replaces_default_set():
    config = Configuration.from_options({"ignoredTypeNames": ["Money"]})
    assert config.ignored_type_names == frozenset(("Money",))
    assert config.reject_functions is False


def test_empty_name_list_disables_overrides():
    config = Configuration.from_options({"ignoredTypeNames": []})
    assert config.ignored_type_names == frozenset()


def test_reject_functions_option():
    config = Configuration.from_options({"rejectFunctions": True})
    assert config.reject_functions is True
    assert config.ignored_type_names == DEFAULT_CONFIGURATION.ignored_type_names


def test_with_ignored_widens_without_mutating():
    wider = DEFAULT_CONFIGURATION.with_ignored("Money", "Path")
    assert {"Money", "Path", "Error"} <= wider.ignored_type_names
    assert "Money" not in DEFAULT_CONFIGURATION.ignored_type_names


def test_with_reject_functions():
    assert DEFAULT_CONFIGURATION.with_reject_functions().reject_functions is True
    assert DEFAULT_CONFIGURATION.with_reject_functions(False) == DEFAULT_CONFIGURATION


def test_to_options_round_trips_through_from_options():
    config = Configuration(ignored_type_names=frozenset(("B", "A")), reject_functions=True)
    assert config.to_options() == {"ignoredTypeNames": ["A", "B"], "rejectFunctions": True}
    assert Configuration.from_options(config.to_options()) == config


def test_configuration_is_immutable():
    with pytest.raises(FrozenInstanceError):
        DEFAULT_CONFIGURATION.reject_functions = True  # type: ignore[misc]


def test_name_list_given_as_string_is_rejected():
    with pytest.raises(ValueError, match="ignoredTypeNames must be a list"):
        Configuration.from_options({"ignoredTypeNames": "Error"})


def test_reject_functions_must_be_boolean():
    with pytest.raises(ValueError, match="rejectFunctions must be a boolean"):
        Configuration.from_options({"rejectFunctions": "false"})
