from __future__ import annotations

import pytest

from envaccess.utils.boolcodec import FALSE_STRING, TRUE_STRING, bool_to_string, string_to_bool


def test_canonical_encoding():
    assert bool_to_string(True) == TRUE_STRING == "true"
    assert bool_to_string(False) == FALSE_STRING == "false"
    assert string_to_bool(bool_to_string(True)) is True
    assert string_to_bool(bool_to_string(False)) is False


@pytest.mark.parametrize("raw", ["1", "true", "True", "TRUE", "yes", "Yes", "on", " on\n"])
def test_truthy(raw):
    assert string_to_bool(raw) is True


@pytest.mark.parametrize("raw", ["0", "false", "no", "off", "", "  ", "2", "enabled", "truthy"])
def test_everything_else_is_false(raw):
    assert string_to_bool(raw) is False
