import pytest

import json_parser as jp
from json_values import ValueKind, kind_of


@pytest.mark.parametrize("text,kind", [
    ("null", ValueKind.NULL),
    ("false", ValueKind.BOOLEAN),
    ("1", ValueKind.NUMBER),
    ('"s"', ValueKind.STRING),
    ("[]", ValueKind.ARRAY),
    ("{}", ValueKind.OBJECT),
])
def test_kind_of_parsed_roots(text, kind):
    assert kind_of(jp.parse_json(text)) is kind


def test_bool_is_not_a_number():
    assert kind_of(True) is ValueKind.BOOLEAN


def test_foreign_objects_rejected():
    with pytest.raises(TypeError):
        kind_of(object())
