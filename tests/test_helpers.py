import pytest

from wordchain.utils import optional_flag


@pytest.mark.parametrize('value, expected', [
    (True, True), (False, False), (1, True), (0, False),
    ('true', True), ('Yes', True), ('off', False), ('', False),
])
def test_optional_flag_parses_switches(value, expected):
    assert optional_flag({'scoring': value}, 'scoring') is expected


def test_optional_flag_missing_key_defers_to_config():
    assert optional_flag({}, 'scoring') is None
    assert optional_flag({'scoring': None}, 'scoring') is None
