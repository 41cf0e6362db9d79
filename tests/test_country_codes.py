import pytest

from dashboard.services.country_codes import COUNTRY_CODES, get_country_code


@pytest.mark.parametrize("country, expected", [
    ("US", "us"), ("USA", "us"), ("United States", "us"),
    ("GB", "gb"), ("UK", "gb"), ("United Kingdom", "gb"),
    ("RU", "ru"), ("Russia", "ru"),
    ("CN", "cn"), ("China", "cn"),
    ("JP", "jp"), ("Japan", "jp"),
    ("IN", "in"), ("India", "in"),
    ("FR", "fr"), ("France", "fr"),
    ("DE", "de"), ("Germany", "de"),
    ("IT", "it"), ("Italy", "it"),
    ("CA", "ca"), ("Canada", "ca"),
    ("AU", "au"), ("Australia", "au"),
])
def test_known_countries(country, expected):
    assert get_country_code(country) == expected


@pytest.mark.parametrize("country", ["KZ", "Kazakhstan"])
def test_kazakhstan_resolves_to_us(country):
    assert get_country_code(country) == "us"


@pytest.mark.parametrize("country", ["", None, "Narnia", "uk", "germany", " GB"])
def test_unmapped_input_defaults_to_us(country):
    assert get_country_code(country) == "us"


def test_every_code_is_two_lowercase_letters():
    for code in COUNTRY_CODES.values():
        assert len(code) == 2 and code.islower()
