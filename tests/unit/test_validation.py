import pytest
from pydantic import BaseModel, ValidationError

from maintrack.domain.validation import (
    check_ip_address,
    check_max_lengths,
    check_required,
    errors_from_pydantic,
    is_ipv4,
    strip_strings,
)


def test_check_required_blank_and_missing():
    errors = check_required({"name": "  ", "os": "Linux"}, ("name", "os", "type"))

    assert [e.code for e in errors] == ["name_required", "type_required"]
    assert errors[0].message == "Name is required"
    assert errors[0].field == "name"


def test_check_max_lengths():
    errors = check_max_lengths({"id": "X" * 21, "name": "ok"}, {"id": 20, "name": 50})

    assert len(errors) == 1
    assert errors[0].code == "id_too_long"
    assert errors[0].message == "Id must be 20 characters or less"


def test_max_length_ignores_surrounding_whitespace():
    assert check_max_lengths({"id": "  CPU001  "}, {"id": 6}) == []


def test_ipv4():
    assert is_ipv4("192.168.1.20")
    assert not is_ipv4("256.1.1.1")
    assert not is_ipv4("10.0.0")
    assert not is_ipv4("fe80::1")


def test_check_ip_address_optional():
    assert check_ip_address({}) == []
    assert check_ip_address({"ip_address": None}) == []
    assert check_ip_address({"ip_address": "1.2.3.999"})[0].code == "ip_invalid"


def test_strip_strings():
    assert strip_strings({"a": " x ", "b": "   ", "c": 3}) == {"a": "x", "b": None, "c": 3}


def test_errors_from_pydantic():
    class Model(BaseModel):
        count: int

    with pytest.raises(ValidationError) as exc_info:
        Model.model_validate({"count": "many"})
    errors = errors_from_pydantic(exc_info.value)

    assert errors[0].code == "invalid_field"
    assert errors[0].field == "count"
    assert errors[0].message.startswith("count: ")
