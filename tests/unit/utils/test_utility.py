import pytest
from pydantic import BaseModel, ValidationError

from webconf.utils.utility import deep_merge, split, validation_error_parser


@pytest.mark.parametrize(
    "value,expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        ("a", ["a"]),
        ("", [""]),
        (" a , b ", ["a", "b"]),
        ("a,,b", ["a", "", "b"]),
        (",", ["", ""]),
        ("a\\,b,c", ["a,b", "c"]),
        ("a\\\\,b", ["a\\", "b"]),
        ("C:\\temp", ["C:\\temp"]),
        ("a\\", ["a\\"]),
    ],
)
def test_split(value, expected):
    assert split(value, ",") == expected


def test_split_without_trim():
    assert split(" a , b ", ",", trim=False) == [" a ", " b "]


def test_split_other_delimiter():
    assert split("a;b,c", ";") == ["a", "b,c"]


def test_deep_merge_nested():
    merged = deep_merge({"a": {"x": 1, "y": 2}, "b": 1}, {"a": {"y": 3}, "c": 4})
    assert merged == {"a": {"x": 1, "y": 3}, "b": 1, "c": 4}


def test_deep_merge_leaves_inputs_untouched():
    base = {"a": 1}
    deep_merge(base, {"a": 2})
    assert base == {"a": 1}


def test_validation_error_parser():
    class Model(BaseModel):
        size: int

    with pytest.raises(ValidationError) as exc:
        Model(size="big")

    parsed = validation_error_parser(exc.value, component="test")
    assert parsed[0]["component"] == "test"
    assert parsed[0]["path"] == "size"
    assert parsed[0]["error_type"] == "int_parsing"
