import pytest

from kvtfutils.k8s_validation import is_valid_port_num
from kvtfutils.validators import (
    string_is_int_in_range,
    validate_annotations,
    validate_attribute_value_does_not_contain,
    validate_attribute_value_is_in,
    validate_base64_encoded,
    validate_base64_encoded_map,
    validate_generate_name,
    validate_int_greater_than,
    validate_labels,
    validate_mode_bits,
    validate_name,
    validate_non_negative_integer,
    validate_port_name,
    validate_port_num,
    validate_port_num_or_name,
    validate_positive_integer,
    validate_resource_list,
    validate_resource_quantity,
    validate_termination_grace_period_seconds,
    validate_type_string_nullable_int,
    validate_type_string_nullable_int_or_percent,
)


def test_annotations_accept_qualified_keys_ignoring_case():
    result = validate_annotations({"Example.COM/MyName": "v", "annotation_key": "x"}, "annotations")
    assert result.errors == []
    assert result.warnings == []


def test_annotations_reject_bad_key():
    errors = validate_annotations({"bad key!": "x"}, "annotations").errors
    assert errors
    assert all(e.startswith('annotations ("bad key!") ') for e in errors)


def test_base64_encoded():
    assert validate_base64_encoded("aGVsbG8=", "k").errors == []
    assert validate_base64_encoded("%%%", "k").errors == ["k: must be a base64-encoded string"]
    assert validate_base64_encoded(5, "k").errors == ["k: must be a non-nil base64-encoded string"]


def test_base64_encoded_map():
    assert validate_base64_encoded_map({"a": "aGk="}, "data").errors == []
    assert validate_base64_encoded_map("x", "data").errors == [
        "data: must be a map of strings to base64 encoded strings"
    ]
    errors = validate_base64_encoded_map({"a": "%%"}, "data").errors
    assert errors == ['a ("%%") a: must be a base64-encoded string']


def test_validate_name():
    assert validate_name("test-vm-bootvolume", "name").errors == []
    errors = validate_name("My_VM", "name").errors
    assert errors and all(e.startswith("name ") for e in errors)


def test_validate_generate_name_allows_trailing_dash():
    assert validate_generate_name("test-vm-", "generate_name").errors == []
    assert validate_generate_name("-vm", "generate_name").errors


def test_labels_valid():
    assert validate_labels({"kubevirt.io/vm": "test-vm"}, "labels").errors == []


def test_labels_invalid_value():
    errors = validate_labels({"app": "bad value!"}, "labels").errors
    assert errors and all(e.startswith('labels ("bad value!") ') for e in errors)


def test_labels_non_string_value_stops():
    errors = validate_labels({"k": 5, "other": "bad value!"}, "labels").errors
    assert errors[-1] == "labels.k (5): Expected value to be string"


def test_port_num():
    assert validate_port_num(8080, "port").errors == []
    assert validate_port_num(0, "port").errors == ["port " + m for m in is_valid_port_num(0)]


def test_port_name():
    assert validate_port_name("http", "port").errors == []
    assert validate_port_name("--", "port").errors


@pytest.mark.parametrize("value", ["80", "http", 443])
def test_port_num_or_name_valid(value):
    assert validate_port_num_or_name(value, "port").errors == []


@pytest.mark.parametrize("value", ["70000", "-bad", 0])
def test_port_num_or_name_invalid(value):
    assert validate_port_num_or_name(value, "port").errors


def test_port_num_or_name_wrong_type():
    assert validate_port_num_or_name(1.5, "p").errors == [
        "p must be defined of type string or int on the schema"
    ]


def test_resource_list():
    assert validate_resource_list({"cpu": 4, "memory": "10G"}, "r").errors == []
    errors = validate_resource_list({"memory": "ten"}, "r").errors
    assert len(errors) == 1 and errors[0].startswith('r.memory ("ten"): ')
    errors = validate_resource_list({"x": 1.5}, "r").errors
    assert len(errors) == 1 and errors[0].endswith("Value can be either string or int")


def test_resource_quantity():
    assert validate_resource_quantity("10Gi", "q").errors == []
    assert validate_resource_quantity(10, "q").errors == []
    errors = validate_resource_quantity("bad", "q").errors
    assert len(errors) == 1 and errors[0].startswith("q.bad : ")


def test_integer_bounds():
    assert validate_non_negative_integer(0, "n").errors == []
    assert validate_non_negative_integer(-1, "n").errors == ["n must be greater than or equal to 0"]
    assert validate_positive_integer(1, "n").errors == []
    assert validate_positive_integer(0, "n").errors == ["n must be greater than 0"]
    assert validate_termination_grace_period_seconds(120, "t").errors == []
    assert validate_termination_grace_period_seconds(-1, "t").errors == [
        "t must be greater than or equal to 0"
    ]


def test_int_greater_than():
    check = validate_int_greater_than(3)
    assert check(3, "x").errors == []
    assert check(2, "x").errors == ["x must be greater than or equal to 3"]


def test_nullable_int():
    assert validate_type_string_nullable_int("", "k").errors == []
    assert validate_type_string_nullable_int("60", "k").errors == []
    assert validate_type_string_nullable_int(60, "k").errors == ["expected type of k to be string"]
    errors = validate_type_string_nullable_int("abc", "k").errors
    assert len(errors) == 1
    assert errors[0].startswith("k: cannot parse 'abc' as int: ")
    assert "invalid syntax" in errors[0]


def test_mode_bits():
    assert validate_mode_bits("0644", "m").errors == []
    assert any("should start with '0' (octal numeral)" in e for e in validate_mode_bits("644", "m").errors)
    assert any("Cannot parse octal numeral" in e for e in validate_mode_bits("0999", "m").errors)
    assert validate_mode_bits("01000", "m").errors == [
        "m (01000) expects octal notation (a value between 0 and 0777)"
    ]


def test_does_not_contain():
    check = validate_attribute_value_does_not_contain("/")
    assert check("abc", "f").errors == []
    assert check("a/b", "f").errors == ['"f" must not contain "/"']


def test_is_in():
    check = validate_attribute_value_is_in(["Always", "Halted"])
    assert check("Always", "s").errors == []
    assert check("Manual", "s").errors == [
        '"s" must contain a value from []string{"Always", "Halted"}, got "Manual"'
    ]


def test_nullable_int_or_percent():
    check = validate_type_string_nullable_int_or_percent
    assert check("", "k").errors == []
    assert check("50%", "k").errors == []
    assert check("10", "k").errors == []
    assert check(10, "k").errors == ["expected type of k to be string"]
    assert check("100%", "k").errors == ["k: '100%' is not between 0% and 100%"]
    errors = check("x", "k").errors
    assert len(errors) == 1 and errors[0].startswith("k: cannot parse 'x' as int or percent: ")
    errors = check("abc%", "k").errors
    assert len(errors) == 1 and errors[0].startswith("k: cannot parse 'abc%' as percent: ")


def test_string_is_int_in_range():
    check = string_is_int_in_range(1, 10)
    assert check("5", "k").errors == []
    assert check("10", "k").errors == []
    assert check("11", "k").errors == ["expected k to be between 1 and 10 inclusive"]
    assert check("x", "k").errors == ["expected k to string representation of integer"]
    assert check(5, "k").errors == ["expected type of k to be string"]