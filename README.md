# kvtfutils

Utilities for KubeVirt and Kubernetes resource data held as plain Python
dictionaries, lists and sets. The package has no dependencies outside the
standard library.

## Modules

### `kvtfutils.quantity`

Kubernetes resource quantities such as `10Gi`, `20G`, `500m` or `2e3`.

- `parse_quantity(text)` returns a `Quantity`; it raises `QuantityError`
  (a `ValueError`) when the text is not a quantity or its suffix is unknown.
- `new_quantity(value)` builds a `Quantity` from an integer.
- A `Quantity` is a frozen dataclass with an exact `value` (a `Fraction`,
  rounded up to nanounits) and a `format` (`QuantityFormat.BINARY_SI`,
  `DECIMAL_SI` or `DECIMAL_EXPONENT`). `canonical()` and `str()` give its
  shortest canonical text.

```python
from kvtfutils.quantity import new_quantity, parse_quantity

str(parse_quantity("1024Mi"))  # "1Gi"
str(parse_quantity("0.5"))     # "500m"
str(new_quantity(4))           # "4"
```

### `kvtfutils.k8s_validation`

Kubernetes naming rules. Each check returns a list of error messages, empty
when the value is valid: `is_qualified_name`, `is_valid_label_value`,
`is_dns1123_label`, `is_dns1123_subdomain`, `name_is_dns_label(name, prefix)`,
`name_is_dns_subdomain(name, prefix)` (with `prefix` set, a trailing dash is
tolerated), `is_valid_port_num` and `is_valid_port_name`.

### `kvtfutils.validators`

Schema field validators. Each takes `(value, key)` and returns a
`ValidationResult`, a named tuple of `warnings` and `errors` (lists of
strings): `validate_annotations`, `validate_labels`, `validate_name`,
`validate_generate_name`, `validate_base64_encoded`,
`validate_base64_encoded_map`, `validate_port_num`, `validate_port_name`,
`validate_port_num_or_name`, `validate_resource_list`,
`validate_resource_quantity`, `validate_non_negative_integer`,
`validate_positive_integer`, `validate_termination_grace_period_seconds`,
`validate_type_string_nullable_int`,
`validate_type_string_nullable_int_or_percent` and `validate_mode_bits`.

Factories build validators of the same shape:
`validate_int_greater_than(min_value)`,
`validate_attribute_value_does_not_contain(search)`,
`validate_attribute_value_is_in(valid_values)` and
`string_is_int_in_range(minimum, maximum)`.

A value of the wrong Python type where the validator requires one (for
instance a string given to `validate_positive_integer`) raises `TypeError`.

```python
from kvtfutils.validators import validate_int_greater_than, validate_labels

warnings, errors = validate_labels({"app": "web"}, "labels")
assert not errors

validate_int_greater_than(1)(0, "replicas").errors
# ["replicas must be greater than or equal to 1"]
```

### `kvtfutils.structures`

Conversions between schema data and API data:

- `id_parts("namespace/name")` returns `(namespace, name)` and raises
  `ValueError` for any other shape; `build_id(namespace, name)` joins them.
- String maps: `flatten_string_map`, `expand_string_map`, `convert_map`.
- Byte maps and base64: `expand_base64_map_to_byte_map` (values that do not
  decode are dropped), `expand_string_map_to_byte_map`,
  `flatten_byte_map_to_base64_map`, `flatten_byte_map_to_string_map`,
  `base64_encode_string_map`.
- Lists and sets: `expand_string_slice` (`None` entries become `""`),
  `slice_of_string`, `new_string_set`, `new_int64_set`,
  `schema_set_to_string_array` and `schema_set_to_int64_array` (both sorted).
- Resource lists: `expand_map_to_resource_list` turns ints and quantity
  strings into `Quantity` objects; `flatten_resource_list` renders them back
  to canonical text.

Non-string values where strings are required raise `TypeError`.

### `kvtfutils.patch`

JSON patch operations and a differ for string maps.

- `AddOperation(path, value)`, `ReplaceOperation(path, value)` and
  `RemoveOperation(path)` are frozen dataclasses with `to_dict()`,
  `to_json()` and `str()`.
- `PatchOperations` is a list of operations with `to_json()` and
  `equal(ops)`, which compares regardless of order.
- `escape_json_pointer(key)` escapes `~` and `/` as RFC 6901 requires.
- `diff_string_map(path_prefix, old, new)` returns the operations that turn
  `old` into `new`. Keys are removed, replaced or added one at a time, so
  entries not present in `old` are left alone; when `old` is empty a single
  `AddOperation` sets the whole map at the prefix.

```python
from kvtfutils.patch import diff_string_map

ops = diff_string_map(
    "/metadata/labels/",
    {"app": "web", "tier": "frontend"},
    {"app": "api", "team/owner": "ops"},
)
print(ops.to_json())
# [{"path":"/metadata/labels/tier","op":"remove"},
#  {"path":"/metadata/labels/app","value":"api","op":"replace"},
#  {"path":"/metadata/labels/team~1owner","value":"ops","op":"add"}]
```

### Sample data: `kvtfutils.entities`, `kvtfutils.expand_fixtures`, `kvtfutils.flatten_fixtures`

Ready-made values for tests, each call returning a fresh structure.
`entities` holds label selectors, node selector terms and node and pod
affinity terms in both schema form (snake_case keys, one-element lists for
nested blocks, sets for unordered strings) and API form (camelCase keys).
`expand_fixtures` and `flatten_fixtures` hold a data volume, a data volume
template and a virtual machine spec as matching schema-form and API-form
pairs, via their `get_base_input_*` and `get_base_output_*` functions.

## What the package does not do

It does not convert whole virtual machines or data volumes between schema
form and API form; the fixture modules only provide sample pairs to check
such conversions against. It does not talk to a Kubernetes cluster and has
no command-line tool.

## Installing

```
pip install .
```

To install with the test tools and run the tests:

```
pip install .[test]
pytest
```