import pytest

from kvtfutils.k8s_validation import (
    is_dns1123_label,
    is_dns1123_subdomain,
    is_qualified_name,
    is_valid_label_value,
    is_valid_port_name,
    is_valid_port_num,
    name_is_dns_label,
    name_is_dns_subdomain,
)


@pytest.mark.parametrize(
    "name",
    ["kubevirt.io/vm", "anti-affinity-key", "annotation_key", "node_selector_key", "MyName"],
)
def test_valid_qualified_names(name):
    assert is_qualified_name(name) == []


@pytest.mark.parametrize("name", ["-bad", "bad-", "a/b/c", "/name", "prefix/", "has space"])
def test_invalid_qualified_names(name):
    errors = is_qualified_name(name)
    assert errors
    assert all(isinstance(message, str) and message for message in errors)


def test_qualified_name_length_limit():
    assert is_qualified_name("a" * 63) == []
    assert is_qualified_name("a" * 64) == ["name part must be no more than 63 characters"]


def test_qualified_name_bad_prefix_is_reported_as_prefix():
    errors = is_qualified_name("Bad_Prefix/name")
    assert errors
    assert all(message.startswith("prefix part ") for message in errors)


def test_qualified_name_with_empty_prefix():
    assert is_qualified_name("/name") == ["prefix part must be non-empty"]


@pytest.mark.parametrize("value", ["", "test-vm", "anti-affinity-val", "my_value", "12345"])
def test_valid_label_values(value):
    assert is_valid_label_value(value) == []


@pytest.mark.parametrize("value", ["-bad", "with space", "x" * 64])
def test_invalid_label_values(value):
    assert is_valid_label_value(value)


@pytest.mark.parametrize("value", ["test-vm-bootvolume", "tenantcluster", "example.com"])
def test_valid_subdomains(value):
    assert is_dns1123_subdomain(value) == []


@pytest.mark.parametrize("value", ["Upper", "under_score", "dot.", "", "a" * 254])
def test_invalid_subdomains(value):
    assert is_dns1123_subdomain(value)


def test_label_rejects_dots_that_subdomain_accepts():
    assert is_dns1123_subdomain("my.name") == []
    assert is_dns1123_label("my.name")
    assert is_dns1123_label("my-name") == []


def test_prefix_tolerates_trailing_dash():
    assert name_is_dns_subdomain("abc-", True) == []
    assert name_is_dns_subdomain("abc-", False)
    assert name_is_dns_label("abc-", True) == []
    assert name_is_dns_label("abc-", False)


def test_generate_name_with_underscore_is_not_a_label():
    assert name_is_dns_label("generate_name", True)


@pytest.mark.parametrize("port", [1, 80, 65535])
def test_valid_port_numbers(port):
    assert is_valid_port_num(port) == []


@pytest.mark.parametrize("port", [0, -1, 65536])
def test_invalid_port_numbers(port):
    assert is_valid_port_num(port) == ["must be between 1 and 65535, inclusive"]


@pytest.mark.parametrize("port", ["http", "https", "my-port", "a1"])
def test_valid_port_names(port):
    assert is_valid_port_name(port) == []


@pytest.mark.parametrize("port", ["123", "a--b", "-http", "http-", "HTTP", "a" * 16, ""])
def test_invalid_port_names(port):
    assert is_valid_port_name(port)


def test_port_name_reports_every_problem():
    errors = is_valid_port_name("--")
    assert any("letter" in message for message in errors)
    assert any("consecutive" in message for message in errors)
    assert any("begin or end" in message for message in errors)