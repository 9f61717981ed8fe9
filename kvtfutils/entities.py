"""Shared scheduling and selector values, in schema form and in API form.

Schema-form values use snake_case keys, one-element lists for nested blocks
and sets for unordered string collections. API-form values use the camelCase
keys of the Kubernetes JSON representation. Every function returns a fresh
structure, so callers may change what they receive.
"""

from __future__ import annotations

from typing import Any

from kvtfutils.structures import new_string_set

_SELECTOR_KEY = "anti-affinity-key"
_SELECTOR_VALUE = "anti-affinity-val"
_TOPOLOGY_KEY = "kubernetes.io/hostname"
_NAMESPACES = ("namespace1",)
_REQUIREMENT_VALUES = ("value1", "value2")
_NODE_PREFERENCE_WEIGHT = 10
_POD_PREFERENCE_WEIGHT = 100


def _requirement_terraform() -> list[dict[str, Any]]:
    return [
        {
            "key": "key",
            "operator": "operator",
            "values": new_string_set(_REQUIREMENT_VALUES),
        }
    ]


def _requirement_api() -> list[dict[str, Any]]:
    return [
        {
            "key": "key",
            "operator": "operator",
            "values": list(_REQUIREMENT_VALUES),
        }
    ]


def label_selector_terraform() -> list[dict[str, Any]]:
    """A label selector block matching one label, in schema form."""
    return [{"match_labels": {_SELECTOR_KEY: _SELECTOR_VALUE}}]


def label_selector_api() -> dict[str, Any]:
    """The same label selector in API form."""
    return {"matchLabels": {_SELECTOR_KEY: _SELECTOR_VALUE}}


def match_expression_terraform() -> list[dict[str, Any]]:
    """Node selector match expressions in schema form."""
    return _requirement_terraform()


def match_fields_terraform() -> list[dict[str, Any]]:
    """Node selector match fields in schema form."""
    return _requirement_terraform()


def node_selector_term_terraform() -> list[dict[str, Any]]:
    """A node selector term holding expressions and fields, in schema form."""
    return [
        {
            "match_expressions": match_expression_terraform(),
            "match_fields": match_fields_terraform(),
        }
    ]


def match_expression_api() -> list[dict[str, Any]]:
    """Node selector match expressions in API form."""
    return _requirement_api()


def match_fields_api() -> list[dict[str, Any]]:
    """Node selector match fields in API form."""
    return _requirement_api()


def node_selector_term_api() -> list[dict[str, Any]]:
    """A node selector term holding expressions and fields, in API form."""
    return [
        {
            "matchExpressions": match_expression_api(),
            "matchFields": match_fields_api(),
        }
    ]


def node_preferred_during_scheduling_terraform() -> list[dict[str, Any]]:
    """A weighted preferred node scheduling term in schema form."""
    return [
        {
            "weight": _NODE_PREFERENCE_WEIGHT,
            "preference": node_selector_term_terraform(),
        }
    ]


def node_required_during_scheduling_terraform() -> list[dict[str, Any]]:
    """A required node selector in schema form."""
    return [{"node_selector_term": node_selector_term_terraform()}]


def pod_preferred_during_scheduling_api() -> list[dict[str, Any]]:
    """A weighted pod affinity term in API form."""
    return [
        {
            "weight": _POD_PREFERENCE_WEIGHT,
            "podAffinityTerm": {
                "labelSelector": label_selector_api(),
                "topologyKey": _TOPOLOGY_KEY,
                "namespaces": list(_NAMESPACES),
            },
        }
    ]


def pod_preferred_during_scheduling_terraform() -> list[dict[str, Any]]:
    """A weighted pod affinity term in schema form."""
    return [
        {
            "weight": _POD_PREFERENCE_WEIGHT,
            "pod_affinity_term": pod_required_during_scheduling_terraform(),
        }
    ]


def pod_required_during_scheduling_api() -> list[dict[str, Any]]:
    """A required pod affinity term in API form."""
    return [
        {
            "labelSelector": label_selector_api(),
            "topologyKey": _TOPOLOGY_KEY,
            "namespaces": list(_NAMESPACES),
        }
    ]


def pod_required_during_scheduling_terraform() -> list[dict[str, Any]]:
    """A required pod affinity term in schema form."""
    return [
        {
            "label_selector": label_selector_terraform(),
            "topology_key": _TOPOLOGY_KEY,
            "namespaces": new_string_set(_NAMESPACES),
        }
    ]