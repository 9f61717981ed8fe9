"""Helpers for KubeVirt resource data: quantities, name checks, validators, conversions, JSON patch diffs and sample fixtures."""

__version__ = "0.1.0"