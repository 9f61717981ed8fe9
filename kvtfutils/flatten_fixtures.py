"""Sample virtual machine and data volume definitions for flattening checks.

Each ``get_base_input_*`` function returns an API-form value. API form uses the
camelCase keys of the Kubernetes JSON representation and
:class:`~kvtfutils.quantity.Quantity` objects for resource amounts. The
matching ``get_base_output_*`` function returns the schema-form value that
flattening that input should produce. Schema form uses snake_case keys,
one-element lists for nested blocks and sets for unordered collections. Every
call returns a fresh structure.
"""

from __future__ import annotations

from typing import Any

from kvtfutils.entities import (
    label_selector_api,
    label_selector_terraform,
    match_expression_api,
    match_fields_api,
    node_preferred_during_scheduling_terraform,
    node_required_during_scheduling_terraform,
    node_selector_term_api,
    pod_preferred_during_scheduling_api,
    pod_preferred_during_scheduling_terraform,
    pod_required_during_scheduling_api,
    pod_required_during_scheduling_terraform,
)
from kvtfutils.quantity import new_quantity, parse_quantity
from kvtfutils.structures import new_string_set

_IMAGE_URL = "https://cloud.centos.org/centos/7/images/CentOS-7-x86_64-GenericCloud.qcow2"
_BOOT_VOLUME = "test-vm-bootvolume"
_DISK_NAME = "test-vm-datavolumedisk1"
_DATA_VOLUME_NAMESPACE = "tenantcluster"
_SOURCE_REF_NAMESPACE = "cdi.kubevirt.io"


def _data_volume_metadata() -> dict[str, Any]:
    return {
        "generateName": "generate_name",
        "name": _BOOT_VOLUME,
        "namespace": _DATA_VOLUME_NAMESPACE,
    }


def _data_volume_spec() -> dict[str, Any]:
    return {
        "source": {
            "http": {
                "url": _IMAGE_URL,
                "secretRef": "secret_ref",
                "certConfigMap": "cert_config_map",
            },
            "pvc": {"namespace": "namespace", "name": "name"},
        },
        "pvc": {
            "accessModes": ["ReadWriteOnce"],
            "resources": {
                "requests": {"storage": parse_quantity("10Gi")},
                "limits": {"storage": parse_quantity("20Gi")},
            },
            "selector": label_selector_api(),
            "volumeName": "volume_name",
            "storageClassName": "standard",
        },
        "storage": {
            "accessModes": ["ReadWriteOnce"],
            "resources": {"requests": {"storage": parse_quantity("10Gi")}},
        },
        "sourceRef": {
            "kind": "DataVolumeSource",
            "namespace": _SOURCE_REF_NAMESPACE,
            "name": _BOOT_VOLUME,
        },
        "contentType": "content_type",
    }


def get_base_input_for_data_volume() -> dict[str, Any]:
    """A data volume in API form."""
    return {"metadata": _data_volume_metadata(), "spec": _data_volume_spec()}


def get_base_input_for_data_volume_template_spec() -> dict[str, Any]:
    """A data volume template in API form."""
    return {"metadata": _data_volume_metadata(), "spec": _data_volume_spec()}


def _flattened_data_volume_metadata() -> list[dict[str, Any]]:
    return [
        {
            "annotations": None,
            "labels": None,
            "name": _BOOT_VOLUME,
            "resource_version": "",
            "self_link": "",
            "uid": "",
            "generation": 0,
            "namespace": _DATA_VOLUME_NAMESPACE,
            "generate_name": "generate_name",
        }
    ]


def _flattened_data_volume_spec() -> list[dict[str, Any]]:
    return [
        {
            "pvc": [
                {
                    "access_modes": new_string_set(["ReadWriteOnce"]),
                    "resources": [
                        {
                            "requests": {"storage": "10Gi"},
                            "limits": {"storage": "20Gi"},
                        }
                    ],
                    "selector": label_selector_terraform(),
                    "volume_name": "volume_name",
                    "storage_class_name": "standard",
                }
            ],
            "source": [
                {
                    "http": [
                        {
                            "url": _IMAGE_URL,
                            "secret_ref": "secret_ref",
                            "cert_config_map": "cert_config_map",
                        }
                    ],
                    "pvc": [{"namespace": "namespace", "name": "name"}],
                }
            ],
            "source_ref": [
                {
                    "kind": "DataVolumeSource",
                    "name": _BOOT_VOLUME,
                    "namespace": _SOURCE_REF_NAMESPACE,
                }
            ],
            "storage": [
                {"resources": [{"requests": {"storage": "10Gi"}}]}
            ],
            "content_type": "content_type",
        }
    ]


def get_base_output_for_data_volume() -> dict[str, Any]:
    """The schema form that :func:`get_base_input_for_data_volume` flattens to."""
    return {
        "metadata": _flattened_data_volume_metadata(),
        "spec": _flattened_data_volume_spec(),
        "status": [{"phase": "", "progress": ""}],
    }


def get_base_input_for_virtual_machine() -> dict[str, Any]:
    """A virtual machine spec in API form."""
    return {
        "runStrategy": "Always",
        "dataVolumeTemplates": [get_base_input_for_data_volume_template_spec()],
        "template": {
            "metadata": {
                "annotations": {"annotation_key": "annotation_value"},
                "labels": {"kubevirt.io/vm": "test-vm"},
                "generateName": "generate_name",
                "name": "name",
                "namespace": "namespace",
            },
            "spec": {
                "priorityClassName": "priority_class_name",
                "volumes": [
                    {
                        "name": _DISK_NAME,
                        "dataVolume": {"name": _BOOT_VOLUME},
                        "cloudInitConfigDrive": {
                            "userDataSecretRef": {"name": "name"},
                            "userDataBase64": "user_data_base64",
                            "userData": "user_data",
                            "networkDataSecretRef": {"name": "name"},
                            "networkDataBase64": "network_data_base64",
                            "networkData": "network_data",
                        },
                        "serviceAccount": {"serviceAccountName": "service_account_name"},
                    }
                ],
                "domain": {
                    "resources": {
                        "requests": {
                            "memory": parse_quantity("10G"),
                            "cpu": new_quantity(4),
                        },
                        "limits": {
                            "memory": parse_quantity("20G"),
                            "cpu": new_quantity(8),
                        },
                        "overcommitGuestOverhead": True,
                    },
                    "devices": {
                        "disks": [
                            {
                                "name": _DISK_NAME,
                                "serial": "serial",
                                "disk": {
                                    "bus": "virtio",
                                    "readOnly": True,
                                    "pciAddress": "pci_address",
                                },
                            }
                        ],
                        "interfaces": [{"name": "main", "bridge": {}}],
                    },
                },
                "nodeSelector": {"node_selector_key": "node_selector_value"},
                "hostname": "hostname",
                "subdomain": "subdomain",
                "schedulerName": "scheduler_name",
                "tolerations": [
                    {
                        "effect": "effect",
                        "key": "key",
                        "operator": "operator",
                        "tolerationSeconds": 60,
                        "value": "value",
                    }
                ],
                "evictionStrategy": "eviction_strategy",
                "terminationGracePeriodSeconds": 120,
                "networks": [
                    {
                        "name": "main",
                        "pod": {"vmNetworkCIDR": "vm_network_cidr"},
                        "multus": {"networkName": "tenantcluster"},
                    }
                ],
                "dnsPolicy": "dns_policy",
                "dnsConfig": {"options": [{"name": "name", "value": "value"}]},
                "affinity": {
                    "nodeAffinity": {
                        "requiredDuringSchedulingIgnoredDuringExecution": {
                            "nodeSelectorTerms": node_selector_term_api(),
                        },
                        "preferredDuringSchedulingIgnoredDuringExecution": [
                            {
                                "weight": 10,
                                "preference": {
                                    "matchExpressions": match_expression_api(),
                                    "matchFields": match_fields_api(),
                                },
                            }
                        ],
                    },
                    "podAffinity": {
                        "preferredDuringSchedulingIgnoredDuringExecution":
                            pod_preferred_during_scheduling_api(),
                        "requiredDuringSchedulingIgnoredDuringExecution":
                            pod_required_during_scheduling_api(),
                    },
                    "podAntiAffinity": {
                        "preferredDuringSchedulingIgnoredDuringExecution":
                            pod_preferred_during_scheduling_api(),
                        "requiredDuringSchedulingIgnoredDuringExecution":
                            pod_required_during_scheduling_api(),
                    },
                },
            },
        },
    }


def get_base_output_for_virtual_machine() -> dict[str, Any]:
    """The schema form that :func:`get_base_input_for_virtual_machine` flattens to."""
    return {
        "data_volume_templates": [
            {
                "metadata": _flattened_data_volume_metadata(),
                "spec": _flattened_data_volume_spec(),
            }
        ],
        "run_strategy": "Always",
        "template": [
            {
                "metadata": [
                    {
                        "annotations": {"annotation_key": "annotation_value"},
                        "labels": {"kubevirt.io/vm": "test-vm"},
                        "generate_name": "generate_name",
                        "name": "name",
                        "namespace": "namespace",
                        "resource_version": "",
                        "self_link": "",
                        "uid": "",
                        "generation": 0,
                    }
                ],
                "spec": [
                    {
                        "node_selector": {"node_selector_key": "node_selector_value"},
                        "scheduler_name": "scheduler_name",
                        "tolerations": [
                            {
                                "effect": "effect",
                                "key": "key",
                                "operator": "operator",
                                "toleration_seconds": "60",
                                "value": "value",
                            }
                        ],
                        "dns_policy": "dns_policy",
                        "priority_class_name": "priority_class_name",
                        "hostname": "hostname",
                        "subdomain": "subdomain",
                        "pod_dns_config": [
                            {"option": [{"name": "name", "value": "value"}]}
                        ],
                        "affinity": [
                            {
                                "node_affinity": [
                                    {
                                        "required_during_scheduling_ignored_during_execution":
                                            node_required_during_scheduling_terraform(),
                                        "preferred_during_scheduling_ignored_during_execution":
                                            node_preferred_during_scheduling_terraform(),
                                    }
                                ],
                                "pod_affinity": [
                                    {
                                        "preferred_during_scheduling_ignored_during_execution":
                                            pod_preferred_during_scheduling_terraform(),
                                        "required_during_scheduling_ignored_during_execution":
                                            pod_required_during_scheduling_terraform(),
                                    }
                                ],
                                "pod_anti_affinity": [
                                    {
                                        "preferred_during_scheduling_ignored_during_execution":
                                            pod_preferred_during_scheduling_terraform(),
                                        "required_during_scheduling_ignored_during_execution":
                                            pod_required_during_scheduling_terraform(),
                                    }
                                ],
                            }
                        ],
                        "domain": [
                            {
                                "devices": [
                                    {
                                        "disk": [
                                            {
                                                "disk_device": [
                                                    {
                                                        "disk": [
                                                            {
                                                                "bus": "virtio",
                                                                "read_only": True,
                                                                "pci_address": "pci_address",
                                                            }
                                                        ]
                                                    }
                                                ],
                                                "name": _DISK_NAME,
                                                "serial": "serial",
                                            }
                                        ],
                                        "interface": [
                                            {
                                                "interface_binding_method": "InterfaceBridge",
                                                "name": "main",
                                            }
                                        ],
                                    }
                                ],
                                "resources": [
                                    {
                                        "requests": {"cpu": "4", "memory": "10G"},
                                        "limits": {"cpu": "8", "memory": "20G"},
                                        "over_commit_guest_overhead": True,
                                    }
                                ],
                            }
                        ],
                        "eviction_strategy": "eviction_strategy",
                        "termination_grace_period_seconds": 120,
                        "volume": [
                            {
                                "name": _DISK_NAME,
                                "volume_source": [
                                    {
                                        "data_volume": [{"name": _BOOT_VOLUME}],
                                        "cloud_init_config_drive": [
                                            {
                                                "user_data_secret_ref": [{"name": "name"}],
                                                "user_data_base64": "user_data_base64",
                                                "user_data": "user_data",
                                                "network_data_secret_ref": [{"name": "name"}],
                                                "network_data_base64": "network_data_base64",
                                                "network_data": "network_data",
                                            }
                                        ],
                                        "service_account": [
                                            {"service_account_name": "service_account_name"}
                                        ],
                                    }
                                ],
                            }
                        ],
                        "network": [
                            {
                                "name": "main",
                                "network_source": [
                                    {
                                        "pod": [{"vm_network_cidr": "vm_network_cidr"}],
                                        "multus": [
                                            {"network_name": "tenantcluster", "default": False}
                                        ],
                                    }
                                ],
                            }
                        ],
                    }
                ],
            }
        ],
    }