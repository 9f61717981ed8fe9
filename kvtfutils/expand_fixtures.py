"""Sample virtual machine and data volume definitions for expansion checks.

Each ``get_base_input_*`` function returns a definition in schema form. Schema
form uses snake_case keys, one-element lists for nested blocks and sets for
unordered collections. The matching ``get_base_output_*`` function returns the
API-form value that expanding that input should produce. API form uses the
camelCase keys of the Kubernetes JSON representation and
:class:`~kvtfutils.quantity.Quantity` objects for resource amounts. Every call
returns a fresh structure.
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
_NETWORK_NAME = "main"

_REQUIRED = "required_during_scheduling_ignored_during_execution"
_PREFERRED = "preferred_during_scheduling_ignored_during_execution"
_REQUIRED_API = "requiredDuringSchedulingIgnoredDuringExecution"
_PREFERRED_API = "preferredDuringSchedulingIgnoredDuringExecution"


def _block(**fields: Any) -> list[dict[str, Any]]:
    """A nested schema block: a list holding one mapping."""
    return [dict(fields)]


def _echo(*names: str) -> dict[str, str]:
    """A mapping whose values repeat their keys."""
    return {name: name for name in names}


def _storage(amount: str) -> dict[str, str]:
    return {"storage": amount}


# Schema form


def _template_metadata_input() -> list[dict[str, Any]]:
    return _block(
        annotations={"annotation_key": "annotation_value"},
        labels={"kubevirt.io/vm": "test-vm"},
        **_echo("generate_name", "name", "namespace"),
    )


def _domain_input() -> list[dict[str, Any]]:
    disk = {
        "disk_device": _block(
            disk=_block(bus="virtio", read_only=True, pci_address="pci_address")
        ),
        "name": _DISK_NAME,
        "serial": "serial",
    }
    interface = {
        "interface_binding_method": "InterfaceBridge",
        "name": _NETWORK_NAME,
    }
    return _block(
        resources=_block(
            requests={"cpu": 4, "memory": "10G"},
            limits={"cpu": 8, "memory": "20G"},
            over_commit_guest_overhead=False,
        ),
        devices=_block(disk=[disk], interface=[interface]),
    )


def _scheduling_input(required: Any, preferred: Any) -> list[dict[str, Any]]:
    return [{_REQUIRED: required, _PREFERRED: preferred}]


def _affinity_input() -> list[dict[str, Any]]:
    return _block(
        node_affinity=_scheduling_input(
            node_required_during_scheduling_terraform(),
            node_preferred_during_scheduling_terraform(),
        ),
        pod_affinity=_scheduling_input(
            pod_required_during_scheduling_terraform(),
            pod_preferred_during_scheduling_terraform(),
        ),
        pod_anti_affinity=_scheduling_input(
            pod_required_during_scheduling_terraform(),
            pod_preferred_during_scheduling_terraform(),
        ),
    )


def _volume_input() -> dict[str, Any]:
    config_drive = {
        "user_data_secret_ref": _block(name="name"),
        "network_data_secret_ref": _block(name="name"),
        **_echo("user_data_base64", "user_data", "network_data_base64", "network_data"),
    }
    return {
        "name": _DISK_NAME,
        "volume_source": _block(
            data_volume=_block(name=_BOOT_VOLUME),
            cloud_init_config_drive=[config_drive],
            service_account=[_echo("service_account_name")],
        ),
    }


def _network_input() -> dict[str, Any]:
    return {
        "name": _NETWORK_NAME,
        "network_source": _block(
            pod=[_echo("vm_network_cidr")],
            multus=_block(network_name=_DATA_VOLUME_NAMESPACE),
        ),
    }


def _template_spec_input() -> list[dict[str, Any]]:
    toleration = {
        **_echo("effect", "key", "operator", "value"),
        "toleration_seconds": "60",
    }
    return _block(
        domain=_domain_input(),
        node_selector={"node_selector_key": "node_selector_value"},
        affinity=_affinity_input(),
        tolerations=[toleration],
        termination_grace_period_seconds=120,
        volume=[_volume_input()],
        network=[_network_input()],
        pod_dns_config=_block(option=[_echo("name", "value")]),
        **_echo(
            "priority_class_name",
            "scheduler_name",
            "eviction_strategy",
            "hostname",
            "subdomain",
            "dns_policy",
        ),
    )


def get_base_input_for_data_volume() -> dict[str, Any]:
    """A data volume definition in schema form."""
    source = _block(
        http=_block(url=_IMAGE_URL, **_echo("secret_ref", "cert_config_map")),
        pvc=[_echo("namespace", "name")],
    )
    claim = _block(
        access_modes=new_string_set(["ReadWriteOnce"]),
        resources=_block(requests=_storage("10Gi"), limits=_storage("20Gi")),
        selector=label_selector_terraform(),
        volume_name="volume_name",
        storage_class_name="standard",
    )
    return {
        "metadata": _block(
            generate_name="generate_name",
            name=_BOOT_VOLUME,
            namespace=_DATA_VOLUME_NAMESPACE,
        ),
        "spec": _block(source=source, pvc=claim, content_type="content_type"),
    }


def get_base_input_for_virtual_machine() -> dict[str, Any]:
    """A virtual machine spec in schema form."""
    return {
        "data_volume_templates": [get_base_input_for_data_volume()],
        "run_strategy": "Always",
        "template": _block(
            metadata=_template_metadata_input(),
            spec=_template_spec_input(),
        ),
    }


# API form


def _data_volume_metadata() -> dict[str, Any]:
    return {
        "generateName": "generate_name",
        "name": _BOOT_VOLUME,
        "namespace": _DATA_VOLUME_NAMESPACE,
    }


def _data_volume_spec() -> dict[str, Any]:
    source = {
        "http": {
            "url": _IMAGE_URL,
            "secretRef": "secret_ref",
            "certConfigMap": "cert_config_map",
        },
        "pvc": _echo("namespace", "name"),
    }
    claim = {
        "accessModes": ["ReadWriteOnce"],
        "resources": {
            "requests": {"storage": parse_quantity("10Gi")},
            "limits": {"storage": parse_quantity("20Gi")},
        },
        "selector": label_selector_api(),
        "volumeName": "volume_name",
        "storageClassName": "standard",
    }
    return {"source": source, "pvc": claim, "contentType": "content_type"}


def _domain_output() -> dict[str, Any]:
    def amounts(cpu: int, memory: str) -> dict[str, Any]:
        return {"memory": parse_quantity(memory), "cpu": new_quantity(cpu)}

    disk = {
        "name": _DISK_NAME,
        "serial": "serial",
        "disk": {"bus": "virtio", "readOnly": True, "pciAddress": "pci_address"},
    }
    return {
        "resources": {
            "requests": amounts(4, "10G"),
            "limits": amounts(8, "20G"),
            "overcommitGuestOverhead": False,
        },
        "devices": {
            "disks": [disk],
            "interfaces": [{"name": _NETWORK_NAME, "bridge": {}}],
        },
    }


def _scheduling_output(required: Any, preferred: Any) -> dict[str, Any]:
    return {_PREFERRED_API: preferred, _REQUIRED_API: required}


def _affinity_output() -> dict[str, Any]:
    preferred_node_term = {
        "weight": 10,
        "preference": {
            "matchExpressions": match_expression_api(),
            "matchFields": match_fields_api(),
        },
    }
    return {
        "nodeAffinity": _scheduling_output(
            {"nodeSelectorTerms": node_selector_term_api()},
            [preferred_node_term],
        ),
        "podAffinity": _scheduling_output(
            pod_required_during_scheduling_api(),
            pod_preferred_during_scheduling_api(),
        ),
        "podAntiAffinity": _scheduling_output(
            pod_required_during_scheduling_api(),
            pod_preferred_during_scheduling_api(),
        ),
    }


def _volume_output() -> dict[str, Any]:
    config_drive = {
        "userDataSecretRef": {"name": "name"},
        "userDataBase64": "user_data_base64",
        "userData": "user_data",
        "networkDataSecretRef": {"name": "name"},
        "networkDataBase64": "network_data_base64",
        "networkData": "network_data",
    }
    return {
        "name": _DISK_NAME,
        "dataVolume": {"name": _BOOT_VOLUME},
        "cloudInitConfigDrive": config_drive,
        "serviceAccount": {"serviceAccountName": "service_account_name"},
    }


def _template_spec_output() -> dict[str, Any]:
    toleration = {**_echo("effect", "key", "operator", "value"), "tolerationSeconds": 60}
    return {
        "priorityClassName": "priority_class_name",
        "domain": _domain_output(),
        "nodeSelector": {"node_selector_key": "node_selector_value"},
        "affinity": _affinity_output(),
        "schedulerName": "scheduler_name",
        "tolerations": [toleration],
        "evictionStrategy": "eviction_strategy",
        "terminationGracePeriodSeconds": 120,
        "volumes": [_volume_output()],
        "hostname": "hostname",
        "subdomain": "subdomain",
        "networks": [
            {
                "name": _NETWORK_NAME,
                "pod": {"vmNetworkCIDR": "vm_network_cidr"},
                "multus": {"networkName": _DATA_VOLUME_NAMESPACE},
            }
        ],
        "dnsPolicy": "dns_policy",
        "dnsConfig": {"options": [_echo("name", "value")]},
    }


def get_base_output_for_data_volume_template_spec() -> dict[str, Any]:
    """The data volume template that the schema-form data volume expands to."""
    return {"metadata": _data_volume_metadata(), "spec": _data_volume_spec()}


def get_base_output_for_data_volume() -> dict[str, Any]:
    """The data volume that :func:`get_base_input_for_data_volume` expands to."""
    return {"metadata": _data_volume_metadata(), "spec": _data_volume_spec()}


def get_base_output_for_virtual_machine() -> dict[str, Any]:
    """The virtual machine spec that :func:`get_base_input_for_virtual_machine` expands to."""
    metadata = {
        "annotations": {"annotation_key": "annotation_value"},
        "labels": {"kubevirt.io/vm": "test-vm"},
        "generateName": "generate_name",
        "name": "name",
        "namespace": "namespace",
    }
    return {
        "runStrategy": "Always",
        "dataVolumeTemplates": [get_base_output_for_data_volume_template_spec()],
        "template": {"metadata": metadata, "spec": _template_spec_output()},
    }