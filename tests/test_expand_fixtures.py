from kvtfutils import expand_fixtures as fx
from kvtfutils.entities import label_selector_api, node_selector_term_api
from kvtfutils.quantity import new_quantity, parse_quantity
from kvtfutils.structures import (
    build_id,
    expand_map_to_resource_list,
    expand_string_map,
    schema_set_to_string_array,
)
from kvtfutils.validators import validate_type_string_nullable_int


def get_data_volume(vm):
    return vm["data_volume_templates"][0]


def get_pvc_requirements(data_volume):
    return data_volume["spec"][0]["pvc"][0]["resources"][0]


def get_domain_resources(vm):
    return vm["template"][0]["spec"][0]["domain"][0]["resources"][0]


def get_virtual_machine_tolerations(vm):
    return vm["template"][0]["spec"][0]["tolerations"][0]


def test_vm_input_embeds_data_volume_input():
    vm = fx.get_base_input_for_virtual_machine()
    assert get_data_volume(vm) == fx.get_base_input_for_data_volume()


def test_pvc_requirements_expand_to_output_resources():
    requirements = get_pvc_requirements(fx.get_base_input_for_data_volume())
    assert requirements == {"requests": {"storage": "10Gi"}, "limits": {"storage": "20Gi"}}
    output = fx.get_base_output_for_data_volume()["spec"]["pvc"]["resources"]
    assert expand_map_to_resource_list(requirements["requests"]) == output["requests"]
    assert expand_map_to_resource_list(requirements["limits"]) == output["limits"]
    assert str(output["requests"]["storage"]) == "10Gi"
    assert str(output["limits"]["storage"]) == "20Gi"


def test_domain_resources_expand_to_output():
    resources = get_domain_resources(fx.get_base_input_for_virtual_machine())
    assert resources["requests"] == {"cpu": 4, "memory": "10G"}
    assert resources["over_commit_guest_overhead"] is False
    output = fx.get_base_output_for_virtual_machine()["template"]["spec"]["domain"]["resources"]
    assert expand_map_to_resource_list(resources["requests"]) == output["requests"]
    assert expand_map_to_resource_list(resources["limits"]) == output["limits"]
    assert output["requests"]["cpu"] == new_quantity(4)
    assert output["limits"]["memory"] == parse_quantity("20G")
    assert str(output["requests"]["memory"]) == "10G"
    assert str(output["limits"]["cpu"]) == "8"
    assert output["overcommitGuestOverhead"] is False


def test_tolerations_seconds_string_maps_to_int():
    toleration = get_virtual_machine_tolerations(fx.get_base_input_for_virtual_machine())
    assert toleration["toleration_seconds"] == "60"
    assert validate_type_string_nullable_int(toleration["toleration_seconds"], "toleration_seconds").errors == []
    output = fx.get_base_output_for_virtual_machine()["template"]["spec"]["tolerations"][0]
    assert output["tolerationSeconds"] == int(toleration["toleration_seconds"])
    assert output["effect"] == toleration["effect"] == "effect"


def test_data_volume_output_matches_template_spec():
    assert fx.get_base_output_for_data_volume() == fx.get_base_output_for_data_volume_template_spec()
    vm = fx.get_base_output_for_virtual_machine()
    assert vm["dataVolumeTemplates"] == [fx.get_base_output_for_data_volume_template_spec()]


def test_data_volume_metadata_and_id():
    metadata = fx.get_base_output_for_data_volume()["metadata"]
    assert build_id(metadata["namespace"], metadata["name"]) == "tenantcluster/test-vm-bootvolume"
    assert metadata["generateName"] == "generate_name"


def test_access_modes_set_maps_to_list():
    pvc_input = fx.get_base_input_for_data_volume()["spec"][0]["pvc"][0]
    pvc_output = fx.get_base_output_for_data_volume()["spec"]["pvc"]
    assert pvc_input["access_modes"] == {"ReadWriteOnce"}
    assert schema_set_to_string_array(pvc_input["access_modes"]) == pvc_output["accessModes"]
    assert pvc_output["selector"] == label_selector_api()
    assert pvc_output["storageClassName"] == "standard"


def test_template_metadata_maps():
    vm_input = fx.get_base_input_for_virtual_machine()
    meta_in = vm_input["template"][0]["metadata"][0]
    meta_out = fx.get_base_output_for_virtual_machine()["template"]["metadata"]
    assert expand_string_map(meta_in["annotations"]) == meta_out["annotations"]
    assert expand_string_map(meta_in["labels"]) == {"kubevirt.io/vm": "test-vm"}
    assert meta_out["labels"] == {"kubevirt.io/vm": "test-vm"}


def test_vm_output_core_fields():
    spec = fx.get_base_output_for_virtual_machine()
    assert spec["runStrategy"] == "Always"
    template_spec = spec["template"]["spec"]
    assert template_spec["terminationGracePeriodSeconds"] == 120
    assert template_spec["evictionStrategy"] == "eviction_strategy"
    assert template_spec["domain"]["devices"]["interfaces"] == [{"name": "main", "bridge": {}}]
    assert template_spec["networks"][0]["multus"] == {"networkName": "tenantcluster"}
    assert template_spec["dnsConfig"] == {"options": [{"name": "name", "value": "value"}]}
    node_affinity = template_spec["affinity"]["nodeAffinity"]
    assert node_affinity["requiredDuringSchedulingIgnoredDuringExecution"] == {
        "nodeSelectorTerms": node_selector_term_api()
    }
    assert node_affinity["preferredDuringSchedulingIgnoredDuringExecution"][0]["weight"] == 10


def test_each_call_returns_fresh_structure():
    first = fx.get_base_input_for_virtual_machine()
    get_virtual_machine_tolerations(first)["key"] = "changed"
    get_data_volume(first)["metadata"][0]["name"] = "changed"
    second = fx.get_base_input_for_virtual_machine()
    assert get_virtual_machine_tolerations(second)["key"] == "key"
    assert get_data_volume(second)["metadata"][0]["name"] == "test-vm-bootvolume"

    out = fx.get_base_output_for_virtual_machine()
    out["template"]["spec"]["volumes"].clear()
    assert len(fx.get_base_output_for_virtual_machine()["template"]["spec"]["volumes"]) == 1