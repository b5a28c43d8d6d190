from clinfo import descriptors
from clinfo.descriptors import ValueKind


def test_platform_order() -> None:
    assert [d.label for d in descriptors.PLATFORM_PROPERTIES] == [
        "name",
        "vendor",
        "profile",
        "version",
        "extensions",
    ]
    assert descriptors.PLATFORM_PROPERTIES[-1].kind is ValueKind.EXTENSION_LIST


def test_device_merged_order_groups_kinds() -> None:
    kinds = [d.kind for d in descriptors.DEVICE_PROPERTIES]
    groups = []
    for kind in kinds:
        group = {
            ValueKind.PLAIN_STRING: "string",
            ValueKind.EXTENSION_LIST: "string",
            ValueKind.NAMED_FLAG_BITMASK: "composite",
            ValueKind.BOUNDED_ENUM: "composite",
            ValueKind.HEX_BITFIELD: "hex",
            ValueKind.SCALAR_INTEGER: "scalar",
            ValueKind.FIXED_VECTOR: "vector",
        }[kind]
        if not groups or groups[-1] != group:
            groups.append(group)

    assert groups == ["string", "composite", "hex", "scalar", "vector"]


def test_device_order_starts_and_ends_as_documented() -> None:
    keys = [d.key for d in descriptors.DEVICE_PROPERTIES]

    assert keys[:10] == [
        "NAME",
        "VENDOR",
        "PROFILE",
        "VERSION",
        "DRIVER_VERSION",
        "EXTENSIONS",
        "TYPE",
        "EXECUTION_CAPABILITIES",
        "GLOBAL_MEM_CACHE_TYPE",
        "LOCAL_MEM_TYPE",
    ]
    assert keys[10:12] == ["SINGLE_FP_CONFIG", "QUEUE_PROPERTIES"]
    assert keys[12] == "VENDOR_ID"
    assert keys[-2:] == ["COMPILER_AVAILABLE", "MAX_WORK_ITEM_SIZES"]


def test_device_keys_are_unique() -> None:
    keys = [d.key for d in descriptors.DEVICE_PROPERTIES]

    assert len(keys) == len(set(keys))


def test_composites_carry_their_tables() -> None:
    by_key = {d.key: d for d in descriptors.DEVICE_COMPOSITE_PROPS}

    assert by_key["TYPE"].flags == descriptors.DEVICE_TYPE_FLAGS
    assert by_key["EXECUTION_CAPABILITIES"].flags == descriptors.EXEC_CAPABILITY_FLAGS
    assert by_key["GLOBAL_MEM_CACHE_TYPE"].labels == ("None", "Read-Only", "Read-Write")
    assert by_key["LOCAL_MEM_TYPE"].labels == ("???", "Local", "Global")


def test_work_item_sizes_is_a_triple() -> None:
    (vector,) = descriptors.DEVICE_VECTOR_PROPS

    assert vector.kind is ValueKind.FIXED_VECTOR
    assert vector.size == 3
