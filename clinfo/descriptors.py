"""
Property tables for platforms and devices.

Keys are the symbolic OpenCL info names (``cl.device_info.NAME`` is keyed as
``"NAME"``). The order of every table is the order of the printed report.
"""
import enum
from dataclasses import dataclass


class ValueKind(enum.Enum):
    PLAIN_STRING = "string"
    EXTENSION_LIST = "extensions"
    SCALAR_INTEGER = "scalar"
    HEX_BITFIELD = "hex"
    NAMED_FLAG_BITMASK = "bitmask"
    BOUNDED_ENUM = "enum"
    FIXED_VECTOR = "vector"


@dataclass(frozen=True)
class PropertyDescriptor:
    key: str
    label: str
    kind: ValueKind
    flags: tuple = ()
    labels: tuple = ()
    size: int = 0


def _table(kind, *keys):
    return tuple(PropertyDescriptor(key, key, kind) for key in keys)


# cl_device_type bits
DEVICE_TYPE_FLAGS = (
    (1 << 0, "Default"),
    (1 << 1, "CPU"),
    (1 << 2, "GPU"),
    (1 << 3, "Accelerator"),
    (1 << 4, "Custom"),
)

# cl_device_exec_capabilities bits
EXEC_CAPABILITY_FLAGS = (
    (1 << 0, "Kernel"),
    (1 << 1, "Native"),
)

GLOBAL_MEM_CACHE_TYPES = ("None", "Read-Only", "Read-Write")
LOCAL_MEM_TYPES = ("???", "Local", "Global")


PLATFORM_STRING_PROPS = (
    PropertyDescriptor("NAME", "name", ValueKind.PLAIN_STRING),
    PropertyDescriptor("VENDOR", "vendor", ValueKind.PLAIN_STRING),
    PropertyDescriptor("PROFILE", "profile", ValueKind.PLAIN_STRING),
    PropertyDescriptor("VERSION", "version", ValueKind.PLAIN_STRING),
    PropertyDescriptor("EXTENSIONS", "extensions", ValueKind.EXTENSION_LIST),
)

DEVICE_STRING_PROPS = _table(
    ValueKind.PLAIN_STRING,
    "NAME",
    "VENDOR",
    "PROFILE",
    "VERSION",
    "DRIVER_VERSION",
) + _table(ValueKind.EXTENSION_LIST, "EXTENSIONS")

DEVICE_COMPOSITE_PROPS = (
    PropertyDescriptor("TYPE", "TYPE", ValueKind.NAMED_FLAG_BITMASK,
                       flags=DEVICE_TYPE_FLAGS),
    PropertyDescriptor("EXECUTION_CAPABILITIES", "EXECUTION_CAPABILITIES",
                       ValueKind.NAMED_FLAG_BITMASK, flags=EXEC_CAPABILITY_FLAGS),
    PropertyDescriptor("GLOBAL_MEM_CACHE_TYPE", "GLOBAL_MEM_CACHE_TYPE",
                       ValueKind.BOUNDED_ENUM, labels=GLOBAL_MEM_CACHE_TYPES),
    PropertyDescriptor("LOCAL_MEM_TYPE", "LOCAL_MEM_TYPE",
                       ValueKind.BOUNDED_ENUM, labels=LOCAL_MEM_TYPES),
)

DEVICE_HEX_PROPS = _table(
    ValueKind.HEX_BITFIELD,
    "SINGLE_FP_CONFIG",
    "QUEUE_PROPERTIES",
)

DEVICE_SCALAR_PROPS = _table(
    ValueKind.SCALAR_INTEGER,
    "VENDOR_ID",
    "MAX_COMPUTE_UNITS",
    "MAX_WORK_ITEM_DIMENSIONS",
    "MAX_WORK_GROUP_SIZE",
    "PREFERRED_VECTOR_WIDTH_CHAR",
    "PREFERRED_VECTOR_WIDTH_SHORT",
    "PREFERRED_VECTOR_WIDTH_INT",
    "PREFERRED_VECTOR_WIDTH_LONG",
    "PREFERRED_VECTOR_WIDTH_FLOAT",
    "PREFERRED_VECTOR_WIDTH_DOUBLE",
    "MAX_CLOCK_FREQUENCY",
    "ADDRESS_BITS",
    "MAX_MEM_ALLOC_SIZE",
    "IMAGE_SUPPORT",
    "MAX_READ_IMAGE_ARGS",
    "MAX_WRITE_IMAGE_ARGS",
    "IMAGE2D_MAX_WIDTH",
    "IMAGE2D_MAX_HEIGHT",
    "IMAGE3D_MAX_WIDTH",
    "IMAGE3D_MAX_HEIGHT",
    "IMAGE3D_MAX_DEPTH",
    "MAX_SAMPLERS",
    "MAX_PARAMETER_SIZE",
    "MEM_BASE_ADDR_ALIGN",
    "MIN_DATA_TYPE_ALIGN_SIZE",
    "GLOBAL_MEM_CACHELINE_SIZE",
    "GLOBAL_MEM_CACHE_SIZE",
    "GLOBAL_MEM_SIZE",
    "MAX_CONSTANT_BUFFER_SIZE",
    "MAX_CONSTANT_ARGS",
    "LOCAL_MEM_SIZE",
    "ERROR_CORRECTION_SUPPORT",
    "PROFILING_TIMER_RESOLUTION",
    "ENDIAN_LITTLE",
    "AVAILABLE",
    "COMPILER_AVAILABLE",
)

DEVICE_VECTOR_PROPS = (
    PropertyDescriptor("MAX_WORK_ITEM_SIZES", "MAX_WORK_ITEM_SIZES",
                       ValueKind.FIXED_VECTOR, size=3),
)

PLATFORM_PROPERTIES = PLATFORM_STRING_PROPS

DEVICE_PROPERTIES = (
    DEVICE_STRING_PROPS
    + DEVICE_COMPOSITE_PROPS
    + DEVICE_HEX_PROPS
    + DEVICE_SCALAR_PROPS
    + DEVICE_VECTOR_PROPS
)

# Printed after DEVICE_PROPERTIES when image formats are requested.
IMAGE_FORMATS_LABEL = "IMAGE_FORMATS"

# cl_mem_flags / cl_mem_object_type used for the image format listing
MEM_READ_ONLY = 1 << 2
MEM_OBJECT_IMAGE2D = 0x10F1

# cl_channel_order and cl_channel_type codes are contiguous from these bases.
CHANNEL_ORDER_BASE = 0x10B0
CHANNEL_ORDERS = (
    "CL_R", "CL_A", "CL_RG", "CL_RA", "CL_RGB", "CL_RGBA", "CL_BGRA",
    "CL_ARGB", "CL_INTENSITY", "CL_LUMINANCE", "CL_Rx", "CL_RGx", "CL_RGBx",
    "CL_DEPTH", "CL_DEPTH_STENCIL", "CL_sRGB", "CL_sRGBx", "CL_sRGBA",
    "CL_sBGRA", "CL_ABGR",
)

CHANNEL_TYPE_BASE = 0x10D0
CHANNEL_TYPES = (
    "CL_SNORM_INT8", "CL_SNORM_INT16", "CL_UNORM_INT8", "CL_UNORM_INT16",
    "CL_UNORM_SHORT_565", "CL_UNORM_SHORT_555", "CL_UNORM_INT_101010",
    "CL_SIGNED_INT8", "CL_SIGNED_INT16", "CL_SIGNED_INT32",
    "CL_UNSIGNED_INT8", "CL_UNSIGNED_INT16", "CL_UNSIGNED_INT32",
    "CL_HALF_FLOAT", "CL_FLOAT", "CL_UNORM_INT24", "CL_UNORM_INT_101010_2",
)
