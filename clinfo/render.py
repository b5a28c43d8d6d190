"""
Renderers turning raw query bytes into report text.

Every renderer returns a list of strings: the first one goes on the
property's label line, any further ones on aligned continuation lines.
"""
import numpy as np

from clinfo.config import VECTOR_ELEMENT_SIZE
from clinfo.descriptors import (
    CHANNEL_ORDER_BASE,
    CHANNEL_ORDERS,
    CHANNEL_TYPE_BASE,
    CHANNEL_TYPES,
    ValueKind,
)

_UINT64 = np.dtype("<u8")


def decode_string(raw):
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def decode_unsigned(raw):
    """Little-endian unsigned value of the first 8 bytes, zero padded."""
    padded = raw[:_UINT64.itemsize].ljust(_UINT64.itemsize, b"\0")
    return int(np.frombuffer(padded, dtype=_UINT64)[0])


def decode_vector(raw, size):
    nbytes = size * VECTOR_ELEMENT_SIZE
    padded = raw[:nbytes].ljust(nbytes, b"\0")
    return [int(v) for v in np.frombuffer(padded, dtype=_UINT64, count=size)]


def group_thousands(value):
    return format(value, ",")


def format_hex(value):
    return f"0x{value:x}"


def decompose_flags(value, flags):
    """Name every known flag set in value, then any leftover bits."""
    names = []
    for bit, label in flags:
        if value & bit:
            value &= ~bit
            names.append(label)
    if value:
        names.append(f"Unknown (0x{value:x})")
    return " ".join(names)


def bounded_label(value, labels):
    if 0 <= value < len(labels):
        return f"{labels[value]} ({value})"
    return f"??? ({value})"


def sorted_tokens(text):
    return sorted(text.split())


def code_name(code, base, names):
    index = code - base
    if 0 <= index < len(names):
        return names[index]
    return f"UNKNOWN 0x{code:x}"


def format_image_format(channel_order, channel_type):
    return (f"{code_name(channel_order, CHANNEL_ORDER_BASE, CHANNEL_ORDERS)}, "
            f"{code_name(channel_type, CHANNEL_TYPE_BASE, CHANNEL_TYPES)}")


def _plain_string(descriptor, raw):
    return [decode_string(raw)]


def _extension_list(descriptor, raw):
    return sorted_tokens(decode_string(raw))


def _scalar(descriptor, raw):
    return [group_thousands(decode_unsigned(raw))]


def _hex(descriptor, raw):
    return [format_hex(decode_unsigned(raw))]


def _bitmask(descriptor, raw):
    return [decompose_flags(decode_unsigned(raw), descriptor.flags)]


def _enum(descriptor, raw):
    return [bounded_label(decode_unsigned(raw), descriptor.labels)]


def _vector(descriptor, raw):
    return [", ".join(str(v) for v in decode_vector(raw, descriptor.size))]


RENDERERS = {
    ValueKind.PLAIN_STRING: _plain_string,
    ValueKind.EXTENSION_LIST: _extension_list,
    ValueKind.SCALAR_INTEGER: _scalar,
    ValueKind.HEX_BITFIELD: _hex,
    ValueKind.NAMED_FLAG_BITMASK: _bitmask,
    ValueKind.BOUNDED_ENUM: _enum,
    ValueKind.FIXED_VECTOR: _vector,
}


def render(descriptor, raw):
    return RENDERERS[descriptor.kind](descriptor, raw)
