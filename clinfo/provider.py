"""
The contract between the report code and an OpenCL runtime.

Info queries come back as raw little-endian bytes plus the natural size the
value needed, mirroring ``clGetPlatformInfo`` / ``clGetDeviceInfo``.
"""
from dataclasses import dataclass
from typing import Optional

import numpy as np

_UINT64_MASK = (1 << 64) - 1


@dataclass(frozen=True)
class QueryResult:
    raw: bytes = b""
    natural_size: int = 0
    error: Optional[int] = None

    @property
    def ok(self):
        return self.error is None


class CapabilityProvider:
    def get_platforms(self):
        """Return the platforms in enumeration order, or raise ProviderError."""
        raise NotImplementedError

    def get_devices(self, platform):
        """Return the devices of a platform, or raise ProviderError."""
        raise NotImplementedError

    def query(self, entity, key, capacity):
        """Fetch one info value.

        Never raises for an unsupported property: the failure is returned as
        ``QueryResult(error=code)``. ``raw`` holds at most ``capacity`` bytes
        while ``natural_size`` is the size the whole value needed.
        """
        raise NotImplementedError

    def image_formats(self, device, flags, image_type):
        """Return ``(channel_order, channel_data_type)`` pairs for a device."""
        raise NotImplementedError


def encode_value(value):
    """Raw bytes for a decoded info value.

    Strings get a NUL terminator, integers and booleans become 8-byte
    unsigned values and integer sequences consecutive 8-byte elements.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8") + b"\0"
    if isinstance(value, (list, tuple, np.ndarray)):
        return np.array([int(v) & _UINT64_MASK for v in value], dtype="<u8").tobytes()
    return np.array(int(value) & _UINT64_MASK, dtype="<u8").tobytes()


def query_value(value, capacity):
    raw = encode_value(value)
    return QueryResult(raw[:capacity], len(raw))
