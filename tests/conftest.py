from collections.abc import Callable

import pytest

from clinfo.descriptors import DEVICE_PROPERTIES
from clinfo.errors import INVALID_VALUE, ProviderError
from clinfo.provider import CapabilityProvider, QueryResult, query_value

PLATFORM_VALUES = {
    "NAME": "Fake Platform",
    "VENDOR": "Acme",
    "PROFILE": "FULL_PROFILE",
    "VERSION": "OpenCL 3.0 Fake",
    "EXTENSIONS": "cl_khr_icd cl_khr_fp64 cl_ext_atomic",
}

DEVICE_VALUES = {
    "NAME": "Fake GPU",
    "VENDOR": "Acme",
    "PROFILE": "FULL_PROFILE",
    "VERSION": "OpenCL 3.0",
    "DRIVER_VERSION": "1.2.3",
    "EXTENSIONS": "cl_khr_fp64 cl_khr_fp16 cl_ext_b",
    "TYPE": 1 << 2,
    "EXECUTION_CAPABILITIES": 1,
    "GLOBAL_MEM_CACHE_TYPE": 2,
    "LOCAL_MEM_TYPE": 1,
    "SINGLE_FP_CONFIG": 0xBE,
    "QUEUE_PROPERTIES": 0x3,
    "GLOBAL_MEM_SIZE": 8589934592,
    "MAX_WORK_ITEM_SIZES": [1024, 512, 64],
}


class FakePlatform:
    def __init__(self, values=None, devices=(), device_error=None):
        self.values = dict(PLATFORM_VALUES if values is None else values)
        self.devices = list(devices)
        self.device_error = device_error


class FakeDevice:
    def __init__(self, values=None, formats=(), format_error=None):
        if values is None:
            values = {d.key: 1 for d in DEVICE_PROPERTIES}
            values.update(DEVICE_VALUES)
        self.values = dict(values)
        self.formats = list(formats)
        self.format_error = format_error


class FakeProvider(CapabilityProvider):
    """In-memory provider; missing keys fail with INVALID_VALUE."""

    def __init__(self, platforms=(), platform_error=None):
        self.platforms = list(platforms)
        self.platform_error = platform_error
        self.queries = []
        self.format_calls = []

    def get_platforms(self):
        if self.platform_error is not None:
            raise ProviderError(self.platform_error)
        return list(self.platforms)

    def get_devices(self, platform):
        if platform.device_error is not None:
            raise ProviderError(platform.device_error)
        return list(platform.devices)

    def query(self, entity, key, capacity):
        self.queries.append((entity, key, capacity))
        if key not in entity.values:
            return QueryResult(error=INVALID_VALUE)
        value = entity.values[key]
        if isinstance(value, QueryResult):
            return value
        return query_value(value, capacity)

    def image_formats(self, device, flags, image_type):
        self.format_calls.append((device, flags, image_type))
        if isinstance(device.format_error, ProviderError):
            raise device.format_error
        if device.format_error is not None:
            raise ProviderError(device.format_error)
        return list(device.formats)


@pytest.fixture
def make_device() -> Callable[..., FakeDevice]:
    def _make_device(overrides=None, missing=(), **kwargs) -> FakeDevice:
        device = FakeDevice(**kwargs)
        device.values.update(overrides or {})
        for key in missing:
            del device.values[key]
        return device

    return _make_device


@pytest.fixture
def make_platform() -> Callable[..., FakePlatform]:
    def _make_platform(devices=(), overrides=None, **kwargs) -> FakePlatform:
        platform = FakePlatform(devices=devices, **kwargs)
        platform.values.update(overrides or {})
        return platform

    return _make_platform


@pytest.fixture
def provider_for() -> Callable[..., FakeProvider]:
    def _provider_for(*platforms, platform_error=None) -> FakeProvider:
        return FakeProvider(platforms, platform_error=platform_error)

    return _provider_for
