"""
Report assembly: per-entity property passes and the platform/device walk.

Everything here yields report lines; diagnostics (failed queries, truncated
values, failed enumerations) go through the module logger instead.
"""
import logging

from clinfo.config import (
    DEVICE_LABEL_WIDTH,
    DEVICE_SEPARATOR,
    PLATFORM_LABEL_WIDTH,
    PLATFORM_SEPARATOR,
    VECTOR_ELEMENT_SIZE,
    ReportConfig,
)
from clinfo.descriptors import (
    DEVICE_PROPERTIES,
    IMAGE_FORMATS_LABEL,
    MEM_OBJECT_IMAGE2D,
    MEM_READ_ONLY,
    PLATFORM_PROPERTIES,
    ValueKind,
)
from clinfo.errors import FatalEnumerationError, ProviderError, status_string
from clinfo.render import format_image_format, render

logger = logging.getLogger(__name__)

_STRING_KINDS = (ValueKind.PLAIN_STRING, ValueKind.EXTENSION_LIST)

# ProviderError.routine values raised by image_formats with their own wording
_IMAGE_FORMAT_FAILURES = {
    "create context": "Unable to create context",
}


def _plural(count, noun):
    return f"{count} {noun}{'' if count == 1 else 's'}"


def capacity_for(descriptor, config):
    if descriptor.kind in _STRING_KINDS:
        return config.string_capacity
    if descriptor.kind is ValueKind.FIXED_VECTOR:
        return descriptor.size * VECTOR_ELEMENT_SIZE
    return config.scalar_capacity


def check_truncation(entity_name, label, result, capacity, oversize="Large"):
    """Warn when the provider needed more room than it was given."""
    if result.natural_size > capacity:
        logger.warning("%s: %s %s (%d bytes)!  Truncating to %d!",
                       entity_name, oversize, label, result.natural_size, capacity)


def property_lines(entity_name, label, width, values):
    prefix = f"{entity_name}: {label:<{width}}: "
    yield prefix + (values[0] if values else "")
    indent = " " * len(prefix)
    for value in values[1:]:
        yield indent + value


def compose_entity(provider, entity, entity_name, descriptors, width, config,
                   oversize="Large"):
    """Query and render every descriptor for one platform or device.

    A failed query is reported and skipped; the remaining descriptors are
    still queried.
    """
    for descriptor in descriptors:
        capacity = capacity_for(descriptor, config)
        result = provider.query(entity, descriptor.key, capacity)
        if not result.ok:
            logger.error("%s: Unable to get %s: %s!",
                         entity_name, descriptor.label, status_string(result.error))
            continue
        check_truncation(entity_name, descriptor.label, result, capacity, oversize)
        values = render(descriptor, result.raw[:capacity])
        yield from property_lines(entity_name, descriptor.label, width, values)


def image_format_lines(provider, device, entity_name):
    try:
        formats = provider.image_formats(device, MEM_READ_ONLY, MEM_OBJECT_IMAGE2D)
    except ProviderError as exc:
        failure = _IMAGE_FORMAT_FAILURES.get(exc.routine, "Unable to get supported image formats")
        logger.error("%s: %s: %s!", entity_name, failure, exc)
        return
    values = [_plural(len(formats), "format")]
    values.extend(format_image_format(order, dtype) for order, dtype in formats)
    yield from property_lines(entity_name, IMAGE_FORMATS_LABEL, DEVICE_LABEL_WIDTH, values)


def compose_platform(provider, index, platform, config):
    return compose_entity(provider, platform, f"platform[{index}]",
                          PLATFORM_PROPERTIES, PLATFORM_LABEL_WIDTH, config,
                          oversize="Huge")


def compose_device(provider, index, device, config):
    entity_name = f"device[{index}]"
    yield from compose_entity(provider, device, entity_name,
                              DEVICE_PROPERTIES, DEVICE_LABEL_WIDTH, config)
    if config.image_formats:
        yield from image_format_lines(provider, device, entity_name)


def platform_section(provider, index, platform, config):
    yield from compose_platform(provider, index, platform, config)
    try:
        devices = provider.get_devices(platform)
    except ProviderError as exc:
        logger.error("platform[%d]: Unable to enumerate the devices: %s", index, exc)
        return
    yield f"platform[{index}], {_plural(len(devices), 'device')}:"
    for device_index, device in enumerate(devices):
        if device_index:
            yield DEVICE_SEPARATOR
        yield from compose_device(provider, device_index, device, config)


def walk(provider, config=None):
    """Yield the whole report, platform by platform.

    Raises FatalEnumerationError when the platform list is unavailable. A
    platform whose devices cannot be listed only loses its device sections.
    """
    config = config or ReportConfig()
    try:
        platforms = provider.get_platforms()
    except ProviderError as exc:
        raise FatalEnumerationError(exc) from exc
    yield f"{_plural(len(platforms), 'platform')}:"
    for index, platform in enumerate(platforms):
        if index:
            yield PLATFORM_SEPARATOR
        yield from platform_section(provider, index, platform, config)
