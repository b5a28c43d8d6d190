import pyopencl as cl

from clinfo.errors import DEVICE_NOT_FOUND, INVALID_VALUE, ProviderError
from clinfo.provider import CapabilityProvider, QueryResult, query_value


def _status(exc):
    return getattr(exc, "code", None)


class OpenCLProvider(CapabilityProvider):
    """CapabilityProvider backed by pyopencl."""

    def get_platforms(self):
        try:
            return cl.get_platforms()
        except cl.Error as exc:
            raise ProviderError(_status(exc), "get_platforms") from exc

    def get_devices(self, platform):
        try:
            return platform.get_devices(cl.device_type.ALL)
        except cl.Error as exc:
            # pyopencl raises instead of returning an empty list
            if _status(exc) == DEVICE_NOT_FOUND:
                return []
            raise ProviderError(_status(exc), "get_devices") from exc

    def query(self, entity, key, capacity):
        info = cl.platform_info if isinstance(entity, cl.Platform) else cl.device_info
        param = getattr(info, key, None)
        if param is None:
            return QueryResult(error=INVALID_VALUE)
        try:
            value = entity.get_info(param)
        except cl.Error as exc:
            return QueryResult(error=_status(exc))
        return query_value(value, capacity)

    def image_formats(self, device, flags, image_type):
        # The context only lives for this call.
        try:
            context = cl.Context([device])
        except cl.Error as exc:
            raise ProviderError(_status(exc), "create context") from exc
        try:
            formats = cl.get_supported_image_formats(context, flags, image_type)
        except cl.Error as exc:
            raise ProviderError(_status(exc), "get_supported_image_formats") from exc
        finally:
            del context
        return [(fmt.channel_order, fmt.channel_data_type) for fmt in formats]
