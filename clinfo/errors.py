"""OpenCL status translation and the exceptions raised at enumeration seams."""

SUCCESS = 0
DEVICE_NOT_FOUND = -1
INVALID_VALUE = -30

_STATUS_MESSAGES = {
    SUCCESS: "no error",
    DEVICE_NOT_FOUND: "device not found",
    -2: "device not available",
    -3: "compiler not available",
    -4: "mem object allocation failure",
    -5: "out of resources",
    -6: "out of host memory",
    -7: "profiling not available",
    -8: "memcopy overlaps",
    -9: "image format mismatch",
    -10: "image format not supported",
    -11: "build program failed",
    -12: "map failed",
    INVALID_VALUE: "invalid value",
    -31: "invalid device type",
    -32: "invalid platform",
    -33: "invalid device",
    -34: "invalid context",
    -1001: "platform not found",
}


def status_string(code):
    """Human readable text for an OpenCL status code."""
    try:
        return _STATUS_MESSAGES[code]
    except KeyError:
        return f"unknown error {code}"


class ProviderError(Exception):
    """An enumeration call into the provider failed with an OpenCL status."""

    def __init__(self, code, routine=None):
        self.code = code
        self.routine = routine
        super().__init__(status_string(code))


class FatalEnumerationError(Exception):
    """The platform list itself could not be enumerated."""

    def __init__(self, cause):
        self.cause = cause
        super().__init__(f"Unable to enumerate the platforms: {cause}")
