from dataclasses import dataclass

# Buffer capacities handed to every query, per value kind.
STRING_CAPACITY = 65536
SCALAR_CAPACITY = 8
VECTOR_ELEMENT_SIZE = 8

SEPARATOR_WIDTH = 80
PLATFORM_SEPARATOR = "=" * SEPARATOR_WIDTH
DEVICE_SEPARATOR = "-" * SEPARATOR_WIDTH

PLATFORM_LABEL_WIDTH = 10
DEVICE_LABEL_WIDTH = 30


@dataclass(frozen=True)
class ReportConfig:
    image_formats: bool = False
    string_capacity: int = STRING_CAPACITY
    scalar_capacity: int = SCALAR_CAPACITY


def build_config(args):
    """Turn parsed command line arguments into a ReportConfig."""
    return ReportConfig(image_formats=bool(args.image_formats))
