from .calc import InvalidInput, parse_radius, read_tokens, run_loop, run_once
from .geometry import CM_PER_INCH, PI, Measurement
from .version import version as __version__

__all__ = [
    "InvalidInput",
    "parse_radius",
    "read_tokens",
    "run_loop",
    "run_once",
    "CM_PER_INCH",
    "PI",
    "Measurement",
    "__version__",
]
