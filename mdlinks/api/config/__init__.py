"""Config API domain."""

from .._output_schemas.config import ConfigInitOutput, ConfigShowOutput, ConfigVersionOutput
from .LogConfig import LogConfig
from .MdlinksConfig import MdlinksConfig
from .ScanConfig import ScanConfig

__all__ = [
    "ConfigInitOutput",
    "ConfigShowOutput",
    "ConfigVersionOutput",
    "LogConfig",
    "MdlinksConfig",
    "ScanConfig",
]
