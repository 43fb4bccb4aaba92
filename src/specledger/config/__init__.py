from .loader import CONFIG_FILENAME, load_config
from .models import GlobalConfig, ProjectConfig, ReporterConfig

__all__ = [
    "CONFIG_FILENAME",
    "GlobalConfig",
    "ProjectConfig",
    "ReporterConfig",
    "load_config",
]
