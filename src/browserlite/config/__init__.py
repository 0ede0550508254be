from .config import (
    BrowserConfig,
    Config,
    ExtractionSettings,
    MonitoringConfig,
    SearchConfig,
    TimeoutConfig,
    find_config_file,
    load_config,
)

__all__ = [
    "BrowserConfig",
    "Config",
    "ExtractionSettings",
    "MonitoringConfig",
    "SearchConfig",
    "TimeoutConfig",
    "find_config_file",
    "load_config",
]
