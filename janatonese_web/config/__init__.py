from .ini_config import AppSettings, IniConfig, parse_port

__all__ = [
    "AppSettings",
    "IniConfig",
    "parse_port",
]
