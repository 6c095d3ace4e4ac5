from .Str import Str
from .Config import config, ConfigRepository, env

__all__ = [
    "Str",
    "config",
    "ConfigRepository",
    "env"
]
