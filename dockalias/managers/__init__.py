"""管理器模块"""

from .base_manager import BaseManager
from .config_manager import ConfigError, ConfigManager
from .container_manager import ContainerManager
from .image_manager import ImageManager
from .network_manager import NetworkManager
from .system_manager import SystemManager
from .volume_manager import VolumeManager

__all__ = [
    "BaseManager",
    "ConfigError",
    "ConfigManager",
    "ContainerManager",
    "ImageManager",
    "NetworkManager",
    "SystemManager",
    "VolumeManager",
]
