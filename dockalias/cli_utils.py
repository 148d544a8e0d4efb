"""CLI工具模块，包含CLI命令行接口的辅助函数和类"""

import sys
from functools import wraps
from threading import Lock
from typing import Any, Callable, Optional, TypeVar, cast

import typer
from loguru import logger

from . import configure_logging
from .constants import DefaultConfig, ENV_FORCE, ERROR_MESSAGES
from .managers.config_manager import ConfigError, ConfigManager
from .managers.container_manager import ContainerManager
from .managers.image_manager import ImageManager
from .managers.network_manager import NetworkManager
from .managers.system_manager import SystemManager
from .managers.volume_manager import VolumeManager
from .utils import ExternalCommandFailure, runtime_available

F = TypeVar("F", bound=Callable[..., Any])


# 运行时上下文管理
class RuntimeContext:
    """运行时上下文管理类，保存本次调用生效的配置"""

    _instance: Optional["RuntimeContext"] = None
    _lock: Lock = Lock()

    def __init__(self) -> None:
        """初始化运行时上下文"""
        if RuntimeContext._instance is not None:
            raise RuntimeError("RuntimeContext是单例类，请使用get_instance()获取实例")
        RuntimeContext._instance = self
        self.config_path: Optional[str] = None
        self.verbose: bool = False
        self._config: Optional[DefaultConfig] = None

    @classmethod
    def get_instance(cls) -> "RuntimeContext":
        """获取RuntimeContext单例实例"""
        with cls._lock:
            if cls._instance is None:
                cls._instance = RuntimeContext()
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """丢弃单例，下次访问时重新加载配置"""
        with cls._lock:
            cls._instance = None

    @property
    def config(self) -> DefaultConfig:
        """获取生效的配置，首次访问时加载"""
        if self._config is None:
            self._config = ConfigManager(self.config_path).load_config()
            configure_logging("DEBUG" if self.verbose else self._config["log_level"])
        return self._config

    @property
    def binary(self) -> str:
        return self.config["runtime"]["binary"]

    def runtime_available(self) -> bool:
        """运行时是否可用"""
        return runtime_available(self.binary, self.config["runtime"]["force_enable"])


def get_image_manager() -> ImageManager:
    """获取镜像管理器实例"""
    return ImageManager(RuntimeContext.get_instance().binary)


def get_container_manager() -> ContainerManager:
    """获取容器管理器实例"""
    ctx = RuntimeContext.get_instance()
    return ContainerManager(ctx.binary, ctx.config["exec"]["default_shell"])


def get_volume_manager() -> VolumeManager:
    """获取数据卷管理器实例"""
    return VolumeManager(RuntimeContext.get_instance().binary)


def get_network_manager() -> NetworkManager:
    """获取网络管理器实例"""
    return NetworkManager(RuntimeContext.get_instance().binary)


def get_system_manager() -> SystemManager:
    """获取系统管理器实例"""
    return SystemManager(RuntimeContext.get_instance().binary)


def exit_with(code: int) -> None:
    """以运行时的退出码结束，退出码为0时正常返回"""
    if code != 0:
        raise typer.Exit(code)


def runtime_command(func: F) -> F:
    """
    运行时命令装饰器

    运行时不可用时拒绝执行；配置错误和运行时命令失败在此统一处理，
    运行时的错误输出原样写入标准错误，并以运行时的退出码退出。

    Args:
        func: 被装饰的函数

    Returns:
        Callable: 装饰后的函数
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = RuntimeContext.get_instance()
        try:
            if not ctx.runtime_available():
                logger.error(ERROR_MESSAGES["runtime_unavailable"].format(ctx.binary, ENV_FORCE))
                sys.exit(1)
            return func(*args, **kwargs)
        except ConfigError as e:
            logger.error(f"错误：{e}")
            sys.exit(1)
        except ExternalCommandFailure as e:
            if e.stderr:
                sys.stderr.write(e.stderr)
                sys.stderr.flush()
            logger.debug(ERROR_MESSAGES["command_failed"].format(e.returncode, " ".join(e.argv)))
            sys.exit(e.returncode)

    return cast(F, wrapper)
