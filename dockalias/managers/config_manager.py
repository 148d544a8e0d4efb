"""配置管理器类"""

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Type, Union, cast

from dotenv import find_dotenv, load_dotenv
from loguru import logger

from ..constants import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_PATH,
    ENV_CONFIG_PATH,
    ENV_FORCE,
    ENV_LOG_LEVEL,
    ENV_RUNTIME,
    ERROR_MESSAGES,
    DefaultConfig,
)
from ..utils import is_truthy


class ConfigError(Exception):
    """配置错误"""

    pass


ValidationStructure = Dict[str, Union[Type[Any], "ValidationStructure"]]


def generate_validation_structure(config_template: Dict[str, Any]) -> ValidationStructure:
    """
    从配置模板生成验证结构

    Args:
        config_template: 配置模板

    Returns:
        ValidationStructure: 验证结构
    """
    validation_structure: ValidationStructure = {}

    for key, value in config_template.items():
        if isinstance(value, dict):
            validation_structure[key] = generate_validation_structure(value)
        elif isinstance(value, list):
            validation_structure[key] = list
        else:
            validation_structure[key] = type(value)

    return validation_structure


def recursive_update(current: Dict[str, Any], updates: Dict[str, Any]) -> None:
    """递归合并配置"""
    for key, value in updates.items():
        if key in current and isinstance(value, dict) and isinstance(current[key], dict):
            recursive_update(current[key], value)
        else:
            current[key] = value


class ConfigManager:
    """配置管理器类，加载用户配置并应用环境变量覆盖"""

    config_path: Path
    config: DefaultConfig
    REQUIRED_CONFIG_FIELDS: ValidationStructure

    def __init__(self, config_path: Optional[str] = None, load_env_file: bool = True) -> None:
        """
        初始化配置管理器

        Args:
            config_path: 配置文件路径，默认读取环境变量或 ~/.config/dockalias/config.json
            load_env_file: 是否加载当前目录下的 .env 文件
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))
        self.config_path = Path(
            config_path or os.environ.get(ENV_CONFIG_PATH) or DEFAULT_CONFIG_PATH
        ).expanduser()
        self.config = cast(DefaultConfig, copy.deepcopy(DEFAULT_CONFIG))
        self.REQUIRED_CONFIG_FIELDS = generate_validation_structure(cast(Dict[str, Any], DEFAULT_CONFIG))

    def load_config(self) -> DefaultConfig:
        """
        加载配置文件并应用环境变量

        配置文件不存在时使用默认配置。

        Returns:
            DefaultConfig: 生效的配置

        Raises:
            ConfigError: 配置文件无法读取或验证失败时抛出
        """
        if self.config_path.exists():
            try:
                with open(self.config_path, "r", encoding="utf-8") as f:
                    user_config = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigError(ERROR_MESSAGES["config_not_readable"].format(self.config_path, e))
            if not isinstance(user_config, dict):
                raise ConfigError(ERROR_MESSAGES["config_validation"].format("顶层必须是对象"))
            recursive_update(cast(Dict[str, Any], self.config), user_config)
            logger.debug(f"已加载配置文件: {self.config_path}")

        self._apply_env_overrides()
        self.validate_config()
        return self.config

    def _apply_env_overrides(self) -> None:
        """环境变量优先于配置文件"""
        runtime = os.environ.get(ENV_RUNTIME)
        if runtime:
            self.config["runtime"]["binary"] = runtime
        if is_truthy(os.environ.get(ENV_FORCE)):
            self.config["runtime"]["force_enable"] = True
        log_level = os.environ.get(ENV_LOG_LEVEL)
        if log_level:
            self.config["log_level"] = log_level.upper()

    def validate_config(self) -> None:
        """
        验证配置的完整性和正确性

        Raises:
            ConfigError: 配置验证失败时抛出
        """
        try:
            self._validate_config_structure(cast(Dict[str, Any], self.config), self.REQUIRED_CONFIG_FIELDS)
        except ConfigError as e:
            raise ConfigError(ERROR_MESSAGES["config_validation"].format(e))
        if not self.config["runtime"]["binary"]:
            raise ConfigError(ERROR_MESSAGES["config_validation"].format("runtime.binary 不能为空"))
        self._validate_log_level()

    def _validate_log_level(self) -> None:
        """日志级别必须是loguru已注册的级别"""
        level = self.config["log_level"].upper()
        try:
            logger.level(level)
        except ValueError:
            raise ConfigError(ERROR_MESSAGES["config_validation"].format(f"未知的日志级别: {level}"))
        self.config["log_level"] = level

    def _validate_config_structure(self, config: Dict[str, Any], required: ValidationStructure) -> None:
        """
        递归验证配置结构

        Raises:
            ConfigError: 配置结构验证失败时抛出
        """
        for key, value_type in required.items():
            if key not in config:
                raise ConfigError(f"缺少必需的配置项: {key}")

            if isinstance(value_type, dict):
                if not isinstance(config[key], dict):
                    raise ConfigError(f"配置项类型错误: {key} 应为字典")
                self._validate_config_structure(config[key], value_type)
            elif not isinstance(config[key], value_type):
                raise ConfigError(f"配置项类型错误: {key} 应为 {value_type.__name__}")

    def save_config(self) -> Path:
        """
        保存当前配置到文件

        Returns:
            Path: 配置文件路径

        Raises:
            ConfigError: 配置保存失败时抛出
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(self.config, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"保存配置失败: {e}")
        return self.config_path

    def get_config(self) -> DefaultConfig:
        """获取当前配置"""
        return self.config
