"""常量配置模块"""

from typing import Dict, List, Tuple, TypedDict

# 环境变量
ENV_CONFIG_PATH: str = "DOCKALIAS_CONFIG"
ENV_RUNTIME: str = "DOCKALIAS_RUNTIME"
ENV_FORCE: str = "DOCKALIAS_FORCE"
ENV_LOG_LEVEL: str = "DOCKALIAS_LOG_LEVEL"

TRUTHY_VALUES: Tuple[str, ...] = ("1", "true", "yes", "on")

DEFAULT_CONFIG_PATH: str = "~/.config/dockalias/config.json"

# 运行时输出格式
JSON_FORMAT: str = "{{json .}}"
IP_ADDRESS_FORMAT: str = "{{range .NetworkSettings.Networks}}{{.IPAddress}}{{end}}"

# 无法启动外部命令时使用的退出码，与shell保持一致
COMMAND_NOT_FOUND_EXIT_CODE: int = 127


# 默认配置
class RuntimeConfig(TypedDict):
    binary: str
    force_enable: bool


class DisplayConfig(TypedDict):
    container_columns: List[str]
    image_columns: List[str]
    volume_columns: List[str]
    network_columns: List[str]


class ExecConfig(TypedDict):
    default_shell: str


class DefaultConfig(TypedDict):
    runtime: RuntimeConfig
    display: DisplayConfig
    exec: ExecConfig
    confirm_destructive: bool
    log_level: str


DEFAULT_CONFIG: DefaultConfig = {
    "runtime": {
        "binary": "docker",
        "force_enable": False,  # 即使PATH中没有运行时也启用命令
    },
    "display": {
        "container_columns": ["identifier", "image", "status", "names", "ports"],
        "image_columns": ["identifier", "repository", "tag", "size", "created_since"],
        "volume_columns": ["name", "driver"],
        "network_columns": ["identifier", "name", "driver", "scope"],
    },
    "exec": {"default_shell": "sh"},
    "confirm_destructive": True,
    "log_level": "INFO",
}

# 列名到表头的映射
COLUMN_TITLES: Dict[str, str] = {
    "identifier": "ID",
    "image": "IMAGE",
    "command": "COMMAND",
    "status": "STATUS",
    "state": "STATE",
    "names": "NAMES",
    "ports": "PORTS",
    "repository": "REPOSITORY",
    "tag": "TAG",
    "size": "SIZE",
    "created_since": "CREATED",
    "name": "NAME",
    "driver": "DRIVER",
    "mountpoint": "MOUNTPOINT",
    "scope": "SCOPE",
}


# Shell别名表：别名 -> (dkr子命令, 说明)
class AliasSpec(TypedDict):
    command: str
    help: str


CLI_NAME: str = "dkr"

ALIASES: Dict[str, AliasSpec] = {
    "dps": {"command": "ps", "help": "列出运行中的容器"},
    "dpa": {"command": "ps --all", "help": "列出所有容器"},
    "di": {"command": "images", "help": "列出镜像"},
    "drmi": {"command": "rmi", "help": "按ID、仓库名或仓库名:标签删除镜像"},
    "drm": {"command": "rm", "help": "删除容器"},
    "dstop": {"command": "stop", "help": "停止容器"},
    "dex": {"command": "exec", "help": "进入容器执行命令"},
    "dlog": {"command": "logs", "help": "查看容器日志"},
    "dip": {"command": "ip", "help": "查看容器IP地址"},
    "dstats": {"command": "stats", "help": "查看容器资源占用"},
    "dvl": {"command": "volumes", "help": "列出数据卷"},
    "dvp": {"command": "volume-prune", "help": "清理未使用的数据卷"},
    "dnl": {"command": "networks", "help": "列出网络"},
    "dnp": {"command": "network-prune", "help": "清理未使用的网络"},
    "dimp": {"command": "image-prune", "help": "清理悬空镜像"},
    "dsp": {"command": "prune", "help": "清理系统资源"},
    "ddf": {"command": "df", "help": "查看磁盘占用"},
    "dx": {"command": "x", "help": "直接调用运行时命令"},
}

SUPPORTED_SHELLS: List[str] = ["bash", "zsh", "fish", "powershell", "pwsh"]

# 错误消息
class ErrorMessages(TypedDict):
    runtime_unavailable: str
    command_failed: str
    config_validation: str
    config_not_readable: str
    unsupported_shell: str
    no_running_containers: str


ERROR_MESSAGES: ErrorMessages = {
    "runtime_unavailable": "未在PATH中找到容器运行时 '{}'，可设置 {}=1 强制启用",
    "command_failed": "命令执行失败（退出码 {}）: {}",
    "config_validation": "配置验证失败: {}",
    "config_not_readable": "无法读取配置文件 {}: {}",
    "unsupported_shell": "不支持的shell: {}，可选值: {}",
    "no_running_containers": "没有正在运行的容器",
}
