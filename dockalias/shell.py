"""Shell别名生成模块"""

from typing import Dict, List, Optional

import shellingham
from loguru import logger

from .constants import ALIASES, CLI_NAME, ERROR_MESSAGES, SUPPORTED_SHELLS, AliasSpec

DEFAULT_SHELL = "bash"


def detect_shell() -> str:
    """
    检测当前shell

    Returns:
        str: shell名称，无法检测时返回bash
    """
    try:
        name, _ = shellingham.detect_shell()
    except shellingham.ShellDetectionFailure:
        logger.debug("无法检测当前shell，使用bash语法")
        return DEFAULT_SHELL
    return name


def render_alias(shell: str, alias: str, command: str) -> str:
    """生成单条别名定义"""
    target = f"{CLI_NAME} {command}"
    if shell == "fish":
        return f"alias {alias} '{target}'"
    if shell in ("powershell", "pwsh"):
        return f"function {alias} {{ {target} @args }}"
    return f"alias {alias}='{target}'"


def render_aliases(shell: Optional[str] = None, aliases: Optional[Dict[str, AliasSpec]] = None) -> str:
    """
    生成别名脚本，供shell的rc文件 eval 使用

    Args:
        shell: shell名称，默认自动检测
        aliases: 别名表，默认使用内置别名

    Returns:
        str: 别名脚本

    Raises:
        ValueError: 不支持的shell
    """
    shell = (shell or detect_shell()).lower()
    if shell not in SUPPORTED_SHELLS:
        raise ValueError(ERROR_MESSAGES["unsupported_shell"].format(shell, ", ".join(SUPPORTED_SHELLS)))

    lines: List[str] = []
    for alias, spec in (aliases or ALIASES).items():
        lines.append(render_alias(shell, alias, spec["command"]))
    return "\n".join(lines) + "\n"
