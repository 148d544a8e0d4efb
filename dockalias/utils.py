"""工具函数模块"""

import shutil
import subprocess
from typing import List, Optional, Sequence

from loguru import logger

from .constants import COMMAND_NOT_FOUND_EXIT_CODE, TRUTHY_VALUES


class ExternalCommandFailure(Exception):
    """外部运行时命令执行失败或无法启动"""

    def __init__(self, returncode: int, stderr: str, argv: Sequence[str]) -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.argv = list(argv)
        super().__init__(f"{' '.join(self.argv)} 退出码 {returncode}")


def run_command(argv: Sequence[str]) -> str:
    """
    运行命令并捕获输出，用于需要解析结果的查询

    Args:
        argv: 命令及参数

    Returns:
        str: 标准输出

    Raises:
        ExternalCommandFailure: 命令返回非零或无法启动时抛出
    """
    logger.debug(f"执行命令: {' '.join(argv)}")

    try:
        result = subprocess.run(
            list(argv), stdout=subprocess.PIPE, stderr=subprocess.PIPE, universal_newlines=True
        )
    except OSError as e:
        raise ExternalCommandFailure(COMMAND_NOT_FOUND_EXIT_CODE, f"{argv[0]}: {e}\n", argv) from e

    if result.returncode != 0:
        logger.debug(f"命令执行失败: {' '.join(argv)}")
        raise ExternalCommandFailure(result.returncode, result.stderr, argv)

    return result.stdout


def forward_command(argv: Sequence[str]) -> int:
    """
    以透传方式运行命令，继承当前进程的标准输入输出

    Args:
        argv: 命令及参数

    Returns:
        int: 命令的退出码

    Raises:
        ExternalCommandFailure: 命令无法启动时抛出
    """
    logger.debug(f"透传命令: {' '.join(argv)}")

    try:
        return subprocess.run(list(argv)).returncode
    except OSError as e:
        raise ExternalCommandFailure(COMMAND_NOT_FOUND_EXIT_CODE, f"{argv[0]}: {e}\n", argv) from e


def split_lines(output: str) -> List[str]:
    """拆分命令输出为非空行"""
    return [line for line in output.splitlines() if line.strip()]


def is_truthy(value: Optional[str]) -> bool:
    """判断环境变量取值是否表示开启"""
    return bool(value) and value.strip().lower() in TRUTHY_VALUES


def runtime_available(binary: str, force_enable: bool = False) -> bool:
    """
    检查容器运行时是否可用

    运行时可执行文件在PATH中，或者配置了强制启用标志时返回True。
    环境变量 DOCKALIAS_FORCE 已由配置管理器合并到 force_enable。

    Args:
        binary: 运行时可执行文件名
        force_enable: 配置中的强制启用标志

    Returns:
        bool: 是否启用命令
    """
    if force_enable:
        return True
    return shutil.which(binary) is not None


def dedupe(values: Sequence[str]) -> List[str]:
    """去除重复值并保持原有顺序"""
    return list(dict.fromkeys(values))
