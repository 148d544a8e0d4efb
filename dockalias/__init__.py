"""Docker快捷命令工具包"""

import sys

# 导入loguru并配置logger
from loguru import logger

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"


def configure_logging(level: str = "INFO") -> None:
    """
    重新配置日志输出

    日志写入标准错误，避免混入运行时的标准输出。

    Args:
        level: 日志级别
    """
    # 移除已有处理器
    logger.remove()
    logger.add(
        sink=lambda msg: print(msg, end="", file=sys.stderr),
        format=LOG_FORMAT,
        colorize=True,
        level=level.upper(),
    )


configure_logging()

__version__ = "0.1.0"

__all__ = [
    "configure_logging",
    "logger",
]
