"""交互式工具函数模块"""

from typing import Optional, Sequence

import questionary
import typer
from loguru import logger

from .managers.records import ContainerRecord


def confirm_action(message: str = "确认执行此操作?", default: bool = False) -> bool:
    """
    请求用户确认操作

    Args:
        message: 提示消息
        default: 默认选项

    Returns:
        bool: 用户是否确认
    """
    try:
        return typer.confirm(message, default=default)
    except (KeyboardInterrupt, EOFError, typer.Abort):
        logger.warning("操作已取消")
        return False


def select_container(containers: Sequence[ContainerRecord]) -> Optional[str]:
    """
    交互式选择一个容器

    Args:
        containers: 候选容器

    Returns:
        Optional[str]: 选中的容器名称，取消时返回None
    """
    if len(containers) == 1:
        return containers[0].names

    choices = [
        questionary.Choice(title=f"{c.names} ({c.image}, {c.status})", value=c.names)
        for c in containers
    ]
    return questionary.select("选择容器", choices=choices).ask()
