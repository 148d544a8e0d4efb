"""Shell别名命令处理模块"""

import sys
from typing import Optional

import typer
from loguru import logger

from ..cli_utils import RuntimeContext
from ..managers.config_manager import ConfigError
from ..shell import render_aliases


def handle_shell_init(shell: Optional[str]) -> None:
    """处理 shell-init 命令

    运行时不可用时不输出任何内容，rc文件中的 eval 因此不会注册别名。

    Args:
        shell: shell名称，为空时自动检测
    """
    try:
        ctx = RuntimeContext.get_instance()
        if not ctx.runtime_available():
            logger.debug(f"运行时 {ctx.binary} 不可用，跳过别名注册")
            return
        script = render_aliases(shell)
    except (ConfigError, ValueError) as e:
        logger.error(f"错误：{e}")
        sys.exit(1)

    typer.echo(script, nl=False)
