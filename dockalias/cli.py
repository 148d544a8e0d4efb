"""CLI命令行接口模块"""

import json
from typing import List, Optional

import typer
from loguru import logger

from .cli_utils import (
    RuntimeContext,
    exit_with,
    get_container_manager,
    get_image_manager,
    get_network_manager,
    get_system_manager,
    get_volume_manager,
    runtime_command,
)
from .commands.shell import handle_shell_init
from .formatters.table import print_table
from .interactive_utils import confirm_action, select_container
from .managers.config_manager import ConfigError, ConfigManager

# 创建CLI应用
app = typer.Typer(
    help="Docker快捷命令工具",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# 允许未知选项原样传给运行时；第一个位置参数之后的内容（包括 --help）不再解析
PASSTHROUGH = {"allow_extra_args": True, "ignore_unknown_options": True, "allow_interspersed_args": False}


@app.callback()
def main_callback(
    config: Optional[str] = typer.Option(None, "--config", envvar="DOCKALIAS_CONFIG", help="配置文件路径"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="输出调试日志"),
):
    """Docker快捷命令工具"""
    RuntimeContext.reset()
    ctx = RuntimeContext.get_instance()
    ctx.config_path = config
    ctx.verbose = verbose


@app.command("ps")
@runtime_command
def list_containers(
    all_: bool = typer.Option(False, "-a", "--all", help="包含已停止的容器"),
    raw: bool = typer.Option(False, "--raw", help="不做投影，直接输出运行时结果"),
):
    """列出容器"""
    if raw:
        exit_with(get_container_manager().passthrough(["ps", "--all"] if all_ else ["ps"]))
        return
    containers = get_container_manager().list_containers(all_)
    print_table(containers, RuntimeContext.get_instance().config["display"]["container_columns"])


@app.command("images")
@runtime_command
def list_images(
    all_: bool = typer.Option(False, "-a", "--all", help="包含中间层镜像"),
    raw: bool = typer.Option(False, "--raw", help="不做投影，直接输出运行时结果"),
):
    """列出镜像"""
    if raw:
        exit_with(get_image_manager().passthrough(["images", "--all"] if all_ else ["images"]))
        return
    images = get_image_manager().list_images(all_)
    print_table(images, RuntimeContext.get_instance().config["display"]["image_columns"])


@app.command("rmi")
@runtime_command
def remove_images(
    tokens: Optional[List[str]] = typer.Argument(None, help="镜像ID、仓库名或 仓库名:标签，为空时删除全部镜像"),
    force: bool = typer.Option(False, "-f", "--force", help="强制删除"),
    yes: bool = typer.Option(False, "-y", "--yes", help="删除全部镜像时不再确认"),
):
    """按ID、仓库名或 仓库名:标签 删除镜像"""
    tokens = tokens or []
    ctx = RuntimeContext.get_instance()
    if not tokens and ctx.config["confirm_destructive"] and not yes:
        if not confirm_action("未指定镜像，将删除全部镜像，是否继续?"):
            logger.warning("操作已取消")
            return

    removed = get_image_manager().remove(tokens, force=force)
    if removed:
        logger.debug(f"已请求删除 {len(removed)} 个镜像")


@app.command("rm")
@runtime_command
def remove_containers(
    containers: Optional[List[str]] = typer.Argument(None, help="容器名称或ID，为空时删除所有已停止的容器"),
    force: bool = typer.Option(False, "-f", "--force", help="强制删除运行中的容器"),
):
    """删除容器"""
    get_container_manager().remove(containers or [], force=force)


@app.command("stop")
@runtime_command
def stop_containers(
    containers: Optional[List[str]] = typer.Argument(None, help="容器名称或ID，为空时停止所有运行中的容器"),
):
    """停止容器"""
    get_container_manager().stop(containers or [])


@app.command("exec", context_settings=PASSTHROUGH)
@runtime_command
def exec_container(
    container: Optional[str] = typer.Argument(None, help="容器名称或ID，为空时交互式选择"),
    command: Optional[List[str]] = typer.Argument(None, help="要执行的命令，默认进入shell"),
    no_tty: bool = typer.Option(False, "-T", "--no-tty", help="不分配交互式终端"),
):
    """进入容器执行命令，选项需写在容器名之前"""
    manager = get_container_manager()
    if not container:
        running = manager.list_containers()
        if not running:
            logger.error("没有正在运行的容器")
            raise typer.Exit(1)
        container = select_container(running)
        if not container:
            logger.warning("操作已取消")
            return
    exit_with(manager.exec(container, command, interactive=not no_tty))


@app.command("logs")
@runtime_command
def show_logs(
    container: str = typer.Argument(..., help="容器名称或ID"),
    follow: bool = typer.Option(False, "-f", "--follow", help="持续显示日志"),
    tail: Optional[int] = typer.Option(None, "-n", "--tail", help="显示最后几行"),
):
    """查看容器日志"""
    exit_with(get_container_manager().logs(container, follow=follow, tail=tail))


@app.command("ip")
@runtime_command
def show_ip(container: str = typer.Argument(..., help="容器名称或ID")):
    """查看容器IP地址"""
    typer.echo(get_container_manager().ip_address(container))


@app.command("stats")
@runtime_command
def show_stats():
    """查看容器资源占用"""
    exit_with(get_container_manager().stats())


@app.command("pull")
@runtime_command
def pull_image(reference: str = typer.Argument(..., help="镜像名称")):
    """拉取镜像"""
    exit_with(get_image_manager().pull(reference))


@app.command("history")
@runtime_command
def image_history(reference: str = typer.Argument(..., help="镜像名称或ID")):
    """查看镜像构建历史"""
    exit_with(get_image_manager().history(reference))


@app.command("image-prune")
@runtime_command
def prune_images(all_: bool = typer.Option(False, "-a", "--all", help="清理所有未使用的镜像")):
    """清理悬空镜像"""
    exit_with(get_image_manager().prune(include_all=all_))


@app.command("volumes")
@runtime_command
def list_volumes():
    """列出数据卷"""
    volumes = get_volume_manager().list_volumes()
    print_table(volumes, RuntimeContext.get_instance().config["display"]["volume_columns"])


@app.command("volume-rm")
@runtime_command
def remove_volumes(names: List[str] = typer.Argument(..., help="数据卷名称")):
    """删除数据卷"""
    exit_with(get_volume_manager().remove(names))


@app.command("volume-prune")
@runtime_command
def prune_volumes():
    """清理未使用的数据卷"""
    exit_with(get_volume_manager().prune())


@app.command("networks")
@runtime_command
def list_networks():
    """列出网络"""
    networks = get_network_manager().list_networks()
    print_table(networks, RuntimeContext.get_instance().config["display"]["network_columns"])


@app.command("network-prune")
@runtime_command
def prune_networks():
    """清理未使用的网络"""
    exit_with(get_network_manager().prune())


@app.command("prune")
@runtime_command
def prune_system(
    all_: bool = typer.Option(False, "-a", "--all", help="同时清理所有未使用的镜像"),
    volumes: bool = typer.Option(False, "--volumes", help="同时清理未使用的数据卷"),
):
    """清理停止的容器、未使用的网络和悬空镜像"""
    exit_with(get_system_manager().prune(include_all=all_, volumes=volumes))


@app.command("df")
@runtime_command
def disk_usage():
    """查看磁盘占用"""
    exit_with(get_system_manager().df())


@app.command("x", context_settings=PASSTHROUGH, add_help_option=False)
@runtime_command
def passthrough(args: Optional[List[str]] = typer.Argument(None, help="原样传给运行时的参数")):
    """直接调用运行时命令"""
    exit_with(get_system_manager().passthrough(args or []))


@app.command("check")
def check_runtime():
    """检查容器运行时是否可用"""
    try:
        ctx = RuntimeContext.get_instance()
        available = ctx.runtime_available()
    except ConfigError as e:
        logger.error(f"错误：{e}")
        raise typer.Exit(1)

    if not available:
        typer.echo(f"{ctx.binary}: 不可用")
        raise typer.Exit(1)
    if not get_system_manager().check_connection():
        typer.echo(f"{ctx.binary}: 已安装，但无法连接守护进程")
        raise typer.Exit(1)
    typer.echo(f"{ctx.binary}: 可用")


@app.command("shell-init")
def shell_init(shell: Optional[str] = typer.Argument(None, help="bash/zsh/fish/powershell，默认自动检测")):
    """输出shell别名定义，用法: eval \"$(dkr shell-init)\""""
    handle_shell_init(shell)


@app.command("config")
def show_config(init: bool = typer.Option(False, "--init", help="将默认配置写入配置文件")):
    """查看生效的配置"""
    ctx = RuntimeContext.get_instance()
    try:
        if init:
            manager = ConfigManager(ctx.config_path)
            if manager.config_path.exists():
                logger.warning(f"配置文件已存在: {manager.config_path}")
                raise typer.Exit(1)
            logger.success(f"已写入默认配置: {manager.save_config()}")
            return
        typer.echo(json.dumps(ctx.config, indent=2, ensure_ascii=False))
    except ConfigError as e:
        logger.error(f"错误：{e}")
        raise typer.Exit(1)


def main():
    """主入口函数"""
    app()


if __name__ == "__main__":
    main()
