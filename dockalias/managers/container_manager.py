"""容器管理器类"""

from typing import List, Optional, Sequence

from loguru import logger

from ..constants import IP_ADDRESS_FORMAT
from ..utils import dedupe, split_lines
from .base_manager import BaseManager
from .records import ContainerRecord


class ContainerManager(BaseManager):
    """容器管理器类，封装常用的容器操作"""

    def __init__(self, binary: str = "docker", default_shell: str = "sh") -> None:
        """
        初始化容器管理器

        Args:
            binary: 容器运行时可执行文件名
            default_shell: exec未指定命令时使用的shell
        """
        super().__init__(binary)
        self.default_shell = default_shell

    def list_containers(self, include_all: bool = False) -> List[ContainerRecord]:
        """
        列出容器

        Args:
            include_all: 是否包含已停止的容器

        Returns:
            List[ContainerRecord]: 容器记录列表
        """
        args = ["ps", "--all"] if include_all else ["ps"]
        return [ContainerRecord.from_json(row) for row in self._query_json(*args)]

    def _ids(self, *filters: str) -> List[str]:
        """按过滤条件查询容器ID"""
        args = ["ps", "--quiet"]
        for item in filters:
            args.extend(["--filter", item])
        if filters:
            args.insert(1, "--all")
        return dedupe(split_lines(self._query(*args)))

    def exec(
        self,
        container: str,
        command: Optional[Sequence[str]] = None,
        interactive: bool = True,
    ) -> int:
        """
        在容器中执行命令

        Args:
            container: 容器名称或ID
            command: 要执行的命令，默认使用配置的shell
            interactive: 是否分配交互式终端

        Returns:
            int: 运行时退出码
        """
        args = ["exec"]
        if interactive:
            args.append("-it")
        args.append(container)
        args.extend(command or [self.default_shell])
        return self._forward(*args)

    def logs(self, container: str, follow: bool = False, tail: Optional[int] = None) -> int:
        """查看容器日志"""
        args = ["logs"]
        if follow:
            args.append("--follow")
        if tail is not None:
            args.extend(["--tail", str(tail)])
        args.append(container)
        return self._forward(*args)

    def stop(self, containers: Sequence[str]) -> List[str]:
        """
        停止容器

        Args:
            containers: 容器名称或ID，为空表示停止所有运行中的容器

        Returns:
            List[str]: 请求停止的容器
        """
        targets = list(containers) or self._ids()
        if not targets:
            logger.info("没有运行中的容器")
            return []
        self._forward_or_raise("stop", *targets)
        return targets

    def remove(self, containers: Sequence[str], force: bool = False) -> List[str]:
        """
        删除容器

        Args:
            containers: 容器名称或ID，为空表示删除所有已停止的容器
            force: 是否强制删除

        Returns:
            List[str]: 请求删除的容器
        """
        targets = list(containers) or self._ids("status=exited", "status=created")
        if not targets:
            logger.info("没有已停止的容器需要删除")
            return []
        args = ["rm", "--force"] if force else ["rm"]
        self._forward_or_raise(*args, *targets)
        return targets

    def ip_address(self, container: str) -> str:
        """
        获取容器的IP地址

        Returns:
            str: IP地址，多个网络时直接拼接，容器没有IP时为空字符串
        """
        return self._query("inspect", "--format", IP_ADDRESS_FORMAT, container).strip()

    def stats(self) -> int:
        """查看容器资源占用快照"""
        return self._forward("stats", "--no-stream")
