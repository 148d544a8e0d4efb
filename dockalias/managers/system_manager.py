"""系统管理器类"""

from .base_manager import BaseManager


class SystemManager(BaseManager):
    """系统级操作：清理、磁盘占用"""

    def prune(self, include_all: bool = False, volumes: bool = False) -> int:
        """
        清理停止的容器、未使用的网络和悬空镜像

        Args:
            include_all: 同时清理所有未使用的镜像
            volumes: 同时清理未使用的数据卷

        Returns:
            int: 运行时退出码
        """
        args = ["system", "prune", "--force"]
        if include_all:
            args.append("--all")
        if volumes:
            args.append("--volumes")
        return self._forward(*args)

    def df(self) -> int:
        """查看磁盘占用"""
        return self._forward("system", "df")
