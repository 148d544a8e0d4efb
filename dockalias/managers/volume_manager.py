"""数据卷管理器类"""

from typing import List, Sequence

from .base_manager import BaseManager
from .records import VolumeRecord


class VolumeManager(BaseManager):
    """数据卷管理器类"""

    def list_volumes(self) -> List[VolumeRecord]:
        """列出数据卷"""
        return [VolumeRecord.from_json(row) for row in self._query_json("volume", "ls")]

    def remove(self, names: Sequence[str]) -> int:
        """删除指定数据卷"""
        return self._forward("volume", "rm", *names)

    def prune(self) -> int:
        """清理未使用的数据卷"""
        return self._forward("volume", "prune", "--force")
