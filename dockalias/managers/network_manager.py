"""网络管理器类"""

from typing import List

from .base_manager import BaseManager
from .records import NetworkRecord


class NetworkManager(BaseManager):
    """网络管理器类"""

    def list_networks(self) -> List[NetworkRecord]:
        """列出网络"""
        return [NetworkRecord.from_json(row) for row in self._query_json("network", "ls")]

    def prune(self) -> int:
        """清理未使用的网络"""
        return self._forward("network", "prune", "--force")
