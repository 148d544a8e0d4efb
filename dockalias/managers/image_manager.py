"""镜像管理器类"""

from typing import List, Sequence

from loguru import logger

from ..utils import dedupe
from .base_manager import BaseManager
from .image import ImageRecord, resolve, unmatched


class ImageManager(BaseManager):
    """镜像管理器类，负责镜像查询和按标识删除"""

    def catalog(self, include_all: bool = False) -> List[ImageRecord]:
        """
        获取当前镜像快照

        Args:
            include_all: 是否包含中间层镜像

        Returns:
            List[ImageRecord]: 镜像记录列表

        Raises:
            ExternalCommandFailure: 查询失败时抛出
        """
        args = ["images", "--all"] if include_all else ["images"]
        return [ImageRecord.from_json(row) for row in self._query_json(*args)]

    def list_images(self, include_all: bool = False) -> List[ImageRecord]:
        """列出镜像，供表格展示"""
        return self.catalog(include_all)

    def select(self, tokens: Sequence[str]) -> List[str]:
        """
        确定要删除的镜像ID

        没有标识时选择快照中的全部镜像，否则按标识匹配。

        Args:
            tokens: 镜像ID、仓库名或 仓库名:标签

        Returns:
            List[str]: 镜像ID列表
        """
        catalog = self.catalog()
        if not tokens:
            return dedupe([record.identifier for record in catalog])

        missing = unmatched(tokens, catalog)
        if missing:
            logger.debug(f"以下标识未匹配任何镜像: {', '.join(sorted(missing))}")
        return sorted(resolve(tokens, catalog))

    def remove(self, tokens: Sequence[str], force: bool = False) -> List[str]:
        """
        删除镜像

        Args:
            tokens: 镜像标识，为空表示删除全部镜像
            force: 是否强制删除

        Returns:
            List[str]: 请求运行时删除的镜像ID，未选中任何镜像时为空

        Raises:
            ExternalCommandFailure: 快照查询失败或删除命令失败时抛出
        """
        identifiers = self.select(tokens)
        if not identifiers:
            logger.info("没有匹配的镜像需要删除")
            return []

        args = ["rmi", "--force"] if force else ["rmi"]
        self._forward_or_raise(*args, *identifiers)
        return identifiers

    def prune(self, include_all: bool = False) -> int:
        """清理悬空镜像，include_all时清理所有未使用的镜像"""
        args = ["image", "prune", "--force"]
        if include_all:
            args.append("--all")
        return self._forward(*args)

    def pull(self, reference: str) -> int:
        """拉取镜像"""
        return self._forward("pull", reference)

    def history(self, reference: str) -> int:
        """查看镜像历史"""
        return self._forward("history", reference)
