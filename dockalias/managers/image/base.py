"""镜像管理基础类型定义"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from ..records import project_record


@dataclass(frozen=True)
class ImageRecord:
    """镜像快照记录，每次查询运行时重新生成，不做持久化"""

    identifier: str
    repository: str
    tag: str
    size: str = field(default="", compare=False)
    created_since: str = field(default="", compare=False)

    KEYS = {
        "identifier": "ID",
        "repository": "Repository",
        "tag": "Tag",
        "size": "Size",
        "created_since": "CreatedSince",
    }

    @property
    def reference(self) -> str:
        """仓库名:标签"""
        return f"{self.repository}:{self.tag}"

    @classmethod
    def from_json(cls, row: Mapping[str, Any]) -> "ImageRecord":
        return project_record(cls, row, cls.KEYS)
