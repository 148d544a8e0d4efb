"""镜像管理相关功能模块

该子包包含镜像快照记录类型和镜像选择逻辑。
"""

from .base import ImageRecord
from .selector import matches, resolve, unmatched

__all__ = [
    "ImageRecord",
    "matches",
    "resolve",
    "unmatched",
]
