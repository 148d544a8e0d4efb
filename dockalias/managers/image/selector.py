"""镜像选择：把用户输入的标识解析为镜像ID集合"""

from typing import Iterable, Set

from .base import ImageRecord


def matches(token: str, record: ImageRecord) -> bool:
    """标识等于镜像ID、仓库名或 仓库名:标签 中任意一个即匹配"""
    return token in (record.identifier, record.repository, record.reference)


def resolve(tokens: Iterable[str], catalog: Iterable[ImageRecord]) -> Set[str]:
    """
    将标识列表解析为去重后的镜像ID集合

    未匹配任何镜像的标识不产生结果，也不报错。调用方在标识为空时
    应直接使用整个快照，不调用本函数。

    Args:
        tokens: 用户输入的标识
        catalog: 镜像快照

    Returns:
        Set[str]: 匹配到的镜像ID
    """
    records = list(catalog)
    return {
        record.identifier
        for token in tokens
        for record in records
        if matches(token, record)
    }


def unmatched(tokens: Iterable[str], catalog: Iterable[ImageRecord]) -> Set[str]:
    """返回未匹配任何镜像的标识"""
    records = list(catalog)
    return {token for token in tokens if not any(matches(token, record) for record in records)}
