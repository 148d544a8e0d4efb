"""运行时JSON输出对应的记录类型"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Type, TypeVar

R = TypeVar("R")


def project_record(record_type: Type[R], row: Mapping[str, Any], keys: Dict[str, str]) -> R:
    """
    将运行时的JSON行投影到固定字段的记录类型

    未列出的键会被忽略，缺失的键取空字符串。

    Args:
        record_type: 目标记录类型
        row: 运行时输出的一行JSON
        keys: 字段名 -> 运行时JSON键名

    Returns:
        R: 记录实例
    """
    values = {}
    for field in fields(record_type):
        value = row.get(keys[field.name], "")
        values[field.name] = "" if value is None else str(value)
    return record_type(**values)


def as_row(record: Any) -> Dict[str, str]:
    """记录转换为字段名 -> 值的字典，供表格展示使用"""
    return {field.name: getattr(record, field.name) for field in fields(record)}


@dataclass(frozen=True)
class ContainerRecord:
    """容器信息，对应 ps --format '{{json .}}'"""

    identifier: str
    image: str
    command: str
    status: str
    names: str
    ports: str
    state: str

    KEYS = {
        "identifier": "ID",
        "image": "Image",
        "command": "Command",
        "status": "Status",
        "names": "Names",
        "ports": "Ports",
        "state": "State",
    }

    @classmethod
    def from_json(cls, row: Mapping[str, Any]) -> "ContainerRecord":
        return project_record(cls, row, cls.KEYS)


@dataclass(frozen=True)
class VolumeRecord:
    """数据卷信息"""

    name: str
    driver: str
    mountpoint: str

    KEYS = {"name": "Name", "driver": "Driver", "mountpoint": "Mountpoint"}

    @classmethod
    def from_json(cls, row: Mapping[str, Any]) -> "VolumeRecord":
        return project_record(cls, row, cls.KEYS)


@dataclass(frozen=True)
class NetworkRecord:
    """网络信息"""

    identifier: str
    name: str
    driver: str
    scope: str

    KEYS = {"identifier": "ID", "name": "Name", "driver": "Driver", "scope": "Scope"}

    @classmethod
    def from_json(cls, row: Mapping[str, Any]) -> "NetworkRecord":
        return project_record(cls, row, cls.KEYS)
