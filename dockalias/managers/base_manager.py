"""基础管理器类"""

import json
from typing import Any, Dict, List, Sequence

from loguru import logger

from ..constants import JSON_FORMAT
from ..utils import ExternalCommandFailure, forward_command, run_command, split_lines


class BaseManager:
    """所有管理器类的基类，包含共享的属性和方法"""

    binary: str

    def __init__(self, binary: str = "docker") -> None:
        """
        初始化基础管理器

        Args:
            binary: 容器运行时可执行文件名
        """
        self.binary = binary

    def _argv(self, *args: str) -> List[str]:
        """拼接运行时命令行"""
        return [self.binary, *args]

    def _query(self, *args: str) -> str:
        """捕获方式运行运行时命令并返回标准输出"""
        return run_command(self._argv(*args))

    def _query_json(self, *args: str) -> List[Dict[str, Any]]:
        """
        以 --format '{{json .}}' 运行查询，每行解析为一个字典

        Returns:
            List[Dict[str, Any]]: 解析后的记录，无法解析的行会被跳过
        """
        output = self._query(*args, "--format", JSON_FORMAT)
        rows = []
        for line in split_lines(output):
            try:
                row = json.loads(line)
            except json.JSONDecodeError:
                logger.warning(f"忽略无法解析的输出行: {line}")
                continue
            if isinstance(row, dict):
                rows.append(row)
        return rows

    def _forward(self, *args: str) -> int:
        """透传方式运行运行时命令，返回退出码"""
        return forward_command(self._argv(*args))

    def _forward_or_raise(self, *args: str) -> None:
        """
        透传方式运行，非零退出码作为失败抛出

        运行时的错误输出已直接写到终端，因此异常中的stderr为空。
        """
        argv = self._argv(*args)
        code = forward_command(argv)
        if code != 0:
            raise ExternalCommandFailure(code, "", argv)

    def passthrough(self, args: Sequence[str]) -> int:
        """
        原样转发任意参数给运行时

        Args:
            args: 运行时参数

        Returns:
            int: 运行时退出码
        """
        return self._forward(*args)

    def check_connection(self) -> bool:
        """
        检查运行时守护进程连接状态

        Returns:
            bool: 连接是否正常
        """
        try:
            self._query("version")
            return True
        except ExternalCommandFailure as e:
            logger.error(f"运行时连接检查失败: {e.stderr.strip() or e}")
            return False
