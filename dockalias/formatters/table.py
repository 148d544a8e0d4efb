"""列表信息格式化模块"""

from typing import Any, List, Optional, Sequence

from loguru import logger
from rich.console import Console
from rich.table import Table

from ..constants import COLUMN_TITLES
from ..managers.records import as_row


def build_table(records: Sequence[Any], columns: Sequence[str]) -> Table:
    """
    将记录投影到指定列并生成表格

    不存在于记录类型中的列会被忽略。

    Args:
        records: 记录列表
        columns: 要展示的字段名

    Returns:
        Table: rich表格
    """
    rows = [as_row(record) for record in records]
    known = _known_columns(records, columns)

    table = Table(box=None, header_style="bold", pad_edge=False)
    for column in known:
        table.add_column(COLUMN_TITLES.get(column, column.upper()), overflow="fold")
    for row in rows:
        table.add_row(*(row[column] for column in known))
    return table


def _known_columns(records: Sequence[Any], columns: Sequence[str]) -> List[str]:
    if not records:
        return list(columns)
    fields = as_row(records[0])
    unknown = [column for column in columns if column not in fields]
    if unknown:
        logger.debug(f"忽略未知的展示列: {', '.join(unknown)}")
    return [column for column in columns if column in fields]


def print_table(records: Sequence[Any], columns: Sequence[str], console: Optional[Console] = None) -> None:
    """打印记录表格"""
    console = console or Console()
    console.print(build_table(records, columns))
