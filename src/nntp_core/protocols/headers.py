# src/nntp_core/protocols/headers.py
"""
NNTP 协议层 - 头部块解析 (Header Block)

仅用于 220 (ARTICLE) 与 221 (HEAD) 响应：状态行之后、正文之前的 "Name: value" 行。
"""

import logging
from typing import Dict, Tuple

from ..exceptions import InvalidHeaderLine
from ..reader import LineReader
from .constants import Wire, is_terminator, strip_line_ending

logger = logging.getLogger(__name__)


def parse_header_line(line: str) -> Tuple[str, str]:
    """把一行头部拆分为 (小写名称, 值)。

    名称去除首尾空白并转为小写；值只去掉紧跟冒号的一个空格。
    """
    content = strip_line_ending(line)
    if Wire.HEADER_SEPARATOR not in content:
        raise InvalidHeaderLine(f"头部行缺少冒号: {line!r}", line)

    name, value = content.split(Wire.HEADER_SEPARATOR, 1)
    if value.startswith(" "):
        value = value[1:]
    return name.strip().lower(), value


async def read_header_block(reader: LineReader) -> Tuple[Dict[str, str], bool]:
    """读取头部块。

    读取直到:
    - 空行: 头部结束，正文随后；
    - 结束行 ".": 响应结束，没有正文 (HEAD 响应在头部后直接以 "." 结束)；
    - 输入结束: 视同响应结束。

    重复的名称以后出现的值为准。

    Returns:
        Tuple[Dict[str, str], bool]: (头部, 响应是否已结束)。

    Raises:
        InvalidHeaderLine: 出现不含冒号的行。
    """
    headers: Dict[str, str] = {}

    while True:
        line = await reader.readline()
        if not line:
            logger.debug(f"头部块在输入末尾结束 ({len(headers)} 项)")
            return headers, True
        if is_terminator(line):
            logger.debug(f"头部块遇到结束行 ({len(headers)} 项)，无正文")
            return headers, True
        if not strip_line_ending(line):
            logger.debug(f"头部块结束 ({len(headers)} 项)，正文随后")
            return headers, False

        name, value = parse_header_line(line)
        headers[name] = value
