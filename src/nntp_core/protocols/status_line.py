import logging
import re
from typing import Tuple

from ..exceptions import InvalidStatusLine
from ..reader import LineReader
from .constants import STATUS_MAX, STATUS_MIN, strip_line_ending

logger = logging.getLogger(__name__)

_STATUS_LINE_RE = re.compile(r"^(\d{3})(?:[ \t]+(.*))?$")


def parse_status_line(line: str) -> Tuple[int, str]:
    """解析状态行，返回 (状态码, 状态文本)。

    状态码之后的第一段空白被消耗，剩余部分去除首尾空白后作为状态文本；
    状态码后没有内容时状态文本为空字符串。
    """
    match = _STATUS_LINE_RE.match(strip_line_ending(line))
    if match is None:
        raise InvalidStatusLine(f"状态行格式无效: {line!r}", line)

    status = int(match.group(1))
    if not STATUS_MIN <= status <= STATUS_MAX:
        raise InvalidStatusLine(f"状态码超出范围: {line!r}", line)
    status_text = (match.group(2) or "").strip()
    return status, status_text


async def read_status_line(reader: LineReader) -> Tuple[int, str]:
    """从行读取源中读取恰好一行并解析为状态行。"""
    line = await reader.readline()
    if not line:
        raise InvalidStatusLine("读取状态行失败: 输入已结束")

    status, status_text = parse_status_line(line)
    logger.debug(f"状态行: {status} {status_text!r}")
    return status, status_text
