# File: src/nntp_core/response.py
"""
NNTP 响应解码库 - 响应对象 (Response)

职责：
1. 解码工厂：状态行 -> 多行判定 -> 头部块 (220/221) -> 正文分帧。
2. 透传构造：由已解码的正文流重新构造响应，不再重复去填充。
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Dict, Optional

from .exceptions import BodyAlreadyConsumed
from .protocols.body import BaseBody, BodyFramer, DecodedBody
from .protocols.classifier import is_multiline
from .protocols.constants import HEADER_RESPONSE_CODES, STATUS_MAX, STATUS_MIN
from .protocols.headers import read_header_block
from .protocols.status_line import read_status_line
from .reader import LineReader

logger = logging.getLogger(__name__)

HeadersInit = Mapping[str, str] | Iterable[tuple[str, str]]


def _normalize_headers(headers: Optional[HeadersInit]) -> Dict[str, str]:
    if headers is None:
        return {}
    items = headers.items() if isinstance(headers, Mapping) else headers
    return {str(name).strip().lower(): str(value) for name, value in items}


class Response:
    """NNTP 响应。

    source 的能力在构造时一次性确定：
    - 具有 readline() 的原始行读取源：正文由 BodyFramer 按判定结果分帧；
    - 异步可迭代的已解码流：原样作为正文 (透传)。
    两种能力都具备或都不具备的对象会被拒绝。

    Attributes:
        status: 三位数状态码。
        status_text: 状态文本，可能为空。
        headers: 小写名称 -> 值 的有序字典。
        multiline: 判定结果；透传构造时为 None (不再判定)。
    """

    def __init__(
        self,
        source: Any,
        *,
        status: int = 200,
        status_text: str = "",
        headers: Optional[HeadersInit] = None,
    ) -> None:
        if isinstance(status, bool) or not isinstance(status, int):
            raise ValueError(f"状态码必须是整数: {status!r}")
        if not STATUS_MIN <= status <= STATUS_MAX:
            raise ValueError(f"状态码必须是三位数: {status}")

        self.status = status
        self.status_text = status_text
        self.headers = _normalize_headers(headers)

        is_raw = callable(getattr(source, "readline", None))
        is_stream = callable(getattr(source, "__aiter__", None))
        if is_raw and is_stream:
            raise TypeError(
                f"无法确定输入类型 ({type(source).__name__} 同时支持 readline 与异步迭代)"
            )

        self.multiline: Optional[bool]
        self._body: BaseBody
        if is_raw:
            self.multiline = is_multiline(status, status_text)
            self._body = BodyFramer(source, self.multiline)
        elif is_stream:
            self.multiline = None
            self._body = DecodedBody(source)
        else:
            raise TypeError(
                f"输入必须是行读取源或已解码的异步流: {type(source).__name__}"
            )

    @classmethod
    async def from_reader(cls, reader: LineReader) -> "Response":
        """从行读取源解码一个完整响应 (正文保持惰性)。

        Raises:
            InvalidStatusLine: 状态行缺失或格式错误。
            InvalidHeaderLine: 头部块中出现不含冒号的行。
        """
        status, status_text = await read_status_line(reader)

        headers: Dict[str, str] = {}
        ended = False
        if status in HEADER_RESPONSE_CODES:
            headers, ended = await read_header_block(reader)

        response = cls(reader, status=status, status_text=status_text, headers=headers)
        if ended:
            # 头部块已读到结束行，后续数据不属于本响应
            response.body.close()
        return response

    @property
    def body(self) -> BaseBody:
        """正文流 (str 块的异步迭代器，只能消费一次)。"""
        return self._body

    @property
    def body_used(self) -> bool:
        return self._body.used

    async def text(self) -> str:
        """读取全部正文并拼接为字符串。

        Raises:
            BodyAlreadyConsumed: 正文此前已被读取 (包括部分读取)。
        """
        if self._body.used:
            raise BodyAlreadyConsumed("正文已被读取过")
        return "".join([chunk async for chunk in self._body])

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} "
            f"status={self.status}, "
            f"status_text={self.status_text!r}, "
            f"headers={len(self.headers)}>"
        )
