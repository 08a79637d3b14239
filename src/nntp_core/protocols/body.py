# src/nntp_core/protocols/body.py
"""
NNTP 协议层 - 正文分帧 (Body Framing)

多行正文以惰性、单向、单次消费的异步迭代器形式提供：
每次拉取只从底层读取一行，去除点填充，遇到结束行 "." 即停止。
"""

import abc
import logging
from typing import AsyncIterable, AsyncIterator, Optional

from ..exceptions import BodyAlreadyConsumed
from ..reader import LineReader
from .constants import Wire, is_terminator

logger = logging.getLogger(__name__)


class BaseBody(abc.ABC):
    """单次消费正文流的抽象基类。

    一旦开始读取 (used=True) 便不可重新迭代；
    再次迭代抛出 BodyAlreadyConsumed，而不是静默返回空内容。
    """

    def __init__(self) -> None:
        self.used = False
        self.finished = False

    def __aiter__(self) -> "BaseBody":
        if self.used:
            raise BodyAlreadyConsumed(f"{self.__class__.__name__} 已被读取过")
        return self

    async def __anext__(self) -> str:
        self.used = True
        if self.finished:
            raise StopAsyncIteration

        chunk = await self._pull()
        if chunk is None:
            self.finished = True
            raise StopAsyncIteration
        return chunk

    def close(self) -> None:
        """标记正文已结束，之后不再读取底层数据源。"""
        self.finished = True

    @abc.abstractmethod
    async def _pull(self) -> Optional[str]:
        """[Abstract] 返回下一块内容；返回 None 表示正文结束。"""
        raise NotImplementedError


class BodyFramer(BaseBody):
    """从原始行读取源中拆出正文。

    Args:
        reader: 已定位在状态行 (及头部块) 之后的行读取源。
        multiline: 判定结果。为 False 时正文立即为空，且不会再读取 reader，
            以免吞掉同一连接上后续的响应。
    """

    def __init__(self, reader: LineReader, multiline: bool) -> None:
        super().__init__()
        self.reader = reader
        self.multiline = multiline
        if not multiline:
            self.close()

    async def _pull(self) -> Optional[str]:
        line = await self.reader.readline()

        if not line:
            # 截断的传输: 没有结束行也正常结束
            logger.warning("正文在结束行之前到达输入末尾，按正常结束处理")
            return None
        if is_terminator(line):
            logger.debug("正文遇到结束行")
            return None
        if line.startswith(Wire.STUFFED_PREFIX):
            return line[1:]
        return line


class DecodedBody(BaseBody):
    """透传已分帧、已去填充的内容流。

    用于由另一个 Response 的正文重新构造 Response (例如代理转发)，
    不会再次去除点填充。
    """

    def __init__(self, stream: AsyncIterable[str]) -> None:
        super().__init__()
        self.stream = stream
        self._iterator: Optional[AsyncIterator[str]] = None

    async def _pull(self) -> Optional[str]:
        if self._iterator is None:
            self._iterator = self.stream.__aiter__()
        try:
            return await self._iterator.__anext__()
        except StopAsyncIteration:
            return None
