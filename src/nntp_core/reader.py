# src/nntp_core/reader.py
"""
NNTP 响应解码库 - 行读取模块 (Line Sources)

解码引擎只依赖一个极小的抽象：“读取下一行 (以 CRLF 结尾)，或告知输入已结束”。
本模块提供该抽象以及两个实现：内存字符串与 asyncio.StreamReader 适配器。
"""

import asyncio
import logging
from typing import Optional, Protocol

from .exceptions import NetworkError, ProtocolError

logger = logging.getLogger(__name__)


class LineReader(Protocol):
    """行读取源协议。

    readline() 返回下一行 (包含行尾)；最后一段没有行尾的内容原样返回；
    到达输入末尾时返回空字符串。
    """

    async def readline(self) -> str: ...


class StringLineReader:
    """基于内存字符串的行读取源。

    主要用于测试，以及对抓取到的报文做离线解码。
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    async def readline(self) -> str:
        if self._pos >= len(self._text):
            return ""
        end = self._text.find("\n", self._pos)
        end = len(self._text) if end == -1 else end + 1
        line = self._text[self._pos : end]
        self._pos = end
        return line

    @property
    def remaining(self) -> str:
        """尚未被读取的内容。"""
        return self._text[self._pos :]


class StreamLineReader:
    """asyncio.StreamReader 适配器。

    字节按行解码为 str (surrogateescape，非法字节可无损还原)。
    超时由这一层负责，解码引擎本身不管理超时。
    """

    def __init__(
        self,
        stream: asyncio.StreamReader,
        encoding: str = "utf-8",
        timeout: Optional[float] = None,
    ) -> None:
        self._stream = stream
        self.encoding = encoding
        self.timeout = timeout

    async def readline(self) -> str:
        try:
            raw = await asyncio.wait_for(self._stream.readline(), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise NetworkError(f"读取超时 ({self.timeout}s)") from None
        except ValueError as e:
            # StreamReader 在单行超过缓冲上限时抛出 ValueError
            raise ProtocolError(f"响应行过长: {e}") from e
        except OSError as e:
            raise NetworkError(f"读取错误: {e}") from e

        if not raw:
            logger.debug("StreamLineReader: 已到达输入末尾")
        return raw.decode(self.encoding, errors="surrogateescape")
