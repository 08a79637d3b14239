# src/nntp_core/network.py
"""
NNTP 响应解码库 - 网络模块 (Network) [Asyncio Edition]

封装一条 TCP 连接：发送命令行，并把连接上的行流交给解码引擎。
不负责认证、TLS、重试与流水线。
"""

import asyncio
import logging
from typing import Optional

from .config import NntpConfig
from .exceptions import NetworkError
from .protocols.constants import Wire
from .reader import StreamLineReader
from .response import Response

logger = logging.getLogger(__name__)


class NetworkClient:
    """
    封装 asyncio TCP 操作的 NNTP 客户端。

    同一连接上的响应严格串行：调用方必须在发送下一条命令之前
    读完上一个多行响应的正文，否则后续分帧会错位。
    """

    def __init__(self, config: NntpConfig):
        self.config = config
        self.reader: Optional[StreamLineReader] = None
        self.writer: Optional[asyncio.StreamWriter] = None
        self._last_response: Optional[Response] = None

    async def connect(self) -> Response:
        """
        建立 TCP 连接并返回服务器欢迎响应。
        """
        target = (self.config.host, self.config.port)
        try:
            stream, self.writer = await asyncio.wait_for(
                asyncio.open_connection(*target), timeout=self.config.timeout
            )
        except asyncio.TimeoutError:
            raise NetworkError(f"连接超时 {target}") from None
        except OSError as e:
            raise NetworkError(f"连接失败 {target}: {e}") from e

        self.reader = StreamLineReader(
            stream, encoding=self.config.encoding, timeout=self.config.timeout
        )
        logger.debug(f"TCP 连接已建立: {target}")

        greeting = await Response.from_reader(self.reader)
        logger.info(f"服务器欢迎: {greeting.status} {greeting.status_text}")
        self._last_response = greeting
        return greeting

    async def send(self, command: str) -> Response:
        """
        发送一条命令并解码其响应 (正文保持惰性)。
        """
        if not self.writer or self.writer.is_closing() or not self.reader:
            raise NetworkError("连接未建立或已关闭")

        last = self._last_response
        if last is not None and last.multiline and not last.body.finished:
            logger.warning(f"上一个多行响应 ({last.status}) 的正文尚未读完，后续分帧可能错位")

        try:
            self.writer.write((command + Wire.CRLF).encode(self.config.encoding))
            await self.writer.drain()
        except OSError as e:
            raise NetworkError(f"发送失败: {e}") from e
        logger.debug(f">>> {command}")

        response = await Response.from_reader(self.reader)
        logger.debug(f"<<< {response.status} {response.status_text}")
        self._last_response = response
        return response

    async def close(self) -> None:
        """关闭连接"""
        if self.writer:
            self.writer.close()
            try:
                await self.writer.wait_closed()
            except OSError as e:
                logger.debug(f"关闭连接时出错: {e}")
            self.writer = None
            self.reader = None
            logger.debug("TCP 连接已关闭")

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
