# tests/test_reader.py
import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from nntp_core import NetworkError, ProtocolError, StreamLineReader, StringLineReader


@pytest.mark.asyncio
async def test_string_reader_lines():
    reader = StringLineReader("a\r\nb\nc")
    assert await reader.readline() == "a\r\n"
    assert await reader.readline() == "b\n"
    assert await reader.readline() == "c"
    assert await reader.readline() == ""


@pytest.mark.asyncio
async def test_stream_reader_decodes_lines():
    stream = asyncio.StreamReader()
    stream.feed_data("200 héllo\r\n".encode("utf-8") + b"\xff\r\n")
    stream.feed_eof()
    reader = StreamLineReader(stream)

    assert await reader.readline() == "200 héllo\r\n"
    raw = await reader.readline()
    assert raw.encode("utf-8", errors="surrogateescape") == b"\xff\r\n"
    assert await reader.readline() == ""


@pytest.mark.asyncio
async def test_stream_reader_timeout():
    stream = asyncio.StreamReader()
    reader = StreamLineReader(stream, timeout=0.01)

    with pytest.raises(NetworkError, match="超时"):
        await reader.readline()


@pytest.mark.asyncio
async def test_stream_reader_connection_error():
    stream = MagicMock()
    stream.readline = AsyncMock(side_effect=ConnectionResetError("reset"))

    with pytest.raises(NetworkError, match="读取错误"):
        await StreamLineReader(stream).readline()


@pytest.mark.asyncio
async def test_stream_reader_line_too_long():
    stream = asyncio.StreamReader(limit=8)
    stream.feed_data(b"0123456789abcdef\r\n")
    stream.feed_eof()

    with pytest.raises(ProtocolError, match="过长"):
        await StreamLineReader(stream).readline()


@pytest.mark.asyncio
async def test_stream_reader_os_error():
    stream = MagicMock()
    stream.readline = AsyncMock(side_effect=OSError("broken pipe"))

    with pytest.raises(NetworkError, match="读取错误"):
        await StreamLineReader(stream).readline()
