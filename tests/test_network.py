# tests/test_network.py
import asyncio
import logging
from dataclasses import replace

import pytest

from nntp_core import InvalidStatusLine, NetworkClient, NetworkError


async def _start_server(replies):
    """启动本地回环服务器：发送欢迎行，然后按收到的命令返回预设回复。"""
    received = []

    async def handle(reader, writer):
        writer.write(b"200 service available\r\n")
        await writer.drain()
        while True:
            line = await reader.readline()
            if not line:
                break
            command = line.decode().strip()
            received.append(command)
            writer.write(replies[command])
            await writer.drain()
            if command == "QUIT":
                break
        writer.close()

    server = await asyncio.start_server(handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    return server, port, received


@pytest.mark.asyncio
async def test_session(valid_config):
    replies = {
        "CAPABILITIES": b"101 capability list\r\nVERSION 2\r\n..dotted\r\n.\r\n",
        "LISTGROUP misc.test": b"211 3 1 3 list follows\r\n1\r\n2\r\n3\r\n.\r\n",
        "QUIT": b"205 closing connection\r\n",
    }
    server, port, received = await _start_server(replies)
    config = replace(valid_config, port=port)

    async with server:
        async with NetworkClient(config) as client:
            response = await client.send("CAPABILITIES")
            assert response.status == 101
            assert await response.text() == "VERSION 2\r\n.dotted\r\n"

            response = await client.send("LISTGROUP misc.test")
            assert response.status == 211
            assert response.multiline is True
            assert await response.text() == "1\r\n2\r\n3\r\n"

            response = await client.send("QUIT")
            assert response.status == 205
            assert response.status_text == "closing connection"
            assert await response.text() == ""

    assert received == ["CAPABILITIES", "LISTGROUP misc.test", "QUIT"]


@pytest.mark.asyncio
async def test_warns_when_body_not_drained(valid_config, caplog):
    replies = {
        "LIST": b"215 list follows\r\nmisc.test 3 1 y\r\n.\r\n",
        "QUIT": b"205 bye\r\n",
    }
    server, port, _ = await _start_server(replies)
    config = replace(valid_config, port=port)

    async with server:
        async with NetworkClient(config) as client:
            await client.send("LIST")
            with caplog.at_level(logging.WARNING, logger="nntp_core.network"):
                # 未读完的正文会让 QUIT 的状态行错位
                with pytest.raises(InvalidStatusLine):
                    await client.send("QUIT")
            assert "尚未读完" in caplog.text


@pytest.mark.asyncio
async def test_connect_refused(valid_config):
    server = await asyncio.start_server(lambda r, w: None, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    server.close()
    await server.wait_closed()

    client = NetworkClient(replace(valid_config, port=port))
    with pytest.raises(NetworkError, match="连接失败"):
        await client.connect()


@pytest.mark.asyncio
async def test_send_without_connection(valid_config):
    client = NetworkClient(valid_config)
    with pytest.raises(NetworkError, match="未建立"):
        await client.send("HELP")
