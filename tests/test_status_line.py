# tests/test_status_line.py
import pytest

from nntp_core import InvalidStatusLine, StringLineReader
from nntp_core.protocols.status_line import parse_status_line, read_status_line


def test_parse_code_and_text():
    assert parse_status_line("205 closing connection\r\n") == (205, "closing connection")


def test_parse_code_only():
    """状态码后无内容时状态文本为空"""
    assert parse_status_line("221\r\n") == (221, "")
    assert parse_status_line("200") == (200, "")


def test_parse_trims_text():
    assert parse_status_line("211   list  below  \r\n") == (211, "list  below")


@pytest.mark.parametrize(
    "line",
    [
        "",
        "\r\n",
        "abc\r\n",
        "20 ok\r\n",
        "2000 ok\r\n",
        "200ok\r\n",
        " 200 ok\r\n",
        "000 foo\r\n",
        "099 x\r\n",
    ],
)
def test_parse_invalid(line):
    with pytest.raises(InvalidStatusLine) as exc_info:
        parse_status_line(line)
    assert exc_info.value.line == line


@pytest.mark.asyncio
async def test_read_consumes_exactly_one_line():
    reader = StringLineReader("101 capabilities\r\nVERSION 2\r\n.\r\n")
    assert await read_status_line(reader) == (101, "capabilities")
    assert reader.remaining == "VERSION 2\r\n.\r\n"


@pytest.mark.asyncio
async def test_read_at_end_of_input():
    with pytest.raises(InvalidStatusLine, match="输入已结束"):
        await read_status_line(StringLineReader(""))
