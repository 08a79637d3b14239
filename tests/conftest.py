# tests/conftest.py
import sys
from pathlib import Path

import pytest

# 确保 src 目录在 sys.path 中
src_path = Path(__file__).resolve().parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from nntp_core.config import NntpConfig
from nntp_core.reader import StringLineReader


@pytest.fixture
def valid_config():
    """[Fixture] 返回一个指向本机的 NntpConfig 对象。"""
    return NntpConfig(host="127.0.0.1", port=1119, encoding="utf-8", timeout=2.0)


@pytest.fixture
def lines_reader():
    """[Fixture] 把若干行拼成以 CRLF 结尾的读取源。"""

    def _make(lines):
        return StringLineReader("\r\n".join(lines) + "\r\n")

    return _make
