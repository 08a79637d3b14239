# src/nntp_core/__init__.py
"""
nntp-core v1.0.0
NNTP 响应解码核心库：状态行、多行判定、头部块与惰性正文分帧。
"""

# 暴露核心配置
from .config import (
    NntpConfig,
    create_config_from_dict,
    load_config_from_env,
    load_config_from_toml,
)

# 暴露异常体系 (方便上层 try-except)
from .exceptions import (
    BodyAlreadyConsumed,
    ConfigError,
    InvalidHeaderLine,
    InvalidStatusLine,
    NetworkError,
    NntpError,
    ProtocolError,
    StateError,
)
from .network import NetworkClient
from .reader import LineReader, StreamLineReader, StringLineReader
from .response import Response

__version__ = "1.0.0"

__all__ = [
    "Response",
    "NetworkClient",
    "LineReader",
    "StringLineReader",
    "StreamLineReader",
    "NntpConfig",
    "create_config_from_dict",
    "load_config_from_env",
    "load_config_from_toml",
    "NntpError",
    "ConfigError",
    "NetworkError",
    "ProtocolError",
    "InvalidStatusLine",
    "InvalidHeaderLine",
    "StateError",
    "BodyAlreadyConsumed",
]
