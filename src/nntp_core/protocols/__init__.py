# src/nntp_core/protocols/__init__.py
"""
NNTP 协议层：状态行、多行判定、头部块与正文分帧。
"""

from .body import BaseBody, BodyFramer, DecodedBody
from .classifier import is_multiline
from .headers import parse_header_line, read_header_block
from .status_line import parse_status_line, read_status_line

__all__ = [
    "BaseBody",
    "BodyFramer",
    "DecodedBody",
    "is_multiline",
    "parse_header_line",
    "read_header_block",
    "parse_status_line",
    "read_status_line",
]
