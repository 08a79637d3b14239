# src/nntp_core/protocols/constants.py
"""
NNTP 协议层 - 常量定义

本模块定义了所有与响应解码相关的状态码表和线路格式常量。
采用命名空间 (Class Namespace) 组织。
"""

# =========================================================================
# 1. 线路格式 (Wire Format)
# =========================================================================


class Wire:
    CRLF = "\r\n"
    LF = "\n"

    # 多行正文的结束行 (不含行尾)
    TERMINATOR = "."
    # 点填充 (dot-stuffing) 的转义前缀
    STUFFED_PREFIX = ".."

    HEADER_SEPARATOR = ":"


# =========================================================================
# 2. 状态码 (Response Codes, RFC 3977)
# =========================================================================


class ResponseCode:
    """常用状态码"""

    HELP_TEXT_FOLLOWS = 100
    CAPABILITY_LIST_FOLLOWS = 101

    SERVICE_AVAILABLE_POSTING = 200
    SERVICE_AVAILABLE_NO_POSTING = 201
    CONNECTION_CLOSING = 205

    # GROUP 与 LISTGROUP 共用 211
    GROUP_SELECTED = 211

    LIST_FOLLOWS = 215
    ARTICLE_FOLLOWS = 220
    HEAD_FOLLOWS = 221
    BODY_FOLLOWS = 222
    OVERVIEW_FOLLOWS = 224
    HDR_FOLLOWS = 225
    NEW_ARTICLES_FOLLOW = 230
    NEW_GROUPS_FOLLOW = 231


# 无条件携带多行正文的状态码 (不含有歧义的 211)
MULTILINE_RESPONSE_CODES: frozenset[int] = frozenset(
    {
        ResponseCode.HELP_TEXT_FOLLOWS,
        ResponseCode.CAPABILITY_LIST_FOLLOWS,
        ResponseCode.LIST_FOLLOWS,
        ResponseCode.ARTICLE_FOLLOWS,
        ResponseCode.HEAD_FOLLOWS,
        ResponseCode.BODY_FOLLOWS,
        ResponseCode.OVERVIEW_FOLLOWS,
        ResponseCode.HDR_FOLLOWS,
        ResponseCode.NEW_ARTICLES_FOLLOW,
        ResponseCode.NEW_GROUPS_FOLLOW,
    }
)

# 正文前带有头部块的状态码 (ARTICLE / HEAD)
HEADER_RESPONSE_CODES: frozenset[int] = frozenset(
    {ResponseCode.ARTICLE_FOLLOWS, ResponseCode.HEAD_FOLLOWS}
)

# 是否有正文取决于状态文本的状态码
AMBIGUOUS_RESPONSE_CODE = ResponseCode.GROUP_SELECTED

# 状态码的合法取值范围 (三位数)
STATUS_MIN = 100
STATUS_MAX = 999


def strip_line_ending(line: str) -> str:
    """去掉行尾的 CRLF 或 LF。"""
    if line.endswith(Wire.CRLF):
        return line[: -len(Wire.CRLF)]
    if line.endswith(Wire.LF):
        return line[: -len(Wire.LF)]
    return line


def is_terminator(line: str) -> bool:
    """判断一行 (含行尾) 是否为多行正文的结束行。"""
    return strip_line_ending(line) == Wire.TERMINATOR
