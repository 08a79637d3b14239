# src/nntp_core/protocols/classifier.py
"""
NNTP 协议层 - 多行响应判定 (Multi-line Classifier)

同一个状态码可能被不同命令复用，因此解码器不能把“流里还有数据”当成正文；
必须在读取流之前，仅凭 (状态码, 状态文本) 判定是否有正文跟随。
"""

from .constants import AMBIGUOUS_RESPONSE_CODE, MULTILINE_RESPONSE_CODES


def is_multiline(status: int, status_text: str = "") -> bool:
    """判定响应是否携带多行正文。

    规则 (按顺序):
    1. 状态码属于 MULTILINE_RESPONSE_CODES: 始终为多行。
    2. 状态码为 211: GROUP 命令返回单行，LISTGROUP 返回以 "." 结束的列表，
       以状态文本是否非空来区分。
    3. 其余状态码: 单行。

    Args:
        status: 三位数状态码。
        status_text: 状态行中状态码之后的文本。

    Returns:
        bool: 有正文跟随返回 True。
    """
    if status in MULTILINE_RESPONSE_CODES:
        return True
    if status == AMBIGUOUS_RESPONSE_CODE:
        # TODO: 区分 GROUP 的 "211 count low high group" 与 LISTGROUP 的文本，改为按短语匹配
        return bool(status_text and status_text.strip())
    return False
