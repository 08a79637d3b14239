# File: src/nntp_core/exceptions.py
"""
NNTP 响应解码库 - 异常体系 (Exceptions)

定义库内统一使用的异常类，以便上层应用（如客户端/代理）能进行精细的错误处理。
"""


class NntpError(Exception):
    """nntp-core 所有内部异常的基类。

    上层应用可以通过捕获此异常来处理所有由 nntp-core 抛出的已知错误。
    """

    pass


class ConfigError(NntpError):
    """配置加载或校验失败。

    触发场景:
    1. 缺少必要字段 (如 host)。
    2. 字段格式错误 (如端口越界、编码名称未知)。
    3. 找不到配置文件或环境变量。
    """

    pass


class NetworkError(NntpError):
    """网络层面的错误 (I/O 级别)。

    触发场景:
    1. 建立 TCP 连接失败。
    2. 发送或读取超时。
    3. 连接被对端关闭。

    注意: 此类错误通常是暂时的，是否重试由上层决定。
    """

    pass


class ProtocolError(NntpError):
    """协议交互错误 (逻辑级别)。"""

    pass


class InvalidStatusLine(ProtocolError):
    """状态行无法解析。

    触发场景:
    1. 行首不是三位数字状态码。
    2. 读取状态行时已到达输入末尾 (一行都没有)。
    """

    def __init__(self, message: str, line: str = "") -> None:
        super().__init__(message)
        self.line = line


class InvalidHeaderLine(ProtocolError):
    """头部块中出现不含冒号的行 (仅 220/221 响应)。"""

    def __init__(self, message: str, line: str = "") -> None:
        super().__init__(message)
        self.line = line


class StateError(NntpError):
    """状态错误 (调用方误用)。"""

    pass


class BodyAlreadyConsumed(StateError):
    """响应正文已被读取过。

    正文是单次消费的惰性序列，重复读取意味着调用方逻辑错误，
    而不是传输问题。
    """

    pass
