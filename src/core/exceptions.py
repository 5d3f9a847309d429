"""自定义异常类"""


class JokeError(Exception):
    """笑话获取基础异常"""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        self.message = message
        super().__init__(f"[{source}] {message}" if source else message)


class RequestConstructionError(JokeError):
    """请求构造异常"""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        source: str | None = None,
    ):
        self.url = url
        super().__init__(message, source)


class TransportError(JokeError):
    """网络传输异常（连接失败、超时、DNS 等）"""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        url: str | None = None,
        source: str | None = None,
    ):
        self.cause = cause
        self.url = url
        super().__init__(message, source)


class UnexpectedStatusError(JokeError):
    """非 200 响应异常，响应体不会被解析"""

    def __init__(
        self,
        message: str,
        status_code: int,
        url: str | None = None,
        source: str | None = None,
    ):
        self.status_code = status_code
        self.url = url
        super().__init__(message, source)


class BodyReadError(JokeError):
    """响应体读取异常"""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        source: str | None = None,
    ):
        self.cause = cause
        super().__init__(message, source)


class DecodeError(JokeError):
    """响应体解析异常"""

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        source: str | None = None,
    ):
        self.cause = cause
        super().__init__(message, source)


class SelectionError(JokeError):
    """笑话来源选择异常（交互模式或未知来源）"""
