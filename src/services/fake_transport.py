"""测试用 HTTP 传输

不进行任何真实网络请求，根据收到的请求返回预设响应或抛出模拟错误。
"""

import io
from typing import Callable, Optional

import requests

Handler = Callable[[requests.PreparedRequest], requests.Response]


def make_response(
    status_code: int,
    body: str | bytes,
    request: Optional[requests.PreparedRequest] = None,
) -> requests.Response:
    """构造一个尚未读取响应体的响应

    Args:
        status_code: HTTP 状态码
        body: 响应体
        request: 对应的请求（可选）

    Returns:
        响应对象
    """
    if isinstance(body, str):
        body = body.encode("utf-8")

    resp = requests.Response()
    resp.status_code = status_code
    resp.raw = io.BytesIO(body)
    resp.encoding = "utf-8"
    if request is not None:
        resp.url = request.url
        resp.request = request
    return resp


class FakeTransport:
    """可替换的测试传输"""

    def __init__(self, handler: Handler):
        self.handler = handler
        self.requests: list[requests.PreparedRequest] = []

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """记录请求并交给 handler 处理"""
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_request(self) -> Optional[requests.PreparedRequest]:
        """最近一次收到的请求"""
        return self.requests[-1] if self.requests else None

    @classmethod
    def static(cls, status_code: int, body: str | bytes) -> "FakeTransport":
        """所有请求都返回同一个响应"""
        return cls(lambda request: make_response(status_code, body, request))

    @classmethod
    def failing(cls, error: BaseException) -> "FakeTransport":
        """所有请求都抛出指定错误"""

        def handler(request: requests.PreparedRequest) -> requests.Response:
            raise error

        return cls(handler)

    @classmethod
    def from_routes(
        cls, routes: dict[str, tuple[int, str | bytes]]
    ) -> "FakeTransport":
        """按 URL 返回响应，未知 URL 返回 404"""

        def handler(request: requests.PreparedRequest) -> requests.Response:
            status_code, body = routes.get(request.url, (404, "Not Found"))
            return make_response(status_code, body, request)

        return cls(handler)
