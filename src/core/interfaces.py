"""核心接口定义

使用 Protocol 定义接口，支持鸭子类型和依赖注入。
"""

from typing import Protocol, runtime_checkable

import requests


@runtime_checkable
class Transport(Protocol):
    """HTTP 传输接口

    发送一个已构造好的请求并返回响应；传输层失败时抛出
    requests.RequestException 或 OSError。
    """

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """发送请求并返回未读取响应体的响应"""
        ...
