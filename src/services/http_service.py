"""HTTP 请求服务

提供基于 requests.Session 的生产环境传输实现。
"""

import logging
from typing import Optional

import requests


class HttpService:
    """基础 HTTP 传输服务"""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """初始化 HTTP 服务

        Args:
            session: 可选的 requests.Session 实例
            timeout: 请求超时（秒），None 表示使用底层默认行为（不超时）
        """
        self.timeout = timeout
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """创建 HTTP 会话"""
        return requests.Session()

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """发送请求

        响应以流模式返回，响应体由调用方按需读取。

        Args:
            request: 已构造的请求

        Returns:
            响应对象

        Raises:
            requests.RequestException: 连接失败、超时等传输错误
        """
        logging.debug(f"{request.method} {request.url}")
        return self.session.send(request, stream=True, timeout=self.timeout)

    def close(self):
        """关闭会话"""
        self.session.close()

    def __enter__(self) -> "HttpService":
        return self

    def __exit__(self, *exc_info):
        self.close()
