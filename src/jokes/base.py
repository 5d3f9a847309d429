"""笑话来源基类和注册表"""

import logging

import requests
from pydantic import ValidationError

from core.interfaces import Transport
from core.models import Joke
from core.exceptions import (
    BodyReadError,
    DecodeError,
    RequestConstructionError,
    TransportError,
    UnexpectedStatusError,
)

DEFAULT_USER_AGENT = "jokecli (https://github.com/brianhays/jokecli)"

# 笑话来源注册表
SOURCE_REGISTRY: dict[str, type["JokeSource"]] = {}


class JokeSource:
    """笑话来源基类

    子类只需声明端点、模型和展示信息，请求、状态检查和解析由基类完成。
    """

    name: str
    title: str
    api_name: str
    label: str
    summary: str
    description: str = ""
    endpoint: str
    model: type[Joke]

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT):
        """初始化笑话来源

        Args:
            user_agent: 客户端标识，不能为空

        Raises:
            ValueError: user_agent 为空
        """
        if not user_agent or not user_agent.strip():
            raise ValueError("User-Agent must not be empty")
        self.user_agent = user_agent

    @property
    def headers(self) -> dict[str, str]:
        """请求头"""
        return {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }

    def build_request(self) -> requests.PreparedRequest:
        """构造 GET 请求

        Raises:
            RequestConstructionError: URL 或请求头无效
        """
        try:
            return requests.Request("GET", self.endpoint, headers=self.headers).prepare()
        except (requests.RequestException, ValueError) as e:
            raise RequestConstructionError(
                f"failed to create {self.title} request: {e}",
                self.endpoint,
                self.name,
            ) from e

    def decode(self, body: bytes) -> Joke:
        """解析响应体

        Raises:
            DecodeError: 响应体不是合法的 JSON 对象
        """
        try:
            return self.model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"failed to parse {self.title}: {e}", e, self.name) from e

    def fetch(self, transport: Transport) -> Joke:
        """获取一条笑话

        Args:
            transport: HTTP 传输

        Returns:
            解析后的笑话记录

        Raises:
            RequestConstructionError: 请求构造失败
            TransportError: 网络请求失败
            UnexpectedStatusError: 响应状态码不是 200
            BodyReadError: 响应体读取失败
            DecodeError: 响应体解析失败
        """
        request = self.build_request()

        logging.info(f"[{self.name}] Fetching: {request.url}")
        try:
            resp = transport.send(request)
        except (requests.RequestException, OSError) as e:
            logging.warning(f"[{self.name}] Request failed: {e}")
            raise TransportError(
                f"failed to fetch {self.title}: {e}", e, request.url, self.name
            ) from e

        with resp:
            if resp.status_code != requests.codes.ok:
                logging.warning(f"[{self.name}] Unexpected status: {resp.status_code}")
                raise UnexpectedStatusError(
                    f"{self.api_name} API returned unexpected status code: {resp.status_code}",
                    resp.status_code,
                    request.url,
                    self.name,
                )

            try:
                body = resp.content
            except (requests.RequestException, OSError) as e:
                logging.warning(f"[{self.name}] Failed to read response: {e}")
                raise BodyReadError(
                    f"failed to read {self.title} response: {e}", e, self.name
                ) from e

        joke = self.decode(body)
        logging.info(f"[{self.name}] Fetched joke: {joke.id or '<no id>'}")
        return joke


# -------------------- 笑话来源注册表 -------------------- #


def register_source(cls: type[JokeSource]):
    """注册笑话来源子类

    Args:
        cls: 笑话来源类

    Returns:
        笑话来源类（用于装饰器）
    """
    name = cls.name
    if name in SOURCE_REGISTRY:
        raise ValueError(f"Joke source {name} already registered")
    SOURCE_REGISTRY[name] = cls
    return cls


def list_sources() -> list[str]:
    """列出所有已注册的笑话来源名称"""
    return list(SOURCE_REGISTRY.keys())


def get_source(name: str) -> type[JokeSource]:
    """获取指定名称的笑话来源类

    Args:
        name: 来源名称

    Returns:
        笑话来源类

    Raises:
        ValueError: 来源未注册
    """
    if name not in SOURCE_REGISTRY:
        raise ValueError(f"No joke source registered under name: {name}")
    return SOURCE_REGISTRY[name]


__all__ = [
    "DEFAULT_USER_AGENT",
    "JokeSource",
    "register_source",
    "list_sources",
    "get_source",
]
