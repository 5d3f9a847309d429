"""笑话分发服务

根据来源名称选择笑话来源，并使用注入的传输获取笑话。
"""

import jokes  # noqa: F401  注册所有笑话来源
from jokes.base import DEFAULT_USER_AGENT, JokeSource, get_source, list_sources
from core.exceptions import SelectionError
from core.interfaces import Transport
from core.models import Joke


def available_sources() -> list[type[JokeSource]]:
    """按注册顺序返回所有笑话来源"""
    return [get_source(name) for name in list_sources()]


class JokeService:
    """笑话分发服务"""

    def __init__(self, transport: Transport, user_agent: str = DEFAULT_USER_AGENT):
        """初始化分发服务

        Args:
            transport: HTTP 传输，所有来源共用
            user_agent: 客户端标识
        """
        self.transport = transport
        self.user_agent = user_agent

    def sources(self) -> list[type[JokeSource]]:
        """按注册顺序返回所有笑话来源"""
        return available_sources()

    def fetch(self, name: str) -> Joke:
        """获取指定来源的笑话

        Raises:
            SelectionError: 来源未注册
            JokeError: 获取失败
        """
        try:
            source_cls = get_source(name)
        except ValueError as e:
            raise SelectionError(f"invalid selection: {name}") from e

        source = source_cls(user_agent=self.user_agent)
        return source.fetch(self.transport)

    def tell(self, name: str) -> str:
        """获取指定来源的笑话正文"""
        return self.fetch(name).text
