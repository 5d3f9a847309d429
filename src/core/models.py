"""核心数据模型

纯数据模型，不包含业务逻辑。缺失或为 null 的字段取零值，未知字段忽略。
"""

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class Joke(BaseModel):
    """笑话记录基类"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_to_default(cls, v, info: ValidationInfo):
        """null 字段取默认值"""
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @property
    def text(self) -> str:
        """笑话正文"""
        raise NotImplementedError


class ChuckNorrisJoke(Joke):
    """api.chucknorris.io 返回的笑话"""

    value: str = ""
    url: str = ""

    @property
    def text(self) -> str:
        return self.value


class DadJoke(Joke):
    """icanhazdadjoke.com 返回的笑话"""

    joke: str = ""
    status: int = 0

    @property
    def text(self) -> str:
        return self.joke
