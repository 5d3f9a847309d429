"""数据模型单元测试"""

import pytest
from pydantic import ValidationError

from core.models import ChuckNorrisJoke, DadJoke


class TestChuckNorrisJoke:
    """ChuckNorrisJoke 测试类"""

    def test_decode(self):
        """测试解析完整响应"""
        joke = ChuckNorrisJoke.model_validate_json(
            '{"id": "abc", "value": "Chuck Norris can divide by zero.", "url": "http://example.com"}'
        )
        assert joke.id == "abc"
        assert joke.text == "Chuck Norris can divide by zero."
        assert joke.url == "http://example.com"

    def test_unknown_fields_ignored(self):
        """测试忽略未知字段"""
        joke = ChuckNorrisJoke.model_validate_json(
            '{"id": "1", "value": "X", "categories": [], "icon_url": "x"}'
        )
        assert joke.text == "X"
        assert not hasattr(joke, "categories")

    def test_missing_fields_default(self):
        """测试缺失字段使用零值"""
        joke = ChuckNorrisJoke.model_validate_json("{}")
        assert joke.id == ""
        assert joke.text == ""
        assert joke.url == ""

    def test_frozen(self):
        """测试记录不可修改"""
        joke = ChuckNorrisJoke(id="1", value="X")
        with pytest.raises(ValidationError):
            joke.value = "Y"


class TestDadJoke:
    """DadJoke 测试类"""

    def test_decode(self):
        """测试解析完整响应"""
        joke = DadJoke.model_validate_json('{"id": "1", "joke": "Y", "status": 200}')
        assert joke.id == "1"
        assert joke.text == "Y"
        assert joke.status == 200

    def test_missing_status_default(self):
        """测试缺失状态码默认为 0"""
        joke = DadJoke.model_validate_json('{"id": "1", "joke": "Y"}')
        assert joke.status == 0

    def test_invalid_json(self):
        """测试非法 JSON"""
        with pytest.raises(ValidationError):
            DadJoke.model_validate_json("invalid json")

    def test_not_an_object(self):
        """测试 JSON 不是对象"""
        with pytest.raises(ValidationError):
            DadJoke.model_validate_json('["Y"]')


class TestNullFields:
    """null 字段测试类"""

    def test_chuck_null_url(self):
        """测试 null 字段取零值"""
        joke = ChuckNorrisJoke.model_validate_json('{"id": "1", "value": "X", "url": null}')
        assert joke.text == "X"
        assert joke.url == ""

    def test_dad_null_fields(self):
        """测试所有字段为 null"""
        joke = DadJoke.model_validate_json('{"id": null, "joke": null, "status": null}')
        assert joke.id == ""
        assert joke.text == ""
        assert joke.status == 0
