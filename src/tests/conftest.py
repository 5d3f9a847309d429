"""测试公共夹具"""

import os

import pytest

from services.fake_transport import FakeTransport

CHUCK_BODY = '{"id": "1", "value": "X", "url": ""}'
DAD_BODY = '{"id": "1", "joke": "Y", "status": 200}'


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """清除 JOKECLI_ 前缀的环境变量，避免影响配置"""
    for key in list(os.environ):
        if key.upper().startswith("JOKECLI_"):
            monkeypatch.delenv(key)


@pytest.fixture
def chuck_transport():
    """返回 Chuck Norris 笑话的传输"""
    return FakeTransport.static(200, CHUCK_BODY)


@pytest.fixture
def dad_transport():
    """返回 dad joke 的传输"""
    return FakeTransport.static(200, DAD_BODY)
