"""配置模块单元测试"""
import pytest
from pydantic import ValidationError

from config.settings import AppConfig, HttpConfig, Config
from jokes.base import DEFAULT_USER_AGENT


class TestAppConfig:
    """AppConfig 测试类"""

    def test_default_values(self):
        """测试默认值"""
        config = AppConfig()
        assert config.log_level == "WARNING"
        assert config.interactive is True

    def test_log_level_normalized(self):
        """测试日志级别转为大写"""
        config = AppConfig(log_level="debug")
        assert config.log_level == "DEBUG"

    def test_log_level_validation(self):
        """测试非法日志级别"""
        with pytest.raises(ValidationError):
            AppConfig(log_level="LOUD")


class TestHttpConfig:
    """HttpConfig 测试类"""

    def test_default_values(self):
        """测试默认值"""
        config = HttpConfig()
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.timeout is None

    def test_timeout_validation(self):
        """测试 timeout 字段验证"""
        # 有效值
        config = HttpConfig(timeout=2.5)
        assert config.timeout == 2.5

        # 无效值（不大于 0）
        with pytest.raises(ValidationError):
            HttpConfig(timeout=0)

    def test_user_agent_validation(self):
        """测试 user_agent 不能为空"""
        with pytest.raises(ValidationError):
            HttpConfig(user_agent="")

    def test_blank_user_agent_rejected(self):
        """测试 user_agent 不能只含空白"""
        with pytest.raises(ValidationError):
            HttpConfig(user_agent="   ")

    def test_user_agent_stripped(self):
        """测试 user_agent 去除首尾空白"""
        config = HttpConfig(user_agent="  tester/1.0 ")
        assert config.user_agent == "tester/1.0"


class TestConfig:
    """Config 测试类"""

    def test_default_config(self):
        """测试默认配置"""
        config = Config()
        assert isinstance(config.app, AppConfig)
        assert isinstance(config.http, HttpConfig)


class TestEnvironmentVariables:
    """环境变量测试类"""

    def test_app_env_prefix(self, monkeypatch):
        """测试 JOKECLI_ 前缀的环境变量"""
        monkeypatch.setenv("JOKECLI_LOG_LEVEL", "info")
        monkeypatch.setenv("JOKECLI_INTERACTIVE", "false")
        config = AppConfig()
        assert config.log_level == "INFO"
        assert config.interactive is False

    def test_http_env_prefix(self, monkeypatch):
        """测试 JOKECLI_HTTP_ 前缀的环境变量"""
        monkeypatch.setenv("JOKECLI_HTTP_USER_AGENT", "tester/1.0")
        monkeypatch.setenv("JOKECLI_HTTP_TIMEOUT", "3")
        config = HttpConfig()
        assert config.user_agent == "tester/1.0"
        assert config.timeout == 3.0
