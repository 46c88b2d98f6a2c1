"""
探测配置模型单元测试
"""
import pytest
from pydantic import ValidationError

from pingprobe.models.config import (
    DEFAULT_COUNT,
    DEFAULT_SIZE,
    IpVersion,
    ProbeConfigError,
    ProbeConfiguration,
)


class TestProbeConfiguration:
    """配置校验测试"""

    def test_defaults(self, monkeypatch):
        """测试默认值"""
        monkeypatch.delenv("PINGPROBE_DEFAULT_DESTINATION", raising=False)
        config = ProbeConfiguration(source="192.168.1.10")

        assert config.destination == "www.google.com"
        assert config.count == DEFAULT_COUNT
        assert config.size == DEFAULT_SIZE
        assert config.no_fragment is False
        assert config.resolve_hostname is False
        assert config.ip_version == IpVersion.V4
        assert config.timeout is None

    def test_default_destination_from_env(self, monkeypatch):
        """测试从环境变量读取默认目标"""
        monkeypatch.setenv("PINGPROBE_DEFAULT_DESTINATION", "gateway.lan")

        assert ProbeConfiguration(source="192.168.1.10").destination == "gateway.lan"

    def test_immutable(self):
        """测试构造后不可修改"""
        config = ProbeConfiguration(source="192.168.1.10")

        with pytest.raises(ValidationError):
            config.count = 5

    @pytest.mark.parametrize("params", [
        {"count": 0},
        {"count": 4294967296},
        {"size": -1},
        {"size": 65501},
        {"source": ""},
        {"source": "   "},
        {"timeout": 0},
    ])
    def test_out_of_range(self, params):
        """测试越界参数"""
        values = {"source": "192.168.1.10"}
        values.update(params)

        with pytest.raises(ProbeConfigError) as exc_info:
            ProbeConfiguration.create(**values)

        assert exc_info.value.errors

    def test_bounds_accepted(self):
        """测试边界值"""
        config = ProbeConfiguration.create(source="10.0.0.1", count=4294967295, size=0)

        assert config.count == 4294967295
        assert config.size == 0

    def test_ipv6_requires_destination(self):
        """测试IPv6必须显式指定目标"""
        with pytest.raises(ProbeConfigError):
            ProbeConfiguration.create(source="2001:db8::10", ip_version=IpVersion.V6)

    def test_ipv6_from_int(self):
        """测试ip_version可以传整数"""
        config = ProbeConfiguration.create(source="2001:db8::10", destination="2001:db8::1", ip_version=6)

        assert config.ip_version == IpVersion.V6
        assert config.is_ipv6 is True

    def test_strips_whitespace(self):
        """测试去除首尾空白"""
        config = ProbeConfiguration.create(source=" 10.0.0.1 ", destination=" example.com ")

        assert config.source == "10.0.0.1"
        assert config.destination == "example.com"
