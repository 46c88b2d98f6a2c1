"""
端点解析器单元测试
"""
from pingprobe.utils.parsers.endpoint_parser import parse_endpoints


class TestParseEndpoints:
    """端点解析测试"""

    def test_hostname_with_ip(self):
        """测试带主机名和方括号IP的标题行"""
        header = "Pinging example.com [93.184.216.34] from 192.168.1.10 with 32 bytes of data:"

        endpoints = parse_endpoints(header, "192.168.1.99", "example.com")

        assert endpoints.destination == "example.com [93.184.216.34]"
        assert endpoints.source == "192.168.1.10"
        assert endpoints.resolved is True

    def test_ip_only(self):
        """测试只有IP的标题行"""
        header = "Pinging 10.0.2.20 from 10.0.1.10 with 32 bytes of data:"

        endpoints = parse_endpoints(header, "10.0.1.10", "10.0.2.20")

        assert endpoints.destination == "10.0.2.20"
        assert endpoints.source == "10.0.1.10"

    def test_ipv6_header(self):
        """测试IPv6标题行"""
        header = "Pinging 2001:db8::20 from 2001:db8::10 with 32 bytes of data:"

        endpoints = parse_endpoints(header, "2001:db8::10", "2001:db8::20")

        assert endpoints.destination == "2001:db8::20"
        assert endpoints.source == "2001:db8::10"

    def test_missing_header_falls_back(self):
        """测试退化输出时回退到输入配置"""
        endpoints = parse_endpoints(None, "10.0.1.10", "no-such-host.invalid")

        assert endpoints.source == "10.0.1.10"
        assert endpoints.destination == "no-such-host.invalid"
        assert endpoints.resolved is False

    def test_header_without_source(self):
        """测试未绑定源地址的标题行"""
        header = "Pinging example.com [93.184.216.34] with 32 bytes of data:"

        endpoints = parse_endpoints(header, "192.168.1.10", "example.com")

        assert endpoints.destination == "example.com [93.184.216.34]"
        assert endpoints.source == "192.168.1.10"
