"""
延迟统计解析器单元测试
"""
from pingprobe.models.report import LatencyStats
from pingprobe.utils.parsers.latency_parser import find_summary_line, parse_latency


class TestParseLatency:
    """延迟统计解析测试"""

    def test_summary_line(self):
        """测试正常的统计行"""
        lines = [
            "Approximate round trip times in milli-seconds:",
            "    Minimum = 13ms, Maximum = 14ms, Average = 13ms",
        ]

        assert parse_latency(lines) == LatencyStats(min_ms=13, max_ms=14, avg_ms=13)

    def test_zero_latency(self):
        """测试全部为 time<1ms 时的0ms统计"""
        latency = parse_latency(["    Minimum = 0ms, Maximum = 0ms, Average = 0ms"])

        assert latency.min_ms == 0
        assert latency.avg_ms == 0

    def test_missing_summary(self):
        """测试没有统计行"""
        lines = ["Ping statistics for 10.0.2.20:", "    Packets: Sent = 2, Received = 0, Lost = 2 (100% loss),"]

        assert find_summary_line(lines) is None
        assert parse_latency(lines) is None

    def test_unexpected_field_count(self):
        """测试字段数异常时忽略延迟而不报错"""
        assert parse_latency(["    Minimum = 13ms, Average = 13ms"]) is None

    def test_unparseable_value(self):
        """测试数值无法解析时忽略延迟"""
        assert parse_latency(["    Minimum = 13ms, Maximum = ?ms, Average = 13ms"]) is None
