"""
ping输出分行器单元测试
"""
from pingprobe.utils.parsers.tokenizer import split_output

FULL_OUTPUT = """
Pinging example.com [93.184.216.34] from 192.168.1.10 with 32 bytes of data:
Reply from 93.184.216.34: bytes=32 time=13ms TTL=56
Reply from 93.184.216.34: bytes=32 time=14ms TTL=56

Ping statistics for 93.184.216.34:
    Packets: Sent = 2, Received = 2, Lost = 0 (0% loss),
Approximate round trip times in milli-seconds:
    Minimum = 13ms, Maximum = 14ms, Average = 13ms"""


class TestSplitOutput:
    """输出分行与窗口提取测试"""

    def test_window_follows_header(self):
        """测试回复窗口紧随标题行"""
        window = split_output(FULL_OUTPUT, 2)

        assert window.degenerate is False
        assert window.header_index == 1
        assert window.header.startswith("Pinging example.com")
        assert window.reply_lines == [
            "Reply from 93.184.216.34: bytes=32 time=13ms TTL=56",
            "Reply from 93.184.216.34: bytes=32 time=14ms TTL=56",
        ]
        assert len(window.lines) == 9

    def test_single_line_is_degenerate(self):
        """测试只有一行错误信息时按退化输出处理"""
        window = split_output("Ping request could not find host X. Please check the name and try again.", 2)

        assert window.degenerate is True
        assert window.header is None
        assert window.reply_lines == []
        assert len(window.lines) == 1

    def test_empty_output_is_degenerate(self):
        """测试空输出"""
        window = split_output("", 4)

        assert window.degenerate is True
        assert window.lines == []

    def test_two_lines_is_degenerate(self):
        """测试少于3行的输出"""
        window = split_output("\nPing request could not find host X.", 1)

        assert window.degenerate is True

    def test_missing_header_starts_at_first_non_blank_line(self):
        """测试没有标题行时从首个非空行开始取窗口"""
        text = "\nRequest timed out.\nRequest timed out.\n\nPing statistics for 10.0.0.1:"
        window = split_output(text, 2)

        assert window.degenerate is False
        assert window.header_index is None
        assert window.reply_lines == ["Request timed out.", "Request timed out."]

    def test_truncated_window(self):
        """测试输出被截断时窗口不足count行"""
        text = "\nPinging 10.0.0.1 from 10.0.0.2 with 32 bytes of data:\nRequest timed out."
        window = split_output(text, 4)

        assert window.reply_lines == ["Request timed out."]

    def test_windows_line_endings(self):
        """测试CRLF换行"""
        window = split_output(FULL_OUTPUT.replace("\n", "\r\n"), 2)

        assert window.header_index == 1
        assert window.reply_lines[0].endswith("TTL=56")
