"""
Pytest配置和全局fixtures
"""
import os
import sys
from pathlib import Path

import pytest

# 添加项目根目录到Python路径，以便导入模块
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def clean_pingprobe_env(monkeypatch):
    """清除本地.env带入的PINGPROBE_*环境变量"""
    for key in list(os.environ):
        if key.startswith("PINGPROBE_"):
            monkeypatch.delenv(key, raising=False)
