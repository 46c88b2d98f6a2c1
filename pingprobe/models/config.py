"""
探测配置数据模型
定义一次探测调用的不可变输入参数及其校验规则
"""
import os
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

DEFAULT_COUNT = 2
DEFAULT_SIZE = 32
MAX_COUNT = 4294967295
MAX_SIZE = 65500
FALLBACK_DESTINATION = "www.google.com"


class IpVersion(str, Enum):
    """IP协议版本枚举"""
    V4 = "4"
    V6 = "6"


class OutputMode(str, Enum):
    """调用方期望的输出形式"""
    RAW = "raw"            # 原始输出行
    QUIET = "quiet"        # 仅返回布尔结果
    DETAILED = "detailed"  # 完整的结构化报告


class ProbeConfigError(Exception):
    """探测配置错误（在启动外部进程之前报告）"""
    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


def default_destination() -> str:
    """未指定目标时使用的默认目标主机名"""
    return os.getenv("PINGPROBE_DEFAULT_DESTINATION", FALLBACK_DESTINATION)


class ProbeConfiguration(BaseModel):
    """
    探测配置

    每次调用构造一次，构造后不可修改
    """
    model_config = ConfigDict(frozen=True)

    source: str = Field(..., description="绑定的本地源地址", min_length=1)
    destination: Optional[str] = Field(None, description="目标主机名或IP，IPv4模式下可省略")
    count: int = Field(default=DEFAULT_COUNT, ge=1, le=MAX_COUNT, description="发送的回显请求数")
    size: int = Field(default=DEFAULT_SIZE, ge=0, le=MAX_SIZE, description="负载字节数")
    no_fragment: bool = Field(default=False, description="设置不分片标志（仅IPv4）")
    resolve_hostname: bool = Field(default=False, description="反向解析目标地址")
    ip_version: IpVersion = Field(default=IpVersion.V4, description="强制使用的IP协议版本")
    timeout: Optional[float] = Field(None, gt=0, description="等待外部进程退出的超时（秒）")

    @field_validator("source")
    @classmethod
    def _check_source(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("源地址不能为空")
        return value

    @field_validator("ip_version", mode="before")
    @classmethod
    def _coerce_ip_version(cls, value: Any) -> Any:
        # 允许直接传入整数 4/6
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @model_validator(mode="before")
    @classmethod
    def _fill_destination(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        destination = data.get("destination")
        if destination is not None and str(destination).strip():
            return {**data, "destination": str(destination).strip()}

        version = data.get("ip_version", IpVersion.V4)
        version = getattr(version, "value", version)
        if str(version) == IpVersion.V6.value:
            raise ValueError("IPv6模式必须显式指定目标地址")

        return {**data, "destination": default_destination()}

    @property
    def is_ipv6(self) -> bool:
        return self.ip_version == IpVersion.V6

    @classmethod
    def create(cls, **params: Any) -> "ProbeConfiguration":
        """
        构造配置，校验失败时抛出ProbeConfigError

        Args:
            **params: 配置字段

        Returns:
            ProbeConfiguration

        Raises:
            ProbeConfigError: 参数超出范围、源地址为空或IPv6缺少目标地址
        """
        try:
            return cls(**params)
        except ValidationError as e:
            messages = []
            for error in e.errors():
                location = ".".join(str(part) for part in error.get("loc", ())) or "config"
                messages.append(f"{location}: {error.get('msg', '')}")
            raise ProbeConfigError("; ".join(messages), errors=e.errors()) from e

    def __str__(self) -> str:
        return (f"{self.source} → {self.destination} "
                f"(IPv{self.ip_version.value}, count={self.count}, size={self.size})")
