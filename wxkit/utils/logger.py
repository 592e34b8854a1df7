"""
描述: wxkit 日志工具库
主要功能:
    - JSON 格式化输出, 附带调度器的 method / path / errcode 等字段
    - 隐去日志中的 access_token / corpsecret 等凭据
    - wxkit 日志器初始化
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from wxkit.config import LoggingSettings


_EXTRA_KEYS = ("method", "path", "errcode", "errmsg", "upload")

# httpx 异常信息中带有完整 URL, 凭据在查询串里
_CREDENTIAL_PATTERN = re.compile(r"\b(access_token|secret|corpsecret)=[^&\s'\"]+")
_REDACTED = "***"


def redact(text: str) -> str:
    """将 URL 查询串中的凭据替换为 ***"""
    return _CREDENTIAL_PATTERN.sub(lambda m: f"{m.group(1)}={_REDACTED}", text)


# region 日志 Formatter
class JsonFormatter(logging.Formatter):
    """JSON 日志格式化器, 输出前隐去凭据"""
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": redact(record.getMessage()),
        }
        for key in _EXTRA_KEYS:
            if hasattr(record, key):
                value = getattr(record, key)
                payload[key] = redact(value) if isinstance(value, str) else value
        if record.exc_info:
            payload["exc_info"] = redact(self.formatException(record.exc_info))
        return json.dumps(payload, ensure_ascii=False)
# endregion


# region 日志初始化
def setup_logging(settings: LoggingSettings) -> logging.Logger:
    """
    初始化 wxkit 日志器

    只配置 "wxkit" 日志器, 不改动 root logger; 重复调用会替换之前安装的 handler。

    参数:
        settings: 日志配置对象
    返回:
        wxkit 日志器
    """
    logger = logging.getLogger("wxkit")
    logger.setLevel(getattr(logging, settings.level.upper(), logging.INFO))
    handler = logging.StreamHandler()
    if settings.format == "json":
        handler.setFormatter(JsonFormatter())
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
# endregion
