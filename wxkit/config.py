"""
描述: wxkit 全局配置加载器
主要功能:
    - 统一管理公众号 / 企业微信凭据与请求配置
    - 支持 YAML 文件加载与环境变量覆盖
    - 支持 .env 文件
"""

from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


_ENV_PATTERN = re.compile(r"\$\{([^}]+)\}")


# region 基础配置模型
class RequestSettings(BaseModel):
    """HTTP 请求配置"""
    timeout: float = 30.0
    trust_env: bool = False


class OASettings(BaseModel):
    """公众号配置"""
    appid: str = ""
    appsecret: str = ""
    token: str = ""
    aes_key: str = ""


class CorpSettings(BaseModel):
    """企业微信配置"""
    corpid: str = ""
    token: str = ""
    aes_key: str = ""
    # 应用名 -> secret, 供 Corp.app_access_token 查找
    secrets: dict[str, str] = Field(default_factory=dict)


class LoggingSettings(BaseModel):
    """日志系统配置"""
    level: str = "INFO"
    format: str = "json"


class Settings(BaseModel):
    """wxkit 配置聚合根"""
    request: RequestSettings = Field(default_factory=RequestSettings)
    oa: OASettings = Field(default_factory=OASettings)
    corp: CorpSettings = Field(default_factory=CorpSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
# endregion


# region 配置加载逻辑


def _expand_env(value: Any) -> Any:
    if isinstance(value, str):
        def replace(match: re.Match[str]) -> str:
            expr = match.group(1)
            if ":-" in expr:
                key, default = expr.split(":-", 1)
                return os.getenv(key, default)
            return os.getenv(expr, "")

        return _ENV_PATTERN.sub(replace, value)
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    if isinstance(value, dict):
        return {key: _expand_env(val) for key, val in value.items()}
    return value


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return _expand_env(data)


def _set_nested(data: dict[str, Any], keys: list[str], value: Any) -> None:
    current = data
    for key in keys[:-1]:
        current = current.setdefault(key, {})
    current[keys[-1]] = value


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    mapping = {
        "WX_OA_APPID": ["oa", "appid"],
        "WX_OA_APPSECRET": ["oa", "appsecret"],
        "WX_OA_TOKEN": ["oa", "token"],
        "WX_OA_AES_KEY": ["oa", "aes_key"],
        "WX_CORP_ID": ["corp", "corpid"],
        "WX_CORP_TOKEN": ["corp", "token"],
        "WX_CORP_AES_KEY": ["corp", "aes_key"],
        "WX_REQUEST_TIMEOUT": ["request", "timeout"],
        "WX_LOG_LEVEL": ["logging", "level"],
    }
    for env_key, path in mapping.items():
        env_value = os.getenv(env_key)
        if env_value is not None and env_value != "":
            _set_nested(data, path, env_value)
    return data


def load_settings(config_path: str | None = None) -> Settings:
    load_dotenv(override=False)
    path = Path(config_path or os.getenv("CONFIG_PATH", "config.yaml"))
    data = _load_yaml(path)
    data = _apply_env_overrides(data)
    return Settings.model_validate(data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """获取单例配置对象"""
    return load_settings()
# endregion
