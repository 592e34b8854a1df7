"""
描述: 微信 API 响应信封解析
主要功能:
    - 从原始响应中提取 errcode / errmsg
    - errcode 缺失与 errcode == 0 均视为成功
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


# region 信封模型
class Envelope(BaseModel):
    """
    微信 API 通用响应信封

    属性:
        errcode: 错误码 (0 或缺失表示成功)
        errmsg: 错误信息
    """
    model_config = ConfigDict(extra="ignore")

    errcode: int = 0
    errmsg: str = ""

    @field_validator("errcode", mode="before")
    @classmethod
    def coerce_code(cls, value: Any) -> int:
        if value is None:
            return 0
        try:
            return int(value)
        except (TypeError, ValueError, OverflowError):
            return 0

    @field_validator("errmsg", mode="before")
    @classmethod
    def coerce_message(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @property
    def ok(self) -> bool:
        return self.errcode == 0
# endregion


# region 解析
def parse_envelope(resp: bytes) -> Envelope:
    """
    解析响应信封 (不抛异常)

    非 JSON 或非对象响应视为没有错误字段, 交由 Action 的解码步骤处理。
    """
    try:
        payload = json.loads(resp)
    except (ValueError, TypeError):
        return Envelope()
    if not isinstance(payload, dict):
        return Envelope()
    return Envelope(
        errcode=payload.get("errcode"),
        errmsg=payload.get("errmsg"),
    )
# endregion
