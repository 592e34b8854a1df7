"""
描述: 通用响应数据模型
"""

from __future__ import annotations

from pydantic import BaseModel


class AccessToken(BaseModel):
    """
    接口调用凭证

    属性:
        access_token: 凭证字符串
        expires_in: 有效期 (秒), 缓存与刷新由调用方负责
    """
    access_token: str = ""
    expires_in: int = 0
