"""
描述: wxkit 异常定义
主要功能:
    - APIError: 响应信封中 errcode 非 0
    - EncodeError: 请求体 / 表单构造失败 (未发起网络请求)
    - DecodeError: 成功响应的负载无法解析
"""

from __future__ import annotations

from dataclasses import dataclass


class WxError(Exception):
    """wxkit 基础异常"""


@dataclass
class APIError(WxError):
    """微信 API 调用异常 (errcode != 0)"""
    code: int
    message: str

    def __str__(self) -> str:
        return f"{self.code}|{self.message}"


class EncodeError(WxError):
    """请求体或上传表单构造失败"""


class DecodeError(WxError):
    """响应负载与预期结构不符"""


class EventCryptoError(WxError):
    """事件消息加解密失败"""
