"""
描述: Action 调度核心
主要功能:
    - Action 抽象与构造器
    - 调度器与响应信封
    - 传输层协议
"""

from wxkit.wx.action import (
    Action,
    WxAction,
    new_get_action,
    new_post_action,
    new_upload_action,
    with_body,
    with_decode,
    with_query,
    with_upload_form,
)
from wxkit.wx.client import DefaultHTTPClient, HTTPClient, with_http_header, with_http_timeout
from wxkit.wx.dispatcher import Dispatcher
from wxkit.wx.envelope import Envelope, parse_envelope
from wxkit.wx.errors import APIError, DecodeError, EncodeError, EventCryptoError, WxError
from wxkit.wx.form import FormField, FormFile, UploadForm
from wxkit.wx.models import AccessToken

__all__ = [
    "Action",
    "WxAction",
    "new_get_action",
    "new_post_action",
    "new_upload_action",
    "with_body",
    "with_decode",
    "with_query",
    "with_upload_form",
    "DefaultHTTPClient",
    "HTTPClient",
    "with_http_header",
    "with_http_timeout",
    "Dispatcher",
    "Envelope",
    "parse_envelope",
    "APIError",
    "DecodeError",
    "EncodeError",
    "EventCryptoError",
    "WxError",
    "FormField",
    "FormFile",
    "UploadForm",
    "AccessToken",
]
