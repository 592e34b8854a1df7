"""
描述: Action 调度器
主要功能:
    - 持有传输层, 执行 Action
    - 统一处理响应信封 (errcode / errmsg)
    - 成功时将完整响应交给 Action 自行解码
"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

from wxkit.wx.action import Action
from wxkit.wx.client import DefaultHTTPClient, HTTPClient, HTTPOption
from wxkit.wx.envelope import parse_envelope
from wxkit.wx.errors import APIError


logger = logging.getLogger(__name__)


# region 调度器
class Dispatcher:
    """
    Action 调度器

    功能:
        - 上传类 Action 走 multipart, 其余走普通请求
        - errcode 非 0 时抛出 APIError, 不调用解码
        - 除传输层外不持有任何可变状态, 可被多个协程并发使用
    """
    def __init__(self, client: HTTPClient | None = None) -> None:
        self._client: HTTPClient = client or DefaultHTTPClient()

    @property
    def client(self) -> HTTPClient:
        return self._client

    async def do(self, access_token: str, action: Action, *options: HTTPOption) -> None:
        """
        执行 Action

        参数:
            access_token: 接口调用凭证
            action: 待执行的操作
            options: 单次请求的传输层选项

        抛出:
            EncodeError: 请求体或表单构造失败 (未发起请求)
            APIError: 响应 errcode 非 0
            DecodeError: 成功响应解码失败
            httpx.HTTPError: 传输层异常 (原样抛出)
        """
        url = action.url(access_token)
        path = urlsplit(url).path

        if action.is_upload():
            form = action.upload_form()
            logger.debug("wx action dispatched", extra={"method": "POST", "path": path, "upload": True})
            resp = await self._client.upload(url, form, *options)
        else:
            body = action.body()
            logger.debug("wx action dispatched", extra={"method": action.method(), "path": path, "upload": False})
            resp = await self._client.do(action.method(), url, body, *options)

        envelope = parse_envelope(resp)
        if not envelope.ok:
            logger.warning(
                "wx api error: %s",
                path,
                extra={"path": path, "errcode": envelope.errcode, "errmsg": envelope.errmsg},
            )
            raise APIError(code=envelope.errcode, message=envelope.errmsg)

        action.decode(resp)
# endregion
