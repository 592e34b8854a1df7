"""
描述: HTTP 传输层
主要功能:
    - HTTPClient 协议 (普通请求 / multipart 上传)
    - 基于 httpx.AsyncClient 的默认实现
    - 单次调用的请求头与超时覆盖
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Protocol

import httpx

from wxkit.config import RequestSettings
from wxkit.wx.form import UploadForm


logger = logging.getLogger(__name__)

_JSON_CONTENT_TYPE = "application/json; charset=utf-8"


# region 请求选项
@dataclass
class HTTPSettings:
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float | None = None


HTTPOption = Callable[[HTTPSettings], None]


def with_http_header(key: str, value: str) -> HTTPOption:
    """设置单次请求的请求头"""
    def apply(settings: HTTPSettings) -> None:
        settings.headers[key] = value
    return apply


def with_http_timeout(seconds: float) -> HTTPOption:
    """设置单次请求的超时时间 (秒)"""
    def apply(settings: HTTPSettings) -> None:
        settings.timeout = seconds
    return apply


def _collect(options: tuple[HTTPOption, ...]) -> HTTPSettings:
    settings = HTTPSettings()
    for apply in options:
        apply(settings)
    return settings
# endregion


# region 传输协议
class HTTPClient(Protocol):
    """传输层能力, 由调用方注入"""

    async def do(
        self,
        method: str,
        url: str,
        body: bytes | None,
        *options: HTTPOption,
    ) -> bytes: ...

    async def upload(self, url: str, form: UploadForm, *options: HTTPOption) -> bytes: ...
# endregion


# region 默认实现
class DefaultHTTPClient:
    """
    基于 httpx 的默认传输层

    非 2xx 响应抛出 httpx.HTTPStatusError; 网络异常原样抛出。

    未注入 client 时每次请求都会新建并关闭一个 httpx.AsyncClient, 无法复用连接。
    长期运行的服务应注入一个长生命周期的 httpx.AsyncClient, 并自行负责关闭:

        async with httpx.AsyncClient(trust_env=False) as http:
            oa = OfficialAccount(appid, appsecret, client=DefaultHTTPClient(http))
    """
    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: RequestSettings | None = None,
    ) -> None:
        self._settings = settings or RequestSettings()
        self._client = client

    async def do(
        self,
        method: str,
        url: str,
        body: bytes | None,
        *options: HTTPOption,
    ) -> bytes:
        http_settings = _collect(options)
        headers = dict(http_settings.headers)
        if body is not None:
            headers.setdefault("Content-Type", _JSON_CONTENT_TYPE)
        return await self._send(
            method,
            url,
            content=body,
            headers=headers,
            timeout=http_settings.timeout,
        )

    async def upload(self, url: str, form: UploadForm, *options: HTTPOption) -> bytes:
        http_settings = _collect(options)
        return await self._send(
            "POST",
            url,
            files=form.file_parts(),
            data=form.field_parts() or None,
            headers=http_settings.headers,
            timeout=http_settings.timeout,
        )

    async def _send(self, method: str, url: str, *, timeout: float | None, **kwargs) -> bytes:
        effective_timeout = timeout if timeout is not None else self._settings.timeout
        if self._client is not None:
            response = await self._client.request(method, url, timeout=effective_timeout, **kwargs)
        else:
            async with httpx.AsyncClient(
                timeout=effective_timeout,
                trust_env=self._settings.trust_env,
            ) as client:
                response = await client.request(method, url, **kwargs)
        logger.debug(
            "wx http response: status=%s",
            response.status_code,
            extra={"method": method, "path": response.request.url.path},
        )
        response.raise_for_status()
        return response.content
# endregion
