"""
描述: 企业微信客户端
主要功能:
    - 获取应用 access_token
    - 网页授权 / 扫码登录 URL 生成
    - 执行 Action
    - 回调消息验签与解密
"""

from __future__ import annotations

import hmac
from urllib.parse import urlencode

from wxkit import urls
from wxkit.config import Settings
from wxkit.wx.action import decode_into, new_get_action, with_decode, with_query
from wxkit.wx.client import DefaultHTTPClient, HTTPClient, HTTPOption
from wxkit.wx.crypto import decrypt, parse_xml_to_map, sign_with_sha1
from wxkit.wx.dispatcher import Dispatcher
from wxkit.wx.models import AccessToken


SCOPE_SNSAPI_BASE = "snsapi_base"
SCOPE_SNSAPI_USER = "snsapi_userinfo"
SCOPE_SNSAPI_PRIVATE_INFO = "snsapi_privateinfo"


# region 企业微信客户端
class Corp(Dispatcher):
    """企业微信客户端, 同一个实例可被多个应用 (不同 secret) 共用"""
    def __init__(
        self,
        corpid: str,
        *,
        token: str = "",
        aes_key: str = "",
        secrets: dict[str, str] | None = None,
        client: HTTPClient | None = None,
    ) -> None:
        super().__init__(client)
        self._corpid = corpid
        self._token = token
        self._aes_key = aes_key
        self._secrets = dict(secrets or {})

    @classmethod
    def from_settings(cls, settings: Settings, client: HTTPClient | None = None) -> Corp:
        return cls(
            settings.corp.corpid,
            token=settings.corp.token,
            aes_key=settings.corp.aes_key,
            secrets=settings.corp.secrets,
            client=client or DefaultHTTPClient(settings=settings.request),
        )

    @property
    def corpid(self) -> str:
        return self._corpid

    def oauth2_url(self, scope: str, redirect_uri: str, state: str) -> str:
        """
        生成网页授权 URL
        [参考](https://developer.work.weixin.qq.com/document/path/91022)
        """
        query = urlencode({
            "appid": self._corpid,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "scope": scope,
            "state": state,
        })
        return f"{urls.CORP_OAUTH2_AUTHORIZE}?{query}#wechat_redirect"

    def qrcode_auth_url(self, agent_id: str, redirect_uri: str, state: str) -> str:
        """
        生成扫码登录 URL
        [参考](https://developer.work.weixin.qq.com/document/path/91019)
        """
        query = urlencode({
            "appid": self._corpid,
            "agentid": agent_id,
            "redirect_uri": redirect_uri,
            "state": state,
        })
        return f"{urls.CORP_QRCODE_AUTHORIZE}?{query}"

    async def access_token(self, secret: str, *options: HTTPOption) -> AccessToken:
        """获取应用 access_token"""
        token = AccessToken()
        action = new_get_action(
            urls.CORP_CGI_BIN_ACCESS_TOKEN,
            with_query("corpid", self._corpid),
            with_query("corpsecret", secret),
            with_decode(decode_into(token)),
        )
        await self.do("", action, *options)
        return token

    async def app_access_token(self, app: str, *options: HTTPOption) -> AccessToken:
        """
        按应用名获取 access_token

        应用 secret 取自构造参数 secrets (配置项 corp.secrets)。
        未配置的应用抛出 KeyError, 不发起请求。
        """
        try:
            secret = self._secrets[app]
        except KeyError:
            raise KeyError(f"no secret configured for corp app: {app}") from None
        return await self.access_token(secret, *options)

    def verify_event_sign(self, signature: str, *items: str) -> bool:
        """
        验证回调消息签名
        [参考](https://developer.work.weixin.qq.com/document/path/90930)

        URL 验证使用 timestamp, nonce, echostr; 事件消息使用 timestamp, nonce, msg_encrypt。
        """
        expected = sign_with_sha1(self._token, *items)
        return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))

    def decrypt_echo_str(self, echo_str: str) -> str:
        """解密 URL 验证时的 echostr"""
        return decrypt(self._corpid, self._aes_key, echo_str).decode("utf-8")

    def decrypt_event_message(self, encrypt: str) -> dict[str, str]:
        """解密回调消息并解析 XML"""
        return parse_xml_to_map(decrypt(self._corpid, self._aes_key, encrypt))
# endregion
