"""
描述: 微信公众号客户端
主要功能:
    - 获取 access_token (缓存与刷新由调用方负责)
    - 网页授权 URL 生成
    - 执行 Action
    - 事件消息验签与解密
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


# region 公众号客户端
class OfficialAccount(Dispatcher):
    """
    公众号客户端

    功能:
        - 持有 appid / appsecret 与服务器配置 (token, EncodingAESKey)
        - 通过注入的 HTTPClient 执行 Action
    """
    def __init__(
        self,
        appid: str,
        appsecret: str,
        *,
        token: str = "",
        aes_key: str = "",
        client: HTTPClient | None = None,
    ) -> None:
        super().__init__(client)
        self._appid = appid
        self._appsecret = appsecret
        self._token = token
        self._aes_key = aes_key

    @classmethod
    def from_settings(cls, settings: Settings, client: HTTPClient | None = None) -> OfficialAccount:
        return cls(
            settings.oa.appid,
            settings.oa.appsecret,
            token=settings.oa.token,
            aes_key=settings.oa.aes_key,
            client=client or DefaultHTTPClient(settings=settings.request),
        )

    @property
    def appid(self) -> str:
        return self._appid

    def oauth2_url(self, scope: str, redirect_uri: str, state: str) -> str:
        """
        生成网页授权 URL
        [参考](https://developers.weixin.qq.com/doc/offiaccount/OA_Web_Apps/Wechat_webpage_authorization.html)
        """
        query = urlencode({
            "appid": self._appid,
            "redirect_uri": redirect_uri,
            "response_type": "code",
            "scope": scope,
            "state": state,
        })
        return f"{urls.OA_OAUTH2_AUTHORIZE}?{query}#wechat_redirect"

    async def access_token(self, *options: HTTPOption) -> AccessToken:
        """获取 access_token"""
        token = AccessToken()
        action = new_get_action(
            urls.OA_CGI_BIN_ACCESS_TOKEN,
            with_query("grant_type", "client_credential"),
            with_query("appid", self._appid),
            with_query("secret", self._appsecret),
            with_decode(decode_into(token)),
        )
        await self.do("", action, *options)
        return token

    def verify_event_sign(self, signature: str, *items: str) -> bool:
        """
        验证事件消息签名

        明文模式使用 signature, timestamp, nonce;
        安全模式使用 msg_signature, timestamp, nonce, msg_encrypt。
        """
        expected = sign_with_sha1(self._token, *items)
        return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))

    def decrypt_event_message(self, encrypt: str) -> dict[str, str]:
        """解密事件消息并解析 XML"""
        return parse_xml_to_map(decrypt(self._appid, self._aes_key, encrypt))
# endregion
