"""
描述: 事件消息签名与加解密
主要功能:
    - SHA1 签名 (token + timestamp + nonce + 密文 字典序拼接)
    - AES-256-CBC 加解密 (EncodingAESKey, PKCS#7 32 字节块)
    - 解密后的 XML 消息解析为扁平字典
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import secrets
import string
import struct
import xml.etree.ElementTree as ET

from Crypto.Cipher import AES
from Crypto.Util.Padding import pad, unpad

from wxkit.wx.errors import EventCryptoError


_BLOCK_SIZE = 32
_NONCE_ALPHABET = string.ascii_letters + string.digits


def nonce(size: int = 16) -> str:
    """生成随机字符串"""
    return "".join(secrets.choice(_NONCE_ALPHABET) for _ in range(size))


def sign_with_sha1(token: str, *items: str) -> str:
    parts = sorted([token, *items])
    return hashlib.sha1("".join(parts).encode("utf-8")).hexdigest()


def _aes_key(encoding_aes_key: str) -> bytes:
    try:
        key = base64.b64decode(encoding_aes_key + "=")
    except (binascii.Error, ValueError) as exc:
        raise EventCryptoError(f"invalid aes key: {exc}") from exc
    if len(key) != 32:
        raise EventCryptoError("aes key must decode to 32 bytes")
    return key


# region 加解密
def encrypt(receive_id: str, encoding_aes_key: str, message: bytes, random_prefix: str | None = None) -> str:
    """
    加密消息

    参数:
        receive_id: 公众号 appid 或企业 corpid
        encoding_aes_key: 43 位 EncodingAESKey
        message: 明文消息
        random_prefix: 16 位随机串 (默认随机生成)

    返回:
        base64 编码的密文
    """
    key = _aes_key(encoding_aes_key)
    prefix = (random_prefix or nonce(16)).encode("utf-8")
    plain = prefix + struct.pack(">I", len(message)) + message + receive_id.encode("utf-8")
    cipher = AES.new(key, AES.MODE_CBC, key[:16])
    return base64.b64encode(cipher.encrypt(pad(plain, _BLOCK_SIZE))).decode("ascii")


def decrypt(receive_id: str, encoding_aes_key: str, ciphertext: str) -> bytes:
    """
    解密消息并校验 receive_id

    抛出:
        EventCryptoError: 密文或密钥非法, receive_id 不匹配
    """
    key = _aes_key(encoding_aes_key)
    try:
        raw = base64.b64decode(ciphertext)
        cipher = AES.new(key, AES.MODE_CBC, key[:16])
        plain = unpad(cipher.decrypt(raw), _BLOCK_SIZE)
    except (binascii.Error, ValueError) as exc:
        raise EventCryptoError(f"failed to decrypt message: {exc}") from exc

    if len(plain) < 20:
        raise EventCryptoError("decrypted message too short")
    (size,) = struct.unpack(">I", plain[16:20])
    message = plain[20:20 + size]
    if len(message) != size:
        raise EventCryptoError("decrypted message length mismatch")
    if plain[20 + size:].decode("utf-8", errors="replace") != receive_id:
        raise EventCryptoError("receive_id mismatch")
    return message
# endregion


def parse_xml_to_map(data: bytes) -> dict[str, str]:
    """将一级 XML 元素解析为字典"""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise EventCryptoError(f"invalid xml message: {exc}") from exc
    return {child.tag: child.text or "" for child in root}
