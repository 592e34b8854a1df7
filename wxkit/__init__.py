"""wxkit: 微信公众号 / 企业微信开放接口客户端。"""

__version__ = "0.1.0"
