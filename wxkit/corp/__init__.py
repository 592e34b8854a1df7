"""企业微信模块入口。"""

from wxkit.corp.corp import SCOPE_SNSAPI_BASE, SCOPE_SNSAPI_PRIVATE_INFO, SCOPE_SNSAPI_USER, Corp

__all__ = [
    "Corp",
    "SCOPE_SNSAPI_BASE",
    "SCOPE_SNSAPI_USER",
    "SCOPE_SNSAPI_PRIVATE_INFO",
]
