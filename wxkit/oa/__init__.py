"""公众号模块入口。"""

from wxkit.oa.oa import SCOPE_SNSAPI_BASE, SCOPE_SNSAPI_USER, OfficialAccount

__all__ = [
    "OfficialAccount",
    "SCOPE_SNSAPI_BASE",
    "SCOPE_SNSAPI_USER",
]
