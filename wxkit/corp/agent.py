"""
描述: 企业微信应用管理
主要功能:
    - 获取应用详情 / 应用列表
    - 设置应用
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from wxkit import urls
from wxkit.wx.action import (
    WxAction,
    decode_into,
    marshal_json,
    new_get_action,
    new_post_action,
    with_body,
    with_decode,
    with_query,
)


# region 数据模型
class AllowUser(BaseModel):
    userid: str = ""


class AllowUserInfos(BaseModel):
    user: list[AllowUser] = Field(default_factory=list)


class AllowPartys(BaseModel):
    partyid: list[int] = Field(default_factory=list)


class AllowTags(BaseModel):
    tagid: list[int] = Field(default_factory=list)


class ResultAgentGet(BaseModel):
    """应用详情"""
    agentid: int = 0
    name: str = ""
    square_logo_url: str = ""
    description: str = ""
    close: int = 0
    redirect_domain: str = ""
    report_location_flag: int = 0
    isreportenter: int = 0
    home_url: str = ""
    allow_userinfos: AllowUserInfos | None = None
    allow_partys: AllowPartys | None = None
    allow_tags: AllowTags | None = None


class AgentListItem(BaseModel):
    agentid: int = 0
    name: str = ""
    square_logo_url: str = ""


class ResultAgentList(BaseModel):
    agentlist: list[AgentListItem] = Field(default_factory=list)


class ParamsAgentSet(BaseModel):
    """设置应用参数, 未设置的字段不提交"""
    agentid: int
    name: str | None = None
    logo_mediaid: str | None = None
    description: str | None = None
    redirect_domain: str | None = None
    report_location_flag: int | None = None
    isreportenter: int | None = None
    home_url: str | None = None
# endregion


# region 应用 Action
def agent_get(agent_id: str, result: ResultAgentGet) -> WxAction:
    """
    获取指定的应用详情
    [参考](https://developer.work.weixin.qq.com/document/path/90227)
    """
    return new_get_action(
        urls.CORP_AGENT_GET,
        with_query("agentid", agent_id),
        with_decode(decode_into(result)),
    )


def agent_list(result: ResultAgentList) -> WxAction:
    """获取 access_token 对应的应用列表"""
    return new_get_action(urls.CORP_AGENT_LIST, with_decode(decode_into(result)))


def agent_set(params: ParamsAgentSet) -> WxAction:
    """
    设置应用
    [参考](https://developer.work.weixin.qq.com/document/path/90228)
    """
    return new_post_action(
        urls.CORP_AGENT_SET,
        with_body(lambda: marshal_json(params.model_dump(exclude_none=True))),
    )
# endregion
