from __future__ import annotations

import asyncio
import json
from typing import Any

from wxkit.corp import Corp
from wxkit.corp.agent import (
    AgentListItem,
    ParamsAgentSet,
    ResultAgentGet,
    ResultAgentList,
    agent_get,
    agent_list,
    agent_set,
)
from wxkit.wx.form import UploadForm


class _FakeClient:
    def __init__(self, response: bytes) -> None:
        self.response = response
        self.calls: list[tuple[str, str, bytes | None]] = []

    async def do(self, method: str, url: str, body: bytes | None, *options: Any) -> bytes:
        self.calls.append((method, url, body))
        return self.response

    async def upload(self, url: str, form: UploadForm, *options: Any) -> bytes:
        raise AssertionError("unexpected upload")


def test_agent_get() -> None:
    resp = """{
        "errcode": 0,
        "errmsg": "ok",
        "agentid": 1000005,
        "name": "HR助手",
        "square_logo_url": "https://p.qlogo.cn/bizmail/FxxM/0",
        "description": "HR服务与员工自助平台",
        "allow_userinfos": {"user": [{"userid": "zhangshan"}, {"userid": "lisi"}]},
        "allow_partys": {"partyid": [1]},
        "allow_tags": {"tagid": [1, 2, 3]},
        "close": 0,
        "redirect_domain": "open.work.weixin.qq.com",
        "report_location_flag": 0,
        "isreportenter": 0,
        "home_url": "https://open.work.weixin.qq.com"
    }""".encode("utf-8")
    client = _FakeClient(resp)
    result = ResultAgentGet()

    asyncio.run(Corp("CORPID", client=client).do("ACCESS_TOKEN", agent_get("1000005", result)))

    assert client.calls[0][:2] == (
        "GET",
        "https://qyapi.weixin.qq.com/cgi-bin/agent/get?access_token=ACCESS_TOKEN&agentid=1000005",
    )
    assert result.agentid == 1000005
    assert result.name == "HR助手"
    assert [user.userid for user in result.allow_userinfos.user] == ["zhangshan", "lisi"]
    assert result.allow_tags.tagid == [1, 2, 3]
    assert result.home_url == "https://open.work.weixin.qq.com"


def test_agent_list() -> None:
    resp = b'{"errcode":0,"errmsg":"ok","agentlist":[{"agentid":1000005,"name":"HR","square_logo_url":"u"}]}'
    result = ResultAgentList()

    asyncio.run(Corp("CORPID", client=_FakeClient(resp)).do("ACCESS_TOKEN", agent_list(result)))

    assert result.agentlist == [AgentListItem(agentid=1000005, name="HR", square_logo_url="u")]


def test_agent_set_only_sends_given_fields() -> None:
    client = _FakeClient(b'{"errcode":0,"errmsg":"ok"}')
    params = ParamsAgentSet(agentid=1000005, name="财经助手", report_location_flag=0)

    asyncio.run(Corp("CORPID", client=client).do("ACCESS_TOKEN", agent_set(params)))

    method, url, body = client.calls[0]
    assert method == "POST"
    assert url == "https://qyapi.weixin.qq.com/cgi-bin/agent/set?access_token=ACCESS_TOKEN"
    assert json.loads(body) == {"agentid": 1000005, "name": "财经助手", "report_location_flag": 0}
