"""
描述: 公众号自定义菜单
主要功能:
    - 菜单树数据模型 (按钮 / 子按钮 / 个性化匹配规则)
    - 创建 / 查询 / 删除 (含个性化菜单) Action
    - 各类按钮构造函数

按钮类型由字段是否为空决定, 没有单独的判别字段:
    - click: key
    - view: url
    - miniprogram: appid + pagepath + url
    - media_id / view_limited: media_id
    - article_id / article_view_limited: article_id
    - 分组: 只有 name 与非空 sub_button
内存中所有字段始终存在 (空字符串), 只有线上格式是稀疏的;
sub_button 在线上始终输出, 没有子按钮时为 []。
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wxkit import urls
from wxkit.wx.action import (
    WxAction,
    decode_into,
    marshal_json,
    new_get_action,
    new_post_action,
    with_body,
    with_decode,
)


# region 按钮类型
BUTTON_CLICK = "click"
BUTTON_VIEW = "view"
BUTTON_MINIPROGRAM = "miniprogram"
BUTTON_SCANCODE_PUSH = "scancode_push"
BUTTON_SCANCODE_WAITMSG = "scancode_waitmsg"
BUTTON_PIC_SYSPHOTO = "pic_sysphoto"
BUTTON_PIC_PHOTO_OR_ALBUM = "pic_photo_or_album"
BUTTON_PIC_WEIXIN = "pic_weixin"
BUTTON_LOCATION_SELECT = "location_select"
BUTTON_MEDIA_ID = "media_id"
BUTTON_VIEW_LIMITED = "view_limited"
BUTTON_ARTICLE_ID = "article_id"
BUTTON_ARTICLE_VIEW_LIMITED = "article_view_limited"
# endregion


# region 数据模型
_BUTTON_FIELDS = ("type", "name", "key", "url", "appid", "pagepath", "media_id", "article_id")
_MATCH_RULE_FIELDS = (
    "tag_id",
    "sex",
    "country",
    "province",
    "city",
    "client_platform_type",
    "language",
)


def _none_as_empty_str(value: Any) -> Any:
    return "" if value is None else value


def _none_as_empty_list(value: Any) -> Any:
    return [] if value is None else value


class MenuButton(BaseModel):
    """菜单按钮 (叶子按钮或一级分组)"""
    type: str = ""
    name: str = ""
    key: str = ""
    url: str = ""
    appid: str = ""
    pagepath: str = ""
    media_id: str = ""
    article_id: str = ""
    sub_button: list[MenuButton] = Field(default_factory=list)

    @field_validator(*_BUTTON_FIELDS, mode="before")
    @classmethod
    def none_as_empty_str(cls, value: Any) -> Any:
        return _none_as_empty_str(value)

    @field_validator("sub_button", mode="before")
    @classmethod
    def none_as_empty_list(cls, value: Any) -> Any:
        return _none_as_empty_list(value)


class MenuMatchRule(BaseModel):
    """个性化菜单匹配规则, 所有字段可选"""
    tag_id: str = ""
    sex: str = ""
    country: str = ""
    province: str = ""
    city: str = ""
    client_platform_type: str = ""
    language: str = ""

    @field_validator(*_MATCH_RULE_FIELDS, mode="before")
    @classmethod
    def none_as_empty_str(cls, value: Any) -> Any:
        return _none_as_empty_str(value)


class ConditionalMenu(BaseModel):
    """个性化菜单"""
    model_config = ConfigDict(populate_by_name=True)

    button: list[MenuButton] = Field(default_factory=list)
    match_rule: MenuMatchRule | None = Field(default=None, alias="matchrule")
    menu_id: int = Field(default=0, alias="menuid")

    @field_validator("button", mode="before")
    @classmethod
    def none_as_empty_list(cls, value: Any) -> Any:
        return _none_as_empty_list(value)


class DefaultMenu(BaseModel):
    """默认菜单"""
    model_config = ConfigDict(populate_by_name=True)

    button: list[MenuButton] = Field(default_factory=list)
    menu_id: int = Field(default=0, alias="menuid")

    @field_validator("button", mode="before")
    @classmethod
    def none_as_empty_list(cls, value: Any) -> Any:
        return _none_as_empty_list(value)


class MenuInfo(BaseModel):
    """菜单查询结果"""
    model_config = ConfigDict(populate_by_name=True)

    default_menu: DefaultMenu | None = Field(default=None, alias="menu")
    conditional_menu: list[ConditionalMenu] = Field(default_factory=list, alias="conditionalmenu")

    @field_validator("conditional_menu", mode="before")
    @classmethod
    def none_as_empty_list(cls, value: Any) -> Any:
        return _none_as_empty_list(value)


class MenuTryMatchResult(BaseModel):
    """个性化菜单匹配结果"""
    button: list[MenuButton] = Field(default_factory=list)

    @field_validator("button", mode="before")
    @classmethod
    def none_as_empty_list(cls, value: Any) -> Any:
        return _none_as_empty_list(value)
# endregion


# region 线上格式编码
def _encode_button(button: MenuButton) -> dict[str, Any]:
    data: dict[str, Any] = {}
    for name in _BUTTON_FIELDS:
        value = getattr(button, name)
        if value:
            data[name] = value
    data["sub_button"] = [_encode_button(sub) for sub in button.sub_button]
    return data


def _encode_match_rule(rule: MenuMatchRule) -> dict[str, str]:
    data: dict[str, str] = {}
    for name in _MATCH_RULE_FIELDS:
        value = getattr(rule, name)
        if value:
            data[name] = value
    return data
# endregion


# region 菜单 Action
def create_menu(*buttons: MenuButton) -> WxAction:
    """
    创建自定义菜单
    [参考](https://developers.weixin.qq.com/doc/offiaccount/Custom_Menus/Creating_Custom-Defined_Menu.html)
    """
    return new_post_action(
        urls.OA_MENU_CREATE,
        with_body(lambda: marshal_json({"button": [_encode_button(b) for b in buttons]})),
    )


def create_conditional_menu(match_rule: MenuMatchRule, *buttons: MenuButton) -> WxAction:
    """
    创建个性化菜单
    [参考](https://developers.weixin.qq.com/doc/offiaccount/Custom_Menus/Personalized_menu_interface.html)
    """
    return new_post_action(
        urls.OA_MENU_ADD_CONDITIONAL,
        with_body(lambda: marshal_json({
            "button": [_encode_button(b) for b in buttons],
            "matchrule": _encode_match_rule(match_rule),
        })),
    )


def try_match_menu(user_id: str, dest: MenuTryMatchResult) -> WxAction:
    """测试个性化菜单匹配结果 (user_id 可以是 openid 或微信号)"""
    return new_post_action(
        urls.OA_MENU_TRY_MATCH,
        with_body(lambda: marshal_json({"user_id": user_id})),
        with_decode(decode_into(dest)),
    )


def get_menu(dest: MenuInfo) -> WxAction:
    """
    查询自定义菜单 (含个性化菜单), 结果写入 dest
    [参考](https://developers.weixin.qq.com/doc/offiaccount/Custom_Menus/Getting_Custom_Menu_Configurations.html)
    """
    return new_get_action(urls.OA_MENU_GET, with_decode(decode_into(dest)))


def delete_menu() -> WxAction:
    """删除自定义菜单 (同时删除全部个性化菜单)"""
    return new_get_action(urls.OA_MENU_DELETE)


def delete_conditional_menu(menu_id: str) -> WxAction:
    """删除个性化菜单"""
    return new_post_action(
        urls.OA_MENU_DELETE_CONDITIONAL,
        with_body(lambda: marshal_json({"menuid": menu_id})),
    )
# endregion


# region 按钮构造
def group_button(name: str, *buttons: MenuButton) -> MenuButton:
    """一级分组按钮 (子按钮不能再分组)"""
    for button in buttons:
        if button.sub_button:
            raise ValueError(f"menu button {button.name!r} cannot be nested in group {name!r}")
    return MenuButton(name=name, sub_button=list(buttons))


def click_button(name: str, key: str) -> MenuButton:
    """点击推事件按钮"""
    return MenuButton(type=BUTTON_CLICK, name=name, key=key)


def view_button(name: str, url: str) -> MenuButton:
    """跳转 URL 按钮"""
    return MenuButton(type=BUTTON_VIEW, name=name, url=url)


def mp_button(name: str, appid: str, pagepath: str, url: str) -> MenuButton:
    """
    小程序按钮

    参数:
        appid: 小程序 appid
        pagepath: 小程序页面路径
        url: 不支持小程序的老版本客户端打开的网页
    """
    return MenuButton(type=BUTTON_MINIPROGRAM, name=name, url=url, appid=appid, pagepath=pagepath)


def scan_code_push_button(name: str, key: str) -> MenuButton:
    return MenuButton(type=BUTTON_SCANCODE_PUSH, name=name, key=key)


def scan_code_wait_msg_button(name: str, key: str) -> MenuButton:
    return MenuButton(type=BUTTON_SCANCODE_WAITMSG, name=name, key=key)


def pic_sys_photo_button(name: str, key: str) -> MenuButton:
    return MenuButton(type=BUTTON_PIC_SYSPHOTO, name=name, key=key)


def pic_photo_or_album_button(name: str, key: str) -> MenuButton:
    return MenuButton(type=BUTTON_PIC_PHOTO_OR_ALBUM, name=name, key=key)


def pic_weixin_button(name: str, key: str) -> MenuButton:
    return MenuButton(type=BUTTON_PIC_WEIXIN, name=name, key=key)


def location_select_button(name: str, key: str) -> MenuButton:
    return MenuButton(type=BUTTON_LOCATION_SELECT, name=name, key=key)


def media_id_button(name: str, media_id: str) -> MenuButton:
    """下发永久素材消息按钮"""
    return MenuButton(type=BUTTON_MEDIA_ID, name=name, media_id=media_id)


def view_limited_button(name: str, media_id: str) -> MenuButton:
    """跳转图文消息 URL 按钮"""
    return MenuButton(type=BUTTON_VIEW_LIMITED, name=name, media_id=media_id)


def article_id_button(name: str, article_id: str) -> MenuButton:
    return MenuButton(type=BUTTON_ARTICLE_ID, name=name, article_id=article_id)


def article_view_limited_button(name: str, article_id: str) -> MenuButton:
    return MenuButton(type=BUTTON_ARTICLE_VIEW_LIMITED, name=name, article_id=article_id)
# endregion
