"""
描述: 企业微信素材上传
主要功能:
    - 上传临时素材 (图片 / 语音 / 视频 / 普通文件)
    - 上传图片获取永久 URL
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from wxkit import urls
from wxkit.wx.action import WxAction, decode_into, new_upload_action, with_decode, with_query, with_upload_form
from wxkit.wx.form import FormFile, new_upload_form


MEDIA_IMAGE = "image"
MEDIA_VOICE = "voice"
MEDIA_VIDEO = "video"
MEDIA_FILE = "file"


class ResultMediaUpload(BaseModel):
    type: str = ""
    media_id: str = ""
    created_at: str = ""

    @field_validator("created_at", mode="before")
    @classmethod
    def created_at_as_str(cls, value: object) -> object:
        return str(value) if isinstance(value, int) else value


class ResultImageUpload(BaseModel):
    url: str = ""


def upload_media(media_type: str, file: FormFile, result: ResultMediaUpload) -> WxAction:
    """
    上传临时素材, 文件字段名固定为 media
    [参考](https://developer.work.weixin.qq.com/document/path/90253)
    """
    media = FormFile(fieldname="media", filename=file.filename, content=file.content, path=file.path)
    return new_upload_action(
        urls.CORP_MEDIA_UPLOAD,
        with_query("type", media_type),
        with_upload_form(lambda: new_upload_form(media)),
        with_decode(decode_into(result)),
    )


def upload_image(file: FormFile, result: ResultImageUpload) -> WxAction:
    """上传图片 (返回的 URL 永久有效)"""
    media = FormFile(fieldname="media", filename=file.filename, content=file.content, path=file.path)
    return new_upload_action(
        urls.CORP_MEDIA_UPLOAD_IMAGE,
        with_upload_form(lambda: new_upload_form(media)),
        with_decode(decode_into(result)),
    )
