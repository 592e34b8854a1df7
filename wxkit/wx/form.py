"""
描述: multipart 上传表单描述
主要功能:
    - FormFile: 文件字段 (内存内容或本地路径)
    - FormField: 普通文本字段
    - UploadForm: 交由传输层编码为 multipart/form-data
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FormFile:
    """上传文件字段"""
    fieldname: str
    filename: str
    content: bytes | None = None
    path: str | None = None

    def read(self) -> bytes:
        """读取文件内容, 优先使用内存内容"""
        if self.content is not None:
            return self.content
        if not self.path:
            raise ValueError(f"form file {self.fieldname!r} has neither content nor path")
        return Path(self.path).read_bytes()


@dataclass(frozen=True)
class FormField:
    name: str
    value: str


@dataclass(frozen=True)
class UploadForm:
    """multipart 表单"""
    files: tuple[FormFile, ...] = field(default_factory=tuple)
    fields: tuple[FormField, ...] = field(default_factory=tuple)

    def load(self) -> UploadForm:
        """读取所有本地文件, 返回只含内存内容的表单"""
        files = tuple(
            FormFile(fieldname=item.fieldname, filename=item.filename, content=item.read())
            for item in self.files
        )
        return UploadForm(files=files, fields=self.fields)

    def file_parts(self) -> list[tuple[str, tuple[str, bytes]]]:
        return [(item.fieldname, (item.filename, item.read())) for item in self.files]

    def field_parts(self) -> dict[str, str]:
        return {item.name: item.value for item in self.fields}


def new_upload_form(*parts: FormFile | FormField) -> UploadForm:
    files = tuple(part for part in parts if isinstance(part, FormFile))
    fields = tuple(part for part in parts if isinstance(part, FormField))
    return UploadForm(files=files, fields=fields)
