"""アップロード要求と結果"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UploadRequest:
    """1回分のアップロード要求"""
    region: str
    profile: str
    file_name: str
    bucket: str
    folder: str


@dataclass
class UploadResult:
    """アップロード結果"""
    file_path: str
    bucket: str
    key: str
    etag: Optional[str] = None
