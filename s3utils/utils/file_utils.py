"""ファイル名・オブジェクトキー関連のユーティリティ"""
import os
from typing import Tuple
from dataclasses import dataclass

from ..exceptions import FileAccessError


@dataclass
class FileInfo:
    """ファイル情報"""
    path: str
    size: int

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @classmethod
    def from_path(cls, file_path: str) -> 'FileInfo':
        """単一ファイルの情報を取得"""
        if not os.path.isfile(file_path):
            raise FileAccessError(f"Not a file: {file_path}")

        return cls(path=file_path, size=os.path.getsize(file_path))


def join_key(folder: str, name: str) -> str:
    """フォルダとファイル名を '/' で連結してオブジェクトキーを作る

    空のセグメントは捨てるので、folder が空ならファイル名だけを返す。
    """
    segments = [folder.rstrip("/"), name.lstrip("/")]
    return "/".join(s for s in segments if s)


def split_name(base_name: str) -> Tuple[str, str]:
    """ファイル名を (stem, 拡張子) に分割

    拡張子は最後の '.' 以降。先頭の '.' しかない名前は全体が拡張子になる
    （".env" -> ("", ".env")）。
    """
    dot = base_name.rfind(".")
    if dot < 0:
        return base_name, ""
    return base_name[:dot], base_name[dot:]
