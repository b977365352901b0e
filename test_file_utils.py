"""ファイル名ユーティリティのテスト"""
import pytest

from s3utils.exceptions import FileAccessError
from s3utils.utils.file_utils import FileInfo, join_key, split_name


@pytest.mark.parametrize("base_name, expected", [
    ("report.pdf", ("report", ".pdf")),
    ("archive.tar.gz", ("archive.tar", ".gz")),
    ("Makefile", ("Makefile", "")),
    (".env", ("", ".env")),
    (".txt", ("", ".txt")),
    (".config.json", (".config", ".json")),
    ("trailing.", ("trailing", ".")),
    ("", ("", "")),
])
def test_split_name(base_name, expected):
    assert split_name(base_name) == expected


@pytest.mark.parametrize("folder, name, expected", [
    ("uploads", "photo.png", "uploads/photo.png"),
    ("uploads/", "photo.png", "uploads/photo.png"),
    ("a/b", "c.txt", "a/b/c.txt"),
    ("", "photo.png", "photo.png"),
])
def test_join_key(folder, name, expected):
    assert join_key(folder, name) == expected


def test_file_info(tmp_path):
    path = tmp_path / "photo.png"
    path.write_bytes(b"12345")

    info = FileInfo.from_path(str(path))

    assert info.size == 5
    assert info.name == "photo.png"


@pytest.mark.parametrize("relative", ["missing.png", "."])
def test_file_info_requires_regular_file(tmp_path, relative):
    with pytest.raises(FileAccessError):
        FileInfo.from_path(str(tmp_path / relative))
