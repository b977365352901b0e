"""テスト共通フィクスチャ"""
import logging
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from s3utils.core.s3_client import S3Session
from s3utils.models.credentials import ProfileCredentials, REQUIRED_ENV_VARS
from s3utils.utils.logger import LoggerManager, LOGGER_NAME, SDK_LOGGERS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """AWS認証情報の環境変数をクリア"""
    for env_var in REQUIRED_ENV_VARS + ("AWS_PROFILE", "AWS_DEFAULT_PROFILE"):
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def reset_logger(monkeypatch):
    """LoggerManager の状態をテストごとにリセット"""
    monkeypatch.setattr(LoggerManager, "_logger", None)
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    for name in SDK_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)


def client_error(code: str, operation: str = "HeadObject", message: str = "error") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


@pytest.fixture
def s3_session():
    """モックのS3クライアントを持つセッション"""
    return S3Session(
        region="us-west-2",
        credentials=ProfileCredentials("default"),
        boto_session=MagicMock(),
        client=MagicMock(),
    )


@pytest.fixture
def bucket_keys(s3_session):
    """head_object が返す既存キーの集合"""
    existing = set()

    def head_object(Bucket, Key):
        if Key in existing:
            return {"ContentLength": 1}
        raise client_error("404", message="Not Found")

    s3_session.client.head_object.side_effect = head_object
    return existing
