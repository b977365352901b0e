"""認証情報の選択（環境変数優先、プロファイルにフォールバック）"""
import os

from ..models.credentials import (
    CredentialSet,
    EnvironmentSessionCredentials,
    ProfileCredentials,
    REQUIRED_ENV_VARS,
    ENV_ACCESS_KEY_ID,
    ENV_SECRET_ACCESS_KEY,
    ENV_SESSION_TOKEN,
)
from ..utils.logger import LoggerManager


def has_env_credentials() -> bool:
    """必要なAWS認証情報が全て環境変数に設定されているかチェック"""
    logger = LoggerManager.get_logger()

    for env_var in REQUIRED_ENV_VARS:
        if not os.environ.get(env_var):
            logger.info("AWS env credentials not fully set, falling back to profile")
            return False
    return True


def resolve_credentials(profile: str) -> CredentialSet:
    """使用する認証情報を決定"""
    logger = LoggerManager.get_logger()

    if has_env_credentials():
        logger.info("Using AWS credentials from environment variables")
        return EnvironmentSessionCredentials(
            access_key_id=os.environ[ENV_ACCESS_KEY_ID],
            secret_access_key=os.environ[ENV_SECRET_ACCESS_KEY],
            session_token=os.environ[ENV_SESSION_TOKEN],
        )

    logger.info(f"Using AWS credentials from profile: {profile}")
    return ProfileCredentials(profile_name=profile)
