"""S3セッション管理"""
from dataclasses import dataclass
from typing import Any, Optional

import boto3
import botocore.session
from botocore.exceptions import BotoCoreError, ProfileNotFound

from ..exceptions import SessionCreationError
from ..models.config import AWSConfig
from ..models.credentials import CredentialSet, EnvironmentSessionCredentials
from ..utils.logger import LoggerManager
from .credentials import resolve_credentials


@dataclass(frozen=True)
class S3Session:
    """リージョンと認証情報に束縛された再利用可能なS3セッション"""
    region: str
    credentials: CredentialSet
    boto_session: boto3.Session
    client: Any


def _env_botocore_session() -> botocore.session.Session:
    """AWS_PROFILE などのプロファイル指定を一切参照しない botocore セッション"""
    return botocore.session.Session(session_vars={'profile': (None, None, None, None)})


def new_aws_session(region: str, profile: str) -> S3Session:
    """新しいAWSセッションを作成

    環境変数に認証情報が揃っていればそれを使い、プロファイルは参照しない。
    揃っていなければ共有設定ファイルのプロファイルを使う。
    """
    logger = LoggerManager.get_logger()
    credentials = resolve_credentials(profile)

    try:
        if isinstance(credentials, EnvironmentSessionCredentials):
            boto_session = boto3.Session(
                aws_access_key_id=credentials.access_key_id,
                aws_secret_access_key=credentials.secret_access_key,
                aws_session_token=credentials.session_token,
                region_name=region,
                botocore_session=_env_botocore_session(),
            )
        else:
            boto_session = boto3.Session(
                profile_name=credentials.profile_name,
                region_name=region,
            )
        s3_client = boto_session.client('s3', region_name=region)

    except ProfileNotFound as e:
        missing = e.kwargs.get('profile', profile)
        logger.error(f"AWS profile not found: {missing}")
        raise SessionCreationError(f"AWS profile not found: {missing}: {e}") from e
    except BotoCoreError as e:
        logger.error(f"Error creating AWS session: {e}")
        raise SessionCreationError(f"Error creating AWS session in {region}: {e}") from e

    logger.debug(f"S3 client created for region {region}")
    return S3Session(
        region=region,
        credentials=credentials,
        boto_session=boto_session,
        client=s3_client,
    )


class S3ClientManager:
    """S3セッションの作成と管理"""

    def __init__(self, aws_config: AWSConfig):
        self.aws_config = aws_config
        self._session: Optional[S3Session] = None

    def get_session(self) -> S3Session:
        """S3セッションを取得（必要に応じて作成）"""
        if self._session is None:
            self._session = new_aws_session(
                self.aws_config.region, self.aws_config.profile
            )
        return self._session
