"""S3オブジェクトの存在確認とユニーク名の生成"""
from botocore.exceptions import BotoCoreError, ClientError

from ..exceptions import NameExhaustedError, ProviderError
from ..models.config import DEFAULT_MAX_NAME_ATTEMPTS
from ..utils.file_utils import join_key, split_name
from ..utils.logger import LoggerManager
from .s3_client import S3Session

NOT_FOUND_CODES = {"404", "NotFound", "NoSuchKey"}


def check_s3_file_exists(session: S3Session, bucket: str, key: str) -> bool:
    """S3バケットにオブジェクトが存在するかチェック

    NotFound 系のエラーコードのみ False に変換し、
    それ以外のエラーは ProviderError として送出する。
    """
    try:
        session.client.head_object(Bucket=bucket, Key=key)
    except ClientError as e:
        code = e.response.get("Error", {}).get("Code")
        if code in NOT_FOUND_CODES:
            return False
        raise ProviderError(
            f"Error checking s3://{bucket}/{key}: {e}", code=code
        ) from e
    except BotoCoreError as e:
        raise ProviderError(f"Error checking s3://{bucket}/{key}: {e}") from e
    return True


def generate_unique_file_name(
    session: S3Session,
    bucket: str,
    folder: str,
    base_name: str,
    max_attempts: int = DEFAULT_MAX_NAME_ATTEMPTS,
) -> str:
    """S3上で衝突しないファイル名を生成

    元のファイル名が空いていればそのまま返し、使われていれば
    stem_1.ext, stem_2.ext ... と順に試す。max_attempts 回で見つからなければ
    NameExhaustedError。
    """
    logger = LoggerManager.get_logger()
    stem, ext = split_name(base_name)

    # まず元のファイル名
    if not check_s3_file_exists(session, bucket, join_key(folder, base_name)):
        return base_name

    for i in range(1, max_attempts + 1):
        file_name = f"{stem}_{i}{ext}"
        if not check_s3_file_exists(session, bucket, join_key(folder, file_name)):
            logger.debug(f"Resolved unique name {file_name} for {base_name}")
            return file_name

    logger.error(f"No free name for {base_name} in s3://{bucket}/{folder}")
    raise NameExhaustedError(base_name, max_attempts)
