"""S3アップロード"""
import os
from typing import BinaryIO

from botocore.exceptions import BotoCoreError, ClientError

from ..exceptions import FileAccessError, UploadError
from ..models.upload import UploadRequest, UploadResult
from ..utils.file_utils import join_key
from ..utils.logger import LoggerManager
from .s3_client import S3Session, new_aws_session


def _open_file(file_name: str) -> BinaryIO:
    try:
        return open(file_name, "rb")
    except OSError as e:
        LoggerManager.get_logger().error(f"Cannot open file {file_name}: {e}")
        raise FileAccessError(f"Cannot open file {file_name}: {e}") from e


def _put_file(session: S3Session, file: BinaryIO, bucket: str, key: str) -> UploadResult:
    """開いたファイルを1回のPutObjectで転送"""
    logger = LoggerManager.get_logger()

    try:
        response = session.client.put_object(Bucket=bucket, Key=key, Body=file)
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Error uploading {file.name} to {bucket}/{key}: {e}")
        raise UploadError(f"Error uploading {file.name} to s3://{bucket}/{key}: {e}") from e

    logger.info(f"Successfully uploaded {file.name} to {bucket}/{key}")
    return UploadResult(
        file_path=file.name,
        bucket=bucket,
        key=key,
        etag=response.get("ETag"),
    )


def upload_to_s3(region: str, profile: str, file_name: str, bucket: str, folder: str) -> UploadResult:
    """ファイルを folder/<ファイル名> としてS3にアップロード

    呼び出しごとに新しいセッションを作成する。ファイルを開けなければ
    セッション作成前に FileAccessError を送出する。
    """
    with _open_file(file_name) as file:
        session = new_aws_session(region, profile)
        key = join_key(folder, os.path.basename(file_name))
        return _put_file(session, file, bucket, key)


def upload_request(request: UploadRequest) -> UploadResult:
    """UploadRequest を実行"""
    return upload_to_s3(
        request.region,
        request.profile,
        request.file_name,
        request.bucket,
        request.folder,
    )


def upload_file_as(session: S3Session, file_name: str, bucket: str, key: str) -> UploadResult:
    """既存のセッションで任意のキーにアップロード"""
    with _open_file(file_name) as file:
        return _put_file(session, file, bucket, key)
