"""s3utils コアモジュール"""
from .credentials import has_env_credentials, resolve_credentials
from .s3_client import S3Session, S3ClientManager, new_aws_session
from .objects import check_s3_file_exists, generate_unique_file_name
from .uploader import upload_to_s3, upload_request, upload_file_as
from .task_runner import TaskRunner

__all__ = [
    'has_env_credentials',
    'resolve_credentials',
    'S3Session',
    'S3ClientManager',
    'new_aws_session',
    'check_s3_file_exists',
    'generate_unique_file_name',
    'upload_to_s3',
    'upload_request',
    'upload_file_as',
    'TaskRunner'
]
