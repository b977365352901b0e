"""s3utils パッケージ"""
from typing import Tuple
from .models.config import Config
from .utils.logger import LoggerManager
from .core import (
    S3Session,
    new_aws_session,
    check_s3_file_exists,
    generate_unique_file_name,
    upload_to_s3,
    upload_file_as,
    TaskRunner,
)
from .exceptions import (
    S3UtilsError,
    SessionCreationError,
    ProviderError,
    NameExhaustedError,
    FileAccessError,
    UploadError,
)


class S3Uploader:
    """設定済みのアップロードタスクをまとめて実行"""

    def __init__(self, config: Config):
        self.config = config
        self.logger = LoggerManager.setup(config.logging)
        self.task_runner = TaskRunner(config)

    @classmethod
    def from_file(cls, config_path: str = "config.json", dry_run: bool = False) -> 'S3Uploader':
        """設定ファイルから作成（dry_run=True なら設定に関わらず dry run）"""
        config = Config.from_file(config_path)
        if dry_run:
            config.options.dry_run = True
        return cls(config)

    def run(self) -> Tuple[int, int]:
        """アップロードタスクを実行して (成功数, 失敗数) を返す"""
        self.logger.info(
            f"Running {len(self.config.upload_tasks)} upload tasks "
            f"(region={self.config.aws.region}, profile={self.config.aws.profile}, "
            f"dry_run={self.config.options.dry_run})"
        )
        return self.task_runner.run_all_tasks()


__all__ = [
    'S3Uploader',
    'Config',
    'S3Session',
    'new_aws_session',
    'check_s3_file_exists',
    'generate_unique_file_name',
    'upload_to_s3',
    'upload_file_as',
    'S3UtilsError',
    'SessionCreationError',
    'ProviderError',
    'NameExhaustedError',
    'FileAccessError',
    'UploadError',
]
