"""アップロードタスクの実行"""
from typing import Tuple

from ..exceptions import S3UtilsError
from ..models.config import UploadTask, Config
from ..utils.file_utils import FileInfo, join_key
from ..utils.logger import LoggerManager
from .objects import generate_unique_file_name
from .s3_client import S3ClientManager
from .uploader import upload_file_as, upload_to_s3


class TaskRunner:
    """アップロードタスクを実行"""

    def __init__(self, config: Config):
        self.config = config
        self.logger = LoggerManager.get_logger()

        # ユニーク名の採番はこのセッションを使い回す
        self.client_manager = S3ClientManager(config.aws)

    def run_all_tasks(self) -> Tuple[int, int]:
        """全てのタスクを実行"""
        total_tasks = len(self.config.upload_tasks)
        successful_tasks = 0
        failed_tasks = 0

        self.logger.info(f"Starting upload tasks: {total_tasks} tasks to process")

        for i, task in enumerate(self.config.upload_tasks, 1):
            if not task.enabled:
                self.logger.info(f"Skipping disabled task: {task.name}")
                continue

            self.logger.info(f"Task {i}/{total_tasks}: Starting '{task.name}'")

            try:
                key = self._run_single_task(task)
                successful_tasks += 1
                self.logger.info(
                    f"Task {i}/{total_tasks}: '{task.name}' completed successfully ({key})"
                )
            except S3UtilsError as e:
                failed_tasks += 1
                self.logger.error(f"Task {i}/{total_tasks}: '{task.name}' failed with error: {e}")

        self.logger.info(
            f"Upload tasks completed: {successful_tasks} successful, {failed_tasks} failed"
        )
        return successful_tasks, failed_tasks

    def _run_single_task(self, task: UploadTask) -> str:
        """単一タスクを実行してアップロード先のキーを返す"""
        file_info = FileInfo.from_path(task.source)
        self.logger.debug(f"{file_info.path}: {file_info.size} bytes")

        if task.unique_name:
            # dry run でも HeadObject による採番は実際に行う
            session = self.client_manager.get_session()
            name = generate_unique_file_name(
                session,
                task.bucket,
                task.folder,
                file_info.name,
                max_attempts=self.config.options.max_name_attempts,
            )
            key = join_key(task.folder, name)
            if self._skip_dry_run(task, key, probed=True):
                return key
            return upload_file_as(session, file_info.path, task.bucket, key).key

        key = join_key(task.folder, file_info.name)
        if self._skip_dry_run(task, key):
            return key
        return upload_to_s3(
            self.config.aws.region,
            self.config.aws.profile,
            file_info.path,
            task.bucket,
            task.folder,
        ).key

    def _skip_dry_run(self, task: UploadTask, key: str, probed: bool = False) -> bool:
        if not self.config.options.dry_run:
            return False

        suffix = " (name checked against existing objects)" if probed else ""
        self.logger.info(f"[DRY RUN]: Would upload {task.source} to {task.bucket}/{key}{suffix}")
        return True
