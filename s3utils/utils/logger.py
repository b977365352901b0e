"""ロギング設定ユーティリティ"""
import logging
import os
from typing import Optional, List
from ..models.config import LoggingConfig

LOGGER_NAME = "s3utils"

# boto3 系のロガーは DEBUG 指定時以外は WARNING に抑える
SDK_LOGGERS = ("boto3", "botocore", "s3transfer", "urllib3")


class LoggerManager:
    """s3utils ロガーの設定と管理"""

    _logger: Optional[logging.Logger] = None

    @classmethod
    def setup(cls, config: LoggingConfig) -> logging.Logger:
        """s3utils ロガーを一度だけセットアップ"""
        if cls._logger is not None:
            return cls._logger

        log_level = getattr(logging, config.level.upper(), logging.INFO)
        if not isinstance(log_level, int):
            log_level = logging.INFO

        formatter = logging.Formatter(config.format, datefmt="%Y-%m-%d %H:%M:%S")

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(log_level)
        logger.handlers = cls._create_handlers(config, formatter)

        sdk_level = logging.DEBUG if log_level <= logging.DEBUG else logging.WARNING
        for name in SDK_LOGGERS:
            logging.getLogger(name).setLevel(sdk_level)

        cls._logger = logger
        return logger

    @staticmethod
    def _create_handlers(config: LoggingConfig, formatter: logging.Formatter) -> List[logging.Handler]:
        """コンソールと（設定されていれば）ファイルのハンドラー"""
        handlers: List[logging.Handler] = [logging.StreamHandler()]

        if config.file:
            log_dir = os.path.dirname(config.file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

        for handler in handlers:
            handler.setFormatter(formatter)
        return handlers

    @classmethod
    def get_logger(cls) -> logging.Logger:
        # setup() 前はハンドラーなしのライブラリ用ロガー
        if cls._logger is None:
            return logging.getLogger(LOGGER_NAME)
        return cls._logger
