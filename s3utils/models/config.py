"""設定管理用のデータクラス"""
from dataclasses import dataclass, field
from typing import List, Optional
import json
import os

DEFAULT_MAX_NAME_ATTEMPTS = 10000


@dataclass
class LoggingConfig:
    """ロギング設定"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class AWSConfig:
    """AWS関連の設定"""
    region: str
    profile: str = "default"

    def __post_init__(self):
        if not self.region or not self.region.strip():
            raise ValueError("region cannot be empty")

        if not self.profile or not self.profile.strip():
            raise ValueError("profile cannot be empty")


@dataclass
class UploadOptions:
    """アップロードオプション"""
    max_name_attempts: int = DEFAULT_MAX_NAME_ATTEMPTS
    dry_run: bool = False

    def __post_init__(self):
        if self.max_name_attempts < 1:
            raise ValueError(
                f"Invalid max_name_attempts: {self.max_name_attempts}. Must be at least 1"
            )


@dataclass
class UploadTask:
    """個別のアップロードタスク"""
    # 必須フィールド
    name: str
    source: str
    bucket: str

    # オプションフィールド
    folder: str = ""
    description: Optional[str] = None
    enabled: bool = True
    unique_name: bool = False  # 既存オブジェクトと衝突しない名前を採番する


@dataclass
class Config:
    """メイン設定クラス"""
    logging: LoggingConfig
    aws: AWSConfig
    options: UploadOptions = field(default_factory=UploadOptions)
    upload_tasks: List[UploadTask] = field(default_factory=list)

    @classmethod
    def from_file(cls, config_path: str) -> 'Config':
        """設定ファイルから読み込み"""
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file {config_path} not found.")

        try:
            with open(config_path, "r", encoding="utf-8") as file:
                data = json.load(file)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error decoding JSON from {config_path}: {e}") from e

        try:
            return cls.from_dict(data)
        except Exception as e:
            raise RuntimeError(f"Error loading configuration: {e}") from e

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        """辞書から各セクションをパース"""
        logging_config = LoggingConfig(**data.get("logging", {}))
        aws_config = AWSConfig(**data.get("aws", {}))
        options = UploadOptions(**data.get("options", {}))

        upload_tasks = [
            UploadTask(**task) for task in data.get("upload_tasks", [])
        ]

        return cls(
            logging=logging_config,
            aws=aws_config,
            options=options,
            upload_tasks=upload_tasks
        )
