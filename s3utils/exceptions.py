"""s3utils の例外定義"""
from typing import Optional


class S3UtilsError(Exception):
    """s3utils の基底例外"""
    pass


class SessionCreationError(S3UtilsError):
    """リージョン・プロファイル・セッションの作成に失敗"""
    pass


class ProviderError(S3UtilsError):
    """メタデータ確認でNotFound以外のエラーが返された"""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class NameExhaustedError(ProviderError):
    """ユニークなファイル名が試行上限内に見つからなかった"""

    def __init__(self, base_name: str, attempts: int):
        super().__init__(
            f"No free object name for '{base_name}' after {attempts} attempts"
        )
        self.base_name = base_name
        self.attempts = attempts


class FileAccessError(S3UtilsError):
    """ローカルファイルを開けなかった"""
    pass


class UploadError(S3UtilsError):
    """S3へのアップロードが拒否または失敗した"""
    pass
