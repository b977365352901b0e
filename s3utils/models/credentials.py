"""認証情報のデータクラス"""
from dataclasses import dataclass
from typing import Union

ENV_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
ENV_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_SESSION_TOKEN = "AWS_SESSION_TOKEN"

REQUIRED_ENV_VARS = (ENV_ACCESS_KEY_ID, ENV_SECRET_ACCESS_KEY, ENV_SESSION_TOKEN)


@dataclass(frozen=True)
class EnvironmentSessionCredentials:
    """環境変数から取得した一時認証情報（3つ全て必須）"""
    access_key_id: str
    secret_access_key: str
    session_token: str

    def __post_init__(self):
        missing = [
            name for name, value in (
                ("access_key_id", self.access_key_id),
                ("secret_access_key", self.secret_access_key),
                ("session_token", self.session_token),
            )
            if not value
        ]
        if missing:
            raise ValueError(
                f"Incomplete environment credentials, missing: {', '.join(missing)}"
            )

    def __repr__(self) -> str:
        # シークレットはログに出さない
        return f"EnvironmentSessionCredentials(access_key_id={self.access_key_id!r})"


@dataclass(frozen=True)
class ProfileCredentials:
    """共有認証情報ファイルのプロファイル参照"""
    profile_name: str


CredentialSet = Union[EnvironmentSessionCredentials, ProfileCredentials]
