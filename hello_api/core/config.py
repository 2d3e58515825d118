# hello_api/core/config.py

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

DISTRIBUTION_NAME = "hello-api"


def package_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        # 直接從原始碼目錄跑、沒有 pip install 的時候
        return "0.0.0"


class Settings(BaseSettings):
    PROJECT_NAME: str = DISTRIBUTION_NAME
    VERSION: str = package_version()

    HOST: str = "0.0.0.0"
    PORT: int = 8888

    LOG_LEVEL: str = "INFO"

    # 預設全開，跟之前的 CORS 設定一樣
    CORS_ORIGINS: List[str] = ["*"]

    # 環境變數都要加 HELLO_API_ 前綴，例如 HELLO_API_PORT=9000
    # .env 檔案就在「執行指令的那個資料夾」
    model_config = SettingsConfigDict(env_prefix="HELLO_API_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
