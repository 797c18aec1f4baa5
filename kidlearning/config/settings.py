from pydantic_settings import BaseSettings
from pydantic import ConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    """应用配置"""

    # 应用配置
    APP_NAME: str = "幼儿启蒙学习乐园"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # 数据库配置
    DATABASE_URL: str = "sqlite:///./kidlearning.db"
    DB_RETRY_ATTEMPTS: int = 3
    DB_RETRY_WAIT_SECONDS: float = 0.5

    # 跨域配置
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
    LOG_DIR: str = "logs"
    LOG_FILE: str = "kidlearning.log"

    # 学习记录配置
    DEFAULT_ACTIVITY_LIMIT: int = 10
    MAX_ACTIVITY_LIMIT: int = 100

    # 测验配置
    ITEM_QUIZ_SIZE: int = 3
    CATEGORY_QUIZ_SIZE: int = 5
    MIN_QUIZ_OPTIONS: int = 4
    QUIZ_RANDOM_SEED: Optional[int] = None

    # 默认账号
    DEFAULT_PARENT_USERNAME: str = "parent"
    DEFAULT_PARENT_PASSWORD: str = "password123"
    DEFAULT_CHILD_AVATARS: List[str] = ["red", "blue", "green"]

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
    )

# 创建全局配置实例
settings = Settings()
