import functools
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import OperationalError
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential
import logging

from kidlearning.config.settings import settings

logger = logging.getLogger(__name__)

# SQLite 需要允许跨线程使用连接（FastAPI 在线程池中执行同步调用）
connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

# 创建数据库引擎
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,  # 在DEBUG模式下输出SQL语句
    pool_pre_ping=True,
    pool_recycle=3600,
    connect_args=connect_args,
)

# 创建SessionLocal类
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    """获取数据库会话"""
    db = SessionLocal()
    try:
        yield db
    except Exception as e:
        logger.error(f"数据库会话错误: {e}")
        db.rollback()
        raise
    finally:
        db.close()


def check_db_connection() -> bool:
    """检查数据库连接是否正常"""
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"数据库连接检查失败: {e}")
        return False
    finally:
        db.close()

def create_tables(bind=None):
    """创建所有表"""
    from kidlearning.models.base import Base
    from kidlearning.models.user import User
    from kidlearning.models.progress import Progress
    from kidlearning.models.activity import Activity

    Base.metadata.create_all(bind=bind or engine)

def init_db():
    """初始化数据库表和默认账号"""
    try:
        create_tables()
        logger.info("数据库表初始化完成")

        _init_default_users()

    except Exception as e:
        logger.error(f"数据库初始化失败: {e}")
        raise

def _init_default_users():
    """初始化默认家长账号和儿童账号"""
    from kidlearning.services.user_service import UserService

    db = SessionLocal()

    try:
        user_service = UserService(db)
        created = user_service.bootstrap_default_users()
        logger.info(f"默认账号初始化完成，新增{len(created)}个账号")
    except Exception as e:
        db.rollback()
        logger.error(f"初始化默认账号失败: {e}")
        raise
    finally:
        db.close()

def db_retry(func):
    """
    数据库瞬时故障重试（仅连接类错误 OperationalError，有限次数）
    用于仓储层的查询和按键幂等的写入，两次尝试之间回滚会话。
    """
    @functools.wraps(func)
    def wrapper(repo, *args, **kwargs):
        def _rollback(retry_state):
            logger.warning(
                f"数据库操作 {func.__name__} 失败，第{retry_state.attempt_number}次重试: "
                f"{retry_state.outcome.exception()}"
            )
            repo.db.rollback()

        retryer = Retrying(
            retry=retry_if_exception_type(OperationalError),
            stop=stop_after_attempt(settings.DB_RETRY_ATTEMPTS),
            wait=wait_exponential(multiplier=settings.DB_RETRY_WAIT_SECONDS, max=2),
            before_sleep=_rollback,
            reraise=True,
        )
        return retryer(func, repo, *args, **kwargs)
    return wrapper
