import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from kidlearning.main import app
from kidlearning.models.base import Base
from kidlearning.services.user_service import UserService
from kidlearning.utils.database import create_tables, get_db

# 测试数据库（内存 SQLite，所有连接共享同一个库）
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """创建测试数据库会话，并初始化默认账号"""
    create_tables(bind=engine)

    session = TestingSessionLocal()
    UserService(session).bootstrap_default_users()
    try:
        yield session
    finally:
        session.close()
    # 清理表
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """创建测试客户端"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()