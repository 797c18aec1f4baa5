import pytest
from sqlalchemy.exc import OperationalError

from kidlearning.config.settings import settings
from kidlearning.repositories.activity_repository import ActivityRepository
from kidlearning.repositories.progress_repository import ProgressRepository
from kidlearning.repositories.user_repository import UserRepository


def test_progress_upsert_keeps_single_record(db_session):
    """同一 (用户, 分类, 内容) 重复写入只保留一条记录"""
    repo = ProgressRepository(db_session)

    first = repo.upsert(3, "alphabets", "A", completed=True)
    second = repo.upsert(3, "alphabets", "A", completed=True)

    assert first.id == second.id
    records = repo.get_progress(3)
    assert len(records) == 1
    assert records[0].completed is True
    assert records[0].score is None


def test_progress_upsert_overwrites_score(db_session):
    """再次写入时覆盖得分"""
    repo = ProgressRepository(db_session)

    repo.upsert(2, "numbers", "quiz", completed=True, score=4)
    repo.upsert(2, "numbers", "quiz", completed=True, score=2)

    record = repo.get_by_item(2, "numbers", "quiz")
    assert record.score == 2
    assert len(repo.get_progress(2, "numbers")) == 1


def test_progress_filter_by_category(db_session):
    """按分类过滤进度"""
    repo = ProgressRepository(db_session)
    repo.upsert(2, "alphabets", "A", completed=True)
    repo.upsert(2, "alphabets", "B", completed=True)
    repo.upsert(2, "shapes", "circle", completed=True)
    repo.upsert(3, "alphabets", "A", completed=True)

    assert len(repo.get_progress(2)) == 3
    assert [r.item_id for r in repo.get_progress(2, "alphabets")] == ["A", "B"]
    assert repo.get_progress(2, "numbers") == []
    assert len(repo.get_progress(3)) == 1


def test_activities_are_appended_and_limited(db_session):
    """活动只追加，按时间倒序返回，受条数限制"""
    repo = ActivityRepository(db_session)
    for letter in "ABCDE":
        repo.append(2, "alphabets", letter, "lesson")
    repo.append(2, "alphabets", "A", "lesson")
    repo.append(3, "numbers", "7", "quiz", score=4)

    recent = repo.get_recent(2, limit=10)
    assert len(recent) == 6
    assert recent[0].item_id == "A"
    assert recent[1].item_id == "E"
    assert all(a.user_id == 2 for a in recent)

    assert len(repo.get_recent(2, limit=2)) == 2
    assert [a.score for a in repo.get_recent(3)] == [4]
    assert repo.get_recent(4) == []


def test_user_lookup(db_session):
    """测试用户查询"""
    repo = UserRepository(db_session)
    parent = repo.get_by_username("parent")
    assert parent.is_parent

    blue = repo.get_by_avatar("blue")
    assert blue.username == "blue"
    assert blue.parent_id == parent.id

    assert [c.username for c in repo.get_children(parent.id)] == ["red", "blue", "green"]
    assert repo.get_by_avatar("purple") is None


def test_point_lookup_retries_transient_failure(db_session, monkeypatch):
    """按键查询遇到连接类错误时有限次重试"""
    monkeypatch.setattr(settings, "DB_RETRY_WAIT_SECONDS", 0)
    repo = ProgressRepository(db_session)
    repo.upsert(2, "shapes", "star", completed=True)

    real_find = repo._find
    calls = []

    def flaky_find(*args):
        calls.append(args)
        if len(calls) == 1:
            raise OperationalError("SELECT", {}, Exception("connection dropped"))
        return real_find(*args)

    monkeypatch.setattr(repo, "_find", flaky_find)

    assert repo.get_by_item(2, "shapes", "star").item_id == "star"
    assert len(calls) == 2


def test_point_lookup_gives_up_after_attempts(db_session, monkeypatch):
    """重试次数用完后抛出原始错误"""
    monkeypatch.setattr(settings, "DB_RETRY_WAIT_SECONDS", 0)
    repo = ProgressRepository(db_session)
    calls = []

    def broken_find(*args):
        calls.append(args)
        raise OperationalError("SELECT", {}, Exception("connection dropped"))

    monkeypatch.setattr(repo, "_find", broken_find)

    with pytest.raises(OperationalError):
        repo.get_by_item(2, "shapes", "star")
    assert len(calls) == settings.DB_RETRY_ATTEMPTS
