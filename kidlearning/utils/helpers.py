import hashlib
import hmac
from datetime import datetime
from typing import Optional

import pytz


def utc_now() -> datetime:
    """当前 UTC 时间"""
    return datetime.now(pytz.utc)

def format_timestamp(dt: Optional[datetime] = None) -> str:
    """格式化时间戳"""
    if not dt:
        dt = utc_now()
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")

def hash_password(password: str) -> str:
    """密码摘要（登录为占位实现，不做真正的身份校验）"""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()

def verify_password(password: str, password_hash: Optional[str]) -> bool:
    """校验密码"""
    if not password or not password_hash:
        return False
    return hmac.compare_digest(hash_password(password), password_hash)

def capitalize_word(word: str) -> str:
    """首字母大写，其余保持不变"""
    if not word:
        return word
    return word[0].upper() + word[1:]
