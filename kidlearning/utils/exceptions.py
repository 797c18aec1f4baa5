"""
业务异常定义
路由层不直接拼装 HTTP 错误，服务层抛出以下异常，由 main.py 中的全局异常处理器统一转换为响应。
"""


class KidLearningError(Exception):
    """业务异常基类"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(KidLearningError):
    status_code = 404


class InvalidCategoryError(NotFoundError):
    def __init__(self, category: str):
        super().__init__(f"分类不存在: {category}")
        self.category = category


class ItemNotFoundError(NotFoundError):
    def __init__(self, category: str, item: str):
        super().__init__(f"分类 {category} 中不存在内容: {item}")
        self.category = category
        self.item = item


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id):
        super().__init__(f"用户不存在: {user_id}")
        self.user_id = user_id


class UnauthorizedError(KidLearningError):
    status_code = 401


class ForbiddenError(KidLearningError):
    status_code = 403


class ValidationError(KidLearningError):
    status_code = 422
