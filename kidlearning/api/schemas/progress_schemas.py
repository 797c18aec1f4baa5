from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from datetime import datetime

class LessonCompletionRequest(BaseModel):
    category: str = Field(..., min_length=1)
    item_id: str = Field(..., min_length=1)

class QuizCompletionRequest(BaseModel):
    category: str = Field(..., min_length=1)
    item_id: str = Field("quiz", min_length=1)
    score: int = Field(..., ge=0)

class ProgressResponse(BaseModel):
    id: int
    user_id: int
    category: str
    item_id: str
    completed: bool
    score: Optional[int] = None
    completed_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True
    )

class ActivityResponse(BaseModel):
    id: int
    user_id: int
    category: str
    item_id: str
    activity: str
    score: Optional[int] = None
    timestamp: datetime

    model_config = ConfigDict(
        from_attributes=True
    )

class CompletionResponse(BaseModel):
    progress: ProgressResponse
    activity: ActivityResponse

class CategoryProgress(BaseModel):
    category: str
    title: str
    completed_items: int
    total_items: int
    percentage: int
    latest_quiz_score: Optional[int] = None

class Recommendation(BaseModel):
    code: str
    title: str
    message: str

class ProgressSummaryResponse(BaseModel):
    user_id: int
    child_name: Optional[str] = None
    total_records: int
    categories: List[CategoryProgress]
    recommendations: List[Recommendation]
