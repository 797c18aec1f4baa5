from pydantic import BaseModel, ConfigDict
from typing import List, Optional, Union

class CategoryResponse(BaseModel):
    id: str
    title: str
    item_count: int

class LessonResponse(BaseModel):
    category: str
    item: str
    title: str
    description: str
    examples: List[str]
    fun_fact: Optional[str] = None

    model_config = ConfigDict(
        from_attributes=True
    )

class QuizQuestionResponse(BaseModel):
    question: str
    options: List[Union[int, str]]
    correct_answer: Union[int, str]
    image: Optional[str] = None

    model_config = ConfigDict(
        from_attributes=True
    )

class QuizResponse(BaseModel):
    category: str
    item: Optional[str] = None
    questions: List[QuizQuestionResponse]
