"""
测验题目生成器
根据分类和可选的具体内容生成一组选择题：每题包含题干、2~4 个选项、正确答案以及可选的图片提示。
所有随机操作都通过注入的 random.Random 完成，测试时可传入固定种子得到确定的顺序。
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from kidlearning.content.catalog import Category, ContentCatalog, LETTERS
from kidlearning.utils.helpers import capitalize_word

logger = logging.getLogger(__name__)

Answer = Union[str, int]


@dataclass
class QuizQuestion:
    """测验题目（只在内存中生成，不落库）"""
    question: str
    options: List[Answer] = field(default_factory=list)
    correct_answer: Answer = ""
    image: Optional[str] = None


class QuestionGenerator:
    """测验题目生成器"""

    def __init__(self, catalog: Optional[ContentCatalog] = None,
                 rng: Optional[random.Random] = None,
                 item_quiz_size: int = 3,
                 category_quiz_size: int = 5,
                 min_options: int = 4):
        self.catalog = catalog or ContentCatalog()
        self.rng = rng or random.Random()
        self.item_quiz_size = item_quiz_size
        self.category_quiz_size = category_quiz_size
        self.min_options = min_options

    def generate(self, category, item: Optional[str] = None) -> List[QuizQuestion]:
        """
        生成一次测验的题目

        Args:
            category: 分类
            item: 具体内容，为空时生成整个分类的随机测验

        Returns:
            List[QuizQuestion]: 题目列表
        """
        if item is None:
            questions = self.generate_for_category(category)
        else:
            questions = self.generate_for_item(category, item)
        logger.debug(f"生成测验题目: 分类={category}, 内容={item}, 题目数={len(questions)}")
        return questions

    def generate_for_item(self, category, item: str) -> List[QuizQuestion]:
        """针对单个内容生成题目"""
        cat = self.catalog.require_item(category, item)

        if cat == Category.ALPHABETS:
            return self._alphabet_questions(item)
        if cat == Category.NUMBERS:
            return self._number_questions(item)
        return self._shape_questions(item)

    def generate_for_category(self, category) -> List[QuizQuestion]:
        """整个分类的测验：随机抽取若干内容，每个内容取第一道题"""
        items = self.catalog.items_of(category)
        picked = self.rng.sample(items, min(self.category_quiz_size, len(items)))

        questions = []
        for item in picked:
            item_questions = self.generate_for_item(category, item)
            if item_questions:
                questions.append(item_questions[0])
        return questions

    # ---- 字母 ----

    def _alphabet_questions(self, letter: str) -> List[QuizQuestion]:
        examples = self.catalog.auxiliary_of(Category.ALPHABETS, letter)
        correct_word = examples[0] if examples else self._filler_word(letter)

        other_letters = [l for l in LETTERS if l != letter]
        word_letters = self.rng.sample(other_letters, 3)
        word_distractors = [self._first_word(l) for l in word_letters]

        upper_pair = self.rng.sample(other_letters, 2)
        lower_pair = self.rng.sample(other_letters, 2)

        questions = [
            QuizQuestion(
                question=f"Which word starts with the letter {letter}?",
                options=self._text_options(correct_word, word_distractors),
                correct_answer=correct_word,
            ),
            QuizQuestion(
                question=f"Find the uppercase letter {letter}",
                options=self._text_options(letter, [letter.lower()] + upper_pair),
                correct_answer=letter,
            ),
            QuizQuestion(
                question=f"Find the lowercase letter {letter}",
                options=self._text_options(
                    letter.lower(), [letter] + [l.lower() for l in lower_pair]
                ),
                correct_answer=letter.lower(),
            ),
        ]
        return self._shuffle(questions)

    def _first_word(self, letter: str) -> str:
        examples = self.catalog.auxiliary_of(Category.ALPHABETS, letter)
        return examples[0] if examples else self._filler_word(letter)

    @staticmethod
    def _filler_word(letter: str) -> str:
        return f"{letter}ord"

    # ---- 数字 ----

    def _number_questions(self, item: str) -> List[QuizQuestion]:
        num = self.catalog.count_target(item)
        neighbours = [num + 1, num - 1, num + 2]

        questions = [
            QuizQuestion(
                question="How many objects are there?",
                options=self._numeric_options(num, neighbours),
                correct_answer=num,
                image="counting",
            ),
            QuizQuestion(
                question=f"Which number comes after {num - 1}?",
                options=self._numeric_options(num, neighbours),
                correct_answer=num,
            ),
            QuizQuestion(
                question=f"Which number comes before {num + 1}?",
                options=self._numeric_options(num, neighbours),
                correct_answer=num,
            ),
        ]

        if num > 5:
            addend1 = num // 2
            addend2 = num - addend1
            questions.append(QuizQuestion(
                question=f"What is {addend1} + {addend2}?",
                options=self._numeric_options(num, [num + 1, num - 1, addend1]),
                correct_answer=num,
            ))
            questions.append(QuizQuestion(
                question=f"What is {num} - {addend2}?",
                options=self._numeric_options(addend1, [addend1 + 1, addend1 - 1, addend2]),
                correct_answer=addend1,
            ))

        return self._shuffle(questions)[:self.item_quiz_size]

    def _numeric_options(self, correct: int, candidates: Sequence[int]) -> List[int]:
        """正确答案加干扰项：去掉非正数和重复值，不足时用更大的正整数补齐"""
        options = [correct]
        for value in candidates:
            if value > 0 and value not in options:
                options.append(value)

        pad = max(options) + 1
        while len(options) < self.min_options:
            options.append(pad)
            pad += 1
        return self._shuffle(options)

    # ---- 形状 ----

    def _shape_questions(self, shape: str) -> List[QuizQuestion]:
        shapes = self.catalog.items_of(Category.SHAPES)
        other_shapes = [s for s in shapes if s != shape]

        correct_name = capitalize_word(shape)
        name_distractors = [capitalize_word(s) for s in self.rng.sample(other_shapes, 3)]

        correct_object = self._shape_objects(shape)[0]
        object_distractors = self._shape_object_distractors(correct_object, other_shapes)

        questions = [
            QuizQuestion(
                question="What shape is this?",
                options=self._text_options(correct_name, name_distractors),
                correct_answer=correct_name,
                image=shape,
            ),
            QuizQuestion(
                question=f"Which object is shaped like a {shape}?",
                options=self._text_options(correct_object, object_distractors),
                correct_answer=correct_object,
            ),
        ]
        return self._shuffle(questions)

    def _shape_objects(self, shape: str) -> List[str]:
        """形状对应的生活实物，没有素材时用占位玩具名"""
        examples = self.catalog.auxiliary_of(Category.SHAPES, shape)
        return list(examples) if examples else [f"{capitalize_word(shape)} Toy"]

    def _shape_object_distractors(self, correct: str, other_shapes: List[str]) -> List[str]:
        """按随机顺序遍历其他形状，每个形状最多取一个实物作为干扰项"""
        distractors: List[str] = []
        for other in self._shuffle(other_shapes):
            if len(distractors) >= self.min_options - 1:
                break
            pool = [e for e in self._shape_objects(other) if e != correct and e not in distractors]
            if pool:
                distractors.append(self.rng.choice(pool))
        return distractors

    # ---- 工具 ----

    def _text_options(self, correct: str, distractors: Sequence[str]) -> List[str]:
        options = [correct]
        for value in distractors:
            if value and value not in options:
                options.append(value)
        return self._shuffle(options)

    def _shuffle(self, values: Sequence) -> list:
        shuffled = list(values)
        self.rng.shuffle(shuffled)
        return shuffled
