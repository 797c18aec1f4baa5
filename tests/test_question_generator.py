import random

import pytest

from kidlearning.content.catalog import ContentCatalog
from kidlearning.quiz.question_generator import QuestionGenerator
from kidlearning.utils.exceptions import InvalidCategoryError, ItemNotFoundError


@pytest.fixture
def generator():
    return QuestionGenerator(rng=random.Random(42))


def _all_pairs():
    catalog = ContentCatalog()
    for category in ("alphabets", "numbers", "shapes"):
        for item in catalog.items_of(category):
            yield category, item


def test_every_question_is_well_formed(generator):
    """每道题的正确答案恰好出现一次，选项不重复"""
    for category, item in _all_pairs():
        questions = generator.generate(category, item)
        assert questions, f"{category}/{item} 没有生成题目"
        for q in questions:
            assert q.options.count(q.correct_answer) == 1, q
            assert len(set(q.options)) == len(q.options), q
            assert 2 <= len(q.options) <= 4, q


def test_numeric_options_are_positive_and_padded(generator):
    """数字题选项都是正整数，且至少 4 个"""
    for item in ContentCatalog().items_of("numbers"):
        for q in generator.generate("numbers", item):
            assert len(q.options) == 4
            assert all(isinstance(o, int) and o > 0 for o in q.options)


def test_number_one_has_no_zero_option(generator):
    """数字 1 的干扰项里没有 0"""
    for q in generator.generate("numbers", "1"):
        assert 0 not in q.options
        assert q.correct_answer == 1


def test_question_counts_per_category(generator):
    """测试各分类单个内容的题目数量"""
    assert len(generator.generate("alphabets", "A")) == 3
    assert len(generator.generate("numbers", "3")) == 3
    assert len(generator.generate("numbers", "7")) == 3
    assert len(generator.generate("shapes", "circle")) == 2


def test_alphabet_questions(generator):
    """测试字母题目内容"""
    questions = {q.question: q for q in generator.generate("alphabets", "A")}
    assert questions["Which word starts with the letter A?"].correct_answer == "Apple"
    assert questions["Find the uppercase letter A"].correct_answer == "A"
    assert "a" in questions["Find the uppercase letter A"].options
    assert questions["Find the lowercase letter A"].correct_answer == "a"
    assert "A" in questions["Find the lowercase letter A"].options


def test_shape_questions(generator):
    """测试形状题目内容"""
    questions = {q.question: q for q in generator.generate("shapes", "circle")}
    name_q = questions["What shape is this?"]
    assert name_q.correct_answer == "Circle"
    assert name_q.image == "circle"

    object_q = questions["Which object is shaped like a circle?"]
    assert object_q.correct_answer == "Clock"
    assert len(object_q.options) == 4


def test_category_quiz(generator):
    """整个分类的测验抽取 5 道题"""
    for category in ("alphabets", "numbers", "shapes"):
        questions = generator.generate(category)
        assert len(questions) == 5
        for q in questions:
            assert q.options.count(q.correct_answer) == 1


def test_same_seed_same_quiz():
    """相同种子生成相同的题目"""
    first = QuestionGenerator(rng=random.Random(7)).generate("numbers", "9")
    second = QuestionGenerator(rng=random.Random(7)).generate("numbers", "9")
    assert first == second


def test_invalid_category_or_item(generator):
    """测试未知分类和内容"""
    with pytest.raises(InvalidCategoryError):
        generator.generate("colors")
    with pytest.raises(InvalidCategoryError):
        generator.generate("colors", "red")
    with pytest.raises(ItemNotFoundError):
        generator.generate("numbers", "42")


class EmptyContentCatalog(ContentCatalog):
    """没有任何辅助素材的目录"""

    def auxiliary_of(self, category, item):
        return []


def test_missing_content_falls_back_to_placeholders():
    """没有素材时用占位内容出题，选项仍然完整"""
    generator = QuestionGenerator(catalog=EmptyContentCatalog(), rng=random.Random(3))

    letter_questions = {q.question: q for q in generator.generate("alphabets", "A")}
    word_q = letter_questions["Which word starts with the letter A?"]
    assert word_q.correct_answer == "Aord"
    assert all(o.endswith("ord") for o in word_q.options)

    shape_questions = {q.question: q for q in generator.generate("shapes", "circle")}
    object_q = shape_questions["Which object is shaped like a circle?"]
    assert object_q.correct_answer == "Circle Toy"

    for q in list(letter_questions.values()) + list(shape_questions.values()):
        assert len(q.options) == 4, q
        assert len(set(q.options)) == len(q.options), q
        assert q.options.count(q.correct_answer) == 1, q

    assert len(generator.generate("shapes")) == 5
