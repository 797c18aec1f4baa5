import pytest

from kidlearning.content.catalog import Category, ContentCatalog
from kidlearning.utils.exceptions import InvalidCategoryError, ItemNotFoundError


@pytest.fixture
def catalog():
    return ContentCatalog()


def test_categories_overview(catalog):
    """测试分类概览"""
    categories = catalog.categories()
    assert [c["id"] for c in categories] == ["alphabets", "numbers", "shapes"]
    assert [c["item_count"] for c in categories] == [26, 20, 10]


def test_items_in_fixed_order(catalog):
    """测试内容列表顺序固定"""
    assert catalog.items_of("alphabets")[:3] == ["A", "B", "C"]
    assert catalog.items_of("alphabets")[-1] == "Z"
    assert catalog.items_of("numbers") == [str(n) for n in range(1, 21)]
    assert catalog.items_of(Category.SHAPES)[0] == "circle"
    assert catalog.items_of("shapes") == catalog.items_of("shapes")


def test_unknown_category(catalog):
    """测试未知分类"""
    assert not catalog.exists("colors")
    with pytest.raises(InvalidCategoryError) as exc_info:
        catalog.items_of("colors")
    assert exc_info.value.status_code == 404


def test_auxiliary_content(catalog):
    """测试辅助素材"""
    assert catalog.auxiliary_of("alphabets", "A") == ["Apple", "Ant", "Airplane"]
    assert catalog.auxiliary_of("shapes", "circle") == ["Clock", "Wheel", "Ball"]
    assert catalog.auxiliary_of("numbers", "3") == ["3 apples", "3 stars", "3 balloons"]
    assert catalog.auxiliary_of("numbers", "1") == ["1 apple", "1 star", "1 balloon"]


def test_auxiliary_content_missing_is_empty(catalog):
    """没有素材的内容返回空列表"""
    assert catalog.auxiliary_of("alphabets", "a") == []
    assert catalog.auxiliary_of("shapes", "cube") == []
    assert catalog.auxiliary_of("colors", "red") == []


def test_require_item(catalog):
    """测试内容校验"""
    assert catalog.require_item("numbers", "7") == Category.NUMBERS
    assert catalog.has_item("shapes", "star")
    assert not catalog.has_item("numbers", "21")

    with pytest.raises(ItemNotFoundError):
        catalog.require_item("numbers", "21")
    with pytest.raises(InvalidCategoryError):
        catalog.require_item("colors", "red")


def test_lesson_content(catalog):
    """测试课程详情"""
    lesson = catalog.lesson_of("alphabets", "A")
    assert lesson.title == "Letter A"
    assert lesson.examples == ("Apple", "Ant", "Airplane")
    assert lesson.fun_fact is not None

    lesson = catalog.lesson_of("numbers", "7")
    assert lesson.title == "Number 7"
    assert lesson.description == "7 comes after 6 and before 8"
    assert lesson.fun_fact is None

    lesson = catalog.lesson_of("shapes", "circle")
    assert lesson.title == "Circle"
    assert lesson.description == "A round shape with no corners"
