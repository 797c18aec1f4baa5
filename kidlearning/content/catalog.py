"""
学习内容目录
定义三个学习分类（字母、数字、形状）的内容列表及每个内容的辅助素材（示例单词、计数素材、生活中的实物）。
数据在进程内只读，不依赖数据库。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Any

from kidlearning.utils.exceptions import InvalidCategoryError, ItemNotFoundError
from kidlearning.utils.helpers import capitalize_word


class Category(str, Enum):
    """学习分类"""
    ALPHABETS = "alphabets"
    NUMBERS = "numbers"
    SHAPES = "shapes"


LETTERS: Tuple[str, ...] = tuple("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

NUMBERS: Tuple[str, ...] = tuple(str(n) for n in range(1, 21))

SHAPES: Tuple[str, ...] = (
    "circle", "square", "triangle", "rectangle",
    "oval", "star", "heart", "diamond",
    "pentagon", "hexagon",
)

LETTER_EXAMPLES: Dict[str, Tuple[str, ...]] = {
    "A": ("Apple", "Ant", "Airplane"),
    "B": ("Ball", "Bear", "Balloon"),
    "C": ("Cat", "Car", "Cookie"),
    "D": ("Dog", "Duck", "Dinosaur"),
    "E": ("Elephant", "Egg", "Eagle"),
    "F": ("Fish", "Flower", "Frog"),
    "G": ("Goat", "Grape", "Giraffe"),
    "H": ("Hat", "Horse", "House"),
    "I": ("Ice Cream", "Igloo", "Insect"),
    "J": ("Jellyfish", "Jam", "Jacket"),
    "K": ("Kite", "Key", "Kangaroo"),
    "L": ("Lion", "Lemon", "Leaf"),
    "M": ("Monkey", "Moon", "Mouse"),
    "N": ("Nest", "Nut", "Nose"),
    "O": ("Octopus", "Orange", "Owl"),
    "P": ("Penguin", "Pizza", "Panda"),
    "Q": ("Queen", "Quilt", "Question"),
    "R": ("Rabbit", "Rainbow", "Robot"),
    "S": ("Sun", "Snake", "Star"),
    "T": ("Tree", "Tiger", "Train"),
    "U": ("Umbrella", "Unicorn", "Up"),
    "V": ("Violin", "Volcano", "Vegetable"),
    "W": ("Whale", "Water", "Window"),
    "X": ("Xylophone", "X-ray", "Box"),
    "Y": ("Yo-yo", "Yellow", "Yogurt"),
    "Z": ("Zebra", "Zoo", "Zipper"),
}

# 数字课程的计数素材
COUNTING_OBJECTS: Tuple[Tuple[str, str], ...] = (
    ("apple", "apples"),
    ("star", "stars"),
    ("balloon", "balloons"),
)

SHAPE_EXAMPLES: Dict[str, Tuple[str, ...]] = {
    "circle": ("Clock", "Wheel", "Ball"),
    "square": ("Window", "Box", "Tile"),
    "triangle": ("Pizza Slice", "Roof", "Road Sign"),
    "rectangle": ("Door", "Book", "TV"),
    "oval": ("Egg", "Mirror", "Football"),
    "star": ("Star in Sky", "Starfish", "Star Badge"),
    "heart": ("Heart Symbol", "Valentine Card", "Candy"),
    "diamond": ("Playing Card", "Kite", "Jewel"),
    "pentagon": ("Soccer Ball Patch", "House Drawing", "Pentagon Building"),
    "hexagon": ("Honeycomb", "Nut Bolt", "Floor Tile"),
}

SHAPE_DESCRIPTIONS: Dict[str, str] = {
    "circle": "A round shape with no corners",
    "square": "A shape with four equal sides and four right angles",
    "triangle": "A shape with three sides and three corners",
    "rectangle": "A shape with four sides and four right angles, two long and two short",
    "oval": "A stretched circle, like an egg",
    "star": "A shape with five points",
    "heart": "A shape of love with two round bumps and a point",
    "diamond": "A square standing on one of its corners",
    "pentagon": "A shape with five sides",
    "hexagon": "A shape with six sides",
}

FUN_FACTS: Dict[Category, Dict[str, str]] = {
    Category.ALPHABETS: {
        "A": "A is the most common letter in the English language!",
        "B": "The letter B initially appeared as a pictograph of a house!",
    },
    Category.NUMBERS: {
        "1": "The number 1 is neither prime nor composite!",
        "2": "Two is the only even prime number!",
    },
    Category.SHAPES: {
        "circle": "A circle has infinite sides!",
        "square": "A square is a special case of a rectangle where all sides are equal!",
    },
}

CATEGORY_TITLES: Dict[Category, str] = {
    Category.ALPHABETS: "Alphabets",
    Category.NUMBERS: "Numbers",
    Category.SHAPES: "Shapes",
}


@dataclass(frozen=True)
class LessonContent:
    """单个内容的课程详情"""
    category: str
    item: str
    title: str
    description: str
    examples: Tuple[str, ...]
    fun_fact: Optional[str] = None


class ContentCatalog:
    """学习内容目录，只提供查询，不产生副作用"""

    _ITEMS: Dict[Category, Tuple[str, ...]] = {
        Category.ALPHABETS: LETTERS,
        Category.NUMBERS: NUMBERS,
        Category.SHAPES: SHAPES,
    }

    def _category(self, category) -> Optional[Category]:
        try:
            return Category(category)
        except ValueError:
            return None

    def exists(self, category) -> bool:
        """分类是否存在"""
        return self._category(category) is not None

    def has_item(self, category, item: str) -> bool:
        """分类中是否包含该内容"""
        cat = self._category(category)
        return cat is not None and item in self._ITEMS[cat]

    def categories(self) -> List[Dict[str, Any]]:
        """获取全部分类概览"""
        return [
            {
                "id": cat.value,
                "title": CATEGORY_TITLES[cat],
                "item_count": len(self._ITEMS[cat]),
            }
            for cat in Category
        ]

    def items_of(self, category) -> List[str]:
        """获取分类下的内容列表（固定顺序）"""
        cat = self._category(category)
        if cat is None:
            raise InvalidCategoryError(str(category))
        return list(self._ITEMS[cat])

    def auxiliary_of(self, category, item: str) -> List[str]:
        """
        获取内容的辅助素材

        没有整理过素材的内容返回空列表，不抛异常。
        """
        cat = self._category(category)
        if cat is None:
            return []
        if cat == Category.ALPHABETS:
            return list(LETTER_EXAMPLES.get(item, ()))
        if cat == Category.SHAPES:
            return list(SHAPE_EXAMPLES.get(item, ()))
        if item not in NUMBERS:
            return []
        count = self.count_target(item)
        return [f"{count} {singular if count == 1 else plural}" for singular, plural in COUNTING_OBJECTS]

    def count_target(self, item: str) -> int:
        """数字内容对应的计数目标"""
        return int(item)

    def require_item(self, category, item: str) -> Category:
        """校验分类和内容，返回分类枚举"""
        cat = self._category(category)
        if cat is None:
            raise InvalidCategoryError(str(category))
        if item not in self._ITEMS[cat]:
            raise ItemNotFoundError(cat.value, item)
        return cat

    def lesson_of(self, category, item: str) -> LessonContent:
        """获取课程详情：标题、说明、示例和趣味知识"""
        cat = self.require_item(category, item)

        if cat == Category.ALPHABETS:
            position = LETTERS.index(item) + 1
            title = f"Letter {item}"
            description = f"Letter number {position} of {len(LETTERS)} in the alphabet"
        elif cat == Category.NUMBERS:
            number = self.count_target(item)
            title = f"Number {item}"
            if number == 1:
                description = "The first counting number"
            else:
                description = f"{number} comes after {number - 1} and before {number + 1}"
        else:
            title = capitalize_word(item)
            description = SHAPE_DESCRIPTIONS.get(item, f"A {item} shape")

        return LessonContent(
            category=cat.value,
            item=item,
            title=title,
            description=description,
            examples=tuple(self.auxiliary_of(cat, item)),
            fun_fact=FUN_FACTS[cat].get(item),
        )
