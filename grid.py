"""
Модель игрового поля.

Клетка поля - Point(x, y), (0, 0) в левом верхнем углу, y растёт вниз.
"""
from collections import namedtuple

from config import GRID_WIDTH, GRID_HEIGHT


class Point(namedtuple("Point", ["x", "y"])):
    """Клетка поля. Сравнение и хэш по значению."""
    __slots__ = ()

    def __add__(self, other):
        return Point(self.x + other[0], self.y + other[1])


def enumerate_space(width=GRID_WIDTH, height=GRID_HEIGHT):
    """Все клетки поля: ровно width * height точек"""
    return [Point(x, y) for x in range(width) for y in range(height)]


def in_bounds(point, width=GRID_WIDTH, height=GRID_HEIGHT):
    """Лежит ли точка внутри поля"""
    return 0 <= point.x < width and 0 <= point.y < height
