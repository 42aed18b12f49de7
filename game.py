"""
Движок игры "Змейка".

GameContext хранит всё состояние игры и меняет его только через свои методы:
  move_up / move_down / move_left / move_right - смена направления
  toggle_pause - пауза, продолжение и рестарт после проигрыша
  next_tick - один шаг змейки
"""
from collections import namedtuple
from enum import Enum

import numpy as np

from config import (UP, DOWN, LEFT, RIGHT, INITIAL_SNAKE, INITIAL_FOOD,
                    INITIAL_SPEED, ACC_RATE, TOP_SPEED)
from grid import Point, enumerate_space, in_bounds


class PlayerDirection(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class GameState(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    OVER = "over"


# Смещение головы для каждого направления
DIRECTION_VECTORS = {
    PlayerDirection.UP: Point(*UP),
    PlayerDirection.DOWN: Point(*DOWN),
    PlayerDirection.LEFT: Point(*LEFT),
    PlayerDirection.RIGHT: Point(*RIGHT),
}

# Разворот на 180 градусов запрещён
OPPOSITE = {
    PlayerDirection.UP: PlayerDirection.DOWN,
    PlayerDirection.DOWN: PlayerDirection.UP,
    PlayerDirection.LEFT: PlayerDirection.RIGHT,
    PlayerDirection.RIGHT: PlayerDirection.LEFT,
}

assert set(DIRECTION_VECTORS) == set(PlayerDirection)
assert set(OPPOSITE) == set(PlayerDirection)


# Снимок состояния для отрисовки (только чтение)
GameSnapshot = namedtuple(
    "GameSnapshot",
    ["state", "player_position", "food", "score", "speed", "won"],
)


class GameContext:
    """
    Состояние одной игры.

    Attributes:
        player_position: список клеток змейки, голова первая
        player_direction: текущее направление
        score: сколько еды съедено
        food: клетка с едой (None, если змейка заняла всё поле)
        state: Playing / Paused / Over
        space: все клетки поля
        speed: кадров на один шаг (меньше = быстрее)
    """

    def __init__(self, rng=None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.restart()
        self.state = GameState.PAUSED

    def restart(self):
        """Сброс к начальной позиции. Состояние (state) не трогает."""
        self.player_position = [Point(*p) for p in INITIAL_SNAKE]
        self.player_direction = PlayerDirection.RIGHT
        self.food = Point(*INITIAL_FOOD)
        self.space = enumerate_space()
        self.score = 0
        self.speed = INITIAL_SPEED
        self.won = False

    @property
    def head(self):
        return self.player_position[0]

    @property
    def length(self):
        return len(self.player_position)

    def is_win(self):
        """Победа = змейка заняла всё поле"""
        return self.won

    def snapshot(self):
        """Неизменяемый снимок для отрисовки"""
        return GameSnapshot(
            state=self.state,
            player_position=tuple(self.player_position),
            food=self.food,
            score=self.score,
            speed=self.speed,
            won=self.won,
        )

    def toggle_pause(self):
        if self.state == GameState.PAUSED:
            self.state = GameState.PLAYING
        elif self.state == GameState.PLAYING:
            self.state = GameState.PAUSED
        else:
            # После проигрыша - новая игра, но на паузе
            self.restart()
            self.state = GameState.PAUSED

    def move_up(self):
        self._turn(PlayerDirection.UP)

    def move_down(self):
        self._turn(PlayerDirection.DOWN)

    def move_left(self):
        self._turn(PlayerDirection.LEFT)

    def move_right(self):
        self._turn(PlayerDirection.RIGHT)

    def _turn(self, direction):
        # Запрет на движение назад (иначе мгновенная смерть)
        if self.player_direction != OPPOSITE[direction]:
            self.player_direction = direction

    def next_tick(self):
        """Один шаг змейки. На паузе и после конца игры ничего не делает."""
        if self.state != GameState.PLAYING:
            return

        next_head = self.head + DIRECTION_VECTORS[self.player_direction]

        # Стена или собственное тело
        if not in_bounds(next_head) or next_head in self.player_position:
            self.state = GameState.OVER
            return

        ate = next_head == self.food
        if not ate:
            self.player_position.pop()

        self.player_position.insert(0, next_head)

        if ate:
            self.score += 1
            if self.speed - ACC_RATE >= TOP_SPEED:
                self.speed -= ACC_RATE
            # Еду ставим после новой головы, чтобы она не попала на змейку
            self.food = self._spawn_food()
            if self.food is None:
                self.won = True
                self.state = GameState.OVER

    def free_space(self):
        """Клетки поля, не занятые змейкой (в порядке space)"""
        occupied = set(self.player_position)
        return [p for p in self.space if p not in occupied]

    def _spawn_food(self):
        """Случайная свободная клетка, None если места нет"""
        empty = self.free_space()
        if not empty:
            return None
        idx = self.rng.integers(len(empty))
        return empty[idx]
