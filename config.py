# Настройки игры
# Поле 40x30 клеток, каждая клетка 20x20 пикселей
GRID_WIDTH = 40
GRID_HEIGHT = 30

# Размер клетки в пикселях
GRID_SIZE = 20
WIDTH = GRID_WIDTH * GRID_SIZE    # 800
HEIGHT = GRID_HEIGHT * GRID_SIZE  # 600

# Панель статистики справа от поля
PANEL_WIDTH = 200

# Цвета
GREEN = (0, 255, 0)
LIME = (124, 252, 0)
RED = (255, 0, 0)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
DARK_GRAY = (30, 30, 30)
DARK_RED = (30, 0, 0)
PANEL = (40, 40, 40)

SNAKE = GREEN
HEAD = LIME
FOOD = RED
TEXT_COLOR = WHITE

# Фон зависит от состояния игры
PLAYING_BACKGROUND = BLACK
PAUSED_BACKGROUND = DARK_GRAY
OVER_BACKGROUND = DARK_RED

# Направления (ось y растёт вниз)
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

# Стартовая позиция
INITIAL_SNAKE = [(3, 1), (2, 1), (1, 1)]  # голова первая
INITIAL_FOOD = (3, 3)

# Скорость = кадров на один шаг змейки (меньше = быстрее)
INITIAL_SPEED = 15
ACC_RATE = 1    # на сколько ускоряемся за каждую еду
TOP_SPEED = 5   # быстрее нельзя

# Кадров в секунду
FPS = 60
