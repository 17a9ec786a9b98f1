# Настройки игры
# Поле 20x20 клеток по 20 пикселей (как canvas 400x400 в браузерной версии)
# Размер окна считается в play.py: grid_count * CELL_SIZE + панель
CELL_SIZE = 20
GRID_COUNT = 20

PANEL_WIDTH = 200

# Цвета
BACKGROUND = (250, 250, 250)
GRID = (235, 235, 235)
SNAKE_HEAD = (44, 62, 80)
SNAKE_BODY = (52, 152, 219)
FOOD = (231, 76, 60)
PANEL = (40, 40, 40)
WHITE = (255, 255, 255)
BUTTON = (70, 70, 70)
BUTTON_DISABLED = (55, 55, 55)
TEXT_DISABLED = (120, 120, 120)

# Направления
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)

# Скорость: один шаг змейки раз в 150 мс
TICK_INTERVAL_MS = 150

# Начальная длина змейки
INITIAL_SNAKE_LENGTH = 3

# Очки за еду
SCORE_FOR_FOOD = 10
