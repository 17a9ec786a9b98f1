import pytest

from game import Cell, SnakeGame


@pytest.fixture
def game():
    return SnakeGame(grid_count=20, seed=1)


@pytest.fixture
def arrange():
    """Ставит змейку, еду и направление вручную и запускает игру"""
    def _arrange(game, snake, direction, food=(0, 0)):
        game.snake = [Cell(*c) for c in snake]
        game.direction = direction
        game.next_direction = direction
        game.food = Cell(*food)
        game.start()
        return game
    return _arrange
