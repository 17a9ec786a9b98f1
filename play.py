"""
Змейка в окне pygame.

Использование:
    python play.py                  # Поле 20x20, шаг 150 мс
    python play.py --grid 30        # Поле побольше
    python play.py --auto-reset     # Сразу новая игра после проигрыша

Управление:
    Стрелки / WASD  направление
    SPACE           старт / пауза / продолжить
    ENTER           старт
    P               пауза
    R               новая игра
    ESC             выход
"""
import argparse
import logging

import pygame

import config
from game import Direction, Lifecycle, SnakeGame

# Событие таймера: один шаг змейки
TICK_EVENT = pygame.USEREVENT + 1

KEY_DIRECTIONS = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}

STATE_LABELS = {
    Lifecycle.IDLE: "Ready",
    Lifecycle.RUNNING: "Playing",
    Lifecycle.PAUSED: "Paused",
    Lifecycle.ENDED: "Game over",
}

CONTROLS_HELP = [
    "Controls:",
    "Arrows/WASD Move",
    "SPACE Pause",
    "R Restart",
    "ESC Quit",
]


def handle_key(game, key):
    """Клавиша -> вызов движка. False = выходим"""
    if key == pygame.K_ESCAPE:
        return False

    if key in KEY_DIRECTIONS:
        game.set_direction(KEY_DIRECTIONS[key])
    elif key == pygame.K_SPACE:
        if game.lifecycle is Lifecycle.IDLE:
            game.start()
        else:
            game.toggle_pause()
    elif key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        game.start()
    elif key == pygame.K_p:
        game.pause()
    elif key == pygame.K_r:
        game.reset()
    return True


def controls_enabled(lifecycle):
    """Какие кнопки активны: (start, pause)"""
    start = lifecycle in (Lifecycle.IDLE, Lifecycle.PAUSED)
    pause = lifecycle in (Lifecycle.RUNNING, Lifecycle.PAUSED)
    return start, pause


class SnakeWindow:
    def __init__(self, game, cell_size=None):
        pygame.init()

        self.game = game
        self.cell = cell_size or config.CELL_SIZE
        self.board = self.game.grid_count * self.cell

        self.screen = pygame.display.set_mode(
            (self.board + config.PANEL_WIDTH, max(self.board, 440)))
        pygame.display.set_caption('Snake')
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 28)

        # Кнопки в панели справа
        left = self.board + 20
        self.start_btn = pygame.Rect(left, 190, 160, 30)
        self.pause_btn = pygame.Rect(left, 230, 160, 30)
        self.reset_btn = pygame.Rect(left, 270, 160, 30)

        self.timer_armed = False
        self.last_result = None
        self.games = 0
        self.total_score = 0
        self.best = 0

    def sync_timer(self):
        """Таймер тикает только пока игра идёт"""
        running = self.game.lifecycle is Lifecycle.RUNNING
        if running != self.timer_armed:
            pygame.time.set_timer(TICK_EVENT, self.game.tick_interval_ms if running else 0)
            self.timer_armed = running

    def on_tick(self):
        snap = self.game.tick()
        if snap.lifecycle is not Lifecycle.ENDED:
            return

        self.games += 1
        self.total_score += snap.score
        self.best = max(self.best, snap.score)
        self.last_result = snap

        if snap.won:
            print(f"Game {self.games}: WIN! Score {snap.score}")
        else:
            print(f"Game {self.games}: Score {snap.score}")

    def click(self, pos):
        start_ok, pause_ok = controls_enabled(self.game.lifecycle)
        if self.start_btn.collidepoint(pos) and start_ok:
            self.game.start()
        elif self.pause_btn.collidepoint(pos) and pause_ok:
            self.game.toggle_pause()
        elif self.reset_btn.collidepoint(pos):
            self.game.reset()

    def draw_button(self, rect, label, enabled):
        pygame.draw.rect(self.screen, config.BUTTON if enabled else config.BUTTON_DISABLED, rect)
        color = config.WHITE if enabled else config.TEXT_DISABLED
        surf = self.font.render(label, True, color)
        self.screen.blit(surf, surf.get_rect(center=rect.center))

    def draw(self):
        snap = self.game.snapshot()
        self.screen.fill(config.BACKGROUND)

        # Сетка
        for x in range(0, self.board, self.cell):
            pygame.draw.line(self.screen, config.GRID, (x, 0), (x, self.board))
        for y in range(0, self.board, self.cell):
            pygame.draw.line(self.screen, config.GRID, (0, y), (self.board, y))

        # Змейка (-1 оставляет зазор между клетками)
        for i, (x, y) in enumerate(snap.snake):
            rect = pygame.Rect(x * self.cell, y * self.cell, self.cell - 1, self.cell - 1)
            color = config.SNAKE_HEAD if i == 0 else config.SNAKE_BODY
            pygame.draw.rect(self.screen, color, rect)

        # Еда
        if snap.food is not None:
            fx, fy = snap.food
            rect = pygame.Rect(fx * self.cell, fy * self.cell, self.cell - 1, self.cell - 1)
            pygame.draw.rect(self.screen, config.FOOD, rect)

        # Панель статистики
        panel = pygame.Rect(self.board, 0, config.PANEL_WIDTH, self.screen.get_height())
        pygame.draw.rect(self.screen, config.PANEL, panel)

        stats = [
            f"Score: {snap.score}",
            f"Length: {len(snap.snake)}",
            f"Best: {self.best}",
            f"Games: {self.games}",
            f"State: {STATE_LABELS[snap.lifecycle]}",
        ]
        for i, text in enumerate(stats):
            surf = self.font.render(text, True, config.WHITE)
            self.screen.blit(surf, (self.board + 10, 20 + i * 25))

        start_ok, pause_ok = controls_enabled(snap.lifecycle)
        pause_label = "Resume" if snap.lifecycle is Lifecycle.PAUSED else "Pause"
        self.draw_button(self.start_btn, "Start", start_ok)
        self.draw_button(self.pause_btn, pause_label, pause_ok)
        self.draw_button(self.reset_btn, "Reset", True)

        for i, text in enumerate(CONTROLS_HELP):
            surf = self.font.render(text, True, config.WHITE)
            self.screen.blit(surf, (self.board + 10, 315 + i * 22))

        if snap.lifecycle is Lifecycle.ENDED:
            self.draw_game_over(snap)

        pygame.display.flip()

    def draw_game_over(self, snap):
        overlay = pygame.Surface((self.board, self.board), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 150))
        self.screen.blit(overlay, (0, 0))

        title = "You win!" if snap.won else "Game over"
        lines = [(self.big_font, title), (self.font, f"Score: {snap.score}"),
                 (self.font, "R - new game")]
        for i, (font, text) in enumerate(lines):
            surf = font.render(text, True, config.WHITE)
            center = (self.board // 2, self.board // 2 - 30 + i * 32)
            self.screen.blit(surf, surf.get_rect(center=center))

    def play(self):
        self.game.reset()
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = handle_key(self.game, event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.click(event.pos)
                elif event.type == TICK_EVENT:
                    self.on_tick()

            self.sync_timer()
            self.draw()
            self.clock.tick(60)

        pygame.time.set_timer(TICK_EVENT, 0)
        pygame.quit()

        if self.games > 0:
            print(f"\nResults: {self.games} games")
            print(f"Avg: {self.total_score / self.games:.1f}")
            print(f"Best: {self.best}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--grid", "-g", type=int, default=config.GRID_COUNT,
                        help="Cells per side")
    parser.add_argument("--interval", "-i", type=int, default=config.TICK_INTERVAL_MS,
                        help="Milliseconds between snake steps")
    parser.add_argument("--cell-size", type=int, default=config.CELL_SIZE,
                        help="Cell size in pixels")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement")
    parser.add_argument("--auto-reset", action="store_true",
                        help="Start over immediately after a game ends")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        game = SnakeGame(grid_count=args.grid, tick_interval_ms=args.interval,
                         auto_reset=args.auto_reset, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    SnakeWindow(game, args.cell_size).play()


if __name__ == "__main__":
    main()
