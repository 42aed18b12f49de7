"""
Игра "Змейка" в окне pygame.

Использование:
    python play.py

Управление:
    W/A/S/D или стрелки - направление
    ESC или SPACE       - пауза / продолжить / новая игра после проигрыша
    Q                   - выход
"""
import pygame

from game import GameContext, GameState
from config import (WIDTH, HEIGHT, GRID_SIZE, PANEL_WIDTH, FPS, SNAKE, HEAD, FOOD,
                    PANEL, TEXT_COLOR, PLAYING_BACKGROUND, PAUSED_BACKGROUND,
                    OVER_BACKGROUND)


BACKGROUNDS = {
    GameState.PLAYING: PLAYING_BACKGROUND,
    GameState.PAUSED: PAUSED_BACKGROUND,
    GameState.OVER: OVER_BACKGROUND,
}

KEY_BINDINGS = {
    pygame.K_w: GameContext.move_up,
    pygame.K_UP: GameContext.move_up,
    pygame.K_s: GameContext.move_down,
    pygame.K_DOWN: GameContext.move_down,
    pygame.K_a: GameContext.move_left,
    pygame.K_LEFT: GameContext.move_left,
    pygame.K_d: GameContext.move_right,
    pygame.K_RIGHT: GameContext.move_right,
    pygame.K_ESCAPE: GameContext.toggle_pause,
    pygame.K_SPACE: GameContext.toggle_pause,
}

QUIT_KEYS = {pygame.K_q}


def dispatch_key(context, key):
    """Применить нажатую клавишу к игре. False, если клавиша не назначена."""
    action = KEY_BINDINGS.get(key)
    if action is None:
        return False
    action(context)
    return True


class TickPacer:
    """
    Отделяет частоту кадров от частоты шагов змейки:
    шаг делается раз в `speed` кадров.
    """

    def __init__(self):
        self.frame_counter = 0

    def frame(self, speed):
        self.frame_counter += 1
        if self.frame_counter % speed == 0:
            self.frame_counter = 0
            return True
        return False


class SnakePlayer:
    def __init__(self, context):
        pygame.init()

        self.context = context
        self.screen = pygame.display.set_mode((WIDTH + PANEL_WIDTH, HEIGHT))
        pygame.display.set_caption('snaek')
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont('arial', 18)
        self.pacer = TickPacer()

        self.games = 0
        self.best = 0

    def draw_dot(self, point, color):
        x, y = point
        rect = pygame.Rect(x * GRID_SIZE, y * GRID_SIZE, GRID_SIZE, GRID_SIZE)
        pygame.draw.rect(self.screen, color, rect)

    def draw(self, snapshot):
        self.screen.fill(BACKGROUNDS[snapshot.state])

        # Змейка (голова ярче)
        for i, point in enumerate(snapshot.player_position):
            self.draw_dot(point, HEAD if i == 0 else SNAKE)

        # Еда
        if snapshot.food is not None:
            self.draw_dot(snapshot.food, FOOD)

        self.draw_stats(snapshot)
        pygame.display.flip()

    def draw_stats(self, snapshot):
        panel = pygame.Rect(WIDTH, 0, PANEL_WIDTH, HEIGHT)
        pygame.draw.rect(self.screen, PANEL, panel)

        if snapshot.won:
            status = "WIN!"
        else:
            status = snapshot.state.value.capitalize()

        stats = [
            f"Score: {snapshot.score}",
            f"Length: {len(snapshot.player_position)}",
            f"Speed: {snapshot.speed}",
            f"State: {status}",
            "",
            f"Games: {self.games}",
            f"Best: {self.best}",
            "",
            "Controls:",
            "WASD / arrows Move",
            "ESC / SPACE Pause",
            "Q Quit",
        ]

        for i, text in enumerate(stats):
            surf = self.font.render(text, True, TEXT_COLOR)
            self.screen.blit(surf, (WIDTH + 10, 20 + i * 25))

    def handle_events(self):
        """Обработка событий. False = выход."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key in QUIT_KEYS:
                    return False
                dispatch_key(self.context, event.key)
        return True

    def step(self):
        """Шаг змейки, если пора. Считает законченные игры."""
        was_over = self.context.state == GameState.OVER
        self.context.next_tick()

        if not was_over and self.context.state == GameState.OVER:
            self.games += 1
            score = self.context.score
            self.best = max(self.best, score)
            if self.context.is_win():
                print(f"Game {self.games}: WIN! Score {score}")
            else:
                print(f"Game {self.games}: Score {score}, "
                      f"length {self.context.length}")

    def play(self):
        print("Press ESC or SPACE to start")
        running = True

        while running:
            running = self.handle_events()
            if not running:
                break

            self.clock.tick(FPS)

            if self.pacer.frame(self.context.speed):
                self.step()

            self.draw(self.context.snapshot())

        pygame.quit()

        if self.games > 0:
            print(f"\nResults: {self.games} games")
            print(f"Best: {self.best}")


def main():
    context = GameContext()
    player = SnakePlayer(context)
    player.play()


if __name__ == "__main__":
    main()
