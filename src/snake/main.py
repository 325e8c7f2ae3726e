# main.py
import logging
import pygame # type: ignore

from .clock import Driver
from .config import WIDTH, HEIGHT, Config
from .controls import InputAdapter, Layout
from .game import new_game_state
from .render import Renderer
from .storage import JsonHighScoreStore

logger = logging.getLogger(__name__)


def main():
    cfg = Config.from_env()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    store = JsonHighScoreStore(cfg.high_score_path, cfg.high_score_key)
    state = new_game_state(store, cfg.grid_size, cfg.seed, cfg.food_attempts)
    logger.info("Starting game, high score %d", state.high_score)

    layout = Layout()
    driver = Driver(state, speed=cfg.initial_speed,
                    min_ms=cfg.min_tick_ms, max_ms=cfg.max_tick_ms)
    driver.sink = Renderer(screen, font, layout, speed_fn=lambda: driver.speed)
    controls = InputAdapter(state, driver, layout, cfg.swipe_threshold)

    running = True
    while running:
        # 1) input
        running = controls.handle_events()
        if not running:
            break

        # 2) update + render; ticks are gated on the driver's interval
        driver.frame(pygame.time.get_ticks())
        pygame.display.flip()

        # 3) yield to the event loop until the next frame
        clock.tick(cfg.fps)

    logger.info("Quit with high score %d", state.high_score)
    pygame.quit()

if __name__ == "__main__":
    main()
