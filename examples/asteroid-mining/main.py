"""
Asteroid Mining
Interactive pygame front-end for asteroid_miner: fly the ship, hold the mouse
button to run the beam over the asteroid, and let the debris drift in.
"""

import logging
import sys

import pygame

from asteroid_miner import BeamLatch, Engine, FrameView, MiningConfig, move_vector
from asteroid_miner.config import FIELD_SIZE

# --- Configuration ---
WIDTH, HEIGHT = int(FIELD_SIZE[0]), int(FIELD_SIZE[1])
FPS = 60
TITLE = "Asteroid Mining Game"
MAX_DT = 0.1  # seconds; keeps a stalled frame from flinging debris

# Colors
BG_COLOR = (0, 0, 0)
SHIP_COLOR = (0, 0, 255)
ASTEROID_COLOR = (255, 0, 0)
BEAM_COLOR = (0, 255, 0)
DEBRIS_COLOR = (255, 255, 0)
HUD_COLOR = (255, 255, 255)


def read_move(keys) -> tuple[float, float]:
    return move_vector(
        keys[pygame.K_LEFT] or keys[pygame.K_a],
        keys[pygame.K_RIGHT] or keys[pygame.K_d],
        keys[pygame.K_UP] or keys[pygame.K_w],
        keys[pygame.K_DOWN] or keys[pygame.K_s],
    )


def draw(screen, font, view: FrameView) -> None:
    screen.fill(BG_COLOR)

    ax, ay = view.asteroid_position
    pygame.draw.circle(screen, ASTEROID_COLOR, (int(ax), int(ay)), int(view.asteroid_radius))

    if view.beam is not None:
        pygame.draw.line(screen, BEAM_COLOR, view.beam.origin, view.beam.target, 2)

    x, y = view.ship_top_left
    size = int(view.ship_size)
    pygame.draw.rect(screen, SHIP_COLOR, pygame.Rect(int(x), int(y), size, size))

    for dx, dy in view.debris:
        pygame.draw.circle(screen, DEBRIS_COLOR, (int(dx), int(dy)), 2)

    surf = font.render(f"Material: {view.resources}", True, HUD_COLOR)
    screen.blit(surf, (20, 20))


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("arial", 20)

    engine = Engine(MiningConfig(max_dt=MAX_DT))
    latch = BeamLatch()

    running = True
    while running:
        dt = pg_clock.tick(FPS) / 1000.0

        # --- Events, applied to the latch in arrival order ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                latch.press((float(event.pos[0]), float(event.pos[1])))
            elif event.type == pygame.MOUSEMOTION:
                latch.drag((float(event.pos[0]), float(event.pos[1])))
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                latch.release()

        # --- Update ---
        view = engine.step(latch.intent(read_move(pygame.key.get_pressed())), dt)

        # --- Draw ---
        draw(screen, font, view)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
