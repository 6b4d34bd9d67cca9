# tools/run_game.py
# Runtime window for GameLoop: menu, player input, adversary timer, HUD.
# - Every key press becomes an event on the loop's queue; the window never
#   touches GameState directly.
# - One advance_frame() per rendered frame; the scheduler counts those frames.

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame
import structlog

from coinmaze.config import DIFFICULTY_ORDER, GameOptions, Settings, load_settings
from coinmaze.engine.loop import (
    ChangeDifficulty,
    GameLoop,
    Move,
    OpenMenu,
    Regenerate,
    SetAdversaries,
    SetTraps,
    StartGame,
)
from coinmaze.engine.timing import TimingModel
from coinmaze.logs import setup_logging
from coinmaze.render.layers import compose_view
from coinmaze.render.tileset import Tileset
from coinmaze.ui.hud import coin_digits, hud_lines
from coinmaze.ui.keys import direction_for_key

log = structlog.get_logger("run_game")

HUD_H = 64
MENU_KEYS = {pygame.K_1: "easy", pygame.K_2: "medium", pygame.K_3: "hard", pygame.K_4: "extreme"}


def settings_from_args(args) -> Settings:
    if args.config:
        return load_settings(args.config)
    return Settings(
        difficulty=args.difficulty,
        options=GameOptions(traps_enabled=args.traps, adversaries_enabled=args.adversaries),
        seed=args.seed,
    )


def draw_menu(screen, font, loop: GameLoop) -> None:
    lines = [
        "Collect coins, avoid traps and wanderers, reach the yellow square.",
        "",
        "Difficulty (1-4): " + "  ".join(
            f"[{n}]" if n == loop.profile.name else n for n in DIFFICULTY_ORDER
        ),
        f"T  traps: {'ON' if loop.options.traps_enabled else 'off'}",
        f"N  wanderers: {'ON' if loop.options.adversaries_enabled else 'off'}",
        "",
        "Enter  start      Esc  quit",
    ]
    y = 24
    for ln in lines:
        img = font.render(ln, True, (30, 30, 30))
        screen.blit(img, (24, y))
        y += img.get_height() + 6


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="coinmaze runtime")
    parser.add_argument("--difficulty", choices=DIFFICULTY_ORDER, default="easy")
    parser.add_argument("--traps", action="store_true")
    parser.add_argument("--adversaries", action="store_true")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=str, default=None, help="TOML settings file ([game] table)")
    parser.add_argument("--tile", type=int, default=24, help="tile size in pixels")
    parser.add_argument("--fps", type=int, default=60)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    settings = settings_from_args(args)
    timing = TimingModel(frame_rate=args.fps, adversary_period_ticks=args.fps)
    loop = GameLoop.from_settings(settings, timing=timing)
    log.info("starting", difficulty=settings.difficulty, seed=settings.seed,
             traps=settings.options.traps_enabled, adversaries=settings.options.adversaries_enabled)

    if not pygame.get_init():
        pygame.init()
    if not pygame.font.get_init():
        pygame.font.init()

    tileset = Tileset(args.tile)
    font = pygame.font.SysFont(None, 22)
    side = loop.profile.rows * args.tile

    def resize():
        rows = loop.state.grid.rows if (loop.state and not loop.in_menu) else 15
        cols = loop.state.grid.cols if (loop.state and not loop.in_menu) else 25
        return pygame.display.set_mode((max(cols * args.tile, 560), rows * args.tile + HUD_H))

    screen = pygame.display.set_mode((max(side, 560), side + HUD_H))
    pygame.display.set_caption("coinmaze")
    clock = pygame.time.Clock()

    running = True
    last_shape = None
    while running:
        # --- Input -> events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif loop.in_menu:
                    if event.key in MENU_KEYS:
                        loop.post(ChangeDifficulty(MENU_KEYS[event.key]))
                    elif event.key == pygame.K_t:
                        loop.post(SetTraps(not loop.options.traps_enabled))
                    elif event.key == pygame.K_n:
                        loop.post(SetAdversaries(not loop.options.adversaries_enabled))
                    elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        loop.post(StartGame())
                else:
                    direction = direction_for_key(pygame.key.name(event.key))
                    if direction is not None:
                        loop.post(Move(direction))
                    elif event.key == pygame.K_r:
                        loop.post(Regenerate())
                    elif event.key == pygame.K_m:
                        loop.post(OpenMenu())
                    elif event.key in MENU_KEYS:
                        loop.post(ChangeDifficulty(MENU_KEYS[event.key]))

        # --- Timer + queued events ---
        loop.advance_frame()

        # --- Rendering ---
        shape = (loop.in_menu, loop.state.grid.rows if loop.state else 0)
        if shape != last_shape:
            screen = resize()
            last_shape = shape
        screen.fill((243, 244, 246))

        if loop.in_menu or loop.state is None:
            draw_menu(screen, font, loop)
        else:
            st = loop.state
            view = compose_view(st)
            for r, row in enumerate(view):
                for c, tid in enumerate(row):
                    screen.blit(tileset.get(tid), (c * args.tile, r * args.tile))

            y = st.grid.rows * args.tile + 6
            lines = hud_lines(st)
            lines[0] = f"{lines[0]} ({coin_digits(st.coin_count)})   R new maze   M menu   1-4 difficulty"
            for i, ln in enumerate(lines):
                color = (30, 30, 30)
                if i == 1:
                    color = (220, 38, 38) if st.lost else (22, 163, 74)
                screen.blit(font.render(ln, True, color), (8, y))
                y += 22

        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
