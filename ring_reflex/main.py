"""ring-reflex - pygame host.

Click the white target, then the next one in ascending id order, as fast as
you can. The ring rotates and the targets pulse once the clock is running.

Controls:
  Click        Hit a target (target 1 starts the clock)
  Long-press   Hold >= 1s during a run to abandon it
  Space        Reshuffle (setup) / back to setup (finished)
  [ / ]        Fewer / more targets (setup)
  { / }        Slower / faster rotation (setup)
  C            Resolve the current target (cheat)
  Esc          Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
import time

import pygame

from ring_reflex.config import GameConfig
from ring_reflex.events import HostEvent, KeyEvent, PointerEvent, PointerKind, ResizeEvent
from ring_reflex.router import InputRouter
from ring_reflex.session import GameSession
from ring_reflex.ui import draw_frame, load_fonts
from ring_reflex.ui.constants import FPS, SCREEN_H, SCREEN_W

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    defaults = GameConfig()
    p = argparse.ArgumentParser(description="ring-reflex - rotating target reflex game")
    p.add_argument("--width", type=int, default=SCREEN_W, help=f"Window width (default: {SCREEN_W})")
    p.add_argument("--height", type=int, default=SCREEN_H, help=f"Window height (default: {SCREEN_H})")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    p.add_argument("--seed", type=int, default=None, help="Layout random seed (default: random)")
    p.add_argument(
        "--nodes",
        type=int,
        default=defaults.default_node_count,
        help=f"Starting target count ({defaults.min_node_count}-{defaults.max_node_count}, "
        f"default: {defaults.default_node_count})",
    )
    p.add_argument(
        "--speed",
        type=float,
        default=defaults.default_rotation_speed,
        help=f"Starting rotation in deg/s ({defaults.min_rotation_speed:g}-"
        f"{defaults.max_rotation_speed:g}, default: {defaults.default_rotation_speed:g})",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    args = p.parse_args(argv)
    args.width = max(200, args.width)
    args.height = max(200, args.height)
    args.fps = max(10, min(240, args.fps))
    args.nodes = defaults.clamp_node_count(args.nodes)
    args.speed = defaults.clamp_rotation_speed(args.speed)
    return args


def translate_event(event: pygame.event.Event, pressed: bool) -> list[HostEvent]:
    """Map one pygame event onto host events. A left-button release after a
    left-button press also yields a click."""
    if event.type == pygame.VIDEORESIZE:
        return [ResizeEvent(width=event.w, height=event.h)]
    if event.type == pygame.MOUSEMOTION:
        x, y = event.pos
        return [PointerEvent(PointerKind.MOVE, x, y, pygame.time.get_ticks())]
    if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        x, y = event.pos
        return [PointerEvent(PointerKind.DOWN, x, y, pygame.time.get_ticks())]
    if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        x, y = event.pos
        stamp = pygame.time.get_ticks()
        out = [PointerEvent(PointerKind.UP, x, y, stamp)]
        if pressed:
            out.append(PointerEvent(PointerKind.CLICK, x, y, stamp))
        return out
    if event.type == pygame.KEYDOWN and event.unicode:
        return [KeyEvent(key=event.unicode)]
    return []


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = GameConfig(
        default_node_count=args.nodes,
        default_rotation_speed=args.speed,
    )
    session = GameSession(config, seed=args.seed)
    router = InputRouter(session)
    logger.info("session seed %d", session.seed)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("ring-reflex")
    clock = pygame.time.Clock()
    fonts = load_fonts()

    router.handle(ResizeEvent(*screen.get_size()), time.monotonic())

    pressed = False
    running = True
    while running:
        clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
                continue

            for host_event in translate_event(event, pressed):
                router.handle(host_event, time.monotonic())

            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                pressed = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                pressed = False

        # --- Tick ---
        now = time.monotonic()
        router.update(now)
        session.refresh_poses()

        # --- Render ---
        draw_frame(screen, router, fonts, now)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
