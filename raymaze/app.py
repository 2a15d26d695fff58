"""pygame front end: window, event loop, HUD.

Everything interesting happens in ``World``; this module only turns
pygame events into movement flags, heading deltas and commands, and hands
each tick's results to the renderer.
"""
import argparse
import dataclasses
import sys

import pygame

from . import config as cfg
from .controls import PointerTurn, command_for_key, movement_for_key
from .render import PygameCanvas, draw_frame
from .world import World


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="raymaze", description="2D raycasting maze visualizer")
    parser.add_argument("--seed", type=int, help="maze seed (random if omitted)")
    parser.add_argument("--rows", type=int, default=cfg.MAZE_ROWS, help="maze rows (odd, >= 3)")
    parser.add_argument("--cols", type=int, default=cfg.MAZE_COLS, help="maze columns (odd, >= 3)")
    parser.add_argument("--rays", type=int, default=cfg.RAY_COUNT, help="rays per viewer")
    parser.add_argument("--fov", type=float, default=cfg.FOV_DEG, help="field of view in degrees (360 = all around)")
    parser.add_argument("--viewers", type=int, default=cfg.VIEWER_COUNT, help="number of viewers")
    parser.add_argument("--mode", choices=cfg.RENDER_MODES, default="top_down", help="initial render mode")
    parser.add_argument("--fixed-turn", action="store_true", help="turn by a fixed amount per pixel of mouse motion")
    parser.add_argument("--no-collide", action="store_true", help="let the viewer pass through walls")
    return parser.parse_args(argv)


def config_from_args(args):
    c = cfg.EngineConfig(
        rows=args.rows, cols=args.cols, ray_count=args.rays, fov=args.fov,
        viewer_count=args.viewers, mode=args.mode,
        velocity_turn=not args.fixed_turn, collide_walls=not args.no_collide,
    )
    if args.seed is not None:
        c = dataclasses.replace(c, seed=args.seed)
    return c.validate()


def draw_hud(screen, font, world, fps):
    info = f"[V] Mode: {world.mode}   [T] Wall color   [R] Reset   [Q/E] Rotate   [Esc] Quit"
    info2 = f"Maze: {world.config.rows}x{world.config.cols}  Segments: {len(world.segments)}  " \
        f"Rays: {world.config.ray_count}  FOV: {world.config.fov:g}°  FPS: {fps:.0f}"
    screen.blit(font.render(info, True, cfg.HUD_COLOR), (10, screen.get_height() - 38))
    screen.blit(font.render(info2, True, cfg.HUD_COLOR), (10, screen.get_height() - 20))


def handle_command(world, command):
    """Apply a discrete command. Returns False when the app should quit."""
    if command == "quit":
        return False
    if command == "reset":
        world.regenerate()
        print(f"New maze (seed {world.config.seed})")
    elif command == "toggle_wall_color":
        color = world.toggle_wall_color()
        print("Wall color:", tuple(color))
    elif command == "toggle_mode":
        print("Render mode:", world.cycle_mode())
    elif command == "rotate_left":
        world.rotate(-1)
    elif command == "rotate_right":
        world.rotate(1)
    return True


def run(config):
    pygame.init()
    screen = pygame.display.set_mode((config.screen_w, config.screen_h))
    pygame.display.set_caption("raymaze")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 18)
    canvas = PygameCanvas(screen)

    world = World(config)
    pointer = PointerTurn(velocity=config.velocity_turn,
                          sensitivity=config.mouse_sens_velocity if config.velocity_turn else config.mouse_sens)
    print(f"Maze {config.rows}x{config.cols}, seed {config.seed}, {len(world.segments)} segments")

    running = True
    while running:
        dt = clock.tick(cfg.FPS_CAP) / 1000.0

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type in (pygame.KEYDOWN, pygame.KEYUP):
                held = e.type == pygame.KEYDOWN
                direction = movement_for_key(e.key)
                if direction:
                    world.movement.set(direction, held)
                elif held:
                    command = command_for_key(e.key)
                    if command and not handle_command(world, command):
                        running = False
            elif e.type == pygame.MOUSEMOTION:
                pointer.feed(e.rel[0])

        # heading only; the fan is rebuilt once in world.step()
        world.turn(pointer.flush(pygame.time.get_ticks()))
        frame = world.step(dt)
        draw_frame(canvas, world, frame)
        draw_hud(screen, font, world, clock.get_fps())
        pygame.display.flip()

    pygame.quit()


def main(argv=None):
    run(config_from_args(parse_args(argv)))
    sys.exit()


if __name__ == "__main__":
    main()
