from dataclasses import dataclass

import pygame

from .config import MOUSE_SENS, MOUSE_SENS_VELOCITY

# ---------- Input ----------
MOVE_KEYS = {
    pygame.K_w: "forward", pygame.K_UP: "forward",
    pygame.K_s: "back", pygame.K_DOWN: "back",
    pygame.K_a: "left", pygame.K_LEFT: "left",
    pygame.K_d: "right", pygame.K_RIGHT: "right",
}

COMMAND_KEYS = {
    pygame.K_r: "reset",
    pygame.K_t: "toggle_wall_color",
    pygame.K_v: "toggle_mode",
    pygame.K_q: "rotate_left",
    pygame.K_e: "rotate_right",
    pygame.K_ESCAPE: "quit",
}


@dataclass
class MovementState:
    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False

    def set(self, direction, held):
        if direction not in ("forward", "back", "left", "right"):
            raise ValueError(f"unknown movement direction {direction!r}")
        setattr(self, direction, bool(held))

    def any(self):
        return self.forward or self.back or self.left or self.right

    def clear(self):
        self.forward = self.back = self.left = self.right = False


def movement_for_key(key):
    return MOVE_KEYS.get(key)


def command_for_key(key):
    return COMMAND_KEYS.get(key)


class PointerTurn:
    """Horizontal pointer motion -> heading change in degrees.

    Fixed mode turns ``dx * sensitivity``. Velocity mode scales with how
    fast the pointer moved: ``sign(dx) * |dx| / dt_ms * sensitivity``.
    Motion events are collected with ``feed()`` and turned into one heading
    change per frame by ``flush()``; events drained in the same frame all
    share one timestamp.
    """

    def __init__(self, velocity=True, sensitivity=None):
        self.velocity = velocity
        if sensitivity is None:
            sensitivity = MOUSE_SENS_VELOCITY if velocity else MOUSE_SENS
        self.sensitivity = sensitivity
        self.prev_ms = None
        self.pending_dx = 0

    def feed(self, dx):
        self.pending_dx += dx

    def flush(self, now_ms):
        dx, self.pending_dx = self.pending_dx, 0
        return self.delta(dx, now_ms)

    def delta(self, dx, now_ms):
        prev, self.prev_ms = self.prev_ms, now_ms
        if not self.velocity:
            return dx * self.sensitivity
        if prev is None or dx == 0:
            return 0.0
        dt = now_ms - prev
        if dt <= 0:
            return 0.0
        sign = 1 if dx > 0 else -1
        return sign * abs(dx) / dt * self.sensitivity
