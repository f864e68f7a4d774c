"""
Input Handler - Translates pygame keys to gameplay input.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Dict, List

import pygame

from vent_escape.gameplay.game import Game, GameEvent, GamePhase
from vent_escape.gameplay.controls import InputSnapshot


# pygame key code -> raw key name understood by KEY_BINDINGS
RAW_KEY_NAMES = {
    pygame.K_w: 'w',
    pygame.K_a: 'a',
    pygame.K_s: 's',
    pygame.K_d: 'd',
    pygame.K_UP: 'arrowup',
    pygame.K_DOWN: 'arrowdown',
    pygame.K_LEFT: 'arrowleft',
    pygame.K_RIGHT: 'arrowright',
    pygame.K_LSHIFT: 'shift',
    pygame.K_RSHIFT: 'shift',
}

START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
RESTART_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_r)


class InputHandler:
    """
    Handles keyboard input.

    The input handler:
    - Samples held keys into an InputSnapshot once per frame
    - Turns start/restart key presses into lifecycle commands
    """

    def __init__(self, game: Game):
        self.game = game

    def handle_key(self, key: int) -> List[GameEvent]:
        """
        Handle a single key press.
        Returns the events of any lifecycle command it triggered.
        """
        phase = self.game.phase
        if phase == GamePhase.NOT_STARTED and key in START_KEYS:
            return self.game.start()
        if phase == GamePhase.GAME_OVER and key in RESTART_KEYS:
            return self.game.restart()
        return []

    def snapshot(self) -> InputSnapshot:
        """Sample the currently held keys."""
        pressed = pygame.key.get_pressed()
        keys: Dict[str, bool] = {}
        for code, name in RAW_KEY_NAMES.items():
            keys[name] = keys.get(name, False) or bool(pressed[code])
        return InputSnapshot.from_keys(keys)
