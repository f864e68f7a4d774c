"""
Renderer - Reads gameplay state and draws it with pygame.
This is a THIN ADAPTER - no game logic here.
"""
import math
from typing import List, Optional, Tuple

import pygame

from vent_escape.gameplay.game import Game, GameEvent, GamePhase, MessageEvent
from vent_escape.gameplay.entities import Monster, OxygenTank, Player
from vent_escape.gameplay.vents import Wall
from vent_escape.gameplay.constants import CANVAS_WIDTH, CANVAS_HEIGHT, LOW_OXYGEN_THRESHOLD


# Visual constants
SCREEN_WIDTH = CANVAS_WIDTH
SCREEN_HEIGHT = CANVAS_HEIGHT
WALL_CULL_MARGIN = 100
WALL_STRIPE_SPACING = 20
FLASHLIGHT_LENGTH = 200
FLASHLIGHT_HALF_WIDTH = 50
MONSTER_DRAW_DISTANCE = 1000
MONSTER_FADE_DISTANCE = 800
VIGNETTE_INNER_RADIUS = 200

# Colors
COLOR_BACKGROUND = (10, 10, 10)
COLOR_WALL = (26, 26, 26)
COLOR_WALL_BORDER = (51, 51, 51)
COLOR_WALL_STRIPE = (37, 37, 37)
COLOR_PLAYER = (68, 136, 255)
COLOR_PLAYER_HIGHLIGHT = (136, 187, 255)
COLOR_FLASHLIGHT = (255, 255, 150)
COLOR_MONSTER_BODY = (51, 0, 0)
COLOR_MONSTER_RED = (255, 0, 0)
COLOR_TANK = (0, 255, 136)
COLOR_TANK_HIGHLIGHT = (136, 255, 204)
COLOR_HUD = (200, 200, 200)
COLOR_OXYGEN_LOW = (255, 60, 60)
COLOR_TITLE = (255, 80, 80)

Point = Tuple[float, float]


def quadratic_curve(p0: Point, p1: Point, p2: Point, steps: int = 8) -> List[Point]:
    """Sample a quadratic Bezier curve into a polyline."""
    points = []
    for i in range(steps + 1):
        t = i / steps
        u = 1 - t
        points.append((
            u * u * p0[0] + 2 * u * t * p1[0] + t * t * p2[0],
            u * u * p0[1] + 2 * u * t * p1[1] + t * t * p2[1],
        ))
    return points


class Renderer:
    """
    Renders game state to a pygame surface.

    This class reads from Game but never changes the simulation. The only
    thing it advances is the cosmetic pulse of the oxygen tanks it draws.
    """

    def __init__(self, game: Game, screen: pygame.Surface, show_fps: bool = False):
        self.game = game
        self.screen = screen
        self.show_fps = show_fps

        self.font = pygame.font.SysFont("Arial", 20)
        self.small_font = pygame.font.SysFont("Arial", 10, bold=True)
        self.big_font = pygame.font.SysFont("Arial", 54, bold=True)

        # Transient message (text, expiry in pygame ticks)
        self.message: Optional[str] = None
        self.message_until: int = 0

        self._vignette = self._build_vignette()

    # =========================================================================
    # NOTIFICATIONS
    # =========================================================================

    def handle_events(self, events: List[GameEvent]) -> None:
        """Show message events; everything else is read straight from the game."""
        for event in events:
            if isinstance(event, MessageEvent):
                self.show_message(event.text, event.duration_ms)

    def show_message(self, text: str, duration_ms: int) -> None:
        self.message = text
        self.message_until = pygame.time.get_ticks() + duration_ms

    # =========================================================================
    # FRAME
    # =========================================================================

    def render(self, fps: Optional[float] = None) -> None:
        """Render entire game state."""
        self.screen.fill(COLOR_BACKGROUND)

        if self.game.phase == GamePhase.NOT_STARTED:
            self.render_start_screen()
            return

        self.render_vents()
        for tank in self.game.tank_spawner:
            self.render_tank(tank)
        self.render_particles()
        self.render_player(self.game.player)
        if self.game.distance_to_monster < MONSTER_DRAW_DISTANCE:
            self.render_monster(self.game.monster, self.game.distance_to_monster)

        self.screen.blit(self._vignette, (0, 0))
        self.render_flash()
        self.render_hud(fps)

        if self.game.phase == GamePhase.GAME_OVER:
            self.render_game_over()

    def to_screen(self, x: float, y: float) -> Tuple[int, int]:
        camera = self.game.state.camera
        return int(x - camera.x), int(y - camera.y)

    # =========================================================================
    # WORLD
    # =========================================================================

    def render_vents(self) -> None:
        camera = self.game.state.camera
        for wall in self.game.vents.walls_in_view(camera.x, camera.x + SCREEN_WIDTH, WALL_CULL_MARGIN):
            self._render_wall(wall)

    def _render_wall(self, wall: Wall) -> None:
        sx, sy = self.to_screen(wall.x, wall.y)
        rect = pygame.Rect(sx, sy, int(wall.width), int(wall.height))
        pygame.draw.rect(self.screen, COLOR_WALL, rect)

        # Grid pattern
        for i in range(0, int(wall.width), WALL_STRIPE_SPACING):
            pygame.draw.line(self.screen, COLOR_WALL_STRIPE, (sx + i, sy), (sx + i, sy + rect.height))

        pygame.draw.rect(self.screen, COLOR_WALL_BORDER, rect, 2)

    def render_tank(self, tank: OxygenTank) -> None:
        pulse_size = math.sin(tank.advance_pulse()) * 3
        cx, cy = self.to_screen(tank.x, tank.y)

        glow_radius = int(tank.size + pulse_size + 10)
        self._blit_glow((cx, cy), glow_radius, COLOR_TANK, 128)

        half = tank.size / 2
        body = pygame.Rect(int(cx - half), int(cy - half), int(tank.size), int(tank.size))
        pygame.draw.rect(self.screen, COLOR_TANK, body)
        highlight = pygame.Rect(body.x, body.y, int(tank.size / 3), int(tank.size / 3))
        pygame.draw.rect(self.screen, COLOR_TANK_HIGHLIGHT, highlight)

        label = self.small_font.render("O2", True, (0, 0, 0))
        self.screen.blit(label, label.get_rect(center=(cx, cy + 1)))

    def render_particles(self) -> None:
        for particle in self.game.particle_system:
            size = max(1, int(particle.size))
            surf = pygame.Surface((size, size), pygame.SRCALPHA)
            alpha = int(max(0.0, min(1.0, particle.life)) * 255)
            surf.fill((*particle.color, alpha))
            sx, sy = self.to_screen(particle.position.x - size / 2, particle.position.y - size / 2)
            self.screen.blit(surf, (sx, sy))

    def render_player(self, player: Player) -> None:
        cx, cy = self.to_screen(player.x, player.y)
        self._render_flashlight((cx, cy), player.facing_angle)

        half = player.size / 2
        body = pygame.Rect(int(cx - half), int(cy - half), int(player.size), int(player.size))
        pygame.draw.rect(self.screen, COLOR_PLAYER, body)
        pygame.draw.rect(self.screen, COLOR_PLAYER_HIGHLIGHT,
                         pygame.Rect(body.x, body.y, int(half), int(half)))

    def _render_flashlight(self, origin: Tuple[int, int], angle: float) -> None:
        """A cone that fades out along its length, drawn as nested triangles."""
        extent = FLASHLIGHT_LENGTH + FLASHLIGHT_HALF_WIDTH
        layer = pygame.Surface((extent * 2, extent * 2), pygame.SRCALPHA)
        cos_a, sin_a = math.cos(angle), math.sin(angle)

        def rotate(px: float, py: float) -> Point:
            return (extent + px * cos_a - py * sin_a, extent + px * sin_a + py * cos_a)

        steps = 6
        for i in range(steps, 0, -1):
            reach = FLASHLIGHT_LENGTH * i / steps
            spread = FLASHLIGHT_HALF_WIDTH * i / steps
            alpha = int(76 / steps)
            points = [rotate(0, 0), rotate(reach, -spread), rotate(reach, spread)]
            pygame.draw.polygon(layer, (*COLOR_FLASHLIGHT, alpha), points)
            self.screen.blit(layer, (origin[0] - extent, origin[1] - extent))
            layer.fill((0, 0, 0, 0))

    def render_monster(self, monster: Monster, distance: float) -> None:
        alpha = max(0.0, min(1.0, 1 - distance / MONSTER_FADE_DISTANCE))
        if alpha <= 0:
            return

        extent = int(monster.size * 2 + 40)
        layer = pygame.Surface((extent * 2, extent * 2), pygame.SRCALPHA)
        center = (extent, extent)

        # Glow
        for radius in range(int(monster.size * 2), 0, -4):
            glow_alpha = int(76 * (1 - radius / (monster.size * 2)))
            pygame.draw.circle(layer, (*COLOR_MONSTER_RED, glow_alpha), center, radius)

        # Tentacles
        for tentacle in monster.tentacles:
            wave = tentacle.wave_offset()
            cos_a, sin_a = math.cos(tentacle.angle), math.sin(tentacle.angle)
            end = (center[0] + cos_a * (tentacle.length + wave), center[1] + sin_a * (tentacle.length + wave))
            control = (center[0] + cos_a * tentacle.length / 2, center[1] + sin_a * tentacle.length / 2 + wave)
            pygame.draw.lines(layer, COLOR_MONSTER_RED, False, quadratic_curve(center, control, end), 3)

        # Body and eyes
        pygame.draw.circle(layer, COLOR_MONSTER_BODY, center, int(monster.size / 2))
        pygame.draw.circle(layer, COLOR_MONSTER_RED, (center[0] - 6, center[1] - 4), 3)
        pygame.draw.circle(layer, COLOR_MONSTER_RED, (center[0] + 6, center[1] - 4), 3)

        layer.set_alpha(int(alpha * 255))
        sx, sy = self.to_screen(monster.x, monster.y)
        self.screen.blit(layer, (sx - extent, sy - extent))

    def _blit_glow(self, center: Tuple[int, int], radius: int, color: Tuple[int, int, int],
                   max_alpha: int) -> None:
        """Radial glow: transparent at the rim, max_alpha in the middle."""
        if radius <= 0:
            return
        surf = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        for r in range(radius, 0, -2):
            alpha = int(max_alpha * (1 - r / radius))
            pygame.draw.circle(surf, (*color, alpha), (radius, radius), r)
        self.screen.blit(surf, (center[0] - radius, center[1] - radius))

    # =========================================================================
    # SCREEN OVERLAYS
    # =========================================================================

    def _build_vignette(self) -> pygame.Surface:
        surf = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        surf.fill((0, 0, 0, 204))
        center = (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
        outer = int(SCREEN_WIDTH / 1.5)
        for radius in range(outer, 0, -8):
            if radius <= VIGNETTE_INNER_RADIUS:
                alpha = 0
            else:
                alpha = int(204 * (radius - VIGNETTE_INNER_RADIUS) / (outer - VIGNETTE_INNER_RADIUS))
            pygame.draw.circle(surf, (0, 0, 0, alpha), center, radius)
        return surf

    def render_flash(self) -> None:
        intensity = self.game.state.flash_intensity
        if intensity <= 0:
            return
        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill((255, 0, 0, int(intensity * 255)))
        self.screen.blit(overlay, (0, 0))

    def render_hud(self, fps: Optional[float] = None) -> None:
        state = self.game.state

        # Oxygen bar
        bar = pygame.Rect(20, 20, 200, 16)
        pygame.draw.rect(self.screen, COLOR_HUD, bar, 1)
        fill_color = COLOR_OXYGEN_LOW if state.oxygen < LOW_OXYGEN_THRESHOLD else COLOR_TANK
        fill_width = int((bar.width - 4) * self.game.get_oxygen_ratio())
        if fill_width > 0:
            pygame.draw.rect(self.screen, fill_color, pygame.Rect(bar.x + 2, bar.y + 2, fill_width, bar.height - 4))
        self._blit_text(self.font, "O2", COLOR_HUD, topleft=(bar.right + 8, bar.y - 3))

        self._blit_text(self.font, f"Distance: {state.distance_meters}m", COLOR_HUD, topleft=(20, 44))

        if self.show_fps and fps is not None:
            self._blit_text(self.font, f"{fps:.0f} fps", COLOR_HUD, topright=(SCREEN_WIDTH - 20, 20))

        if self.message and pygame.time.get_ticks() < self.message_until:
            self._blit_text(self.font, self.message, COLOR_HUD, center=(SCREEN_WIDTH // 2, 80))

    def render_start_screen(self) -> None:
        self._blit_text(self.big_font, "VENT ESCAPE", COLOR_TITLE, center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 - 60))
        lines = [
            "WASD / arrows to crawl, SHIFT to sprint (burns oxygen faster)",
            "Grab oxygen tanks. Don't let it catch you.",
            "Press ENTER to start",
        ]
        for i, line in enumerate(lines):
            self._blit_text(self.font, line, COLOR_HUD, center=(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2 + 10 + i * 30))

    def render_game_over(self) -> None:
        overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 170))
        self.screen.blit(overlay, (0, 0))

        mid_x, mid_y = SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2
        self._blit_text(self.big_font, self.game.game_over_message or "", COLOR_TITLE, center=(mid_x, mid_y - 50))
        self._blit_text(self.font, f"You traveled {self.game.state.distance_meters} meters", COLOR_HUD,
                        center=(mid_x, mid_y + 10))
        self._blit_text(self.font, "Press R to restart", COLOR_HUD, center=(mid_x, mid_y + 45))

    def _blit_text(self, font: pygame.font.Font, text: str, color: Tuple[int, int, int], **anchor) -> None:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(**anchor))
