"""
renderer.py: Draws a game snapshot with pygame. Holds no game logic.
"""

import pygame

from .data_models import GameConfig, GamePhase, GameSnapshot, ObstacleView, PlaneView

SKY_COLOR = (112, 197, 206)
GROUND_COLOR = (139, 195, 74)
BUILDING_COLOR = (91, 118, 154)
WINDOW_COLOR = (207, 201, 201)
PLANE_BODY_COLOR = (65, 140, 226)
PLANE_DETAIL_COLOR = (44, 106, 182)
COCKPIT_COLOR = (204, 204, 204)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BUTTON_COLOR = (231, 76, 60)

WINDOW_SIZE = 15
WINDOW_GAP = 10
WINDOW_PADDING = 5


class Renderer:
    """Renders the sky, buildings, plane, HUD and the game-over overlay."""

    def __init__(self, surface: pygame.Surface, config: GameConfig = None):
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.config = config or GameConfig()
        self.large_font = pygame.font.Font(None, 56)
        self.medium_font = pygame.font.Font(None, 34)
        self.font = pygame.font.Font(None, 24)

        w, h = self.config.screen_width, self.config.screen_height
        self.restart_button = pygame.Rect(0, 0, 140, 40)
        self.restart_button.center = (w // 2, h // 2 + 120)

        self.overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        self.overlay.fill((0, 0, 0, 178))

    def draw(self, snapshot: GameSnapshot):
        cfg = self.config
        screen = self.surface
        screen.fill(SKY_COLOR)
        pygame.draw.rect(screen, GROUND_COLOR,
                         (0, cfg.floor_y, cfg.screen_width, cfg.ground_height))

        for obs in snapshot.obstacles:
            self._draw_obstacle(obs)
        self._draw_plane(snapshot.plane)
        self._draw_hud(snapshot)

        if snapshot.is_game_over:
            self._draw_overlay(snapshot)

    def _draw_obstacle(self, obs: ObstacleView):
        screen = self.surface
        floor_y = self.config.floor_y
        pygame.draw.rect(screen, BUILDING_COLOR, (obs.x, 0, obs.width, obs.top_height))
        pygame.draw.rect(screen, BUILDING_COLOR, (obs.x, obs.bottom_y, obs.width, obs.bottom_height))

        columns = (obs.x + WINDOW_PADDING, obs.x + obs.width - WINDOW_PADDING - WINDOW_SIZE)
        step = WINDOW_SIZE + WINDOW_GAP
        for window_x in columns:
            for y in range(WINDOW_GAP, obs.top_height - WINDOW_SIZE, step):
                pygame.draw.rect(screen, WINDOW_COLOR, (window_x, y, WINDOW_SIZE, WINDOW_SIZE))
            for y in range(obs.bottom_y + WINDOW_GAP, floor_y - WINDOW_SIZE, step):
                pygame.draw.rect(screen, WINDOW_COLOR, (window_x, y, WINDOW_SIZE, WINDOW_SIZE))

    def _draw_plane(self, plane: PlaneView):
        # Drawn unrotated on a padded canvas, then tilted around its center
        pad = 20
        w, h = plane.width, plane.height
        canvas = pygame.Surface((w * 2 + pad, h + pad * 2), pygame.SRCALPHA)
        cx, cy = canvas.get_width() // 2, canvas.get_height() // 2

        body_h = int(h * 0.7)
        half_w, half_body_h = w // 2, body_h // 2
        pygame.draw.rect(canvas, PLANE_BODY_COLOR, (cx - half_w, cy - half_body_h, w, body_h))
        pygame.draw.circle(canvas, COCKPIT_COLOR, (cx + half_w - 5, cy), max(1, int(half_body_h * 0.7)))

        wing_span = int(w * 1.5)
        pygame.draw.rect(canvas, PLANE_DETAIL_COLOR, (cx - wing_span // 2 + 5, cy - 2, wing_span - 10, 5))

        tail_x = cx - half_w + 5
        pygame.draw.polygon(canvas, PLANE_DETAIL_COLOR, [
            (tail_x, cy - half_body_h),
            (tail_x, cy - half_body_h - 15),
            (tail_x - 5, cy - half_body_h),
        ])
        pygame.draw.rect(canvas, PLANE_DETAIL_COLOR, (tail_x - 15, cy + half_body_h - 3, 15, 3))

        rotated = pygame.transform.rotate(canvas, -plane.tilt)
        center = (plane.x + w / 2, plane.y + h / 2)
        self.surface.blit(rotated, rotated.get_rect(center=center))

    def _blit_centered(self, text: str, font: pygame.font.Font, y: int, color=WHITE):
        surf = font.render(text, True, color)
        self.surface.blit(surf, (self.config.screen_width // 2 - surf.get_width() // 2, y))

    def _draw_hud(self, snapshot: GameSnapshot):
        self._blit_centered(f"Score: {snapshot.score}", self.medium_font, 25)
        self._blit_centered(f"Overall Best: {snapshot.best_score}", self.font, 55)
        player = self.font.render(
            f"{snapshot.player_name} - Best: {snapshot.player_best_score}", True, WHITE)
        self.surface.blit(player, (10, self.config.screen_height - 24))

    def _draw_overlay(self, snapshot: GameSnapshot):
        mid = self.config.screen_height // 2
        self.surface.blit(self.overlay, (0, 0))

        if snapshot.phase is GamePhase.IDLE:
            self._blit_centered("FLAPPY PLANE", self.large_font, mid - 40)
        else:
            self._blit_centered("GAME OVER", self.large_font, mid - 40)
            self._blit_centered(f"Final Score: {snapshot.score}", self.medium_font, mid + 15)
        self._blit_centered("Click/Tap or Press Space to Restart", self.font, mid + 60)

        pygame.draw.rect(self.surface, BUTTON_COLOR, self.restart_button, border_radius=6)
        label = self.font.render("Restart", True, WHITE)
        self.surface.blit(label, label.get_rect(center=self.restart_button.center))
