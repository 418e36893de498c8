#camera.py

import pygame
import constants as C
import logger as log

class Camera:
    def __init__(self):
        self.x = C.WORLD_MIN_X + C.WORLD_WIDTH / 2
        self.y = C.WORLD_MIN_Y + C.WORLD_HEIGHT / 2
        self.zoom = C.CAMERA_DEFAULT_ZOOM
        log.log(f"Camera initialized at world coordinates ({self.x:.1f}, {self.y:.1f}) with zoom {self.zoom:.2f}")

    def world_to_screen(self, world_x, world_y):
        screen_x = (world_x - self.x) * self.zoom + C.SCREEN_WIDTH / 2
        screen_y = (world_y - self.y) * self.zoom + C.SCREEN_HEIGHT / 2
        return int(screen_x), int(screen_y)

    def screen_to_world(self, screen_x, screen_y):
        """Converts a point from screen coordinates to world coordinates."""
        world_x = (screen_x - C.SCREEN_WIDTH / 2) / self.zoom + self.x
        world_y = (screen_y - C.SCREEN_HEIGHT / 2) / self.zoom + self.y
        return world_x, world_y

    def scale(self, value):
        return int(value * self.zoom)

    def _clamp_axis(self, value, world_min, world_size, visible_half):
        # When the whole axis fits on screen, keep it centred.
        if visible_half * 2 >= world_size:
            return world_min + world_size / 2
        return min(max(value, world_min + visible_half), world_min + world_size - visible_half)

    def clamp(self):
        """Keeps the visible area inside the world boundaries."""
        visible_half_width = (C.SCREEN_WIDTH / 2) / self.zoom
        visible_half_height = (C.SCREEN_HEIGHT / 2) / self.zoom
        self.x = self._clamp_axis(self.x, C.WORLD_MIN_X, C.WORLD_WIDTH, visible_half_width)
        self.y = self._clamp_axis(self.y, C.WORLD_MIN_Y, C.WORLD_HEIGHT, visible_half_height)

    def pan(self, dx, dy):
        """Pans the camera by a screen-space offset."""
        self.x += dx / self.zoom
        self.y += dy / self.zoom
        self.clamp()

    def zoom_in(self):
        """Zooms in, clamping to a maximum zoom level."""
        self.zoom *= (1 + C.CAMERA_ZOOM_SPEED)
        self.zoom = min(self.zoom, C.CAMERA_MAX_ZOOM)
        self.clamp()

    def zoom_out(self):
        """Zooms out, clamping to a minimum zoom level."""
        self.zoom *= (1 - C.CAMERA_ZOOM_SPEED)
        self.zoom = max(self.zoom, C.CAMERA_MIN_ZOOM)
        self.clamp()

    def rect_to_screen(self, rect):
        """The pygame.Rect covering a world Rectangle on screen."""
        left, top = self.world_to_screen(rect.x1, rect.y1)
        right, bottom = self.world_to_screen(rect.x2, rect.y2)
        return pygame.Rect(left, top, max(right - left, 1), max(bottom - top, 1))

    def draw_world_border(self, screen, boundary):
        pygame.draw.rect(screen, C.COLOR_WHITE, self.rect_to_screen(boundary), 1)
