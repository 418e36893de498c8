#ui.py

import pygame
import constants as C

def draw_loading_screen(screen, font, progress, total):
    """Draws a progress bar and loading text."""
    screen.fill(C.COLOR_BLACK)

    # Render text
    text_surface = font.render(f"Indexing points... {progress:,}/{total:,}", True, C.COLOR_WHITE)
    text_rect = text_surface.get_rect(center=(C.SCREEN_WIDTH / 2, C.SCREEN_HEIGHT / 2 - C.UI_LOADING_TEXT_OFFSET_Y))
    screen.blit(text_surface, text_rect)

    bar_x = (C.SCREEN_WIDTH - C.UI_LOADING_BAR_WIDTH) / 2
    bar_y = (C.SCREEN_HEIGHT - C.UI_LOADING_BAR_HEIGHT) / 2
    progress_ratio = progress / total if total else 1.0

    pygame.draw.rect(screen, C.COLOR_LOADING_BAR_BG, (bar_x, bar_y, C.UI_LOADING_BAR_WIDTH, C.UI_LOADING_BAR_HEIGHT))
    pygame.draw.rect(screen, C.COLOR_LOADING_BAR_FG, (bar_x, bar_y, C.UI_LOADING_BAR_WIDTH * progress_ratio, C.UI_LOADING_BAR_HEIGHT))

    pygame.display.flip()

def draw_partition(screen, camera, quadtree):
    """Outlines every node of the tree."""
    for node in quadtree.iter_nodes():
        pygame.draw.rect(screen, C.COLOR_NODE_BORDER, camera.rect_to_screen(node.boundary), 1)

def draw_points(screen, camera, points, color):
    for point in points:
        pygame.draw.circle(screen, color, camera.world_to_screen(point.x, point.y), C.POINT_RADIUS_PIXELS)

def draw_query(screen, camera, query):
    pygame.draw.rect(screen, C.COLOR_QUERY_RECT, camera.rect_to_screen(query), 2)

def draw_hud(screen, font, lines):
    """Renders text lines top-left, one below the other."""
    y = C.UI_HUD_POS_Y
    for line in lines:
        surface = font.render(line, True, C.COLOR_WHITE)
        screen.blit(surface, (C.UI_HUD_POS_X, y))
        y += C.UI_HUD_LINE_SPACING
