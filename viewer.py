#viewer.py

import pygame
import constants as C
import logger as log
from baseline import naive_search
from benchmark import same_points
from camera import Camera
from point_generator import generate_points, make_rng
from quadtree import Point, Rectangle, create_quad_tree, world_boundary
from stopwatch import Stopwatch, format_duration
from ui import draw_loading_screen, draw_partition, draw_points, draw_query, draw_hud


class QuerySelection:
    """
    Tracks the query window the user drags out and the result of searching
    it. Works purely in world coordinates, so it needs no display.
    """
    def __init__(self):
        self.anchor = None
        self.corner = None
        self.query = None
        self.matches = []
        self.naive_count = 0
        self.quadtree_seconds = 0.0
        self.naive_seconds = 0.0
        self.results_match = True

    @staticmethod
    def is_drag(start_screen, end_screen):
        dx = abs(end_screen[0] - start_screen[0])
        dy = abs(end_screen[1] - start_screen[1])
        return max(dx, dy) >= C.MIN_QUERY_DRAG_PIXELS

    @property
    def dragging(self):
        return self.anchor is not None

    def begin(self, world_pos):
        self.anchor = world_pos
        self.corner = world_pos

    def update(self, world_pos):
        if self.dragging:
            self.corner = world_pos

    def pending_region(self):
        """The window currently being dragged, or None."""
        if not self.dragging:
            return None
        return Rectangle(self.anchor[0], self.anchor[1], self.corner[0], self.corner[1])

    def cancel(self):
        self.anchor = None
        self.corner = None

    def clear(self):
        self.cancel()
        self.query = None
        self.matches = []
        self.naive_count = 0
        self.results_match = True

    def finish(self, world_pos, quadtree, points):
        """Closes the drag and runs the window through both search methods."""
        if not self.dragging:
            return None
        self.corner = world_pos
        self.query = self.pending_region()
        self.cancel()
        return self.run(quadtree, points)

    def run(self, quadtree, points):
        if self.query is None:
            return None

        with Stopwatch() as timer:
            self.matches = quadtree.search(self.query)
        self.quadtree_seconds = timer.elapsed_seconds

        with Stopwatch() as timer:
            naive_found = naive_search(points, self.query)
        self.naive_seconds = timer.elapsed_seconds
        self.naive_count = len(naive_found)

        self.results_match = same_points(self.matches, naive_found)
        log.log(f"Query {self.query!r}: quadtree {len(self.matches):,} points in {format_duration(self.quadtree_seconds)}, "
                f"naive {self.naive_count:,} in {format_duration(self.naive_seconds)}")
        if not self.results_match:
            log.log("ERROR: Quadtree and naive search disagree for this query.")
        return self.matches

    def hud_lines(self):
        if self.query is None:
            return ["Drag with the left mouse button to search."]
        lines = [
            f"Quadtree: {len(self.matches):,} found in {format_duration(self.quadtree_seconds)}",
            f"Naive: {self.naive_count:,} found in {format_duration(self.naive_seconds)}",
        ]
        if not self.results_match:
            lines.append("MISMATCH between quadtree and naive results!")
        return lines


class Viewer:
    """Interactive window showing the partition and live range queries."""
    def __init__(self, point_count=None, capacity=None, distribution=None, seed=None):
        self.point_count = C.VIEWER_POINT_COUNT if point_count is None else point_count
        self.capacity = C.VIEWER_CAPACITY if capacity is None else capacity
        self.distribution = distribution or C.DEFAULT_POINT_DISTRIBUTION
        self.rng = make_rng(seed)
        self.boundary = world_boundary()
        self.camera = Camera()
        self.selection = QuerySelection()
        self.show_partition = True
        self.quadtree = create_quad_tree(self.boundary, self.capacity)
        self.points = []
        self.drag_start_screen = None
        self.node_count = 1
        self.tree_depth = 0

    def populate(self, screen, font):
        """Generates fresh points and inserts them, drawing a loading bar as it goes."""
        log.log(f"Populating viewer with {self.point_count:,} {self.distribution} points (capacity {self.capacity})...")
        self.quadtree = create_quad_tree(self.boundary, self.capacity)
        self.points = generate_points(self.distribution, self.point_count, self.boundary, self.rng)
        for done, point in enumerate(self.points, start=1):
            self.quadtree.insert(point)
            if done % C.UI_LOADING_BAR_UPDATE_INTERVAL == 0 or done == self.point_count:
                pygame.event.pump()
                draw_loading_screen(screen, font, done, self.point_count)
        self.refresh_stats()
        log.log(f"Indexed {len(self.quadtree):,} points in {self.node_count:,} nodes (depth {self.tree_depth}).")
        self.selection.run(self.quadtree, self.points)

    def refresh_stats(self):
        """Recounts nodes and depth; the HUD reads these every frame."""
        self.node_count = self.quadtree.node_count()
        self.tree_depth = self.quadtree.max_depth()

    def add_point(self, screen_pos):
        world_x, world_y = self.camera.screen_to_world(*screen_pos)
        point = Point(world_x, world_y)
        if not self.quadtree.insert(point):
            log.log(f"Point ({world_x:.2f}, {world_y:.2f}) lies outside {self.boundary!r}; not inserted.")
            return False
        self.points.append(point)
        self.refresh_stats()
        log.log(f"Inserted point ({world_x:.2f}, {world_y:.2f}).")
        # Keep the highlighted result current.
        self.selection.run(self.quadtree, self.points)
        return True

    def handle_event(self, event, screen, font):
        """Returns False once the window should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                self.drag_start_screen = event.pos
                self.selection.begin(self.camera.screen_to_world(*event.pos))
            elif event.button == 3: self.add_point(event.pos)
            elif event.button == 4: self.camera.zoom_in()
            elif event.button == 5: self.camera.zoom_out()
        if event.type == pygame.MOUSEMOTION and self.selection.dragging:
            self.selection.update(self.camera.screen_to_world(*event.pos))
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self.selection.dragging:
            if self.drag_start_screen and QuerySelection.is_drag(self.drag_start_screen, event.pos):
                self.selection.finish(self.camera.screen_to_world(*event.pos), self.quadtree, self.points)
            else:
                self.selection.cancel()
            self.drag_start_screen = None
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_g: self.show_partition = not self.show_partition
            if event.key == pygame.K_c: self.selection.clear()
            if event.key == pygame.K_r: self.populate(screen, font)
            if event.key == pygame.K_ESCAPE: return False
        return True

    def draw(self, screen, font):
        screen.fill(C.COLOR_VOID)
        if self.show_partition:
            draw_partition(screen, self.camera, self.quadtree)
        self.camera.draw_world_border(screen, self.boundary)
        draw_points(screen, self.camera, self.points, C.COLOR_POINT)
        draw_points(screen, self.camera, self.selection.matches, C.COLOR_POINT_MATCH)

        query = self.selection.pending_region() or self.selection.query
        if query is not None:
            draw_query(screen, self.camera, query)

        lines = [f"Points: {len(self.points):,} | Nodes: {self.node_count:,} | Depth: {self.tree_depth}"]
        lines.extend(self.selection.hud_lines())
        draw_hud(screen, font, lines)


def initialize_viewer():
    log.log("Attempting to initialize Pygame...")
    pygame.init()
    log.log(f"Creating display surface with width: {C.SCREEN_WIDTH} and height: {C.SCREEN_HEIGHT}")
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    pygame.display.set_caption("Quadtree Range Search")
    font = pygame.font.Font(None, C.UI_FONT_SIZE)
    log.log("Display surface and font created.")
    return screen, font


def run_viewer(point_count=None, capacity=None, distribution=None, seed=None):
    screen, font = initialize_viewer()
    clock = pygame.time.Clock()
    viewer = Viewer(point_count, capacity, distribution, seed)
    viewer.populate(screen, font)

    log.log("Starting viewer loop...")
    log.log("CONTROLS: [LMB drag] Search, [RMB] Insert point, [G] Grid, [C] Clear, [R] Regenerate, [Arrows/Wheel] Pan/Zoom.")

    running = True
    while running:
        clock.tick(C.CLOCK_TICK_RATE)

        for event in pygame.event.get():
            if not viewer.handle_event(event, screen, font):
                running = False

        keys = pygame.key.get_pressed()
        if keys[pygame.K_LEFT]: viewer.camera.pan(-C.CAMERA_PANSPEED_PIXELS, 0)
        if keys[pygame.K_RIGHT]: viewer.camera.pan(C.CAMERA_PANSPEED_PIXELS, 0)
        if keys[pygame.K_UP]: viewer.camera.pan(0, -C.CAMERA_PANSPEED_PIXELS)
        if keys[pygame.K_DOWN]: viewer.camera.pan(0, C.CAMERA_PANSPEED_PIXELS)

        viewer.draw(screen, font)
        pygame.display.flip()

    log.log("Viewer loop ended.")
    log.log("Quitting Pygame...")
    pygame.quit()
