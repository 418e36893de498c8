# constants.py

# =============================================================================
# --- QUADTREE SETTINGS ---
# =============================================================================
QUADTREE_CAPACITY = 100 # Points a leaf holds before it subdivides into 4 children
QUADTREE_MAX_DEPTH = 32 # Leaves at this depth never subdivide (coincident points would recurse forever)

# =============================================================================
# --- WORLD BOUNDS ---
# =============================================================================
# Lower and upper bounds for x and y coordinates of the indexed area.
WORLD_MIN_X = 0.0
WORLD_MAX_X = 100.0
WORLD_MIN_Y = 0.0
WORLD_MAX_Y = 100.0
WORLD_WIDTH = WORLD_MAX_X - WORLD_MIN_X
WORLD_HEIGHT = WORLD_MAX_Y - WORLD_MIN_Y

# =============================================================================
# --- POINT GENERATION ---
# =============================================================================
POINT_DISTRIBUTIONS = ("uniform", "clustered", "noise")
DEFAULT_POINT_DISTRIBUTION = "uniform"
CLUSTER_COUNT = 8
CLUSTER_SPREAD_FRACTION = 0.05 # Std deviation of a cluster as a fraction of the world width
NOISE_SCALE = 25.0 # World units per noise cell
NOISE_OCTAVES = 4
NOISE_PERSISTENCE = 0.5
NOISE_LACUNARITY = 2.0
NOISE_DENSITY_EXPONENT = 3.0 # Sharpens the density field so dense areas stand out
NOISE_DENSITY_FLOOR = 0.02 # Minimum acceptance probability, keeps sampling from stalling
NOISE_SAMPLE_BATCH = 4096 # Candidates drawn per rejection-sampling round

# =============================================================================
# --- BENCHMARK SETTINGS ---
# =============================================================================
BENCHMARK_TOTAL_POINTS = 1_000_000
BENCHMARK_SERIES_SIZES = (1_000, 10_000, 100_000, 1_000_000)
# The search window, bounded by 10.0 and 15.0 on both axes.
BENCHMARK_QUERY_X1 = 10.0
BENCHMARK_QUERY_Y1 = 10.0
BENCHMARK_QUERY_X2 = 15.0
BENCHMARK_QUERY_Y2 = 15.0
PROFILER_PRINT_LINE_COUNT = 20
MICROSECONDS_PER_SECOND = 1_000_000

# =============================================================================
# --- GRAPHS ---
# =============================================================================
GRAPH_FIGURE_SIZE = (12, 7)
GRAPH_OUTPUT_DIR = "."
GRAPH_SEARCH_TIME_FILE = "search_time_graph.png"
GRAPH_SPEEDUP_FILE = "speedup_graph.png"
GRAPH_BUILD_TIME_FILE = "build_time_graph.png"

# =============================================================================
# --- VIEWER, CAMERA & COLORS ---
# =============================================================================
CLOCK_TICK_RATE = 60
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 800
VIEWER_POINT_COUNT = 2000
VIEWER_CAPACITY = 4 # Small so the partition is visible
CAMERA_PANSPEED_PIXELS = 15
CAMERA_ZOOM_SPEED = 0.1
CAMERA_MAX_ZOOM = 400.0
CAMERA_MIN_ZOOM = 4.0
CAMERA_DEFAULT_ZOOM = 7.5 # Screen pixels per world unit
MIN_QUERY_DRAG_PIXELS = 3 # Shorter drags are treated as clicks
UI_LOADING_BAR_UPDATE_INTERVAL = 100

COLOR_WHITE = (255, 255, 255)
COLOR_BLACK = (0, 0, 0); COLOR_VOID = (10, 0, 20)
COLOR_LOADING_BAR_BG = (50, 50, 50); COLOR_LOADING_BAR_FG = (100, 200, 100)
COLOR_NODE_BORDER = (60, 90, 60)
COLOR_POINT = (120, 160, 255)
COLOR_POINT_MATCH = (255, 90, 60)
COLOR_QUERY_RECT = (255, 220, 0)

POINT_RADIUS_PIXELS = 2

UI_FONT_SIZE = 28
UI_HUD_POS_X = 10
UI_HUD_POS_Y = 10
UI_HUD_LINE_SPACING = 24
UI_LOADING_TEXT_OFFSET_Y = 50
UI_LOADING_BAR_WIDTH = 400
UI_LOADING_BAR_HEIGHT = 30
