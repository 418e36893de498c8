# point_generator.py

import numpy as np
import constants as C
import logger as log
from quadtree import Point

GRADIENT_VECTORS = np.array([[0, 1], [0, -1], [1, 0], [-1, 0]])


def make_rng(seed=None):
    return np.random.default_rng(seed)


def _check_count(count):
    if count < 0:
        raise ValueError(f"Cannot generate a negative number of points: {count}")


def _to_points(xs, ys):
    return [Point(x, y) for x, y in zip(xs.tolist(), ys.tolist())]


def points_to_array(points):
    """Packs points into an (n, 2) float array for vectorized scans."""
    if not points:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array([(p.x, p.y) for p in points], dtype=np.float64)


def generate_uniform_points(count, boundary, rng=None):
    """Draws points uniformly over the boundary."""
    _check_count(count)
    rng = rng if rng is not None else make_rng()
    xs = rng.uniform(boundary.x1, boundary.x2, count)
    ys = rng.uniform(boundary.y1, boundary.y2, count)
    return _to_points(xs, ys)


def generate_clustered_points(count, boundary, rng=None, cluster_count=None, spread_fraction=None):
    """
    Draws points around randomly placed cluster centres with a normal
    spread, clipped back into the boundary. Dense clusters push the tree
    much deeper than uniform data does.
    """
    _check_count(count)
    rng = rng if rng is not None else make_rng()
    cluster_count = C.CLUSTER_COUNT if cluster_count is None else cluster_count
    if cluster_count < 1:
        raise ValueError(f"Clustered points need at least one cluster, got {cluster_count}")
    spread_fraction = C.CLUSTER_SPREAD_FRACTION if spread_fraction is None else spread_fraction

    centres_x = rng.uniform(boundary.x1, boundary.x2, cluster_count)
    centres_y = rng.uniform(boundary.y1, boundary.y2, cluster_count)
    assignment = rng.integers(0, cluster_count, count)

    xs = rng.normal(centres_x[assignment], spread_fraction * boundary.width)
    ys = rng.normal(centres_y[assignment], spread_fraction * boundary.height)
    xs = np.clip(xs, boundary.x1, boundary.x2)
    ys = np.clip(ys, boundary.y1, boundary.y2)
    return _to_points(xs, ys)


def make_permutation(rng):
    """A shuffled, doubled permutation table for the gradient lookups."""
    p = np.arange(256, dtype=int)
    rng.shuffle(p)
    return np.concatenate([p, p])


def lerp(a, b, x):
    "Linear interpolation."
    return a + x * (b - a)


def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)


def gradient(h, x, y):
    g = GRADIENT_VECTORS[h % 4]
    return g[..., 0] * x + g[..., 1] * y


def _perlin_octave(perm, x, y):
    xi = np.floor(x).astype(int)
    yi = np.floor(y).astype(int)
    xf = x - xi
    yf = y - yi
    u = fade(xf)
    v = fade(yf)

    px0 = xi % 256
    px1 = (px0 + 1) % 256
    py0 = yi % 256
    py1 = (py0 + 1) % 256

    g00 = gradient(perm[perm[px0] + py0], xf, yf)
    g01 = gradient(perm[perm[px0] + py1], xf, yf - 1)
    g10 = gradient(perm[perm[px1] + py0], xf - 1, yf)
    g11 = gradient(perm[perm[px1] + py1], xf - 1, yf - 1)

    return lerp(lerp(g00, g10, u), lerp(g01, g11, u), v)


def noise_density(perm, x, y, octaves=None, persistence=None, lacunarity=None):
    """
    Fractal Perlin noise over world coordinates, rescaled to a [0, 1] density.

    Args:
        perm: permutation table from make_permutation.
        x, y: numpy arrays of world coordinates, same shape.
    """
    octaves = C.NOISE_OCTAVES if octaves is None else octaves
    if octaves < 1:
        raise ValueError(f"Noise needs at least one octave, got {octaves}")
    persistence = C.NOISE_PERSISTENCE if persistence is None else persistence
    lacunarity = C.NOISE_LACUNARITY if lacunarity is None else lacunarity

    x = np.asarray(x, dtype=np.float64) / C.NOISE_SCALE
    y = np.asarray(y, dtype=np.float64) / C.NOISE_SCALE
    total = np.zeros(x.shape)
    amplitude = 1.0
    max_amplitude = 0.0
    for _ in range(octaves):
        total += _perlin_octave(perm, x, y) * amplitude
        max_amplitude += amplitude
        amplitude *= persistence
        x, y = x * lacunarity, y * lacunarity

    return np.clip((total / max_amplitude + 1) / 2, 0.0, 1.0)


def generate_noise_field_points(count, boundary, rng=None):
    """
    Rejection-samples points against a Perlin density field, giving
    irregular, terrain-like clumps and voids.
    """
    _check_count(count)
    rng = rng if rng is not None else make_rng()
    perm = make_permutation(rng)

    xs_kept, ys_kept = [], []
    kept = 0
    rounds = 0
    while kept < count:
        xs = rng.uniform(boundary.x1, boundary.x2, C.NOISE_SAMPLE_BATCH)
        ys = rng.uniform(boundary.y1, boundary.y2, C.NOISE_SAMPLE_BATCH)
        density = noise_density(perm, xs, ys) ** C.NOISE_DENSITY_EXPONENT
        density = C.NOISE_DENSITY_FLOOR + (1 - C.NOISE_DENSITY_FLOOR) * density
        accepted = rng.random(C.NOISE_SAMPLE_BATCH) < density
        xs_kept.append(xs[accepted])
        ys_kept.append(ys[accepted])
        kept += int(accepted.sum())
        rounds += 1

    log.log(f"Noise field sampling kept {count:,} points after {rounds} rounds.")
    xs = np.concatenate(xs_kept)[:count] if xs_kept else np.zeros(0)
    ys = np.concatenate(ys_kept)[:count] if ys_kept else np.zeros(0)
    return _to_points(xs, ys)


GENERATORS = {
    "uniform": generate_uniform_points,
    "clustered": generate_clustered_points,
    "noise": generate_noise_field_points,
}


def generate_points(distribution, count, boundary, rng=None):
    """Dispatches to the generator registered for 'distribution'."""
    try:
        generator = GENERATORS[distribution]
    except KeyError:
        raise ValueError(f"Unknown point distribution '{distribution}'. Choose one of {sorted(GENERATORS)}") from None
    return generator(count, boundary, rng)
