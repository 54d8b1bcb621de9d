"""
Sand painting: approximate a line by many single pixel grains.

Each grain gets a position along the edge from 3D Perlin noise. The
noise value is multiplied by NOISE_FOLD and wrapped to [0, 1), so the grains
bunch up in bands instead of spreading evenly. The third noise axis is
time (random offset + frame count), which makes the texture drift from
frame to frame while the sketch accumulates on the canvas.

Uses the noise module: https://github.com/caseman/noise
"""
import math
import numpy as np

try:
    from noise import pnoise3
except ImportError:
    raise ImportError('This module needs the noise module to work. https://pypi.org/project/noise/')

from triangle_sketches.geometry import dist, lerp

#############################################################
#%%  SET PARAMETERS HERE:
DENSITY = 500           # grains per unit of (normalized) edge length
NOISE_RESOLUTION = 0.001
MIN_LENGTH = 0.007      # shorter edges are not drawn at all
NOISE_FOLD = 30
TIME_STEP = 0.01        # noise time advance per frame
NOISE_OCTAVES = 4
NOISE_PERSISTENCE = 0.5
#############################################################

_BELOW_ONE = np.nextafter(1.0, 0.0)


def coherent_noise(x, y, t):
    """Perlin noise remapped from [-1, 1] to [0, 1)"""
    n = pnoise3(x, y, t,
                octaves=NOISE_OCTAVES,
                persistence=NOISE_PERSISTENCE)
    return min(max((n + 1.0) / 2.0, 0.0), _BELOW_ONE)


def fmod(x, y):
    """Floored modulo, always has the sign of y"""
    return x - math.floor(x / y) * y


def grain_count(a, b):
    length = dist(a, b)
    if length < MIN_LENGTH:
        return 0
    return int(math.ceil(length * DENSITY))


def stipple_line(a, b, rng, frame_count, noise_fn=coherent_noise):
    """Return grain positions for the line a->b as an (n, 2) array of
    normalized coordinates. rng needs a random() method.
    """
    n_grains = grain_count(a, b)
    grains = np.empty((n_grains, 2))
    x1, y1 = a
    for i in range(n_grains):
        t = rng.random() + frame_count * TIME_STEP
        n = fmod(noise_fn(x1 * NOISE_RESOLUTION, y1 * NOISE_RESOLUTION, t) * NOISE_FOLD, 1.0)
        grains[i] = lerp(a, b, n)
    return grains


def paint_line(surface, a, b, rng, frame_count, noise_fn=coherent_noise):
    """Draw the stippled line a->b onto surface, one point() call per grain.

    surface needs width, height and point(px, py) in pixel coordinates.
    """
    for x, y in stipple_line(a, b, rng, frame_count, noise_fn):
        surface.point(x * surface.width, y * surface.height)


def stipple_triangles(triangles, rng, frame_count, noise_fn=coherent_noise):
    """Grains for edges AB, BC and CA of every triangle, in set order"""
    chunks = []
    for a, b, c in triangles:
        for p, q in ((a, b), (b, c), (c, a)):
            chunks.append(stipple_line(p, q, rng, frame_count, noise_fn))
    if not chunks:
        return np.empty((0, 2))
    return np.concatenate(chunks)
