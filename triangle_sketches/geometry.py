"""
Triangle geometry for the sketches: longest-edge subdivision and the
centroid offset used for the pulsing animation.

Coordinates are normalized to the canvas, i.e. a point is an (x, y) tuple
with values in [0, 1] (values outside are allowed, they just fall off the
canvas). A triangle is a tuple of three points.

    A *-----------* C
      |        /
      |     /
      |  /
    B *

"""
import math

# two edges closer than this count as equally long
EDGE_TOLERANCE = 1e-9
# split ratio along the longest edge ~ N(mean, sigma)
SPLIT_MEAN = 0.5
SPLIT_SIGMA = 0.08


def dist(a, b):
    return math.hypot(b[0] - a[0], b[1] - a[1])


def lerp(a, b, t):
    """Point at ratio t between points a and b"""
    return (a[0] + (b[0] - a[0]) * t,
            a[1] + (b[1] - a[1]) * t)


def equalf(a, b, tol=EDGE_TOLERANCE):
    """Return whether or not two floats are equal (enough)"""
    return abs(a - b) < tol


def longest_edge(tri, tol=EDGE_TOLERANCE):
    """Return the longest edge of tri as (end1, end2, opposite vertex).

    Edges are checked in the order AB, BC, CA and the first one within tol
    of the maximum wins, so an equilateral triangle always gives AB.
    """
    a, b, c = tri
    edges = [(a, b, c), (b, c, a), (c, a, b)]
    lengths = [dist(e1, e2) for e1, e2, _ in edges]
    len_longest = max(lengths)
    for edge, length in zip(edges, lengths):
        if equalf(length, len_longest, tol):
            return edge
    # not reachable unless a length is NaN
    return edges[0]


def subdivide(tri, rng, tol=EDGE_TOLERANCE):
    """Split tri into two triangles along its longest edge.

    The new point P sits on the longest edge at a Gaussian ratio around the
    middle. The ratio is not clamped, so P may land outside the edge.
    rng needs a gauss(mu, sigma) method (random.Random works).
    """
    e1, e2, opposite = longest_edge(tri, tol)
    r = rng.gauss(SPLIT_MEAN, SPLIT_SIGMA)
    p = lerp(e1, e2, r)
    return [(p, e1, opposite),
            (p, e2, opposite)]


def subdivide_all(triangles, rng):
    """One subdivision pass over a whole set, doubling its size"""
    result = []
    for tri in triangles:
        result.extend(subdivide(tri, rng))
    return tuple(result)


def centroid(tri):
    (x1, y1), (x2, y2), (x3, y3) = tri
    return ((x1 + x2 + x3) / 3.0,
            (y1 + y2 + y3) / 3.0)


def offset(tri, amount):
    """Move every vertex towards (amount > 0) or away from (amount < 0) the
    centroid. Each vertex moves amount * d / d_max, where d is its distance
    to the centroid and d_max the largest such distance.
    Nothing is clamped: applied repeatedly a triangle collapses and flips.
    """
    cx, cy = centroid(tri)
    len_longest = max(dist(p, (cx, cy)) for p in tri)
    if len_longest < EDGE_TOLERANCE:
        # collapsed to a point, no direction to move in
        return tuple(tri)

    def move_toward(p):
        px, py = p
        theta = math.atan2(cy - py, cx - px)
        scale = dist(p, (cx, cy)) / len_longest
        return (px + amount * scale * math.cos(theta),
                py + amount * scale * math.sin(theta))

    return tuple(move_toward(p) for p in tri)


def offset_all(triangles, amount):
    return tuple(offset(tri, amount) for tri in triangles)
