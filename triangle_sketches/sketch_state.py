"""
State of the sand painting sketch and the functions that move it along.

Nothing in here draws. Key presses go through handle_key(), held keys
through apply_held_keys() once per frame, and frame_points() turns a state
into the grains to paint for that frame. Each function returns a new state.
"""
from triangle_sketches.geometry import subdivide_all, offset_all
from triangle_sketches.stipple import stipple_triangles, coherent_noise

# Colours are (hue 0-360, saturation 0-100, brightness 0-100)
DEFAULT_TRIANGLE = ((0.1, 0.1), (0.1, 0.9), (0.9, 0.1))
BLACK = (0, 0, 0)
WHITE = (0, 0, 100)
PALETTE = [
    (322, 63, 100),
    (2, 79, 41),
    (54, 38, 100),
    (107, 46, 31),
]
STROKE_ALPHA = 0.1
# drawing library default before any colour key is pressed
DEFAULT_STROKE = BLACK + (1.0,)
OFFSET_STEP = 0.001
OFFSET_KEYS = {'j': OFFSET_STEP, 'k': -OFFSET_STEP}


class SketchState(object):
    """Everything the sand painting sketch remembers between frames.

    triangles  -- tuple of triangles currently drawn
    stroke     -- (h, s, b, alpha) stroke colour
    drawing    -- whether frames paint anything
    needs_clear -- canvas should be wiped before the next frame
    """
    def __init__(self, triangles=(DEFAULT_TRIANGLE,), stroke=DEFAULT_STROKE,
                 drawing=True, needs_clear=False):
        self.triangles = tuple(triangles)
        self.stroke = stroke
        self.drawing = drawing
        self.needs_clear = needs_clear

    def replace(self, **changes):
        fields = dict(triangles=self.triangles,
                      stroke=self.stroke,
                      drawing=self.drawing,
                      needs_clear=self.needs_clear)
        fields.update(changes)
        return SketchState(**fields)

    def __repr__(self):
        return 'SketchState({} triangles, stroke={}, drawing={})'.format(
            len(self.triangles), self.stroke, self.drawing)


def initial_state():
    return SketchState()


def stroke_for_key(key):
    """Stroke colour selected by a digit key, or None for any other key"""
    if key is None or len(key) != 1 or not key.isdigit():
        return None
    k = int(key)
    if k == 0:
        return BLACK + (STROKE_ALPHA,)
    idx = min(k - 1, len(PALETTE) - 1)
    return PALETTE[idx] + (STROKE_ALPHA,)


def reset(state):
    return state.replace(triangles=(DEFAULT_TRIANGLE,),
                         stroke=BLACK + (STROKE_ALPHA,),
                         drawing=True,
                         needs_clear=True)


def handle_key(state, key, rng):
    """Apply one key press:
    0-9 -- stroke colour
    s   -- subdivide every triangle
    d   -- toggle drawing on/off
    r   -- reset triangle, colour and canvas
    """
    stroke = stroke_for_key(key)
    if stroke is not None:
        return state.replace(stroke=stroke)
    if key == 's':
        return state.replace(triangles=subdivide_all(state.triangles, rng))
    if key == 'd':
        return state.replace(drawing=not state.drawing)
    if key == 'r':
        return reset(state)
    return state


def apply_held_keys(state, held):
    """Offset every triangle while j (inwards) or k (outwards) is held"""
    triangles = state.triangles
    for key in sorted(OFFSET_KEYS):
        if key in held:
            triangles = offset_all(triangles, OFFSET_KEYS[key])
    if triangles is state.triangles:
        return state
    return state.replace(triangles=triangles)


def frame_points(state, frame_count, rng, noise_fn=coherent_noise):
    """Grains to paint for one frame, (n, 2) normalized coordinates"""
    if not state.drawing:
        return stipple_triangles((), rng, frame_count, noise_fn)
    return stipple_triangles(state.triangles, rng, frame_count, noise_fn)


#############################################################
# The outline sketch only knows how to subdivide.
OUTLINE_TRIANGLE = ((0.1, 0.1), (0.9, 0.9), (0.9, 0.1))


def handle_outline_key(triangles, key, rng):
    if key == 's':
        return subdivide_all(triangles, rng)
    return tuple(triangles)
