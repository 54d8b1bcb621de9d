#!/usr/bin/env python3

"""
Sand painting of a recursively subdivided triangle.

Every triangle edge is painted as a cloud of single pixel grains placed
along the edge by Perlin noise. The canvas is never wiped, so the picture
builds up while the sketch runs.

Keys:
    s     subdivide every triangle along its longest edge
    0-9   stroke colour (0 is black, 1-4 the palette, 5-9 repeat 4)
    d     stop/start drawing
    r     reset to a single triangle and a blank canvas
    j/k   hold to shrink/grow the triangles towards their centroids

Examples:
---------
Interactive window:
python -m triangle_sketches.sand_triangles

Headless, 6 subdivisions, 300 frames, repeatable with seed 13:
python -m triangle_sketches.sand_triangles --subdivisions 6 --frames 300 --seed 13 -o sand.png
"""
import argparse
import random

import matplotlib
from matplotlib import pyplot as plt
from matplotlib import animation

from triangle_sketches.canvas import RasterCanvas, release_keymaps
from triangle_sketches.sketch_state import (initial_state, handle_key, apply_held_keys,
                                            frame_points, OFFSET_KEYS, WHITE)

#############################################################
#%%  SET PARAMETERS HERE:
WIDTH = 700
HEIGHT = 700
FPS = 60
SKETCH_KEYS = ['s', 'd', 'r', 'j', 'k'] + [str(i) for i in range(10)]
#############################################################


class SandSketch(object):
    """The sand painting sketch: state, canvas and the frame loop.

    The state transitions live in sketch_state, this class only feeds them
    key events and frame ticks and paints the result.
    """
    def __init__(self, width=WIDTH, height=HEIGHT, rng=None, verbose=False):
        self.rng = rng if rng is not None else random.Random()
        self.canvas = RasterCanvas(width, height, background=WHITE)
        self.state = initial_state()
        self.held = set()
        self.frame_count = 1
        self.verbose = verbose
        self._image = None
        self._anim = None

    def key_pressed(self, key):
        self.state = handle_key(self.state, key, self.rng)
        if key.lower() in OFFSET_KEYS:
            self.held.add(key.lower())
        if self.verbose:
            print('Key "{}": {}'.format(key, self.state))

    def key_released(self, key):
        self.held.discard(key.lower())

    def step(self):
        """Advance one frame and paint it onto the canvas"""
        self.state = apply_held_keys(self.state, self.held)
        if self.state.needs_clear:
            self.canvas.clear()
            self.state = self.state.replace(needs_clear=False)
        self.canvas.set_stroke(self.state.stroke)
        grains = frame_points(self.state, self.frame_count, self.rng)
        self.canvas.draw_normalized(grains)
        self.frame_count += 1
        return len(grains)

    def run_headless(self, frames, subdivisions=0):
        for i in range(subdivisions):
            self.key_pressed('s')
        grains = 0
        for i in range(frames):
            grains += self.step()
        print('Number of triangles N = {}'.format(len(self.state.triangles)))
        print('Grains painted: {}'.format(grains))
        return grains

    # matplotlib plumbing
    def _on_press(self, event):
        if event.key is not None:
            self.key_pressed(event.key)

    def _on_release(self, event):
        if event.key is not None:
            self.key_released(event.key)

    def _update(self, frame):
        self.step()
        self._image.set_data(self.canvas.to_image())
        return [self._image]

    def show(self):
        release_keymaps(SKETCH_KEYS)
        dpi = matplotlib.rcParams['figure.dpi']
        fig = plt.figure(figsize=(self.canvas.width / dpi, self.canvas.height / dpi))
        fig.canvas.manager.set_window_title('sand triangles')
        ax = fig.add_axes([0, 0, 1, 1])
        ax.set_axis_off()
        self._image = ax.imshow(self.canvas.to_image(), interpolation='nearest')
        fig.canvas.mpl_connect('key_press_event', self._on_press)
        fig.canvas.mpl_connect('key_release_event', self._on_release)
        self._anim = animation.FuncAnimation(fig, self._update,
                                             interval=1000.0 / FPS,
                                             blit=True,
                                             cache_frame_data=False)
        plt.show()


def parse_args(argv=None):
    PARSER = argparse.ArgumentParser(description='Sand painting of a recursively subdivided triangle.')
    PARSER.add_argument('--seed', type=int, default=None,
                        help='Seed for the random generator (repeatable drawings).')
    PARSER.add_argument('--frames', type=int, default=0,
                        help='Render this many frames without a window and save a PNG. '
                        '0 opens the interactive window.')
    PARSER.add_argument('--subdivisions', type=int, default=0,
                        help='Subdivision passes before the first frame.')
    PARSER.add_argument('-o', '--output', help='Output file name (.png), headless mode only.')
    PARSER.add_argument('-v', '--verbose', help='Print every key event.',
                        action='store_true')
    return PARSER.parse_args(argv)


def main(config):
    if config.frames < 0:
        raise ValueError('Number of frames can not be negative.')
    if config.subdivisions < 0:
        raise ValueError('Number of subdivisions can not be negative.')
    seed = config.seed if config.seed is not None else random.randrange(1, 1 << 16)
    print('Parameters:')
    print('Canvas: {}x{}'.format(WIDTH, HEIGHT))
    print('Seed: {}'.format(seed))
    print('Subdivisions: {}'.format(config.subdivisions))

    sketch = SandSketch(rng=random.Random(seed), verbose=config.verbose)
    if not config.frames:
        for i in range(config.subdivisions):
            sketch.key_pressed('s')
        sketch.show()
        return
    print('Frames: {}'.format(config.frames))
    fout = config.output or 'sand_triangles_sub-{}_frames-{}_seed-{}.png'.format(
        config.subdivisions, config.frames, seed)
    sketch.run_headless(config.frames, config.subdivisions)
    sketch.canvas.save_png(fout)


def cli():
    main(parse_args())


if __name__ == "__main__":
    config = parse_args()
    main(config)
