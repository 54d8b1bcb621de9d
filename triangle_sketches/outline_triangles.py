#!/usr/bin/env python3

"""
Outline drawing of a recursively subdivided triangle.

Press "s" to split every triangle along its longest edge. The frame is
redrawn from scratch each time, so only the current set of triangles shows.

Examples:
---------
python -m triangle_sketches.outline_triangles
python -m triangle_sketches.outline_triangles --subdivisions 8 --seed 3 -o triangles.svg
"""
import argparse
import random

import matplotlib
from matplotlib import pyplot as plt
from matplotlib import animation
from matplotlib.collections import PolyCollection

from triangle_sketches.canvas import OutlineCanvas, hsb_to_rgb, release_keymaps
from triangle_sketches.outline import render_triangle
from triangle_sketches.sketch_state import OUTLINE_TRIANGLE, handle_outline_key

#############################################################
#%%  SET PARAMETERS HERE:
WIDTH = 400
HEIGHT = 400
BACKGROUND = (0, 0, 90)
STROKE_WEIGHT = 0.001   # normalized, scaled by canvas width
FPS = 60
#############################################################


class OutlineSketch(object):
    def __init__(self, width=WIDTH, height=HEIGHT, rng=None, verbose=False):
        self.rng = rng if rng is not None else random.Random()
        self.canvas = OutlineCanvas(width, height,
                                    background=BACKGROUND,
                                    stroke_weight=STROKE_WEIGHT * width)
        self.triangles = (OUTLINE_TRIANGLE,)
        self.verbose = verbose
        self._collection = None
        self._anim = None

    def key_pressed(self, key):
        self.triangles = handle_outline_key(self.triangles, key, self.rng)
        if self.verbose:
            print('Key "{}": {} triangles'.format(key, len(self.triangles)))

    def draw(self):
        """Repaint the frame: background, then every triangle outline"""
        self.canvas.clear()
        for tri in self.triangles:
            render_triangle(self.canvas, tri)
        return self.canvas.polygons

    def _on_press(self, event):
        if event.key is not None:
            self.key_pressed(event.key)

    def _update(self, frame):
        self._collection.set_verts(self.draw())
        return [self._collection]

    def show(self):
        release_keymaps(['s'])
        dpi = matplotlib.rcParams['figure.dpi']
        w, h = self.canvas.width, self.canvas.height
        fig = plt.figure(figsize=(w / dpi, h / dpi),
                         facecolor=hsb_to_rgb(*BACKGROUND))
        fig.canvas.manager.set_window_title('outline triangles')
        ax = fig.add_axes([0, 0, 1, 1])
        ax.set_axis_off()
        ax.set_xlim(0, w)
        # pixel rows grow downwards
        ax.set_ylim(h, 0)
        # points per pixel, so the line width matches the canvas scale
        lw = self.canvas.stroke_weight * 72.0 / dpi
        self._collection = PolyCollection(self.draw(), closed=True,
                                          facecolors='none',
                                          edgecolors='black',
                                          linewidths=lw)
        ax.add_collection(self._collection)
        fig.canvas.mpl_connect('key_press_event', self._on_press)
        self._anim = animation.FuncAnimation(fig, self._update,
                                             interval=1000.0 / FPS,
                                             blit=True,
                                             cache_frame_data=False)
        plt.show()


def parse_args(argv=None):
    PARSER = argparse.ArgumentParser(description='Outlines of a recursively subdivided triangle.')
    PARSER.add_argument('--seed', type=int, default=None,
                        help='Seed for the random generator (repeatable drawings).')
    PARSER.add_argument('--subdivisions', type=int, default=0,
                        help='Subdivision passes before the first frame.')
    PARSER.add_argument('-o', '--output',
                        help='Save the triangles to this SVG file instead of opening a window.')
    PARSER.add_argument('-v', '--verbose', help='Print every key event.',
                        action='store_true')
    return PARSER.parse_args(argv)


def main(config):
    if config.subdivisions < 0:
        raise ValueError('Number of subdivisions can not be negative.')
    seed = config.seed if config.seed is not None else random.randrange(1, 1 << 16)
    print('Parameters:')
    print('Canvas: {}x{}'.format(WIDTH, HEIGHT))
    print('Seed: {}'.format(seed))
    print('Subdivisions: {}'.format(config.subdivisions))

    sketch = OutlineSketch(rng=random.Random(seed), verbose=config.verbose)
    for i in range(config.subdivisions):
        sketch.key_pressed('s')
    if config.output:
        sketch.draw()
        print('Number of triangles N = {}'.format(len(sketch.triangles)))
        sketch.canvas.save_svg(config.output)
    else:
        sketch.show()


def cli():
    main(parse_args())


if __name__ == "__main__":
    config = parse_args()
    main(config)
