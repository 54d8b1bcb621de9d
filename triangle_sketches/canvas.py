"""
Drawing surfaces for the sketches.

RasterCanvas keeps an RGB float image that grains are composited into with
the current stroke alpha. Nothing is erased between frames, which is what
gives the sand painting its build up.

OutlineCanvas just collects the polygons of one frame so they can be handed
to matplotlib or written out with svgwrite.
"""
import os
import numpy as np
from matplotlib import colors

try:
    import svgwrite
except ImportError:
    raise ImportError('This module needs the svgwrite module to work. https://pypi.org/project/svgwrite/')


def hsb_to_rgb(h, s, b):
    """HSB on the scales 360/100/100 to an RGB triple in [0, 1]"""
    return colors.hsv_to_rgb([(h % 360) / 360.0, s / 100.0, b / 100.0])


def fix_extension(outfn, ext):
    """Make sure outfn ends in ext, telling the user if it had to change"""
    fname, fext = os.path.splitext(outfn)
    if fext.lower() != ext:
        print('File name needs to end in "{}"'.format(ext))
        print('Changed "{}" to "{}"'.format(outfn, fname + ext))
        outfn = fname + ext
    return outfn


class RasterCanvas(object):
    """A width x height pixel canvas that points are composited into"""
    def __init__(self, width, height, background=(0, 0, 100)):
        if width <= 0 or height <= 0:
            raise ValueError('Canvas needs a positive size, got {}x{}'.format(width, height))
        self.width = width
        self.height = height
        self.background = hsb_to_rgb(*background)
        self.image = np.empty((height, width, 3))
        self.stroke_rgb = np.zeros(3)
        self.alpha = 1.0
        self.draw_count = 0
        self.clear()

    def clear(self):
        self.image[:, :] = self.background

    def set_stroke(self, hsba):
        h, s, b, alpha = hsba
        self.stroke_rgb = hsb_to_rgb(h, s, b)
        self.alpha = alpha

    def point(self, px, py):
        self.points(np.array([[px, py]], dtype=float))

    def points(self, xy):
        """Composite an (n, 2) array of pixel coordinates.

        A pixel hit k times gets coverage 1 - (1 - alpha)**k, the same as
        drawing the k points one after another. Off canvas points are
        dropped.
        """
        xy = np.asarray(xy, dtype=float).reshape(-1, 2)
        self.draw_count += len(xy)
        if not len(xy):
            return
        cols = np.floor(xy[:, 0]).astype(int)
        rows = np.floor(xy[:, 1]).astype(int)
        inside = (cols >= 0) & (cols < self.width) & (rows >= 0) & (rows < self.height)
        if not inside.any():
            return
        flat = rows[inside] * self.width + cols[inside]
        pixels, hits = np.unique(flat, return_counts=True)
        coverage = (1.0 - (1.0 - self.alpha) ** hits)[:, None]
        view = self.image.reshape(-1, 3)
        view[pixels] = view[pixels] * (1.0 - coverage) + self.stroke_rgb * coverage

    def draw_normalized(self, xy):
        """Composite points given in normalized [0, 1] canvas coordinates"""
        xy = np.asarray(xy, dtype=float).reshape(-1, 2)
        self.points(xy * np.array([self.width, self.height]))

    def to_image(self):
        return np.clip(self.image, 0.0, 1.0)

    def save_png(self, outfn):
        from matplotlib import pyplot as plt
        outfn = fix_extension(outfn, '.png')
        plt.imsave(outfn, self.to_image())
        print('Saved to PNG file: {}'.format(outfn))
        return outfn


class OutlineCanvas(object):
    """Polygons of one frame of the outline sketch, in pixel coordinates"""
    def __init__(self, width, height, background=(0, 0, 90), stroke_weight=1.0):
        self.width = width
        self.height = height
        self.background = background
        self.stroke_weight = stroke_weight
        self.polygons = []

    def clear(self):
        self.polygons = []

    def polygon(self, vertices):
        self.polygons.append(np.asarray(vertices, dtype=float))

    def save_svg(self, outfn):
        outfn = fix_extension(outfn, '.svg')
        dwg = svgwrite.Drawing(outfn,
                               size=(self.width, self.height),
                               profile='tiny')
        r, g, b = hsb_to_rgb(*self.background) * 100
        dwg.add(dwg.rect((0, 0), (self.width, self.height),
                         fill=svgwrite.rgb(float(r), float(g), float(b), '%')))
        tris = dwg.add(dwg.g(id='triangles', stroke='black', fill='none',
                             stroke_width=self.stroke_weight))
        for vertices in self.polygons:
            tris.add(dwg.polygon(points=[(float(x), float(y)) for x, y in vertices]))
        dwg.save()
        print('Saved to SVG file: {}'.format(outfn))
        return outfn


def release_keymaps(keys):
    """Take keys away from matplotlib's default figure shortcuts (s saves,
    k toggles log scale, r goes home...) so a sketch can use them.
    """
    from matplotlib import pyplot as plt
    for name in list(plt.rcParams.keys()):
        if name.startswith('keymap.'):
            plt.rcParams[name] = [k for k in plt.rcParams[name] if k not in keys]
