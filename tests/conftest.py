import matplotlib
matplotlib.use('Agg')

import pytest


class FixedRandom(object):
    """Stand-in random source returning the same values every call"""
    def __init__(self, gauss_value=0.5, uniform_value=0.25):
        self.gauss_value = gauss_value
        self.uniform_value = uniform_value
        self.gauss_calls = []

    def gauss(self, mu, sigma):
        self.gauss_calls.append((mu, sigma))
        return self.gauss_value

    def random(self):
        return self.uniform_value


class RecordingSurface(object):
    """Surface that remembers every point() and polygon() call"""
    def __init__(self, width=700, height=700):
        self.width = width
        self.height = height
        self.calls = []
        self.polygons = []

    def point(self, px, py):
        self.calls.append((px, py))

    def polygon(self, vertices):
        self.polygons.append(vertices)


@pytest.fixture
def fixed_random():
    return FixedRandom()


@pytest.fixture
def surface():
    return RecordingSurface()
