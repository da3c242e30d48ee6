#noise_generator.py

import math

import numpy as np

PERMUTATION_SIZE = 256
_UINT32_MASK = 0xFFFFFFFF
_HASH_MULTIPLIER = 0x45d9f3b

def lerp(a, b, x):
    "Linear interpolation."
    return a + x * (b - a)

def fade(t):
    "6t^5 - 15t^4 + 10t^3"
    return t * t * t * (t * (t * 6 - 15) + 10)

def hash_int(x):
    """Integer avalanche hash on unsigned 32-bit values, used to drive the seeded shuffle."""
    x &= _UINT32_MASK
    x = (((x >> 16) ^ x) * _HASH_MULTIPLIER) & _UINT32_MASK
    x = (((x >> 16) ^ x) * _HASH_MULTIPLIER) & _UINT32_MASK
    return (x >> 16) ^ x

def gradient_1d(h, x):
    """Sign gradient: even hashes keep x, odd hashes flip it."""
    return x if (h & 1) == 0 else -x

def gradient_2d(h, x, y):
    """Maps the low 4 bits of h to one of 8 diagonal directions with magnitude 1 + (h & 7)."""
    h = h & 15
    g = 1 + (h & 7)
    gx = g if (h & 8) == 0 else -g
    gy = g if (h & 4) == 0 else -g
    return gx * x + gy * y

def _gradient_2d_vectorized(h, x, y):
    h = h & 15
    g = 1 + (h & 7)
    gx = np.where((h & 8) == 0, g, -g)
    gy = np.where((h & 4) == 0, g, -g)
    return gx * x + gy * y

def build_permutation(seed):
    """
    Builds the 512-entry permutation table for a seed.

    The 256-entry identity table is Fisher-Yates shuffled using hash_int(seed + i)
    as the swap-index source, then concatenated with itself so lattice lookups
    at X + 1 never need to wrap.
    """
    p = list(range(PERMUTATION_SIZE))
    for i in range(PERMUTATION_SIZE - 1, 0, -1):
        j = hash_int(seed + i) % (i + 1)
        p[i], p[j] = p[j], p[i]
    return np.array(p + p, dtype=np.int64)

class NoiseGenerator:
    """
    Seeded gradient noise. Output is a pure function of the seed and the input
    coordinates, so a single seed value reproduces the whole world layout.
    """
    def __init__(self, seed):
        self.seed = int(seed)
        self.permutation = build_permutation(self.seed)
        self.permutation.setflags(write=False)
        # Plain ints for the scalar path; numpy scalars would leak into the results.
        self._p = self.permutation.tolist()

    def noise_1d(self, x):
        p = self._p
        floor_x = math.floor(x)
        X = floor_x & 255
        x = x - floor_x
        u = fade(x)
        return lerp(gradient_1d(p[X], x), gradient_1d(p[X + 1], x - 1), u) * 2

    def noise_2d(self, x, y):
        p = self._p
        floor_x, floor_y = math.floor(x), math.floor(y)
        X = floor_x & 255
        Y = floor_y & 255
        x = x - floor_x
        y = y - floor_y

        u = fade(x)
        v = fade(y)

        A = p[X] + Y
        AA = p[A]
        AB = p[A + 1]
        B = p[X + 1] + Y
        BA = p[B]
        BB = p[B + 1]

        x1 = lerp(gradient_2d(AA, x, y), gradient_2d(BA, x - 1, y), u)
        x2 = lerp(gradient_2d(AB, x, y - 1), gradient_2d(BB, x - 1, y - 1), u)
        return lerp(x1, x2, v)

    def noise_2d_grid(self, x, y):
        """
        Evaluates noise_2d over 2D numpy arrays of the same shape.
        Results match noise_2d element for element.
        """
        p = self.permutation
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        floor_x, floor_y = np.floor(x), np.floor(y)
        X = floor_x.astype(np.int64) & 255
        Y = floor_y.astype(np.int64) & 255
        xf = x - floor_x
        yf = y - floor_y

        u = fade(xf)
        v = fade(yf)

        A = p[X] + Y
        AA = p[A]
        AB = p[A + 1]
        B = p[X + 1] + Y
        BA = p[B]
        BB = p[B + 1]

        x1 = lerp(_gradient_2d_vectorized(AA, xf, yf), _gradient_2d_vectorized(BA, xf - 1, yf), u)
        x2 = lerp(_gradient_2d_vectorized(AB, xf, yf - 1), _gradient_2d_vectorized(BB, xf - 1, yf - 1), u)
        return lerp(x1, x2, v)

    def fractal_noise_2d_grid(self, x, y, octaves=1, persistence=0.5, lacunarity=2.0):
        """Sums several octaves of noise_2d_grid for a rougher terrain texture."""
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        total_noise = np.zeros(x.shape)
        amplitude = 1.0

        for _ in range(octaves):
            total_noise += self.noise_2d_grid(x, y) * amplitude
            amplitude *= persistence
            # Update coordinates for next octave by increasing frequency
            x, y = x * lacunarity, y * lacunarity

        return total_noise
