"""Seedable two-dimensional gradient (Perlin) noise."""

from __future__ import annotations

import math

_GRAD3: tuple[tuple[int, int, int], ...] = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
)

_P: tuple[int, ...] = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36, 103, 30,
    69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148, 247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219,
    203, 117, 35, 11, 32, 57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74,
    165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105,
    92, 41, 55, 46, 245, 40, 244, 102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208,
    89, 18, 169, 200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64, 52, 217,
    226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17,
    182, 189, 28, 42, 223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167,
    43, 172, 9, 129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246,
    97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239,
    107, 49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254,
    138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)


def fade(t: float) -> float:
    """Quintic smoothstep 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(a: float, b: float, t: float) -> float:
    return (1 - t) * a + t * b


def _dot2(grad: tuple[int, int, int], dx: float, dy: float) -> float:
    return grad[0] * dx + grad[1] * dy


class Noise:
    """Perlin noise whose permutation table is mixed with a seed."""

    def __init__(self, seed: float = 0) -> None:
        self.perm: list[int] = []
        self.grad_p: list[tuple[int, int, int]] = []
        self.seed(seed)

    def seed(self, value: float) -> None:
        """Reseed; values in (0, 1) are scaled to 16 bits, small ones are doubled up."""
        if 0 < value < 1:
            value *= 65536
        mix = math.floor(value)
        if mix < 256:
            mix |= mix << 8
        low = mix & 255
        high = (mix >> 8) & 255
        half = [base ^ (low if i & 1 else high) for i, base in enumerate(_P)]
        self.perm = half + half
        self.grad_p = [_GRAD3[v % 12] for v in self.perm]

    def perlin2(self, x: float, y: float) -> float:
        """Noise value at (x, y); zero on every integer lattice point."""
        cell_x = math.floor(x)
        cell_y = math.floor(y)
        x -= cell_x
        y -= cell_y
        cell_x &= 255
        cell_y &= 255

        perm, grad_p = self.perm, self.grad_p
        n00 = grad_p[cell_x + perm[cell_y]]
        n01 = grad_p[cell_x + perm[cell_y + 1]]
        n10 = grad_p[cell_x + 1 + perm[cell_y]]
        n11 = grad_p[cell_x + 1 + perm[cell_y + 1]]

        u = fade(x)
        return lerp(
            lerp(_dot2(n00, x, y), _dot2(n10, x - 1, y), u),
            lerp(_dot2(n01, x, y - 1), _dot2(n11, x - 1, y - 1), u),
            fade(y),
        )