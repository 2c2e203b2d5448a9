"""Colour utilities: dominant palette extraction and tolerant palette comparison.

Palettes extracted independently from two screenshots come back in cluster
order, which is arbitrary. Sorting both by channel triple lines them up so
they can be compared position by position.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

Colour = tuple[int, int, int]

PALETTE_SAMPLES = 5000


def sort_colors(colors: Iterable[Sequence[int]]) -> list[Colour]:
    """Return colours ordered lexicographically by (r, g, b)."""
    return sorted((int(c[0]), int(c[1]), int(c[2])) for c in colors)


def compare_colors(a: Sequence[int], b: Sequence[int], tolerance: int) -> bool:
    """True if every channel of a is within tolerance of the same channel of b."""
    return all(abs(int(x) - int(y)) <= tolerance for x, y in zip(a, b, strict=True))


def palettes_match(canonical: Sequence[Sequence[int]], actual: Sequence[Sequence[int]], tolerance: int) -> bool:
    """Sort both palettes and compare them pairwise. Different lengths never match."""
    if len(canonical) != len(actual):
        return False
    return all(
        compare_colors(expected, got, tolerance)
        for expected, got in zip(sort_colors(canonical), sort_colors(actual), strict=True)
    )


def extract_palette(image_path: str | Path, count: int = 4, n_samples: int = PALETTE_SAMPLES) -> list[Colour]:
    """Extract `count` dominant colours with KMeans, most populous cluster first.

    Raises FileNotFoundError if the image does not exist.
    """
    with Image.open(image_path) as img:
        arr = np.array(img.convert('RGB'))
    pixels = arr.reshape(-1, 3)

    if len(pixels) > n_samples:
        indices = np.random.default_rng(42).choice(len(pixels), n_samples, replace=False)
        pixels = pixels[indices]

    km = KMeans(n_clusters=min(count, len(pixels)), n_init=3, random_state=42)
    km.fit(pixels.astype(float))
    centres = np.rint(km.cluster_centers_).astype(int)
    counts = np.bincount(km.labels_, minlength=len(centres))

    order = np.argsort(-counts, kind='stable')
    return [(int(centres[i][0]), int(centres[i][1]), int(centres[i][2])) for i in order]
