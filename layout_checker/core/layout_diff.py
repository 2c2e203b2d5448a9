"""Full-page layout diff between a canonical image and a live page.

Opens its own browser session, lets the caller prepare the page through an
on_before_screenshot hook, saves a full-page screenshot, then diffs it
against the canonical image pixel by pixel: a pixel matches when its RGB
distance to the canonical pixel is at most DIFF_THRESHOLD. The canonical
image is resized to the screenshot size if they differ.

Writes a diff image: green = match, red = mismatch.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from layout_checker.core.browser import launch_browser
from layout_checker.core.types import PageHandle

logger = logging.getLogger(__name__)

DIFF_THRESHOLD = 20

BeforeScreenshot = Callable[[PageHandle], Awaitable[None]]


@dataclass
class LayoutDiff:
    mismatch_pct: float
    page_image: Path
    output_image: Path


def diff_images(canonical_path: str | Path, page_path: str | Path, output_path: str | Path) -> float:
    """Write a match/mismatch image and return the mismatch percentage."""
    with Image.open(canonical_path) as ref_file, Image.open(page_path) as cur_file:
        ref_img = ref_file.convert('RGB')
        cur_img = cur_file.convert('RGB')

    if ref_img.size != cur_img.size:
        ref_img = ref_img.resize(cur_img.size, Image.Resampling.LANCZOS)

    ref_arr = np.array(ref_img).astype(int)
    cur_arr = np.array(cur_img).astype(int)
    matches = np.linalg.norm(ref_arr - cur_arr, axis=-1) <= DIFF_THRESHOLD

    h, w = cur_arr.shape[:2]
    diff_img = np.zeros((h, w, 3), dtype=np.uint8)
    diff_img[matches] = [0, 200, 0]  # green = match
    diff_img[~matches] = [200, 0, 0]  # red = mismatch
    Image.fromarray(diff_img).save(output_path)

    pixel_count = h * w
    return round((1.0 - int(np.sum(matches)) / max(pixel_count, 1)) * 100, 1)


async def compare_layout(
    url: str,
    *,
    canonical_image: str | Path,
    page_image: str | Path,
    output_image: str | Path,
    launch_args: Sequence[str] = (),
    viewport: dict[str, int] | None = None,
    on_before_screenshot: BeforeScreenshot | None = None,
) -> LayoutDiff:
    """Screenshot url into page_image and diff it against canonical_image into output_image."""
    async with launch_browser(url, launch_args=launch_args, viewport=viewport) as session:
        if on_before_screenshot is not None:
            await on_before_screenshot(session.page)
        await session.page.screenshot(path=str(page_image), full_page=True)

    mismatch_pct = diff_images(canonical_image, page_image, output_image)
    logger.debug('layout diff %s vs %s: %.1f%% mismatch', page_image, canonical_image, mismatch_pct)
    return LayoutDiff(mismatch_pct=mismatch_pct, page_image=Path(page_image), output_image=Path(output_image))
