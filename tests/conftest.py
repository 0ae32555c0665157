from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import numpy as np
import pytest


def repo_root() -> Path:
	return Path(__file__).resolve().parents[1]


def _ensure_repo_on_path() -> None:
	if importlib.util.find_spec('vinylgroove') is None:
		sys.path.insert(0, str(repo_root()))


_ensure_repo_on_path()

from vinylgroove.raster import Raster  # noqa: E402

BACKGROUND = 0
PLATE = 50
TRACK = 200


def ring_plate(
	size: int = 111,
	radius: int = 50,
	rings: int = 4,
	track: int = 5,
	gap: int = 4,
) -> np.ndarray:
	"""
	Lightness map of a plate with concentric light tracks.

	On the center row every track is exactly `track` pixels wide and every
	gap exactly `gap` pixels.
	"""
	c = size // 2
	yy, xx = np.mgrid[0:size, 0:size]
	d = np.sqrt((xx - c) ** 2 + (yy - c) ** 2)

	image = np.full((size, size), BACKGROUND, dtype=np.uint8)
	image[d < radius] = PLATE
	pitch = track + gap
	for k in range(rings):
		outer = radius - k * pitch
		image[(d >= outer - track) & (d < outer)] = TRACK
	return image


@pytest.fixture
def plate_lightness() -> np.ndarray:
	return ring_plate()


@pytest.fixture
def plate_raster(plate_lightness) -> Raster:
	return Raster.from_lightness(plate_lightness)


def row_raster(values, height: int = 1) -> Raster:
	row = np.asarray(values, dtype=np.uint8)
	return Raster.from_lightness(np.tile(row, (height, 1)))
