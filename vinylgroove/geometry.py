"""
Groove geometry estimation.

Every estimator except the center search is a 1-D analysis of the single
scanline through the disc center. Runs of pixels at or above
MINIMAL_TRACK_LIGHTNESS are tracks, darker pixels are gaps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .raster import Raster

log = logging.getLogger(__name__)

# Approximate, tuned on scanned plates
MINIMAL_TRACK_WIDTH		= 3
MINIMAL_TRACK_LIGHTNESS	= 70

MINIMAL_PLATE_LIGHTNESS	= 30
THRESHOLD				= 5		# bright pixels a column/row needs to count as plate


@dataclass(frozen=True)
class Point:
	x: int
	y: int

	def __str__(self) -> str:
		return f'({self.x};{self.y})'


def _edges(counts: np.ndarray) -> tuple[int, int]:
	# First qualifying index from each side; 0 when nothing qualifies
	hits = np.flatnonzero(counts > THRESHOLD)
	if hits.size == 0:
		return 0, 0
	return int(hits[0]), int(hits[-1])


def compute_center_x(raster: Raster) -> int:
	counts = (raster.lightness_map > MINIMAL_PLATE_LIGHTNESS).sum(axis=0)
	left, right = _edges(counts)
	return right - (right - left) // 2


def compute_center_y(raster: Raster) -> int:
	counts = (raster.lightness_map > MINIMAL_PLATE_LIGHTNESS).sum(axis=1)
	upper, lower = _edges(counts)
	return lower - (lower - upper) // 2


def compute_center(raster: Raster) -> Point:
	return Point(compute_center_x(raster), compute_center_y(raster))


def _mean(total: float, count: int) -> float:
	# No accepted runs gives NaN rather than an exception
	with np.errstate(divide='ignore', invalid='ignore'):
		return float(np.float64(total) / count)


def average_track_width(raster: Raster, center: Point) -> float:
	total_width = 0
	count = 0

	track_width = 0
	for value in raster.row(center.y).tolist():
		if value < MINIMAL_TRACK_LIGHTNESS:
			if track_width > MINIMAL_TRACK_WIDTH:
				count += 1
				total_width += track_width
			track_width = 0
		else:
			track_width += 1

	return _mean(total_width, count)


def average_gap_width(raster: Raster, track_width: float, center: Point) -> float:
	"""
	Mean length of dark runs that directly follow a full track.

	Runs longer than twice the track width are plate or background, not gaps,
	and are dropped.
	"""
	track_width = np.trunc(track_width)
	gap_width_limit = track_width * 2

	total_width = 0
	count = 0

	is_gap = False
	gap = 0
	current_track_width = 0
	for value in raster.row(center.y).tolist():
		if value < MINIMAL_TRACK_LIGHTNESS:
			if current_track_width >= track_width - 1:
				is_gap = True
			current_track_width = 0
			gap += 1
		else:
			if is_gap:
				total_width += gap
				count += 1
				is_gap = False
			gap = 0
			current_track_width += 1

		if gap > gap_width_limit:
			is_gap = False

	return _mean(total_width, count)


def possible_spin_count(raster: Raster, track_width: float, center: Point) -> int:
	"""Raw number of track crossings on the center scanline."""
	track_width = np.trunc(track_width)

	count = 0
	current_width = 0
	for value in raster.row(center.y).tolist():
		if value < MINIMAL_TRACK_LIGHTNESS:
			if current_width >= track_width:
				count += 1
			current_width = 0
		else:
			current_width += 1

	return count


def spin_count(crossings: int) -> int:
	# The scanline cuts every revolution twice
	return (crossings + 1) // 2


def find_start_x(raster: Raster, center: Point) -> int | None:
	"""X of the outer edge of the spiral on the center scanline, or None."""
	current_width = 0
	for x, value in enumerate(raster.row(center.y).tolist()):
		if value > MINIMAL_TRACK_LIGHTNESS:
			current_width += 1
		else:
			current_width = 0

		if current_width == MINIMAL_TRACK_WIDTH:
			return x - MINIMAL_TRACK_WIDTH + 1

	log.debug('no run of %d light pixels on row %d', MINIMAL_TRACK_WIDTH, center.y)
	return None
