"""
Open-loop spiral walk over the plate image.

The walk starts on the outer track at the left of the center scanline and
sweeps left, below the center, then right, while the radius shrinks by one
track+gap pitch per revolution. It never looks at the groove under the
needle, so output quality depends entirely on the estimated geometry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

import numpy as np

from .errors import NotTrackedError, SpiralNotFoundError
from .geometry import Point, find_start_x
from .raster import Raster

log = logging.getLogger(__name__)

HIGHLIGHT = (255, 0, 0)


@dataclass
class ExtractionParameters:
	center: Point
	track_width: float
	gap_width: float


@dataclass(frozen=True)
class SpiralStep:
	index: int
	lap: int
	angle: float
	radius: float
	point: Point


@dataclass(frozen=True, eq=False)
class Extraction:
	samples: bytes
	overlay: np.ndarray | None = None

	@property
	def tracked(self) -> bool:
		return self.overlay is not None

	@property
	def track(self) -> np.ndarray:
		"""Overlay of visited pixels; only available for tracked extractions."""
		if self.overlay is None:
			raise NotTrackedError()
		return self.overlay

	def __len__(self) -> int:
		return len(self.samples)


def samples_count(raster_width: int, start_x: int, spin_count: int) -> int:
	# Assumes the walk starts at the outermost point of the outer "circle"
	return max(((raster_width // 2) - 1 - start_x) * 4 * spin_count, 0)


def walk_spiral(center: Point, start_x: int, track_width: float,
		parameters: ExtractionParameters, count: int) -> Iterator[SpiralStep]:
	"""
	Yield `count` spiral positions.

	`track_width` only sets the outer radius (it is the plate's own estimate);
	the radial pitch comes from `parameters`.
	"""
	lap_radius_delta = parameters.track_width + parameters.gap_width

	with np.errstate(divide='ignore', invalid='ignore'):
		outer_radius = np.float64(center.x - start_x) - np.trunc(track_width / 2)
		samples_per_half_turn = outer_radius * 4
		angle_delta = 2 * np.pi / samples_per_half_turn
		radius_delta = lap_radius_delta / samples_per_half_turn

	outer_radius = float(outer_radius)
	angle_delta = float(angle_delta)
	radius_delta = float(radius_delta)

	radius = outer_radius
	angle = np.pi
	lap = 0

	for i in range(count):
		if angle < -np.pi:
			lap += 1
			radius = outer_radius - lap * lap_radius_delta
			angle = np.pi

		x = int(np.rint(center.x + radius * np.cos(angle)))
		y = int(np.rint(center.y + radius * np.sin(angle)))
		yield SpiralStep(i, lap, angle, radius, Point(x, y))

		radius -= radius_delta
		angle -= angle_delta


def extract_audio(raster: Raster, track_width: float, spin_count: int,
		parameters: ExtractionParameters, track: bool = False) -> Extraction:
	center = parameters.center
	if not raster.contains(center.x, center.y):
		raise IndexError(f'center {center} outside {raster.width}x{raster.height} raster')

	start_x = find_start_x(raster, center)
	if start_x is None:
		raise SpiralNotFoundError()

	overlay = None
	if track:
		overlay = raster.copy_rgb()
		overlay[center.y, center.x] = HIGHLIGHT

	count = samples_count(raster.width, start_x, spin_count)
	log.debug('spiral starts at x=%d, extracting %d samples around %s', start_x, count, center)

	audio = bytearray(count)
	for step in walk_spiral(center, start_x, track_width, parameters, count):
		x, y = step.point.x, step.point.y
		audio[step.index] = raster.lightness(x, y)
		if overlay is not None:
			overlay[y, x] = HIGHLIGHT

	return Extraction(bytes(audio), overlay)
