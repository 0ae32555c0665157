import math
from datetime import timedelta

import imageio.v3 as iio
import numpy as np
import pytest

from vinylgroove import NotTrackedError, SpiralNotFoundError, VinylPlate, override
from vinylgroove.geometry import Point
from vinylgroove.raster import Raster


@pytest.fixture
def plate(plate_raster):
	return VinylPlate(plate_raster)


def test_profile_estimates(plate):
	assert plate.center == Point(55, 55)
	assert plate.track_width == 5.0
	assert plate.gap_width == 4.0
	assert plate.spin_count == 4
	assert plate.duration == timedelta(seconds=2)


def test_duration_follows_rpm(plate_raster):
	assert VinylPlate(plate_raster, rpm=60).duration == timedelta(seconds=4)
	assert VinylPlate(plate_raster, rpm=33.3).spin_count == 4


def test_from_file(tmp_path, plate_lightness):
	path = tmp_path / 'plate.png'
	iio.imwrite(path, plate_lightness)
	plate = VinylPlate.from_file(path)
	assert plate.center == Point(55, 55)
	assert plate.spin_count == 4


def test_default_extraction(plate):
	extraction = plate.extract()
	assert len(extraction) == 768
	assert not extraction.tracked
	with pytest.raises(NotTrackedError):
		extraction.track


def test_repeated_extractions_are_independent(plate):
	tracked = plate.extract(track=True)
	plain = plate.extract()

	assert tracked.samples == plain.samples
	assert tracked.tracked
	assert tracked.track.shape == (111, 111, 3)
	with pytest.raises(NotTrackedError):
		plain.track


def test_override_does_not_touch_profile(plate):
	parameters = override(plate, gap_width=8.0)
	assert parameters.center == plate.center
	assert parameters.track_width == plate.track_width

	changed = plate.extract(parameters)
	assert changed.samples != plate.extract().samples
	assert len(changed) == 768
	assert plate.gap_width == 4.0
	assert plate.parameters().gap_width == 4.0


def test_override_with_same_values_is_identical(plate):
	parameters = override(plate, center=Point(55, 55), track_width=5.0, gap_width=4.0)
	assert plate.extract(parameters).samples == plate.extract().samples


def test_degenerate_plate():
	plate = VinylPlate(Raster.from_lightness(np.zeros((20, 20), dtype=np.uint8)))

	assert plate.center == Point(0, 0)
	assert math.isnan(plate.track_width)
	assert math.isnan(plate.gap_width)
	assert plate.spin_count == 0
	assert plate.duration == timedelta(0)
	with pytest.raises(SpiralNotFoundError):
		plate.extract()


def test_repr(plate):
	assert repr(plate) == 'VinylPlate(center=(55;55), track_width=5.00, gap_width=4.00, spin_count=4)'
