"""Shared fixtures for framedither tests."""
import numpy as np
import pytest
from PIL import Image

from framedither import FramePreset


@pytest.fixture
def make_preset(tmp_path):
	"""Small-screen preset factory, quiet and noiseless unless overridden."""
	def _make(**kwargs):
		options = dict(
			input_dir = str(tmp_path / "input"),
			output_dir = str(tmp_path / "output"),
			screen_width = 64,
			screen_height = 48,
			noise_amount = 0.0,
			logging = False,
		)
		options.update(kwargs)
		return FramePreset(**options)
	return _make


@pytest.fixture
def solid_image():
	def _make(size, color = (128, 128, 128), mode = "RGB"):
		return Image.new(mode, size, color)
	return _make


@pytest.fixture
def border_mask():
	"""Boolean mask of canvas pixels outside the photo region."""
	def _mask(shape, layout):
		mask = np.ones(shape[:2], dtype=bool)
		mask[layout.border_y:layout.border_y+layout.height, layout.border_x:layout.border_x+layout.width] = False
		return mask
	return _mask
