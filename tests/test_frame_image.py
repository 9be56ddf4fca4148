"""Tests for the photo to screen pipeline."""
import io

import numpy as np
import pytest
from PIL import Image

from framedither import ArrayRandom, FrameImage, FramePreset, NordPalette, ditherImage


class TestDitherImage:

	def test_canvas_has_screen_size(self, make_preset, solid_image):
		preset = make_preset()
		for size in [(40, 30), (30, 40), (500, 20), (3, 3)]:
			canvas = ditherImage(solid_image(size), preset)
			assert canvas.shape == (48, 64, 3)
			assert canvas.dtype == np.uint8

	def test_all_pixels_are_palette_colors(self, make_preset):
		preset = make_preset(noise_amount=0.05)
		arr = np.random.default_rng(5).integers(0, 256, size=(60, 90, 3)).astype(np.uint8)
		canvas = ditherImage(Image.fromarray(arr, "RGB"), preset, ArrayRandom(1))
		assert NordPalette.contains(canvas).all()

	def test_border_stays_background(self, make_preset, solid_image, border_mask):
		frame = FrameImage(solid_image((40, 30), (255, 255, 255)), make_preset(noise_amount=0.05))
		frame.dither(ArrayRandom(2))
		border = frame.pixels_output[border_mask(frame.pixels_output.shape, frame.layout)]
		assert (border == NordPalette.BACKGROUND).all()

	def test_zero_noise_is_reproducible(self, make_preset):
		arr = np.random.default_rng(8).integers(0, 256, size=(30, 40, 3)).astype(np.uint8)
		img = Image.fromarray(arr, "RGB")
		assert np.array_equal(ditherImage(img, make_preset()), ditherImage(img, make_preset()))

	def test_preset_seed_is_reproducible(self, make_preset, solid_image):
		preset = make_preset(noise_amount=0.05, seed=77)
		img = solid_image((40, 30), (120, 140, 160))
		assert np.array_equal(FrameImage(img, preset).dither(), FrameImage(img, preset).dither())

	@pytest.mark.parametrize("size", [(0, 10), (10, 0)])
	def test_degenerate_source_raises(self, make_preset, solid_image, size):
		with pytest.raises(ValueError):
			ditherImage(solid_image(size), make_preset())

	def test_default_preset_targets_framework_screen(self, solid_image):
		frame = FrameImage(solid_image((8, 6)))
		assert (frame.width, frame.height) == (2256, 1504)
		assert frame.pixels.shape == (1504, 2256, 3)


class TestFrameImage:

	def test_composited_pixels_are_kept(self, make_preset, solid_image):
		frame = FrameImage(solid_image((40, 30), (128, 128, 128)), make_preset())
		frame.dither()
		assert (frame.layout.region(frame.pixels) == 128).all()
		assert not frame.pixels.flags.writeable
		assert not np.array_equal(frame.pixels, frame.pixels_output)

	def test_encode_is_lossless_png(self, make_preset, solid_image):
		frame = FrameImage(solid_image((40, 30), (200, 100, 50)), make_preset())
		frame.dither()
		data = frame.encode()
		assert data.startswith(b"\x89PNG")
		with Image.open(io.BytesIO(data)) as decoded:
			assert decoded.size == (64, 48)
			assert np.array_equal(np.asarray(decoded.convert("RGB")), frame.pixels_output)

	def test_load_image_reads_png_and_jpeg(self, tmp_path, solid_image):
		solid_image((12, 8), (10, 20, 30)).save(tmp_path / "a.png")
		solid_image((12, 8), (10, 20, 30)).save(tmp_path / "a.jpg")
		for name in ["a.png", "a.jpg"]:
			img = FrameImage.loadImage(str(tmp_path / name))
			assert img.size == (12, 8)
			assert img.mode == "RGBA"

	def test_decode_round_trips_encode(self, make_preset, solid_image):
		frame = FrameImage(solid_image((40, 30), (90, 160, 30)), make_preset())
		frame.dither()
		decoded = FrameImage.decode(frame.encode())
		assert np.array_equal(np.asarray(decoded.convert("RGB")), frame.pixels_output)

	def test_load_image_keeps_high_byte_of_16bit_gray(self, tmp_path, make_preset):
		path = tmp_path / "gray16.png"
		Image.fromarray(np.full((30, 40), 128 * 257, dtype=np.uint16)).save(path)
		img = FrameImage.loadImage(str(path))
		assert img.mode == "RGBA"
		assert img.getpixel((0, 0)) == (128, 128, 128, 255)

		frame = FrameImage(img, make_preset())
		frame.dither()
		first = frame.pixels_output[frame.layout.border_y, frame.layout.border_x]
		assert tuple(first.tolist()) == NordPalette.closestColor((128, 128, 128))

	def test_repeat_dither_does_not_compound(self, make_preset):
		arr = np.random.default_rng(3).integers(0, 256, size=(30, 40, 3)).astype(np.uint8)
		frame = FrameImage(Image.fromarray(arr, "RGB"), make_preset())
		once = frame.dither().copy()
		assert np.array_equal(frame.dither(), once)

		noisy = FrameImage(Image.fromarray(arr, "RGB"), make_preset(noise_amount=0.05))
		once = noisy.dither(ArrayRandom(5)).copy()
		assert np.array_equal(noisy.dither(ArrayRandom(5)), once)
		assert np.array_equal(ditherImage(Image.fromarray(arr, "RGB"), make_preset(noise_amount=0.05), ArrayRandom(5)), once)

	def test_load_image_rejects_corrupt_file(self, tmp_path):
		path = tmp_path / "broken.jpg"
		path.write_bytes(b"not an image")
		with pytest.raises(OSError):
			FrameImage.loadImage(str(path))


class TestFrameworkScreenScenario:
	"""4000x3000 mid gray photo on the default 2256x1504 screen, noise off."""

	@pytest.fixture(scope="class")
	def gray_photo(self):
		return Image.new("RGB", (4000, 3000), (128, 128, 128))

	@pytest.fixture(scope="class")
	def frame(self, gray_photo):
		frame = FrameImage(gray_photo, FramePreset(noise_amount=0.0, logging=False))
		frame.dither()
		return frame

	def test_layout(self, frame):
		assert (frame.layout.width, frame.layout.height) == (1002, 752)
		assert (frame.layout.border_x, frame.layout.border_y) == (627, 376)

	def test_canvas(self, frame, border_mask):
		canvas = frame.pixels_output
		assert canvas.shape == (1504, 2256, 3)
		assert (canvas[border_mask(canvas.shape, frame.layout)] == NordPalette.BACKGROUND).all()
		assert NordPalette.contains(frame.layout.region(canvas)).all()

	def test_first_pixel_is_nearest_to_gray(self, frame):
		first = frame.pixels_output[frame.layout.border_y, frame.layout.border_x]
		assert tuple(first.tolist()) == NordPalette.closestColor((128, 128, 128))

	def test_rerun_is_identical(self, frame, gray_photo):
		again = ditherImage(gray_photo, FramePreset(noise_amount=0.0, logging=False))
		assert np.array_equal(again, frame.pixels_output)
