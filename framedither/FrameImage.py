import io
import numpy as np
from PIL import Image

from .FrameLayout import FrameLayout
from .FrameDither import FrameDither
from .FramePreset import FramePreset
from .ArrayRandom import ArrayRandom


class FrameImage:
	"""
		One photo converted for the screen.
		pixels: composited canvas before dithering, don't mutate after init
		pixels_output: dithered canvas, every pixel a NordPalette color
	"""
	pixels = None
	pixels_output = None

	width = None
	height = None
	layout = None

	def __init__(self, src_img: Image.Image, preset: FramePreset = None):
		if preset is None:
			preset = FramePreset(logging=False)
		self.preset = preset
		self.width = preset.screen_width
		self.height = preset.screen_height

		src_w, src_h = src_img.size
		self.layout = FrameLayout.fit(src_w, src_h, self.width, self.height, preset.scale_factor)
		self.pixels = FrameLayout.composite(src_img, self.layout, self.width, self.height)
		self.pixels.setflags(write=False)
		self.pixels_output = self.pixels.copy()

	@staticmethod
	def loadImage(input_path: str):
		"""Image loadImage(str input_path) decoded and fully read, OSError on bad files"""
		with Image.open(input_path) as in_img:
			in_img.load()
			if in_img.mode == "I" or in_img.mode.startswith("I;16"):
				#16-bit gray keeps its high byte, convert() would clip it to 255
				gray = np.asarray(in_img).astype(np.int64) >> 8
				return Image.fromarray(np.clip(gray, 0, 255).astype(np.uint8)).convert("RGBA")
			return in_img.convert("RGBA")

	@staticmethod
	def decode(data: bytes):
		"""Image decode(bytes data) any format Pillow reads"""
		return FrameImage.loadImage(io.BytesIO(data))

	def dither(self, rand = None):
		"""Dither from the composited pixels, repeat calls don't compound"""
		if rand is None and self.preset.noise_amount:
			rand = ArrayRandom(self.preset.seed)
		self.pixels_output = self.pixels.copy()
		FrameDither.ditherRegion(self.pixels_output, self.layout, self.preset.noise_amount, rand)
		return self.pixels_output

	def toImage(self):
		return Image.fromarray(self.pixels_output, "RGB")

	def encode(self):
		"""bytes encode() PNG"""
		buf = io.BytesIO()
		self.toImage().save(buf, format="PNG")
		return buf.getvalue()

	def saveImage(self, output_path: str):
		self.toImage().save(output_path, format="PNG")


def ditherImage(src_img: Image.Image, preset: FramePreset = None, rand = None):
	"""uint8[screen_h][screen_w][3] ditherImage(Image src_img, FramePreset preset, rand)"""
	frame = FrameImage(src_img, preset)
	return frame.dither(rand)
