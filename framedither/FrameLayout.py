"""Fit a photo inside a fixed screen and center it on a background canvas"""
import math
import numpy as np
from PIL import Image
from dataclasses import dataclass

from .NordPalette import NordPalette


@dataclass(frozen=True)
class FrameLayout:
	"""Photo sub-rectangle inside the canvas"""
	border_x: int
	border_y: int
	width: int
	height: int

	@property
	def box(self):
		"""(left, top, right, bottom)"""
		return (self.border_x, self.border_y, self.border_x+self.width, self.border_y+self.height)

	def region(self, canvas: np.ndarray):
		"""View of canvas[border_y:+height, border_x:+width]"""
		return canvas[self.border_y:self.border_y+self.height, self.border_x:self.border_x+self.width]

	@staticmethod
	def fit(src_w: int, src_h: int, screen_w: int, screen_h: int, scale_factor: float = 0.5):
		"""FrameLayout fit(int src_w, int src_h, int screen_w, int screen_h, float scale_factor)"""
		if src_w < 1 or src_h < 1:
			raise ValueError("Degenerate source image "+str(src_w)+"x"+str(src_h))

		avail_w = int(math.floor(screen_w * scale_factor))
		avail_h = int(math.floor(screen_h * scale_factor))
		if avail_w < 1 or avail_h < 1:
			raise ValueError("Screen "+str(screen_w)+"x"+str(screen_h)+" leaves no room at scale "+str(scale_factor))

		#scale = min(scale_x, scale_y), floors done in integers so float error can't drop a pixel
		if avail_w * src_h <= avail_h * src_w:
			new_w = avail_w
			new_h = min(avail_h, (src_h * avail_w) // src_w)
		else:
			new_w = min(avail_w, (src_w * avail_h) // src_h)
			new_h = avail_h

		if new_w < 1 or new_h < 1:
			raise ValueError("Source image "+str(src_w)+"x"+str(src_h)+" is too thin to fit "+str(avail_w)+"x"+str(avail_h))

		return FrameLayout(
			border_x = (screen_w - new_w) // 2,
			border_y = (screen_h - new_h) // 2,
			width = new_w,
			height = new_h,
		)

	@staticmethod
	def composite(src_img: Image.Image, layout, screen_w: int, screen_h: int):
		"""uint8[screen_h][screen_w][3] composite(Image src_img, FrameLayout layout, int screen_w, int screen_h)"""
		rgba = src_img.convert("RGBA")
		if rgba.size != (layout.width, layout.height):
			#Pillow bicubic is Catmull-Rom (a=-0.5)
			rgba = rgba.resize((layout.width, layout.height), Image.Resampling.BICUBIC)

		canvas = Image.new("RGBA", (screen_w, screen_h), NordPalette.BACKGROUND + (255,))
		canvas.alpha_composite(rgba, dest=(layout.border_x, layout.border_y))

		return np.array(canvas.convert("RGB"), dtype=np.uint8)
