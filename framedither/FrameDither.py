"""Noisy Floyd-Steinberg dithering to the Nord palette, confined to the photo region"""
import numpy as np
from numba import njit

from .NordPalette import NordPalette, NordPalette_njitClosestIndex
from .ArrayRandom import ArrayRandom


#Byte semantics: clamp to [0,255] then drop the fraction
@njit
def FrameDither_njitClampByte(v:float):
	if v < 0.0:
		return 0.0
	if v > 255.0:
		return 255.0
	return np.floor(v)


@njit
def FrameDither_njitFloydSteinberg(buf:np.ndarray, noise:np.ndarray, pal_colors:np.ndarray):
	height = buf.shape[0]
	width = buf.shape[1]
	for y in range(height):
		for x in range(width):
			old_r = FrameDither_njitClampByte(buf[y, x, 0] + noise[y, x, 0])
			old_g = FrameDither_njitClampByte(buf[y, x, 1] + noise[y, x, 1])
			old_b = FrameDither_njitClampByte(buf[y, x, 2] + noise[y, x, 2])

			best_idx = NordPalette_njitClosestIndex(pal_colors, old_r, old_g, old_b)
			new_r = pal_colors[best_idx, 0]
			new_g = pal_colors[best_idx, 1]
			new_b = pal_colors[best_idx, 2]

			err_r = old_r - new_r
			err_g = old_g - new_g
			err_b = old_b - new_b

			buf[y, x, 0] = new_r
			buf[y, x, 1] = new_g
			buf[y, x, 2] = new_b

			#each neighbor clamps right after its own addition
			if x + 1 < width: #right
				buf[y, x+1, 0] = FrameDither_njitClampByte(buf[y, x+1, 0] + err_r * 7.0 / 16.0)
				buf[y, x+1, 1] = FrameDither_njitClampByte(buf[y, x+1, 1] + err_g * 7.0 / 16.0)
				buf[y, x+1, 2] = FrameDither_njitClampByte(buf[y, x+1, 2] + err_b * 7.0 / 16.0)
			if x > 0 and y + 1 < height: #bottom left
				buf[y+1, x-1, 0] = FrameDither_njitClampByte(buf[y+1, x-1, 0] + err_r * 3.0 / 16.0)
				buf[y+1, x-1, 1] = FrameDither_njitClampByte(buf[y+1, x-1, 1] + err_g * 3.0 / 16.0)
				buf[y+1, x-1, 2] = FrameDither_njitClampByte(buf[y+1, x-1, 2] + err_b * 3.0 / 16.0)
			if y + 1 < height: #bottom
				buf[y+1, x, 0] = FrameDither_njitClampByte(buf[y+1, x, 0] + err_r * 5.0 / 16.0)
				buf[y+1, x, 1] = FrameDither_njitClampByte(buf[y+1, x, 1] + err_g * 5.0 / 16.0)
				buf[y+1, x, 2] = FrameDither_njitClampByte(buf[y+1, x, 2] + err_b * 5.0 / 16.0)
			if x + 1 < width and y + 1 < height: #bottom right
				buf[y+1, x+1, 0] = FrameDither_njitClampByte(buf[y+1, x+1, 0] + err_r / 16.0)
				buf[y+1, x+1, 1] = FrameDither_njitClampByte(buf[y+1, x+1, 1] + err_g / 16.0)
				buf[y+1, x+1, 2] = FrameDither_njitClampByte(buf[y+1, x+1, 2] + err_b / 16.0)

	return buf


class FrameDither:
	NOISE_AMOUNT = 0.05

	@staticmethod
	def noise(shape: tuple, noise_amount: float, rand = None):
		"""float64[shape] noise(tuple shape, float noise_amount, rand)
		(u-0.5)*255*noise_amount. Draws are consumed in C order so (h,w,3) is R,G,B per pixel, row-major.
		"""
		if noise_amount == 0.0:
			return np.zeros(shape, dtype=np.float64)
		if rand is None:
			rand = ArrayRandom()
		u = np.asarray(rand.random(shape), dtype=np.float64)
		return (u - 0.5) * 255.0 * noise_amount

	@staticmethod
	def ditherPixels(pixels: np.ndarray, noise_amount: float = NOISE_AMOUNT, rand = None):
		"""uint8[h][w][3] ditherPixels(uint8[h][w][3] pixels, float noise_amount, rand)"""
		buf = np.array(pixels[..., :3], dtype=np.float64) #working buffer, owned by this call
		noise = FrameDither.noise(buf.shape, noise_amount, rand)
		buf = FrameDither_njitFloydSteinberg(buf, noise, NordPalette.COLORS_F64)
		return buf.astype(np.uint8)

	@staticmethod
	def ditherRegion(canvas: np.ndarray, layout, noise_amount: float = NOISE_AMOUNT, rand = None):
		"""Dither layout's sub-rectangle of canvas in place, border stays untouched"""
		region = layout.region(canvas)
		region[...] = FrameDither.ditherPixels(region, noise_amount, rand)
		return canvas
