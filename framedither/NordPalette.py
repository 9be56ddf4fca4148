"""Fixed Nord palette and nearest color lookup"""
import numpy as np
from numba import njit


#Linear scan, first entry wins ties
@njit
def NordPalette_njitClosestIndex(pal_colors:np.ndarray, r:float, g:float, b:float):
	min_dist_sq = 1e10
	best_idx = 0
	for j in range(pal_colors.shape[0]):
		diff_r = r - pal_colors[j, 0]
		diff_g = g - pal_colors[j, 1]
		diff_b = b - pal_colors[j, 2]
		dist_sq = diff_r*diff_r + diff_g*diff_g + diff_b*diff_b
		if dist_sq < min_dist_sq:
			min_dist_sq = dist_sq
			best_idx = j
	return best_idx


class NordPalette:
	### Constants ###
	COLORS = np.array([
		#Polar Night
		[ 46,  52,  64],
		[ 59,  66,  82],
		[ 67,  76,  94],
		[ 76,  86, 106],
		#Snow Storm
		[216, 222, 233],
		[229, 233, 240],
		[236, 239, 244],
		#Frost
		[143, 188, 187],
		[136, 192, 208],
		[129, 161, 193],
		[ 94, 129, 172],
		#Aurora
		[191,  97, 106],
		[208, 135, 112],
		[235, 203, 139],
		[163, 190, 140],
		[180, 142, 173],
	], dtype=np.uint8)
	COLORS.setflags(write=False)

	NAMES = tuple("nord"+str(i) for i in range(len(COLORS)))

	#float copy handed to the njit kernels
	COLORS_F64 = COLORS.astype(np.float64)
	COLORS_F64.setflags(write=False)

	BACKGROUND = tuple(int(c) for c in COLORS[0])


	@staticmethod
	def closestIndex(rgb):
		"""int closestIndex(int[3] rgb)"""
		r, g, b = rgb
		return int(NordPalette_njitClosestIndex(NordPalette.COLORS_F64, float(r), float(g), float(b)))

	@staticmethod
	def closestColor(rgb):
		"""(int,int,int) closestColor(int[3] rgb)"""
		idx = NordPalette.closestIndex(rgb)
		return tuple(int(c) for c in NordPalette.COLORS[idx])

	@staticmethod
	def contains(pixels):
		"""bool[...] contains(uint8[...,3] pixels) exact palette membership"""
		return np.isin(NordPalette.packRgb(pixels), NordPalette.packRgb(NordPalette.COLORS))

	@staticmethod
	def packRgb(pixels):
		"""int[...] packRgb(uint8[...,3] pixels) -> 0xRRGGBB"""
		pixels = np.asarray(pixels, dtype=np.int64)
		return (pixels[..., 0] << 16) | (pixels[..., 1] << 8) | pixels[..., 2]
