#FrameStats.py
import numpy as np
from scipy.spatial import cKDTree

from .NordPalette import NordPalette
from .FrameTools import FrameTools

class FrameStats:
	_palette_tree = None

	@staticmethod
	def _getPaletteTree():
		if FrameStats._palette_tree is None:
			FrameStats._palette_tree = cKDTree(NordPalette.COLORS_F64)
		return FrameStats._palette_tree

	@staticmethod
	def paletteUsage(pixels):
		"""(int[16], int) paletteUsage(uint8[...,3] pixels) -> per-entry counts, off-palette count"""
		col_list = np.asarray(pixels, dtype=np.float64).reshape(-1, 3)
		if len(col_list) == 0:
			return np.zeros(len(NordPalette.COLORS), dtype=np.int64), 0

		dists, idxs = FrameStats._getPaletteTree().query(col_list, k=1, workers=-1)
		on_palette = dists == 0.0
		counts = np.bincount(idxs[on_palette], minlength=len(NordPalette.COLORS))
		return counts, int(np.count_nonzero(~on_palette))

	@staticmethod
	def quantError(before, after):
		"""(float[3], float[3]) quantError(uint8[...,3] before, uint8[...,3] after) -> rms, bias per channel"""
		quant_delta = np.asarray(after, dtype=np.float64).reshape(-1, 3) - np.asarray(before, dtype=np.float64).reshape(-1, 3)
		if len(quant_delta) == 0:
			return np.zeros(3), np.zeros(3)
		#_rmsq = root mean square
		rmsq = np.sqrt(np.mean(quant_delta**2, axis=0))
		bias = np.mean(quant_delta, axis=0)
		return rmsq, bias

	@staticmethod
	def printStats(frame_image, precision = 4):
		"""void printStats(FrameImage frame_image, int precision = 4) photo region only"""
		layout = frame_image.layout
		before = layout.region(frame_image.pixels)
		after = layout.region(frame_image.pixels_output)

		counts, off_palette = FrameStats.paletteUsage(after)
		total = max(1, int(np.sum(counts)) + off_palette)

		print("Palette usage")
		for i in np.argsort(-counts, kind="stable"):
			if counts[i] == 0:
				continue
			print(
				NordPalette.NAMES[i] + " " +
				FrameTools.srgbToHex(NordPalette.COLORS[i]) + " " +
				str(round(100.0*counts[i]/total, precision)) + " %"
			)
		if off_palette:
			print("Off palette pixels: "+str(off_palette))

		rmsq, bias = FrameStats.quantError(before, after)
		print("[R,G,B] rmsq: " + ", ".join(str(round(float(v), precision)) for v in rmsq))
		print("[R,G,B] bias: " + ", ".join(str(round(float(v), precision)) for v in bias))
		print("")
