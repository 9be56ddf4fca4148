#FramePreset.py
from dataclasses import dataclass
import os

from .FrameTools import FrameTools

### Frame conversion ###
@dataclass
class FramePreset:
	"""Preset for FrameImage and FrameBatch"""
	DEFAULT_SCREEN = (2256, 1504) #Framework 13 native resolution

	#File i/o
	input_dir: str = "/input"		#scanned for .jpg .jpeg .png
	output_dir: str = "/output"	#created if missing
	output_prefix: str = "fm13_"	#output = prefix + input stem + .png

	screen_width: int = DEFAULT_SCREEN[0]
	screen_height: int = DEFAULT_SCREEN[1]
	scale_factor: float = 0.5		#photo fills this fraction of each screen axis, rest is border
	noise_amount: float = 0.05	#0.0 disables noise, output is then reproducible

	seed: int = None	#None = random seed, [0,UINT64_MAX] = seeded noise

	print_stats: bool = False	#Print palette usage and quant error per image
	logging: bool = True	#Progress printing

	valid: bool = False

	def __post_init__(self):

		#var sanity checks
		if self.screen_width is None or int(self.screen_width) < 1:
			print("Invalid screen_width "+str(self.screen_width)+". Defaulting to "+str(self.DEFAULT_SCREEN[0]))
			self.screen_width = self.DEFAULT_SCREEN[0]
		if self.screen_height is None or int(self.screen_height) < 1:
			print("Invalid screen_height "+str(self.screen_height)+". Defaulting to "+str(self.DEFAULT_SCREEN[1]))
			self.screen_height = self.DEFAULT_SCREEN[1]
		self.screen_width = int(self.screen_width)
		self.screen_height = int(self.screen_height)

		self.scale_factor = float(self.scale_factor)
		if not 0.0 < self.scale_factor <= 1.0:
			print("scale_factor must be in (0,1], got "+str(self.scale_factor))
			self.scale_factor = min(1.0, max(self.scale_factor, 1.0/min(self.screen_width, self.screen_height)))

		self.noise_amount = max(0.0, float(self.noise_amount))

		if self.output_prefix is None:
			self.output_prefix = ""

		self.valid = FrameTools.validateDirs([
			[self.input_dir, os.R_OK],
			[self.output_dir, os.W_OK],
		], logging=self.logging)
