"""Run FramePreset over a directory of photos"""
import os
import sys
import argparse
from dataclasses import dataclass, field
from PIL import Image

from .FrameImage import FrameImage
from .FramePreset import FramePreset
from .FrameStats import FrameStats
from .FrameTools import FrameTools
from .ArrayRandom import ArrayRandom


@dataclass
class BatchResult:
	converted: list = field(default_factory=list)
	skipped: list = field(default_factory=list)
	failed: list = field(default_factory=list)


class FrameBatch:

	# Private
	@staticmethod
	def _strToBool(s):
		return True if str(s).lower() in ["true", "1"] else False

	@staticmethod
	def _seedArg(s):
		"""argparse type, none or a base 10 int"""
		if str(s).lower() == "none":
			return None
		try:
			return int(s)
		except ValueError:
			raise argparse.ArgumentTypeError("seed must be an integer or none, got " + repr(s))

	@staticmethod
	def _log(preset, msg):
		if preset.logging:
			print(msg)

	@staticmethod
	def _error(msg):
		print(msg, file=sys.stderr)


	# Public

	@staticmethod
	def listPhotos(input_dir: str):
		"""list[str] listPhotos(str input_dir) sorted photo file names"""
		return sorted(
			name for name in os.listdir(input_dir)
			if FrameTools.isPhotoFile(name) and os.path.isfile(os.path.join(input_dir, name))
		)

	@staticmethod
	def convertFile(src_path: str, output_path: str, preset: FramePreset, rand = None):
		"""FrameImage convertFile(...) decode, dither, write PNG. OSError/ValueError propagate"""
		src_img = FrameImage.loadImage(src_path)
		frame = FrameImage(src_img, preset)
		frame.dither(rand)
		frame.saveImage(output_path)
		return frame

	### Convert directory ###

	@staticmethod
	def usePreset(preset: FramePreset, rand = None):
		"""BatchResult usePreset(FramePreset preset, rand) FileNotFoundError if input_dir is missing"""
		if not os.path.isdir(preset.input_dir):
			raise FileNotFoundError("Error reading input dir: "+str(preset.input_dir))
		os.makedirs(preset.output_dir, exist_ok=True)

		if rand is None and preset.noise_amount:
			rand = ArrayRandom(preset.seed)
			FrameBatch._log(preset, "Using seed "+str(rand.seed))

		#outputs present at start of the run
		existing = set(os.listdir(preset.output_dir))

		files = FrameBatch.listPhotos(preset.input_dir)
		FrameBatch._log(preset, "Found "+str(len(files))+" images to process")

		result = BatchResult()
		for file_name in files:
			out_name = FrameTools.outputName(file_name, preset.output_prefix)

			if out_name in existing:
				FrameBatch._log(preset, "Skipping "+file_name+" (already processed)")
				result.skipped.append(file_name)
				continue

			FrameBatch._log(preset, "Processing "+file_name+"...")
			try:
				src_img = FrameImage.loadImage(os.path.join(preset.input_dir, file_name))
				frame = FrameImage(src_img, preset)
			except (OSError, ValueError, Image.DecompressionBombError) as e:
				FrameBatch._error("  Error loading "+file_name+": "+str(e))
				result.failed.append(file_name)
				continue

			frame.dither(rand)

			try:
				frame.saveImage(os.path.join(preset.output_dir, out_name))
			except (OSError, ValueError) as e:
				FrameBatch._error("  Error encoding "+out_name+": "+str(e))
				result.failed.append(file_name)
				continue

			FrameBatch._log(preset, "  -> "+out_name)
			if preset.print_stats:
				FrameStats.printStats(frame)
			result.converted.append(out_name)

		FrameBatch._log(preset, "Done.")
		return result


	## Frame batch parser ##

	@staticmethod
	def parser(argv):

		parser = argparse.ArgumentParser(prog=argv[0],description="Dither photos to the Nord palette for a fixed screen")

		parser.add_argument(
			'-i', '--input', type=str,
			default="/input",
			help="Directory of .jpg .jpeg .png photos"
		)
		parser.add_argument(
			'-o', '--output', type=str,
			default="/output",
			help="Output directory, created if missing. Existing outputs are skipped."
		)
		parser.add_argument(
			'-p', '--prefix', type=str,
			default="fm13_",
			help="Output file name prefix"
		)
		parser.add_argument(
			'-W', '--width', type=int,
			default=FramePreset.DEFAULT_SCREEN[0],
			help="Screen width in pixels"
		)
		parser.add_argument(
			'-H', '--height', type=int,
			default=FramePreset.DEFAULT_SCREEN[1],
			help="Screen height in pixels"
		)
		parser.add_argument(
			'-s', '--scale', type=float,
			default=0.5,
			help="Fraction of each screen axis the photo may fill, rest is border"
		)
		parser.add_argument(
			'-n', '--noise', type=float,
			default=0.05,
			help="Dither noise amount. 0 gives reproducible output."
		)
		parser.add_argument(
			'--seed', type=FrameBatch._seedArg,
			default=None,
			help="Noise seed, none = random"
		)
		parser.add_argument(
			'-S', '--stats',  type=str,
			default="False",
			dest='print_stats',
			help="Print palette usage and quant error"
		)
		parser.add_argument(
			'-q', '--quiet', action='store_true',
			help="Only print errors"
		)

		arg_list = parser.parse_args(argv[1:])

		d_preset = FramePreset(
			input_dir			= str(arg_list.input),
			output_dir			= str(arg_list.output),
			output_prefix		= str(arg_list.prefix),
			screen_width		= arg_list.width,
			screen_height		= arg_list.height,
			scale_factor		= arg_list.scale,
			noise_amount		= arg_list.noise,
			seed					= arg_list.seed,
			print_stats			= FrameBatch._strToBool(arg_list.print_stats),
			logging				= not arg_list.quiet,
		)

		return d_preset if d_preset.valid else None


def main(argv = None):
	argv = sys.argv[:] if argv is None else argv
	d_preset = FrameBatch.parser(argv)
	if not d_preset:
		return 1
	try:
		FrameBatch.usePreset(d_preset)
	except FileNotFoundError as e:
		print(e, file=sys.stderr)
		return 1
	return 0
