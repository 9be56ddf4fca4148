"""Namespace for file and formatting helpers used by framedither"""

import os
import numpy as np


class FrameTools:
	### Constants ###
	PHOTO_EXTENSIONS = (".jpg", ".jpeg", ".png")
	OUTPUT_EXTENSION = ".png"


	### File names ###

	@staticmethod
	def isPhotoFile(file_name: str):
		"""bool isPhotoFile(str file_name) case-insensitive extension check"""
		_, ext = os.path.splitext(file_name)
		return ext.lower() in FrameTools.PHOTO_EXTENSIONS

	@staticmethod
	def outputName(file_name: str, prefix: str = ""):
		"""str outputName(str file_name, str prefix) -> prefix + stem + .png"""
		stem, _ = os.path.splitext(os.path.basename(file_name))
		return prefix + stem + FrameTools.OUTPUT_EXTENSION


	### Misc tools ###

	@staticmethod
	def srgbToHex(rgb):
		"""char* srgbToHex(int[3] rgb)"""
		rgb = np.clip(np.asarray(rgb), 0, 255).astype(np.uint8)
		return "#{:02x}{:02x}{:02x}".format(rgb[0],rgb[1],rgb[2])

	@staticmethod
	def validateDirs(dir_list, logging: bool = True):
		"""bool validateDirs(list[[str dir, int access_flag]])
		R_OK dirs must exist. W_OK dirs must exist and be writable, or be creatable in their parent.
		"""
		def report(msg):
			if logging:
				print(msg)

		dirs_ok = True
		for path, access_flag in dir_list:

			if (path is None) or (path==''):
				report("Undefined directory")
				dirs_ok = False
				continue

			if os.path.isdir(path):
				if not os.access(path, access_flag):
					report("Can't access directory "+path)
					dirs_ok = False
				continue

			if access_flag == os.R_OK:
				report("Directory doesn't exist "+path)
				dirs_ok = False
				continue

			#writable doesn't exist yet, nearest existing parent must be writable
			parent = os.path.dirname(os.path.abspath(path))
			while parent and not os.path.isdir(parent):
				parent = os.path.dirname(parent)
			if not os.access(parent, os.W_OK):
				report("Can't create directory "+path)
				dirs_ok = False
		return dirs_ok
