"""
framedither api
"""
#shared
from .ArrayRandom import ArrayRandom
from .NordPalette import NordPalette
from .FrameTools import FrameTools

#dither_frames.py
from .FrameBatch import BatchResult, FrameBatch
from .FrameDither import FrameDither
from .FrameImage import FrameImage, ditherImage
from .FrameLayout import FrameLayout
from .FramePreset import FramePreset
from .FrameStats import FrameStats

__all__ = [
	"ArrayRandom",
	"BatchResult",
	"FrameBatch",
	"FrameDither",
	"FrameImage",
	"FrameLayout",
	"FramePreset",
	"FrameStats",
	"FrameTools",
	"NordPalette",
	"ditherImage",
]
