"""Constants shared by the conversion functions and color classes."""

import sys

# Two-character hexadecimal tokens for absolute black and absolute white.
BLACK_HEX = "00"
WHITE_HEX = "ff"

RGB_RED_INDEX = 0
RGB_GREEN_INDEX = 1
RGB_BLUE_INDEX = 2
NUMBER_OF_RGB_COMPONENTS = 3

HSB_HUE_INDEX = 0
HSB_SATURATION_INDEX = 1
HSB_BRIGHTNESS_INDEX = 2
NUMBER_OF_HSB_COMPONENTS = 3

CMYK_CYAN_INDEX = 0
CMYK_MAGENTA_INDEX = 1
CMYK_YELLOW_INDEX = 2
CMYK_BLACK_INDEX = 3
NUMBER_OF_CMYK_COMPONENTS = 4

# NTSC luma weights, with the more precise red weight used by Matlab's rgb2gray.
NTSC_LUMA_WEIGHTS = (0.2989, 0.587, 0.114)

# Unweighted channel mean below this posterizes to black.
BITMAP_THRESHOLD = 0.5

# HSB brightness at or below this is "dark".
DEFAULT_BRIGHTNESS_CUTOFF = 0.51

# Smallest normal double; keeps the CMYK denominator away from zero.
CMYK_EPSILON = sys.float_info.min

MAX_COMPONENT = 255
