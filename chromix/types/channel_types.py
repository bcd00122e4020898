# No dependencies
CHANNEL_MIN = 0
CHANNEL_MAX = 255
DEFAULT_CHANNEL = 255

CHANNEL_NAMES = ("r", "g", "b", "a")
NUM_CHANNELS = len(CHANNEL_NAMES)

HUE_360 = 360
HUE_SECTOR_WIDTH = 60
NUM_SECTORS = 6
