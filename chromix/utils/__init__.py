from .channel_math import to_float, clamp_channel, round_half_up, normalize_channel
from .default import channel_or_default

__all__ = ["to_float", "clamp_channel", "round_half_up", "normalize_channel", "channel_or_default"]
