"""
Audio and timing parameters shared by the Morse generator and decoder
"""

from dataclasses import dataclass

import numpy as np

from morse_errors import UnsupportedSampleWidth

# Audio parameters
SAMPLE_RATE = 44100  # Sample rate for audio
FREQUENCY = 800  # Frequency of the tone in Hz

# Timing constants (in seconds)
DOT_DURATION = 0.1  # Duration of a dot
DASH_DURATION = DOT_DURATION * 3  # Duration of a dash (3 times dot)
SYMBOL_GAP = DOT_DURATION  # Gap between dots and dashes within a letter
LETTER_GAP = DOT_DURATION * 3  # Gap between letters
WORD_GAP = DOT_DURATION * 7  # Gap between words

# Detection parameters
THRESHOLD_DIVISOR = 100  # A sample is a tone above max amplitude / 100
DEBOUNCE_DURATION = 0.001  # A new state must persist this long
# Silences are measured from the end of the last tone, so they include
# the symbol gap. These bands sit just below 0.4s and 0.8s.
LETTER_GAP_THRESHOLD = 0.39
WORD_GAP_THRESHOLD = 0.79

# Sample widths in bits
SAMPLE_DTYPES = {8: np.int8, 16: np.int16, 32: np.int32}
DEFAULT_SAMPLE_WIDTH = 16


@dataclass(frozen=True)
class AudioConfig:
    sample_rate: int = SAMPLE_RATE
    frequency: float = FREQUENCY
    dot_duration: float = DOT_DURATION
    dash_duration: float = DASH_DURATION
    symbol_gap: float = SYMBOL_GAP
    letter_gap: float = LETTER_GAP
    word_gap: float = WORD_GAP
    threshold_divisor: int = THRESHOLD_DIVISOR
    debounce_duration: float = DEBOUNCE_DURATION
    letter_gap_threshold: float = LETTER_GAP_THRESHOLD
    word_gap_threshold: float = WORD_GAP_THRESHOLD

    @property
    def dash_threshold(self):
        """Tones shorter than this are dots, anything else is a dash"""
        return (self.dot_duration + self.dash_duration) / 2

    def samples_for(self, duration, sample_rate=None):
        """Number of samples covering `duration` seconds"""
        if sample_rate is None:
            sample_rate = self.sample_rate
        return int(round(duration * sample_rate))

    def debounce_samples(self, sample_rate):
        """Samples a new tone/silence state must last before it counts"""
        return max(int(sample_rate * self.debounce_duration), 1)


DEFAULT_CONFIG = AudioConfig()


def check_sample_width(bits):
    """Return `bits` if samples of that width are supported"""
    if bits not in SAMPLE_DTYPES:
        raise UnsupportedSampleWidth(bits)
    return bits


def sample_dtype(bits):
    """numpy dtype holding one signed sample of the given width"""
    return np.dtype(SAMPLE_DTYPES[check_sample_width(bits)])


def max_amplitude(bits):
    """Largest positive value a signed sample of the given width can hold"""
    check_sample_width(bits)
    return 2 ** (bits - 1) - 1
