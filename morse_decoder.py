"""
Morse Code Audio Decoder
Decodes WAV files containing Morse code audio back to text
"""

import numpy as np

from morse_codec import morse_to_text
from morse_config import (
    DEFAULT_CONFIG,
    DEFAULT_SAMPLE_WIDTH,
    SAMPLE_DTYPES,
    check_sample_width,
    max_amplitude,
)
from morse_errors import SampleWidthMismatch
from morse_io import load_wav, write_text
from morse_table import LETTER_SEPARATOR, WORD_SEPARATOR


def detect_segments(samples, sample_rate, sample_width=None, config=DEFAULT_CONFIG):
    """
    Detect tone and silence segments in the audio
    Returns list of tuples: (start_sample, end_sample, is_tone)

    A sample is tone when its magnitude exceeds 1% of the maximum
    amplitude. A change between tone and silence only counts once the
    new state has held for the debounce window; shorter runs are noise.
    Segments start and end at the sample where the change was confirmed.
    The silence before the first tone and any interval still open at
    the end of the buffer are not reported.
    """
    segments = []
    samples = np.asarray(samples)
    if len(samples) == 0:
        return segments

    if sample_width is None:
        sample_width = samples.dtype.itemsize * 8
        if sample_width not in SAMPLE_DTYPES:
            # Plain lists come in as int64 or float64
            sample_width = DEFAULT_SAMPLE_WIDTH
    threshold = max_amplitude(sample_width) // config.threshold_divisor
    debounce = config.debounce_samples(sample_rate)

    is_active = np.abs(samples.astype(np.int64)) > threshold

    # Split into runs of equal state
    changes = np.flatnonzero(is_active[1:] != is_active[:-1]) + 1
    run_starts = np.concatenate(([0], changes))
    run_ends = np.concatenate((changes, [len(is_active)]))

    in_tone = False
    tone_start = None
    silence_start = None

    for start, end in zip(run_starts, run_ends):
        run_is_tone = bool(is_active[start])
        if run_is_tone == in_tone or end - start < debounce:
            continue

        confirmed_at = int(start) + debounce - 1
        if run_is_tone:
            if silence_start is not None:
                segments.append((silence_start, confirmed_at, False))
            tone_start = confirmed_at
        else:
            segments.append((tone_start, confirmed_at, True))
            silence_start = confirmed_at
        in_tone = run_is_tone

    return segments


def segments_to_morse(segments, sample_rate, config=DEFAULT_CONFIG):
    """Convert detected segments to Morse code string"""
    morse = []

    for start, end, is_tone in segments:
        duration = (end - start) / sample_rate

        if is_tone:
            # Classify as dot or dash based on duration
            morse.append('.' if duration < config.dash_threshold else '-')
        elif duration >= config.word_gap_threshold:
            morse.append(WORD_SEPARATOR)
        elif duration >= config.letter_gap_threshold:
            morse.append(LETTER_SEPARATOR)
        # Anything shorter is the gap inside a letter

    return ''.join(morse)


def decode_samples(samples, sample_rate, sample_width=None, config=DEFAULT_CONFIG):
    """Recover the Morse code string from audio samples"""
    segments = detect_segments(samples, sample_rate, sample_width, config)
    return segments_to_morse(segments, sample_rate, config)


class MorseDecoder:
    """
    WAV -> Morse code -> text

    With sample_width=None the bit depth is taken from the WAV header.
    Otherwise a file with a different bit depth is rejected.
    """

    def __init__(self, sample_width=None, config=DEFAULT_CONFIG):
        if sample_width is not None:
            check_sample_width(sample_width)
        self.sample_width = sample_width
        self.config = config

    def decode(self, morse_code):
        """Convert Morse code string to text"""
        return morse_to_text(morse_code)

    def decode_samples(self, samples, sample_rate, sample_width=None):
        """Recover the Morse code string, rejecting samples of the wrong width"""
        if sample_width is None:
            sample_width = self.sample_width
        elif self.sample_width is not None and sample_width != self.sample_width:
            raise SampleWidthMismatch(self.sample_width, sample_width)
        return decode_samples(samples, sample_rate, sample_width, self.config)

    def decode_file(self, input_file, output_file):
        """Decode Morse code from a WAV file and save the text"""
        print(f"Loading audio from {input_file}...")
        samples, sample_width, sample_rate = load_wav(input_file)

        if self.sample_width is not None and sample_width != self.sample_width:
            raise SampleWidthMismatch(self.sample_width, sample_width)

        print("Analyzing audio segments...")
        morse = self.decode_samples(samples, sample_rate, sample_width)
        print(f"Morse code: {morse}")

        print("Decoding to text...")
        text = self.decode(morse)

        write_text(output_file, text)
        print(f"Saved to {output_file}")
        return text
