"""
WAV and text file reading/writing
"""

import numpy as np
from pydub import AudioSegment

from morse_config import SAMPLE_RATE, check_sample_width, sample_dtype


def save_wav(file_path, samples, sample_width, sample_rate=SAMPLE_RATE):
    """Save mono PCM samples as a WAV file"""
    dtype = sample_dtype(sample_width).newbyteorder('<')
    raw = np.asarray(samples).astype(dtype).tobytes()

    audio = AudioSegment(
        data=raw,
        sample_width=sample_width // 8,
        frame_rate=sample_rate,
        channels=1,
    )
    with open(file_path, 'wb') as f:
        audio.export(f, format="wav")


def load_wav(file_path):
    """
    Load a WAV file and convert to mono
    Returns: (samples, sample_width_bits, sample_rate)
    """
    with open(file_path, 'rb') as f:
        audio = AudioSegment.from_wav(f)

    # Convert to mono if stereo
    if audio.channels > 1:
        audio = audio.set_channels(1)

    sample_width = check_sample_width(audio.sample_width * 8)
    samples = np.array(audio.get_array_of_samples(), dtype=sample_dtype(sample_width))
    return samples, sample_width, audio.frame_rate


def read_text(file_path):
    """Read a whole UTF-8 text file"""
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()


def write_text(file_path, text):
    """Write text to a UTF-8 file, replacing it"""
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(text)
