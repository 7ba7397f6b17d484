"""
Morse Code Audio Generator
Converts text to Morse code and generates a WAV file with the audio
"""

import numpy as np

from morse_codec import text_to_morse
from morse_config import DEFAULT_CONFIG, DEFAULT_SAMPLE_WIDTH, max_amplitude, sample_dtype
from morse_io import read_text, save_wav


def generate_tone(duration, sample_width=DEFAULT_SAMPLE_WIDTH, config=DEFAULT_CONFIG):
    """Generate a sine wave tone at full amplitude"""
    n = config.samples_for(duration)
    step = 2 * np.pi * config.frequency / config.sample_rate
    wave = max_amplitude(sample_width) * np.sin(step * np.arange(n))
    # Casting truncates toward zero
    return wave.astype(sample_dtype(sample_width))


def generate_silence(duration, sample_width=DEFAULT_SAMPLE_WIDTH, config=DEFAULT_CONFIG):
    """Generate silence"""
    return np.zeros(config.samples_for(duration), dtype=sample_dtype(sample_width))


def morse_to_samples(morse_code, sample_width=DEFAULT_SAMPLE_WIDTH, config=DEFAULT_CONFIG):
    """
    Convert Morse code string to audio samples.

    Every dot and dash is followed by one symbol gap. A single space
    tops this up to a letter gap, a run of three or more spaces adds a
    full word gap. Other characters (and runs of two spaces) add nothing.
    """
    dot = generate_tone(config.dot_duration, sample_width, config)
    dash = generate_tone(config.dash_duration, sample_width, config)
    symbol_gap = generate_silence(config.symbol_gap, sample_width, config)
    letter_gap = generate_silence(config.letter_gap, sample_width, config)
    word_gap = generate_silence(config.word_gap, sample_width, config)

    chunks = []
    i = 0
    while i < len(morse_code):
        symbol = morse_code[i]
        if symbol == ' ':
            space_count = 0
            while i < len(morse_code) and morse_code[i] == ' ':
                space_count += 1
                i += 1
            if space_count == 1:
                chunks.append(letter_gap)
            elif space_count >= 3:
                chunks.append(word_gap)
            continue

        if symbol == '.':
            chunks.extend((dot, symbol_gap))
        elif symbol == '-':
            chunks.extend((dash, symbol_gap))
        i += 1

    if not chunks:
        return np.zeros(0, dtype=sample_dtype(sample_width))
    return np.concatenate(chunks)


class MorseEncoder:
    """Text -> Morse code -> WAV"""

    def __init__(self, sample_width=DEFAULT_SAMPLE_WIDTH, config=DEFAULT_CONFIG):
        sample_dtype(sample_width)
        self.sample_width = sample_width
        self.config = config

    def encode(self, text):
        """Convert text to Morse code"""
        return text_to_morse(text)

    def generate(self, morse_code):
        """Convert Morse code string to audio samples"""
        return morse_to_samples(morse_code, self.sample_width, self.config)

    def encode_file(self, input_file, output_file):
        """Convert a text file to Morse code audio and save as WAV"""
        # A final newline in the text file is not part of the message
        text = read_text(input_file).rstrip('\r\n')
        print(f"Converting text to Morse code: '{text}'")

        morse = self.encode(text)
        print(f"Morse code: {morse}")

        print("Generating audio...")
        samples = self.generate(morse)

        print(f"Saving to {output_file}...")
        save_wav(output_file, samples, self.sample_width, self.config.sample_rate)
        print(f"Successfully created {output_file}")
        return morse
