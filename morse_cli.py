#!/usr/bin/env python3
"""
Morse Code Audio Converter

Usage:
    morse_cli.py --encode <input.txt> <output.wav>
    morse_cli.py --decode <input.wav> <output.txt>
    morse_cli.py                      (run self-test)
"""

import sys

from morse_decoder import MorseDecoder
from morse_generator import MorseEncoder
from morse_io import read_text, write_text

TEST_MESSAGE = "I HAVE 2 CUPS OF WATER."
TEST_FILE = "test.txt"
TEST_WAV = "test.wav"
TEST_OUTPUT = "output.txt"


def self_test():
    """Encode a known sentence, decode it back and compare"""
    print("Running self-test...")
    write_text(TEST_FILE, TEST_MESSAGE)

    encoder = MorseEncoder()
    print(f"Generated Morse:\n{encoder.encode(TEST_MESSAGE)}\n")

    encoder.encode_file(TEST_FILE, TEST_WAV)
    MorseDecoder().decode_file(TEST_WAV, TEST_OUTPUT)

    decoded = read_text(TEST_OUTPUT)
    passed = decoded == TEST_MESSAGE
    print(f"Original message: {TEST_MESSAGE}")
    print(f"Decoded message: {decoded}")
    print("SUCCESS" if passed else "FAILURE")
    return passed


def main(argv=None):
    """Main console application"""
    if argv is None:
        argv = sys.argv[1:]

    print("=" * 50)
    print("Morse Code Audio Converter")
    print("=" * 50)

    try:
        if not argv:
            return 0 if self_test() else 1

        if len(argv) != 3:
            print(__doc__.strip(), file=sys.stderr)
            return 1

        mode, input_file, output_file = argv
        if mode == "--encode":
            MorseEncoder().encode_file(input_file, output_file)
            print(f"Encoded successfully to {output_file}")
        elif mode == "--decode":
            MorseDecoder().decode_file(input_file, output_file)
            print(f"Decoded successfully to {output_file}")
        else:
            print("Error: Invalid mode. Use --encode or --decode", file=sys.stderr)
            return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
