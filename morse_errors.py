"""
Errors raised by the Morse code encoder and decoder
"""


class MorseError(Exception):
    """Base class for Morse code errors"""


class UnsupportedCharacter(MorseError, ValueError):
    """Raised when text contains a character with no Morse code"""

    def __init__(self, char):
        self.char = char
        super().__init__(f"Character {char!r} cannot be encoded in Morse.")


class SampleWidthMismatch(MorseError):
    """Raised when a WAV file's bit depth differs from the decoder's"""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Sample width mismatch: expected {expected}-bit samples, "
            f"file contains {actual}-bit samples"
        )


class UnsupportedSampleWidth(MorseError, ValueError):
    def __init__(self, bits):
        self.bits = bits
        super().__init__(f"Unsupported sample width: {bits} bits")
