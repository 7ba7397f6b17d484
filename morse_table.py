"""
Character <-> Morse code lookup table
"""

from morse_errors import UnsupportedCharacter

WORD_SEPARATOR = '   '  # Words are separated by 3 spaces in Morse
LETTER_SEPARATOR = ' '

# Morse code mapping
MORSE_CODE = {
    'A': '.-', 'B': '-...', 'C': '-.-.', 'D': '-..', 'E': '.', 'F': '..-.',
    'G': '--.', 'H': '....', 'I': '..', 'J': '.---', 'K': '-.-', 'L': '.-..',
    'M': '--', 'N': '-.', 'O': '---', 'P': '.--.', 'Q': '--.-', 'R': '.-.',
    'S': '...', 'T': '-', 'U': '..-', 'V': '...-', 'W': '.--', 'X': '-..-',
    'Y': '-.--', 'Z': '--..',
    '0': '-----', '1': '.----', '2': '..---', '3': '...--', '4': '....-',
    '5': '.....', '6': '-....', '7': '--...', '8': '---..', '9': '----.',
    '.': '.-.-.-', ',': '--..--', '?': '..--..', ' ': WORD_SEPARATOR
}

# Reverse Morse code mapping (morse -> character)
MORSE_TO_CHAR = {code: char for char, code in MORSE_CODE.items()}


def to_morse(char):
    """Morse code for a single character, case-insensitive"""
    code = MORSE_CODE.get(char.upper())
    if code is None:
        raise UnsupportedCharacter(char)
    return code


def to_char(code):
    """Character for a Morse code, or None if the code is unknown"""
    return MORSE_TO_CHAR.get(code)
