"""
Text <-> Morse code string conversion
"""

from morse_table import LETTER_SEPARATOR, WORD_SEPARATOR, to_char, to_morse


def text_to_morse(text):
    """
    Convert text to Morse code.

    Letters are separated by one space and words by three. A run of
    spaces produces a single word separator. Raises UnsupportedCharacter
    for anything not in the Morse table.
    """
    morse = []
    prev_was_space = False

    for char in text:
        if char == ' ':
            if not prev_was_space:
                morse.append(WORD_SEPARATOR)
            prev_was_space = True
            continue

        code = to_morse(char)
        if morse and not prev_was_space:
            morse.append(LETTER_SEPARATOR)
        morse.append(code)
        prev_was_space = False

    return ''.join(morse)


def morse_to_text(morse_code):
    """
    Convert Morse code string to text.

    Unknown codes are dropped rather than reported, so malformed input
    still decodes to whatever it contains that is recognisable.
    """
    decoded_words = []

    for word in morse_code.split(WORD_SEPARATOR):
        decoded_letters = []
        for letter in word.split():
            char = to_char(letter)
            if char is not None:
                decoded_letters.append(char)
        decoded_words.append(''.join(decoded_letters))

    return ' '.join(decoded_words)
