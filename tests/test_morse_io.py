import wave

import numpy as np
import pytest

from morse_decoder import MorseDecoder
from morse_errors import SampleWidthMismatch
from morse_generator import MorseEncoder
from morse_io import load_wav, read_text, save_wav, write_text


def test_wav_header(tmp_path):
    path = tmp_path / "tone.wav"
    samples = np.array([0, 1000, -1000, 32767, -32768], dtype=np.int16)
    save_wav(str(path), samples, 16)

    with wave.open(str(path), 'rb') as wav:
        assert wav.getnchannels() == 1
        assert wav.getsampwidth() == 2
        assert wav.getframerate() == 44100
        assert wav.getnframes() == 5
        assert wav.readframes(5) == samples.astype('<i2').tobytes()


def test_wav_16_bit(tmp_path):
    path = tmp_path / "tone.wav"
    samples = np.array([0, 1000, -1000, 32767, -32768], dtype=np.int16)
    save_wav(str(path), samples, 16, sample_rate=8000)

    loaded, bits, rate = load_wav(str(path))
    assert bits == 16
    assert rate == 8000
    assert loaded.dtype == np.int16
    assert loaded.tolist() == samples.tolist()


def test_wav_8_bit_is_stored_unsigned(tmp_path):
    path = tmp_path / "tone.wav"
    samples = np.array([-100, 0, 100], dtype=np.int8)
    save_wav(str(path), samples, 8)

    with wave.open(str(path), 'rb') as wav:
        assert wav.getsampwidth() == 1
        assert wav.readframes(3) == bytes([28, 128, 228])

    loaded, bits, rate = load_wav(str(path))
    assert bits == 8
    assert rate == 44100
    assert loaded.tolist() == [-100, 0, 100]


def test_load_missing_wav(tmp_path):
    with pytest.raises(OSError):
        load_wav(str(tmp_path / "missing.wav"))


def test_text_files(tmp_path):
    path = tmp_path / "message.txt"
    write_text(str(path), "CUPS OF WATER")
    assert read_text(str(path)) == "CUPS OF WATER"


def test_write_text_to_missing_directory(tmp_path):
    with pytest.raises(OSError):
        write_text(str(tmp_path / "no" / "such" / "dir.txt"), "A")


@pytest.mark.parametrize("bits", [8, 16])
def test_file_round_trip(tmp_path, bits):
    text_in = tmp_path / "in.txt"
    wav_file = tmp_path / "morse.wav"
    text_out = tmp_path / "out.txt"
    text_in.write_text("I have 2 cups of water.", encoding="utf-8")

    MorseEncoder(sample_width=bits).encode_file(str(text_in), str(wav_file))
    text = MorseDecoder(sample_width=bits).decode_file(str(wav_file), str(text_out))

    assert text == "I HAVE 2 CUPS OF WATER."
    assert text_out.read_text(encoding="utf-8") == "I HAVE 2 CUPS OF WATER."


def test_decoder_reads_width_from_header(tmp_path):
    text_in = tmp_path / "in.txt"
    wav_file = tmp_path / "morse.wav"
    text_out = tmp_path / "out.txt"
    text_in.write_text("SOS", encoding="utf-8")

    MorseEncoder(sample_width=8).encode_file(str(text_in), str(wav_file))
    assert MorseDecoder().decode_file(str(wav_file), str(text_out)) == "SOS"


def test_sample_width_mismatch(tmp_path):
    text_in = tmp_path / "in.txt"
    wav_file = tmp_path / "morse.wav"
    text_out = tmp_path / "out.txt"
    text_in.write_text("SOS", encoding="utf-8")

    MorseEncoder(sample_width=8).encode_file(str(text_in), str(wav_file))
    with pytest.raises(SampleWidthMismatch) as excinfo:
        MorseDecoder(sample_width=16).decode_file(str(wav_file), str(text_out))

    assert excinfo.value.expected == 16
    assert excinfo.value.actual == 8
    assert not text_out.exists()
