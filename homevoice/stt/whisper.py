"""Speech-to-text using faster-whisper.

Turns a recorded voice command into the utterance string the interpreter
works on. Accepts either int16 audio (16 kHz mono) or a path to an audio
file that faster-whisper can decode.

Usage (standalone test):
    python -m homevoice.stt.whisper command.wav
"""

import os
import numpy as np

# Workaround for OpenMP duplicate library conflict (torch + ctranslate2 on macOS)
os.environ.setdefault("KMP_DUPLICATE_LIB_OK", "TRUE")

DEFAULT_MODEL_SIZE = os.environ.get("HOMEVOICE_WHISPER_MODEL", "small")
DEFAULT_COMPUTE_TYPE = "int8"

_model = None


def load_model(model_size=DEFAULT_MODEL_SIZE, compute_type=DEFAULT_COMPUTE_TYPE):
    """Load the Whisper model. Caches on first call."""
    global _model
    if _model is None:
        from faster_whisper import WhisperModel
        _model = WhisperModel(model_size, device="cpu", compute_type=compute_type)
    return _model


def _prepare(audio):
    """File paths pass through; int16 samples become float32 in [-1, 1]."""
    if isinstance(audio, (str, os.PathLike)):
        return os.fspath(audio)
    audio = np.asarray(audio)
    if audio.dtype == np.int16:
        return audio.astype(np.float32) / 32768.0
    return audio.astype(np.float32)


def transcribe(audio, model=None):
    """Transcribe a voice command to text.

    Args:
        audio: numpy int16 array (16 kHz mono), or an audio file path.
        model: WhisperModel instance, or None to use the cached default.

    Returns:
        str: The transcribed text (stripped), or empty string if nothing detected.
    """
    if model is None:
        model = load_model()

    segments, _ = model.transcribe(
        _prepare(audio),
        language="en",
        vad_filter=True,  # filter out non-speech segments
    )
    return " ".join(s.text for s in segments).strip()


if __name__ == "__main__":
    import sys
    import time

    if len(sys.argv) < 2:
        print("usage: python -m homevoice.stt.whisper <audio file>")
        sys.exit(2)
    t0 = time.time()
    model = load_model()
    print(f"Model loaded ({time.time() - t0:.1f}s)")
    t0 = time.time()
    text = transcribe(sys.argv[1], model)
    print(f"[{time.time() - t0:.1f}s] \"{text}\"")
