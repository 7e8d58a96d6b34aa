"""Entry point for `python -m homevoice`.

    python -m homevoice                     interactive loop on stdin
    python -m homevoice -parse <text>       show how <text> is interpreted
    python -m homevoice -audio <file>       transcribe <file>, then run it
"""

import sys


def _print_parse(text, devices):
    """Interpret a single input and print the result in test_cases.txt format."""
    from homevoice.nlu import process_command

    p = process_command(text, devices)
    print(f"> {text}")

    if p is None:
        print("intent: none")
        return

    print(f"intent: {p.intent}")
    print(f"targets: {', '.join(p.targets) if p.targets else 'empty'}")
    print(f"state: {p.state if p.state is not None else 'none'}")
    if p.requires_clarification:
        print("clarify: true")
        print(f"prompt: {p.clarification_prompt}")


def _run_parse(text, path=None):
    from homevoice.devices import DEFAULT_DEVICES_PATH, load_devices

    path = path or DEFAULT_DEVICES_PATH
    try:
        devices = load_devices(path)
    except (OSError, ValueError) as e:
        print(f"Could not load devices: {e}")
        return 1
    _print_parse(text, devices)
    return 0


def _run_audio(audio_path, path=None):
    from homevoice.devices import DEFAULT_DEVICES_PATH
    from homevoice.main import load_registry, log, run_utterance

    try:
        registry = load_registry(path or DEFAULT_DEVICES_PATH)
    except (OSError, ValueError) as e:
        log(f"Could not load devices: {e}")
        return 1

    from homevoice.stt.whisper import load_model, transcribe
    log("Loading whisper model...")
    model = load_model()
    log("Transcribing...")
    text = transcribe(audio_path, model)
    if not text:
        log("  (no speech detected)")
        return 1
    run_utterance(text, registry, source="[audio]")
    return 0


if __name__ == "__main__" or not sys.argv[0]:
    if len(sys.argv) >= 3 and sys.argv[1] == "-parse":
        sys.exit(_run_parse(" ".join(sys.argv[2:])))
    elif len(sys.argv) == 3 and sys.argv[1] == "-audio":
        sys.exit(_run_audio(sys.argv[2]))
    else:
        from homevoice.main import main
        sys.exit(main())
