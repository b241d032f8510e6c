"""Keypad replay command for the Pokedex CLI.

Replays a key script through the multi-tap engine on a virtual clock:

    pokedex keypad 3 3 3 3 4 4 4 4 7 7 7 7 3 3 3

Script tokens:
    1..9        tap a character key
    10          short tap on the dual key (types a space)
    hold[=MS]   hold the dual key for MS milliseconds (default 600)
    _           pause long enough for the pending character to commit
    wait=MS     pause for MS milliseconds

Consecutive events are separated by --gap milliseconds.
"""

from ...core.config import Config
from ...input.keymap import DUAL_KEY
from ...input.multitap import MultiTapInputEngine
from ...input.scheduler import ManualScheduler
from ...services.search import SearchService
from .search import resolve_catalog

DEFAULT_HOLD_MS = 600


def add_keypad_arguments(parser) -> None:
    """Add arguments for the keypad command.

    Args:
        parser: Argument parser for the command.
    """
    parser.add_argument("script", nargs="+", help="Key script tokens")
    parser.add_argument(
        "-g",
        "--gap",
        type=int,
        default=100,
        help="Milliseconds between consecutive events (default: 100)",
    )
    parser.add_argument(
        "-t",
        "--trace",
        action="store_true",
        help="Print the display text after every event",
    )
    parser.add_argument(
        "-s",
        "--search",
        action="store_true",
        help="Run the typed text as a search against the catalog",
    )
    parser.add_argument(
        "-c",
        "--catalog",
        help="Catalog JSON path or fsspec URL, used with --search",
    )


def replay(
    script: list[str],
    config: Config,
    gap_ms: int = 100,
    trace: list[str] | None = None,
) -> str:
    """Run a key script and return the final committed text.

    Args:
        script: Script tokens (see module docstring).
        config: Application configuration supplying the engine timing.
        gap_ms: Milliseconds between consecutive events.
        trace: When given, receives "token -> display text" lines.

    Raises:
        ValueError: On an unrecognised script token.
    """
    scheduler = ManualScheduler()
    engine = MultiTapInputEngine(scheduler, config=config.input)
    commit_pause = config.input.commit_delay_ms / 1000

    for index, token in enumerate(script):
        if index:
            scheduler.advance(gap_ms / 1000)

        if token == "_":
            scheduler.advance(commit_pause)
        elif token.startswith("wait="):
            scheduler.advance(_milliseconds(token, "wait=") / 1000)
        elif token == "hold" or token.startswith("hold="):
            held = _milliseconds(token, "hold=") if "=" in token else DEFAULT_HOLD_MS
            engine.on_dual_key_press()
            scheduler.advance(held / 1000)
            engine.on_dual_key_release()
        elif token.isdigit() and int(token) == DUAL_KEY:
            engine.on_dual_key_press()
            engine.on_dual_key_release()
        elif token.isdigit():
            engine.on_key_press(int(token))
        else:
            raise ValueError(f"Unrecognised key script token: {token!r}")

        if trace is not None:
            trace.append(f"{token:>8} -> {engine.get_display_text()!r}")

    scheduler.advance(commit_pause)
    text = engine.committed_text
    engine.close()
    return text


def _milliseconds(token: str, prefix: str) -> int:
    value = token[len(prefix):]
    if not value.isdigit():
        raise ValueError(f"Expected milliseconds in {token!r}")
    return int(value)


def handle_keypad(args, config: Config) -> None:
    """Handle keypad command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.
    """
    trace: list[str] | None = [] if args.trace else None
    text = replay(args.script, config, gap_ms=args.gap, trace=trace)

    for line in trace or []:
        print(line)
    print(f"Text: {text!r}")

    if args.search:
        service = SearchService(resolve_catalog(args, config))
        for entity in service.search(text):
            print(f"  {entity.id:>4} {entity.name}")
