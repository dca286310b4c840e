"""Terminal message helpers for the RICOAI CLI.

Messages go to stderr so stdout stays machine-readable. Each line starts with
a glyph; terminals that cannot encode the emoji get an ASCII fallback.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(pair: tuple[str, str]) -> str:
    """Pick the emoji of an ``(emoji, fallback)`` pair if stderr can show it."""
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold caution line to **stderr**."""
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**."""
    click.secho(f"{glyph(SUCCESS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**."""
    click.secho(f"{glyph(ERROR)}  {msg}", fg="red", bold=True, err=True)
