"""Console diagnostics: info, error, warning and free-form messages."""

from __future__ import annotations


def _to_text(value: object) -> str:
    """Render a value the way the engine's diagnostics expect."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def info(msg: str) -> None:
    """Print an informational line."""
    print(f"[INFO]: {msg}")


def error(msg: str) -> None:
    """Print an error line."""
    print(f"[ERROR]: {msg}")


def warning(msg: str) -> None:
    """Print a warning line."""
    print(f"[WARNING]: {msg}")


def message(*args: object) -> None:
    """Print all arguments concatenated into one message line."""
    print("[MESSAGE]: " + "".join(_to_text(arg) for arg in args))