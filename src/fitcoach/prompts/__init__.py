"""Coach persona prompts.

The OpenAI-backed coach needs a system prompt; the packaged default lives
next to this module and can be replaced without touching the package by
pointing FITCOACH_PROMPTS_DIR at a directory holding ``<name>.txt``.
"""

import os
from functools import lru_cache
from pathlib import Path

PROMPTS_DIR_ENV = "FITCOACH_PROMPTS_DIR"

_PACKAGE_DIR = Path(__file__).parent


def prompt_dirs() -> list[Path]:
    """Directories searched for prompt files, highest priority first."""
    dirs = []
    override = os.getenv(PROMPTS_DIR_ENV)
    if override:
        dirs.append(Path(override).expanduser())
    dirs.append(_PACKAGE_DIR)
    return dirs


@lru_cache(maxsize=8)
def load_prompt(name: str) -> str:
    """Read ``<name>.txt`` from the first directory that has it.

    Raises:
        FileNotFoundError: If no searched directory holds the prompt
    """
    searched = [d / f"{name}.txt" for d in prompt_dirs()]
    for path in searched:
        if path.is_file():
            return path.read_text(encoding="utf-8").strip()

    raise FileNotFoundError(
        f"Prompt '{name}' not found in: " + ", ".join(str(p) for p in searched)
    )


def get_coach_prompt() -> str:
    """System prompt describing the fitness coach persona."""
    return load_prompt("coach")


def clear_cache() -> None:
    load_prompt.cache_clear()


__all__ = [
    "PROMPTS_DIR_ENV",
    "clear_cache",
    "get_coach_prompt",
    "load_prompt",
    "prompt_dirs",
]
