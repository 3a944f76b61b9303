"""Prompt templates.

The remote prompt wording lives in .txt files next to this module. A
file with the same name under ./prompts/ in the working directory takes
precedence, so the wording can be changed without touching the package.
"""

from functools import lru_cache
from pathlib import Path

_PACKAGE_DIR = Path(__file__).parent


def _search_paths(filename: str) -> list[Path]:
    return [Path.cwd() / "prompts" / filename, _PACKAGE_DIR / filename]


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Read a prompt template by name.

    Args:
        name: Template name without the .txt suffix

    Returns:
        Template text without its trailing newline

    Raises:
        FileNotFoundError: If neither the working directory nor the
            package provides the template
    """
    candidates = _search_paths(f"{name}.txt")
    for path in candidates:
        if path.is_file():
            return path.read_text(encoding="utf-8").rstrip("\n")

    searched = "\n".join(f"  - {path}" for path in candidates)
    raise FileNotFoundError(f"Prompt '{name}' not found. Searched:\n{searched}")


def build_concise_answer_prompt(question: str) -> str:
    """Wrap a raw utterance in the single-turn remote prompt."""
    return load_prompt("concise_answer").format(question=question)


def clear_cache() -> None:
    """Forget loaded templates so edited files are picked up."""
    load_prompt.cache_clear()


__all__ = [
    "build_concise_answer_prompt",
    "clear_cache",
    "load_prompt",
]
