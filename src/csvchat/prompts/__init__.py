"""Instructions given to the analysis model.

Hidden design decisions:
- The answer document contract (sections, tables, chart fences) lives in
  ``system.txt`` beside this module
- An override directory wins over the packaged copy: ``$CSVCHAT_PROMPTS_DIR``
  when set, otherwise ``./prompts``
- Each prompt file is read once per process
"""

import logging
import os
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

PACKAGE_PROMPTS = Path(__file__).parent
PROMPTS_DIR_ENV = "CSVCHAT_PROMPTS_DIR"
SYSTEM_PROMPT_NAME = "system"


def prompt_search_path() -> tuple[Path, ...]:
    """Directories holding prompt files, highest priority first."""
    override = os.environ.get(PROMPTS_DIR_ENV)
    user_dir = Path(override).expanduser() if override else Path.cwd() / "prompts"
    return (user_dir, PACKAGE_PROMPTS)


@lru_cache(maxsize=8)
def load_prompt(name: str) -> str:
    """Text of prompt ``name`` from the first directory that has ``{name}.txt``.

    Raises:
        FileNotFoundError: No directory on the search path has the file
    """
    candidates = [directory / f"{name}.txt" for directory in prompt_search_path()]
    for path in candidates:
        if path.is_file():
            logger.debug("Prompt '%s' read from %s", name, path)
            return path.read_text(encoding="utf-8")

    searched = ", ".join(str(path) for path in candidates)
    raise FileNotFoundError(f"Prompt '{name}' not found (searched {searched})")


def get_system_prompt() -> str:
    return load_prompt(SYSTEM_PROMPT_NAME)


def clear_cache() -> None:
    """Forget loaded prompts so edited files are picked up."""
    load_prompt.cache_clear()


__all__ = [
    "PROMPTS_DIR_ENV",
    "clear_cache",
    "get_system_prompt",
    "load_prompt",
    "prompt_search_path",
]
