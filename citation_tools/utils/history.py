"""
History of identifiers entered at the interactive prompt.

The history is a plain list owned by the caller: functions here take a list
and return a new one, and only load/save touch the disk.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


def load_history(path: Optional[Path]) -> List[str]:
    """Load previously entered identifiers, oldest first.

    A missing or unreadable file yields an empty history.
    """
    if path is None or not Path(path).exists():
        return []

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read history file {path}, starting fresh: {e}")
        return []

    if not isinstance(data, list):
        logger.warning(f"Ignoring malformed history file {path}")
        return []

    return [str(entry) for entry in data if entry]


def append_history(history: Sequence[str], raw: str) -> List[str]:
    """Return a new history with raw appended; blank entries are not recorded."""
    entry = (raw or '').strip()
    if not entry:
        return list(history)
    return list(history) + [entry]


def save_history(path: Path, history: Sequence[str], max_entries: int = 100):
    """Write the most recent max_entries identifiers to path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    entries = list(history)
    if max_entries > 0:
        entries = entries[-max_entries:]

    with open(path, 'w', encoding='utf-8') as f:
        json.dump(entries, f, indent=2)
