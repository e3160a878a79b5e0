from __future__ import annotations
from collections import deque
import sys
import time
from typing import Deque, List

_MAX = 400
_PREFIX = "[Mood]"
_buf: Deque[str] = deque(maxlen=_MAX)

def push(line: str) -> None:
    _buf.append(str(line))

def tail(n: int = 200) -> List[str]:
    if n <= 0:
        return []
    return list(_buf)[-n:]

def clear() -> None:
    _buf.clear()

def log(msg: str, *, echo: bool = True) -> str:
    """Timestamp, keep in the ring, and (optionally) echo to stderr."""
    line = f"{time.strftime('%H:%M:%S')} {_PREFIX} {msg}\n"
    push(line)
    if echo:
        try:
            sys.stderr.write(line)
        except (OSError, ValueError):
            pass
    return line
