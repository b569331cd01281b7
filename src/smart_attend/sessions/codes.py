from __future__ import annotations

import secrets
import threading
from datetime import datetime
from typing import Callable

from ..common.datetime_utils import epoch_millis, now_utc
from ..core.constants import SESSION_CODE_ALPHABET, SESSION_CODE_PREFIX, SESSION_CODE_SUFFIX_LENGTH


class SessionCodeGenerator:
    """Generate ``ATT-<epoch ms>-<8 random chars>`` codes, never repeating one.

    Issued codes are remembered for the lifetime of the generator so a repeat
    is redrawn rather than handed out twice.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = now_utc,
        choice: Callable[[str], str] = secrets.choice,
    ):
        self._clock = clock
        self._choice = choice
        self._issued: set[str] = set()
        self._lock = threading.Lock()

    def _suffix(self) -> str:
        return "".join(self._choice(SESSION_CODE_ALPHABET) for _ in range(SESSION_CODE_SUFFIX_LENGTH))

    def generate(self) -> str:
        with self._lock:
            while True:
                code = f"{SESSION_CODE_PREFIX}-{epoch_millis(self._clock())}-{self._suffix()}"
                if code not in self._issued:
                    self._issued.add(code)
                    return code

    __call__ = generate
