"""Japanese to romaji conversion and the process-wide engine handle.

The pykakasi dictionaries take a moment to load, so the engine is built on a
background thread at startup. Until it is ready, callers get
EngineNotReadyError instead of blocking or racing the initializer.
"""
from __future__ import annotations
import enum
import logging
import threading
from typing import Callable

import pykakasi

from translation_relay.common.errors import EngineNotReadyError

LOGGER = logging.getLogger("translation_relay.romanizer")

class EngineState(str, enum.Enum):
    INITIALIZING = "initializing"
    READY = "ready"
    FAILED = "failed"


class Romanizer:
    """Hepburn romanization, one space between converted segments."""

    def __init__(self, kakasi: pykakasi.kakasi | None = None) -> None:
        self._kakasi = kakasi or pykakasi.kakasi()

    def convert(self, text: str) -> str:
        segments = self._kakasi.convert(text)
        words = [seg["hepburn"].strip() for seg in segments]
        return " ".join(w for w in words if w)


class EngineHandle:
    """Holds the shared Romanizer and its lifecycle state."""

    def __init__(self, factory: Callable[[], Romanizer] = Romanizer) -> None:
        self._factory = factory
        self._lock = threading.Lock()
        self._state = EngineState.INITIALIZING
        self._engine: Romanizer | None = None
        self._error: Exception | None = None
        self._thread: threading.Thread | None = None

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def error(self) -> Exception | None:
        return self._error

    def initialize(self) -> None:
        """Build the engine synchronously and record the outcome."""
        try:
            engine = self._factory()
        except Exception as e:
            LOGGER.error("Romanizer initialization failed: %s", e)
            with self._lock:
                self._error = e
                self._state = EngineState.FAILED
            return
        with self._lock:
            self._engine = engine
            self._error = None
            self._state = EngineState.READY
        LOGGER.info("Romanizer initialized (kanji -> kana/romaji ready)")

    def start(self) -> threading.Thread:
        """Start initialization on a daemon thread. Calling twice is a no-op."""
        with self._lock:
            if self._thread is not None:
                return self._thread
            self._state = EngineState.INITIALIZING
            self._thread = threading.Thread(
                target=self.initialize, name="romanizer-init", daemon=True
            )
        self._thread.start()
        return self._thread

    def set_engine(self, engine: Romanizer) -> None:
        """Install an already-built engine and mark the handle ready.

        Injection hook for callers that construct the engine themselves,
        such as tests supplying a prebuilt or fake Romanizer.
        """
        with self._lock:
            self._engine = engine
            self._error = None
            self._state = EngineState.READY

    def get(self) -> Romanizer:
        """Return the engine, or raise EngineNotReadyError while not ready."""
        with self._lock:
            if self._state is not EngineState.READY or self._engine is None:
                raise EngineNotReadyError(self._state.value)
            return self._engine
