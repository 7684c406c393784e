"""
Snowflake ID Generator Utility

Generates time-ordered 64-bit snowflake identifiers.

Each generator owns one per-millisecond sequence counter. A process normally
shares a single instance (see get_snowflake_generator()) so that every call
site draws from the same counter.
"""

import os
import threading
import time
from typing import Callable, Optional

from snowflake_codec.core.config import Settings, settings
from snowflake_codec.core.error_codes import ConfigurationErrorCode
from snowflake_codec.core.exceptions import (
    ClockRegressionException,
    ConfigurationException,
    TimestampOutOfRangeException,
)
from snowflake_codec.core.logfire_config import initialize_logfire
from snowflake_codec.core.logger import get_logger
from snowflake_codec.utils.snowflake_layout import (
    IDENTITY_LIMIT,
    MAX_SEQUENCE,
    pack_snowflake,
)

logger = get_logger(__name__)

Clock = Callable[[], int]


def current_millis() -> int:
    """Wall-clock time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def _validate_identity(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigurationException(
            f"{name} must be a non-negative integer",
            ConfigurationErrorCode.INVALID_IDENTITY,
            details={name: value},
        )
    return value


class SnowflakeGenerator:
    """
    Thread-safe snowflake generator.

    Snowflakes are 64-bit integers with the following structure:
    - 42 bits for milliseconds since EPOCH
    - 5 bits for the worker id (modulo 32)
    - 5 bits for the process id (modulo 32)
    - 12 bits for a sequence number within the millisecond

    When more than 4096 ids are requested within one millisecond the call
    waits until the clock moves on, so values never repeat within a process.
    """

    def __init__(
        self,
        worker_id: int = 0,
        process_id: Optional[int] = None,
        clock: Optional[Clock] = None,
        sleep_interval: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Args:
            worker_id: Cluster worker identifier, 0 when not running in a cluster
            process_id: Process identifier, the OS pid by default
            clock: Callable returning epoch milliseconds, current_millis by default
            sleep_interval: Seconds to sleep between clock polls while waiting
                out a sequence overflow; 0 spins
            sleep: Sleep function used with sleep_interval
        """
        self._worker_id = _validate_identity("worker_id", worker_id)
        self._process_id = _validate_identity(
            "process_id", os.getpid() if process_id is None else process_id
        )
        if sleep_interval < 0:
            raise ConfigurationException(
                "sleep_interval must not be negative",
                ConfigurationErrorCode.INVALID_CONFIG,
                details={"sleep_interval": sleep_interval},
            )

        self._clock = clock or current_millis
        self._sleep_interval = sleep_interval
        self._sleep = sleep

        self._lock = threading.Lock()
        self._last_time = -1
        self._sequence = 0

        logger.debug(
            "SnowflakeGenerator initialized (worker_id=%s, process_id=%s, "
            "encoded as %s/%s)",
            self._worker_id,
            self._process_id,
            self._worker_id % IDENTITY_LIMIT,
            self._process_id % IDENTITY_LIMIT,
        )

    @classmethod
    def from_settings(
        cls, config: Settings, clock: Optional[Clock] = None
    ) -> "SnowflakeGenerator":
        """Build a generator from the snowflake__* settings."""
        return cls(
            worker_id=config.snowflake__worker_id,
            process_id=config.snowflake__process_id,
            clock=clock,
            sleep_interval=config.snowflake__overflow_sleep_interval,
        )

    @property
    def worker_id(self) -> int:
        return self._worker_id

    @property
    def process_id(self) -> int:
        return self._process_id

    @property
    def last_time(self) -> int:
        """Millisecond packed into the most recent snowflake, -1 before the first."""
        return self._last_time

    @property
    def sequence(self) -> int:
        return self._sequence

    def _wait_next_millis(self, current: int) -> int:
        now = self._clock()
        while now <= current:
            if self._sleep_interval:
                self._sleep(self._sleep_interval)
            now = self._clock()
        return now

    def _next_sequence(self) -> tuple[int, int]:
        """Pick the (time, sequence) pair to pack. Caller holds the lock."""
        now = self._clock()

        if now < self._last_time:
            exc = ClockRegressionException(
                "System clock moved backwards",
                details={"last_time": self._last_time, "current_time": now},
            )
            logger.error("Refusing to generate snowflake: %s", exc.to_dict())
            raise exc

        if now != self._last_time:
            return now, 0

        sequence = self._sequence + 1
        if sequence > MAX_SEQUENCE:
            logger.debug("Sequence exhausted at %d, waiting for next millisecond", now)
            return self._wait_next_millis(now), 0
        return now, sequence

    def generate_id(self) -> int:
        """
        Generate a unique snowflake ID.

        Generator state only moves once the value has been packed, so a
        rejected clock reading leaves the counter untouched.

        Returns:
            int: Snowflake as integer

        Raises:
            ClockRegressionException: If the clock moved backwards since the last call
            TimestampOutOfRangeException: If the clock is outside the 42-bit range
        """
        with self._lock:
            now, sequence = self._next_sequence()
            try:
                snowflake = pack_snowflake(
                    now, self._worker_id, self._process_id, sequence
                )
            except TimestampOutOfRangeException as exc:
                exc.with_context(worker_id=self._worker_id, process_id=self._process_id)
                logger.error("Refusing to generate snowflake: %s", exc.to_dict())
                raise

            self._last_time = now
            self._sequence = sequence
            return snowflake

    def generate_id_str(self) -> str:
        """
        Generate a unique snowflake ID as string.

        64-bit values exceed what many JSON consumers read exactly, so this
        is the form to hand to other systems.
        """
        return str(self.generate_id())

    generate = generate_id_str


_generator: Optional[SnowflakeGenerator] = None
_generator_lock = threading.Lock()


def get_snowflake_generator() -> SnowflakeGenerator:
    """
    Get the process-wide SnowflakeGenerator, creating it from settings on first use.

    Returns:
        SnowflakeGenerator: The shared generator instance
    """
    global _generator
    if _generator is None:
        with _generator_lock:
            if _generator is None:
                initialize_logfire(settings)
                _generator = SnowflakeGenerator.from_settings(settings)
    return _generator


def reset_snowflake_generator() -> None:
    """Drop the shared generator so the next call rebuilds it from settings."""
    global _generator
    with _generator_lock:
        _generator = None


def generate_snowflake_id() -> int:
    """Convenience function to generate a snowflake ID from the shared generator."""
    return get_snowflake_generator().generate_id()


def generate_snowflake_id_str() -> str:
    """Convenience function to generate a snowflake ID as string."""
    return get_snowflake_generator().generate_id_str()
