"""Clipboard writes with automatic expiry.

Every copy issues a ticket carrying a fresh generation number and
schedules a clear for that ticket. When a clear fires it only empties
the clipboard if its generation is still the latest one, so an older
timer never wipes a value copied after it. Writes and the generation
check share one lock.
"""
from __future__ import annotations
import threading, time, logging
from dataclasses import dataclass
from typing import Callable, List, Optional
import pyperclip
from config.settings import clipboard_delay

log = logging.getLogger(__name__)

class ClipboardError(Exception): ...


@dataclass(frozen=True)
class ClipboardClearTicket:
	generation: int
	scheduled_at: float
	delay: float

	@property
	def deadline(self) -> float:
		return self.scheduled_at + self.delay


class ThreadScheduler:
	"""Runs each deferred action on its own `threading.Timer`.

	Timers are non-daemon so a short-lived process still clears the
	clipboard before exiting; `join()` waits for them explicitly and
	`cancel_all()` drops whatever is still pending.
	"""

	def __init__(self):
		self._timers: List[threading.Timer] = []
		self._lock = threading.Lock()

	def schedule(self, delay: float, action: Callable[[], None]) -> threading.Timer:
		timer = threading.Timer(delay, action)
		timer.name = f'clipboard-clear-{delay:g}s'
		with self._lock:
			self._timers = [t for t in self._timers if t.is_alive()]
			self._timers.append(timer)
		timer.start()
		return timer

	def pending(self) -> int:
		with self._lock:
			return sum(1 for t in self._timers if t.is_alive())

	def join(self, timeout: Optional[float] = None) -> None:
		with self._lock:
			timers = list(self._timers)
		for t in timers:
			t.join(timeout)

	def cancel_all(self) -> None:
		with self._lock:
			timers, self._timers = self._timers, []
		for t in timers:
			t.cancel()


class ClipboardSession:
	def __init__(self, set_text: Callable[[str], None] | None = None, scheduler=None,
			delay: float | None = None, clock: Callable[[], float] = time.monotonic):
		self._set_text = set_text or pyperclip.copy
		self.scheduler = scheduler if scheduler is not None else ThreadScheduler()
		self.delay = delay if delay is not None else clipboard_delay()
		self.clock = clock
		self._generation = 0
		self._live = False
		self._lock = threading.Lock()

	@property
	def generation(self) -> int:
		with self._lock:
			return self._generation

	def _write(self, text: str) -> None:
		try:
			self._set_text(text)
		except ClipboardError:
			raise
		except Exception as e:
			raise ClipboardError(f'Cannot write to clipboard: {e}') from e

	def copy_with_expiry(self, value: str, delay: float | None = None) -> ClipboardClearTicket:
		"""Put `value` on the clipboard and schedule it to be cleared.

		Raises ClipboardError if the write fails; no clear is scheduled then.
		"""
		delay = self.delay if delay is None else delay
		with self._lock:
			self._write(value)
			self._generation += 1
			self._live = True
			ticket = ClipboardClearTicket(self._generation, self.clock(), delay)
		log.debug('clipboard written, generation %s clears in %ss', ticket.generation, delay)
		self.scheduler.schedule(delay, lambda: self.expire(ticket))
		return ticket

	def expire(self, ticket: ClipboardClearTicket) -> bool:
		"""Clear the clipboard if `ticket` is still the latest one."""
		with self._lock:
			if not self._live:
				return False
			if ticket.generation != self._generation:
				log.debug('clear for generation %s superseded by %s', ticket.generation, self._generation)
				return False
			try:
				self._write('')
			except ClipboardError as e:
				log.warning('Clipboard clear failed: %s', e)
				return False
			self._live = False
		log.debug('clipboard cleared (generation %s)', ticket.generation)
		return True

	def join(self, timeout: Optional[float] = None) -> None:
		join = getattr(self.scheduler, 'join', None)
		if join is not None:
			join(timeout)

	def close(self) -> None:
		"""Drop pending timers and clear right away if a value is still live."""
		cancel = getattr(self.scheduler, 'cancel_all', None)
		if cancel is not None:
			cancel()
		with self._lock:
			if not self._live:
				return
			ticket = ClipboardClearTicket(self._generation, self.clock(), 0)
		self.expire(ticket)
