"""Transient desktop notifications via notify-send."""
from __future__ import annotations
import subprocess, logging
from typing import Callable, List, Optional
from config.settings import APP_NAME, NOTIFY_ICON, NOTIFY_TIMEOUT_MS, NOTIFY_COMMAND

log = logging.getLogger(__name__)

class NotificationError(Exception): ...


class Notifier:
	def __init__(self, app_name: str = APP_NAME, icon: str = NOTIFY_ICON, timeout_ms: int = NOTIFY_TIMEOUT_MS,
			command: str = NOTIFY_COMMAND, runner: Optional[Callable[..., subprocess.CompletedProcess]] = None):
		self.app_name = app_name
		self.icon = icon
		self.timeout_ms = timeout_ms
		self.command = command
		self._run = runner or subprocess.run

	def build_command(self, summary: str, body: str) -> List[str]:
		return [
			self.command,
			f'--app-name={self.app_name}',
			f'--icon={self.icon}',
			f'--expire-time={self.timeout_ms}',
			'--hint=boolean:transient:true',
			'--', summary, body,
		]

	def send(self, summary: str, body: str) -> None:
		cmd = self.build_command(summary, body)
		try:
			res = self._run(cmd, capture_output=True, check=False, timeout=5)
		except (OSError, subprocess.TimeoutExpired) as e:
			raise NotificationError(f'{self.command} failed: {e}') from e
		if res.returncode != 0:
			err = (res.stderr or b'').decode('utf-8', errors='replace').strip()
			raise NotificationError(err or f'{self.command} exited with status {res.returncode}')

	def notify(self, summary: str, body: str) -> bool:
		"""Best-effort delivery; failures are logged and swallowed."""
		try:
			self.send(summary, body)
		except NotificationError as e:
			log.warning('Notification not delivered: %s', e)
			return False
		return True
