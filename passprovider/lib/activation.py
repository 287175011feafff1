"""Deliver the secret behind an activated search result.

One activation means: look the entry up again, decrypt it, pick the
password or a one-time code, put that on the clipboard, and send exactly
one notification describing what happened. Every decrypted or derived
value is wiped before `activate` returns, whichever way it returns.
"""
from __future__ import annotations
import logging
from typing import Optional, Sequence
from .clipboard import ClipboardError
from .matcher import Query, entries_or_empty
from .otp import OtpError, OtpExtractor
from .secret import SecretText
from .store import EntryNotFound, StoreError

log = logging.getLogger(__name__)

NOT_FOUND = ('Error', 'Could Not Find Password')
PASSWORD_COPIED = 'Password copied to clipboard'
OTP_COPIED = 'OTP copied to clipboard'


class ActivationController:
	def __init__(self, store, clipboard, notifier, extractor: Optional[OtpExtractor] = None):
		self.store = store
		self.clipboard = clipboard
		self.notifier = notifier
		self.extractor = extractor or OtpExtractor()

	def activate(self, identifier: str, terms: Sequence[str], timestamp: int = 0) -> None:
		query = Query.parse(terms)
		log.debug('activate %s (otp=%s, timestamp=%s)', identifier, query.otp, timestamp)
		try:
			self._activate(identifier, query)
		except Exception:
			log.exception('Activation of %s failed', identifier)
			self.notifier.notify('Error', 'Unexpected failure')

	def _activate(self, identifier: str, query: Query) -> None:
		entry = next((e for e in entries_or_empty(self.store) if e.name == identifier), None)
		if entry is None:
			log.info('No entry named %s', identifier)
			self.notifier.notify(*NOT_FOUND)
			return
		try:
			secret = self.store.read_secret(entry.name)
		except EntryNotFound:
			log.info('%s vanished before it could be read', identifier)
			self.notifier.notify(*NOT_FOUND)
			return
		except StoreError as e:
			log.info('Cannot read %s: %s', identifier, e)
			self.notifier.notify('Could not read entry' if query.otp else 'Password Error', str(e))
			return
		with secret:
			if query.otp:
				self._deliver_code(identifier, secret)
			else:
				self._deliver_password(identifier, secret)

	def _deliver_code(self, identifier: str, secret: SecretText) -> None:
		try:
			code = self.extractor.extract(secret)
		except OtpError as e:
			log.info('No code for %s: %s', identifier, e)
			self.notifier.notify('OTP Error', str(e))
			return
		with code:
			if self._copy(code):
				self.notifier.notify(identifier, OTP_COPIED)

	def _deliver_password(self, identifier: str, secret: SecretText) -> None:
		with secret.first_line() as password:
			if self._copy(password):
				self.notifier.notify(identifier, PASSWORD_COPIED)

	def _copy(self, value: SecretText) -> bool:
		try:
			self.clipboard.copy_with_expiry(value.reveal())
		except ClipboardError as e:
			log.warning('Clipboard write failed: %s', e)
			self.notifier.notify('Clipboard Error', str(e))
			return False
		return True
