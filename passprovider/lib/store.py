"""Read-only access to a `pass` password store.

The store is a directory tree of gpg-encrypted files; an entry's name is
its path relative to the root without the `.gpg` suffix. Decryption is
delegated to the gpg binary, which talks to the user's agent for keys.
"""
from __future__ import annotations
import os, subprocess, logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional
from config.settings import ENTRY_SUFFIX, store_dir, gpg_binary
from .secret import SecretText

log = logging.getLogger(__name__)

class StoreError(Exception): ...
class EntryNotFound(StoreError): ...
class DecryptError(StoreError): ...


@dataclass(frozen=True)
class PasswordEntry:
	name: str
	path: Path


class PasswordStore:
	def __init__(self, root: Path | None = None, gpg: str | None = None, runner: Optional[Callable[..., subprocess.CompletedProcess]] = None):
		# Resolve path dynamically to honor environment overrides in tests
		self.root = Path(root) if root is not None else store_dir()
		self.gpg = gpg or gpg_binary()
		self._run = runner or subprocess.run

	def exists(self) -> bool:
		return self.root.is_dir()

	def list_entries(self) -> List[PasswordEntry]:
		if not self.exists(): raise StoreError(f'Password store not found: {self.root}')
		entries = []
		try:
			for dirpath, dirnames, filenames in os.walk(self.root):
				# Skip .git, .extensions and friends; walk in a stable order
				dirnames[:] = sorted(d for d in dirnames if not d.startswith('.'))
				for fn in sorted(filenames):
					if not fn.endswith(ENTRY_SUFFIX) or fn.startswith('.'): continue
					path = Path(dirpath) / fn
					name = path.relative_to(self.root).as_posix()[:-len(ENTRY_SUFFIX)]
					entries.append(PasswordEntry(name, path))
		except OSError as e:
			raise StoreError(f'Cannot read password store: {e}') from e
		return entries

	def get_entry(self, name: str) -> PasswordEntry:
		for entry in self.list_entries():
			if entry.name == name:
				return entry
		raise EntryNotFound(name)

	def read_secret(self, name: str) -> SecretText:
		"""Decrypt an entry and return its full content.

		Raises EntryNotFound if the entry is missing and DecryptError if gpg
		fails; gpg's own message becomes the error text.
		"""
		entry = self.get_entry(name)
		cmd = [self.gpg, '--quiet', '--batch', '--yes', '--decrypt', str(entry.path)]
		try:
			res = self._run(cmd, capture_output=True, check=False)
		except OSError as e:
			raise DecryptError(f'Cannot run {self.gpg}: {e}') from e
		if res.returncode != 0:
			err = (res.stderr or b'').decode('utf-8', errors='replace').strip()
			log.debug('gpg exited with %s for %s', res.returncode, name)
			raise DecryptError(err or f'gpg exited with status {res.returncode}')
		secret = SecretText(bytearray(res.stdout))
		try:
			secret.reveal()
		except UnicodeDecodeError:
			secret.wipe()
			raise DecryptError(f'{name} is not valid UTF-8') from None
		return secret
