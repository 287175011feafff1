"""Wipeable container for decrypted or derived secret text.

Python strings are immutable, so the bytes live in a bytearray that is
zero-filled when the owning `with` block exits. `reveal()` hands out a
short-lived str for APIs that insist on one (clipboard, pyotp); callers
drop it as soon as the call returns.
"""
from __future__ import annotations
from typing import Optional


class SecretText:
	__slots__ = ('_buf',)

	def __init__(self, data: bytes | bytearray | str = b''):
		if isinstance(data, str):
			data = data.encode('utf-8')
		self._buf: Optional[bytearray] = bytearray(data)
		if isinstance(data, bytearray):
			# We took a copy; the caller's buffer is ours to clear
			data[:] = b'\x00' * len(data)

	@property
	def wiped(self) -> bool:
		return self._buf is None

	def reveal(self) -> str:
		if self._buf is None: raise ValueError('Secret already wiped')
		return self._buf.decode('utf-8')

	def first_line(self) -> 'SecretText':
		"""Return the first line as a new secret (pass keeps the password there)."""
		if self._buf is None: raise ValueError('Secret already wiped')
		end = self._buf.find(b'\n')
		line = self._buf[:end] if end >= 0 else self._buf[:]
		if line.endswith(b'\r'):
			line[-1:] = b''
		return SecretText(line)

	def wipe(self) -> None:
		if self._buf is None:
			return
		for i in range(len(self._buf)):
			self._buf[i] = 0
		self._buf = None

	def __len__(self) -> int:
		return 0 if self._buf is None else len(self._buf)

	def __bool__(self) -> bool:
		return bool(self._buf)

	def __enter__(self) -> 'SecretText':
		return self

	def __exit__(self, *exc) -> None:
		self.wipe()

	def __del__(self):
		self.wipe()

	def __repr__(self) -> str:
		return '<SecretText wiped>' if self._buf is None else '<SecretText ***>'

	__str__ = __repr__
