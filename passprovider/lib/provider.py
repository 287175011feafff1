"""Host-facing search provider interface.

A desktop search host drives a provider through three calls: get the
results for some terms, describe a batch of results, and activate one.
`PassSearchProvider` answers them from a password store.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from .activation import ActivationController
from .clipboard import ClipboardSession
from .matcher import CredentialMatcher, ResultMeta
from .notify import Notifier
from .otp import OtpExtractor
from .store import PasswordStore


class SearchProvider(ABC):
	@abstractmethod
	def initial_result_set(self, terms: Sequence[str]) -> List[str]: ...

	@abstractmethod
	def result_metas(self, identifiers: Sequence[str]) -> List[ResultMeta]: ...

	@abstractmethod
	def activate_result(self, identifier: str, terms: Sequence[str], timestamp: int) -> None: ...

	def subsearch_result_set(self, previous: Sequence[str], terms: Sequence[str]) -> List[str]:
		return self.initial_result_set(terms)

	def launch_search(self, terms: Sequence[str], timestamp: int) -> None:
		"""Opening a full search UI is not supported."""


class PassSearchProvider(SearchProvider):
	def __init__(self, store: Optional[PasswordStore] = None, clipboard: Optional[ClipboardSession] = None,
			notifier: Optional[Notifier] = None, extractor: Optional[OtpExtractor] = None):
		self.store = store if store is not None else PasswordStore()
		self.clipboard = clipboard if clipboard is not None else ClipboardSession()
		self.notifier = notifier if notifier is not None else Notifier()
		self.matcher = CredentialMatcher(self.store)
		self.controller = ActivationController(self.store, self.clipboard, self.notifier, extractor)

	def initial_result_set(self, terms: Sequence[str]) -> List[str]:
		return self.matcher.filter(terms)

	def subsearch_result_set(self, previous: Sequence[str], terms: Sequence[str]) -> List[str]:
		return self.matcher.refine(previous, terms)

	def result_metas(self, identifiers: Sequence[str]) -> List[ResultMeta]:
		return self.matcher.describe(identifiers)

	def activate_result(self, identifier: str, terms: Sequence[str], timestamp: int = 0) -> None:
		self.controller.activate(identifier, terms, timestamp)

	def wait(self, timeout: Optional[float] = None) -> None:
		"""Block until every scheduled clipboard clear has run."""
		self.clipboard.join(timeout)

	def close(self) -> None:
		self.clipboard.close()
