"""Query parsing and entry filtering for the search surface."""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple
from config.settings import OTP_SENTINEL
from .store import PasswordEntry, StoreError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Query:
	terms: Tuple[str, ...]
	otp: bool = False

	@classmethod
	def parse(cls, terms: Sequence[str]) -> 'Query':
		"""A leading `otp` term asks for a one-time code instead of the password."""
		terms = tuple(terms)
		if terms and terms[0] == OTP_SENTINEL:
			return cls(terms[1:], True)
		return cls(terms, False)

	def matches(self, name: str) -> bool:
		lowered = name.lower()
		return any(t.lower() in lowered for t in self.terms)


@dataclass(frozen=True)
class ResultMeta:
	id: str
	name: str
	description: str


def entries_or_empty(store) -> List[PasswordEntry]:
	try:
		return store.list_entries()
	except StoreError as e:
		log.warning('Cannot list entries: %s', e)
		return []


class CredentialMatcher:
	def __init__(self, store):
		self.store = store

	def filter(self, terms: Sequence[str]) -> List[str]:
		query = Query.parse(terms)
		if not query.terms:
			return []
		return [e.name for e in entries_or_empty(self.store) if query.matches(e.name)]

	def refine(self, previous: Sequence[str], terms: Sequence[str]) -> List[str]:
		query = Query.parse(terms)
		return [name for name in previous if query.matches(name)]

	@staticmethod
	def describe(identifiers: Sequence[str]) -> List[ResultMeta]:
		metas = []
		for ident in identifiers:
			folder, _, _ = ident.rpartition('/')
			metas.append(ResultMeta(ident, ident, folder or 'Password Store'))
		return metas
