"""One-time code extraction from decrypted entries.

An entry may carry an `otpauth://totp/...` provisioning URL anywhere in
its text. The URL is parsed leniently: unknown query parameters are
ignored and the secret length is not validated, since several providers
still hand out 80-bit secrets that strict parsers reject.
"""
from __future__ import annotations
import binascii, hashlib, time, logging
from dataclasses import dataclass, field
from typing import Callable, Optional
from urllib.parse import urlsplit, parse_qsl, unquote
import pyotp
from config.settings import OTP_URL_MARKER
from .secret import SecretText

log = logging.getLogger(__name__)

class OtpError(Exception): ...

class NoOtpUrl(OtpError):
	def __init__(self, msg: str = 'No OTP URL found'):
		super().__init__(msg)

class InvalidOtpUrl(OtpError): ...
class CodeGenerationFailed(OtpError): ...

ALGORITHMS = {'SHA1': hashlib.sha1, 'SHA256': hashlib.sha256, 'SHA512': hashlib.sha512}
DEFAULT_DIGITS = 6
DEFAULT_PERIOD = 30


@dataclass(frozen=True)
class OtpDescriptor:
	url: str = field(repr=False)
	secret: str = field(repr=False)
	algorithm: str = 'SHA1'
	digits: int = DEFAULT_DIGITS
	period: int = DEFAULT_PERIOD
	issuer: str = ''
	account: str = ''


def find_otp_url(text: str) -> str:
	"""Return the provisioning URL embedded in `text`.

	The URL runs from the marker up to the first whitespace character, so
	labels or comments after it on the same line are not part of it.
	"""
	start = text.find(OTP_URL_MARKER)
	if start < 0:
		raise NoOtpUrl()
	end = len(text)
	for pos in range(start, len(text)):
		if text[pos].isspace():
			end = pos
			break
	return text[start:end]


def _positive_int(params: dict, key: str, default: int) -> int:
	raw = params.get(key)
	if raw is None or raw == '':
		return default
	try:
		value = int(raw)
	except ValueError:
		raise InvalidOtpUrl(f'Invalid {key}: {raw!r}')
	if value <= 0:
		raise InvalidOtpUrl(f'Invalid {key}: {raw!r}')
	return value


def parse_otp_url(url: str) -> OtpDescriptor:
	try:
		parts = urlsplit(url)
	except ValueError as e:
		raise InvalidOtpUrl(f'Malformed OTP URL: {e}') from e
	if parts.scheme.lower() != 'otpauth':
		raise InvalidOtpUrl('Not an otpauth URL')
	kind = parts.netloc.lower()
	if kind != 'totp':
		raise InvalidOtpUrl(f'Unsupported OTP type: {kind or "missing"}')
	# Last value wins for repeated keys
	params = {k.lower(): v for k, v in parse_qsl(parts.query, keep_blank_values=True)}
	secret = params.get('secret', '').replace(' ', '').upper()
	if not secret:
		raise InvalidOtpUrl('Missing secret')
	label = unquote(parts.path.lstrip('/'))
	issuer, _, account = label.rpartition(':')
	return OtpDescriptor(
		url=url,
		secret=secret,
		algorithm=(params.get('algorithm') or 'SHA1').upper(),
		digits=_positive_int(params, 'digits', DEFAULT_DIGITS),
		period=_positive_int(params, 'period', DEFAULT_PERIOD),
		issuer=params.get('issuer') or issuer,
		account=account,
	)


def generate_code(desc: OtpDescriptor, for_time: Optional[float] = None) -> SecretText:
	digest = ALGORITHMS.get(desc.algorithm)
	if digest is None:
		raise CodeGenerationFailed(f'Unsupported algorithm: {desc.algorithm}')
	try:
		totp = pyotp.TOTP(desc.secret, digits=desc.digits, digest=digest, interval=desc.period)
		code = totp.at(time.time() if for_time is None else for_time)
	except (binascii.Error, ValueError, TypeError) as e:
		raise CodeGenerationFailed(f'Cannot generate code: {e}') from e
	return SecretText(code)


class OtpExtractor:
	def __init__(self, clock: Callable[[], float] = time.time):
		self.clock = clock

	def extract(self, secret: SecretText) -> SecretText:
		"""Produce the code valid now for the URL stored in `secret`."""
		text = secret.reveal()
		try:
			desc = parse_otp_url(find_otp_url(text))
		finally:
			del text
		log.debug('generating %s-digit %s code (period %ss)', desc.digits, desc.algorithm, desc.period)
		return generate_code(desc, self.clock())
