"""Configuration settings and constants for pass-search-provider.

Everything lives in `config.settings`; this package re-exports it so
callers can write `from config import OTP_SENTINEL`.
"""

from .settings import (
	APP_NAME, NOTIFY_ICON, NOTIFY_TIMEOUT_MS, NOTIFY_COMMAND, BUS_NAME, OBJECT_PATH,
	OTP_SENTINEL, OTP_URL_MARKER, CLIPBOARD_CLEAR_DELAY, STORE_DIR_NAME, ENTRY_SUFFIX, LOG_LEVEL,
	home_dir, store_dir, gpg_binary, clipboard_delay
)

__all__ = [
	'APP_NAME', 'NOTIFY_ICON', 'NOTIFY_TIMEOUT_MS', 'NOTIFY_COMMAND', 'BUS_NAME', 'OBJECT_PATH',
	'OTP_SENTINEL', 'OTP_URL_MARKER', 'CLIPBOARD_CLEAR_DELAY', 'STORE_DIR_NAME', 'ENTRY_SUFFIX', 'LOG_LEVEL',
	'home_dir', 'store_dir', 'gpg_binary', 'clipboard_delay'
]
