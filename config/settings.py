"""Project configuration settings.

Constants are fixed here; anything the environment can override is
resolved at call time so tests can point it elsewhere.
"""

from pathlib import Path
import os

# Notifications
APP_NAME = "Pass"
NOTIFY_ICON = "dialog-password"
NOTIFY_TIMEOUT_MS = 4000
NOTIFY_COMMAND = "notify-send"

# Search provider identity (used by the desktop host)
BUS_NAME = "io.m51.Pass.SearchProvider"
OBJECT_PATH = "/io/m51/Pass/SearchProvider"

# Query micro-protocol
OTP_SENTINEL = "otp"
OTP_URL_MARKER = "otpauth://"

# Clipboard
CLIPBOARD_CLEAR_DELAY = 40  # seconds

# Store
STORE_DIR_NAME = ".password-store"
ENTRY_SUFFIX = ".gpg"

# Logging
LOG_LEVEL = "WARNING"


def home_dir() -> Path:
	home = os.environ.get('HOME')
	return Path(home) if home else Path.home()


def store_dir() -> Path:
	env_path = os.environ.get('PASSWORD_STORE_DIR')
	return Path(env_path) if env_path else home_dir() / STORE_DIR_NAME


def gpg_binary() -> str:
	return os.environ.get('PASSWORD_STORE_GPG') or 'gpg'


def clipboard_delay() -> int:
	raw = os.environ.get('PASS_CLIPBOARD_TIMEOUT')
	if not raw:
		return CLIPBOARD_CLEAR_DELAY
	try:
		value = int(raw)
	except ValueError:
		return CLIPBOARD_CLEAR_DELAY
	return value if value > 0 else CLIPBOARD_CLEAR_DELAY


__all__ = [
	'APP_NAME','NOTIFY_ICON','NOTIFY_TIMEOUT_MS','NOTIFY_COMMAND','BUS_NAME','OBJECT_PATH',
	'OTP_SENTINEL','OTP_URL_MARKER','CLIPBOARD_CLEAR_DELAY','STORE_DIR_NAME','ENTRY_SUFFIX','LOG_LEVEL',
	'home_dir','store_dir','gpg_binary','clipboard_delay'
]
