"""CLI commands implemented with click.

Acts as a terminal host for the search provider: the same three calls a
desktop shell makes (search, describe, activate) plus `info`.
"""
from __future__ import annotations
import logging, click
from config import settings
from passprovider.lib.provider import PassSearchProvider

def make_provider() -> PassSearchProvider:
	return PassSearchProvider()

@click.group()
@click.option('-v', '--verbose', is_flag=True, help='Log debug output to stderr.')
def cli(verbose):
	"""Pass search provider"""
	logging.basicConfig(level=logging.DEBUG if verbose else settings.LOG_LEVEL, format='%(levelname)s %(name)s: %(message)s')

@cli.command()
@click.argument('terms', nargs=-1, required=True)
def search(terms):
	"""List entries matching TERMS (start with `otp` to ask for a code)."""
	provider = make_provider()
	for ident in provider.initial_result_set(list(terms)):
		click.echo(ident)

@cli.command()
@click.argument('identifiers', nargs=-1, required=True)
def metas(identifiers):
	"""Describe result IDENTIFIERS."""
	provider = make_provider()
	for m in provider.result_metas(list(identifiers)):
		click.echo(f"{m.id}\t{m.name}\t{m.description}")

@cli.command()
@click.argument('identifier')
@click.argument('terms', nargs=-1)
@click.option('--otp', is_flag=True, help='Copy a one-time code instead of the password.')
@click.option('--wait/--no-wait', default=True, help='Stay until the clipboard has been cleared.')
def activate(identifier, terms, otp, wait):
	"""Copy the password (or code) of IDENTIFIER to the clipboard."""
	terms = list(terms) or [identifier]
	if otp and terms[0] != settings.OTP_SENTINEL:
		terms.insert(0, settings.OTP_SENTINEL)
	provider = make_provider()
	provider.activate_result(identifier, terms, 0)
	if wait:
		provider.wait()
	else:
		# Nobody will be around to clear it later
		provider.close()

@cli.command()
def info():
	"""Show where entries are read from and how long copies live."""
	click.echo(f"Store: {settings.store_dir()}")
	click.echo(f"Clipboard clear: {settings.clipboard_delay()}s")
	click.echo(f"Bus name: {settings.BUS_NAME}")
	click.echo(f"Object path: {settings.OBJECT_PATH}")
