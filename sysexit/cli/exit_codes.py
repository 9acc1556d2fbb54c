"""Deterministic process exit-code mapping for the CLI."""

from sysexit.codes import Code

SUCCESS = Code.SUCCESS
USER_ERROR = Code.USAGE
VALIDATION_ERROR = Code.DATAERR
INTERNAL_BUG = Code.SOFTWARE
CONFIG_ERROR = Code.CONFIG
