"""Konstanter for payqr."""

QR_SCHEMA_VERSION = 1
DATE_FORMAT = "%Y%m%d"
SWISH_PREFIX = "C"
SWISH_SEPARATOR = ";"
