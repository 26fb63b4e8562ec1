"""Shared building blocks for admin back-end services: enums, errors, tokens,
password hashing, request context, data permissions, i18n, captcha storage and
configuration for databases, redis, MongoDB and message queues."""

__version__ = "0.1.0"