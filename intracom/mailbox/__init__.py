"""Mailbox module."""

from .mailbox import IMailboxStore, MailboxStore

__all__ = ["IMailboxStore", "MailboxStore"]
