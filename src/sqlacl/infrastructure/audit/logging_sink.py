"""Audit sink writing permission changes to a logger."""

import logging

from sqlacl.domain.entities import AuditEvent


class LoggingAuditSink:
    """Logs one line per committed permission change."""

    def __init__(self, logger_name: str = "sqlacl.audit") -> None:
        self._logger = logging.getLogger(logger_name)

    def publish(self, event: AuditEvent) -> None:
        self._logger.info(
            "%s %s by %s: %s -> %s",
            event.operation,
            event.key,
            event.actor or "<system>",
            _describe(event.before, event.grant_option_before),
            _describe(event.after, event.grant_option_after),
        )


def _describe(effect: object, grant_option: bool) -> str:
    if effect is None:
        return "none"
    return f"{effect} with grant option" if grant_option else str(effect)
