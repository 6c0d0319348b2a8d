# fsacheck/persistence/serializer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Text formats on both ends of a validation run.

Input is one declaration group per line, ``label=[t1,t2,...]``. Output is the
report: a verdict line with optional sorted warnings, or a single error.
"""

import logging
from typing import Iterable, Iterator, List

from fsacheck.core.errors import MalformedInput
from fsacheck.interfaces.types import Declaration, Report

logger = logging.getLogger(__name__)

WARNING_HEADER = "Warning:"


def split_fields(text: str, separator: str) -> List[str]:
    """
    Split ``text`` on ``separator`` and drop trailing empty fields, so
    ``"a,b,"`` gives ``["a", "b"]`` and ``"a>0>"`` gives ``["a", "0"]``.
    """
    fields = text.split(separator)
    while fields and not fields[-1]:
        fields.pop()
    return fields


def parse_declaration(line: str) -> Declaration:
    """
    Parse one ``label=[t1,t2,...]`` line. ``[]`` is an empty group and a
    trailing comma is ignored.

    :param line: The line without its line terminator.
    :raises MalformedInput: If the line does not have that shape, or a
        non-empty group contains an empty token or no token at all.
    """
    if not line or "=" not in line or line.startswith("["):
        raise MalformedInput()

    label = line[: line.index("=")]
    if not label or not line.startswith(label + "=[") or not line.endswith("]"):
        raise MalformedInput()

    body = line[len(label) + 2 : -1]
    if not body:
        return Declaration(label, ())

    tokens = tuple(split_fields(body, ","))
    if not tokens or "" in tokens:
        raise MalformedInput()
    return Declaration(label, tokens)


def read_declarations(lines: Iterable[str]) -> Iterator[Declaration]:
    """
    Lazily parse declaration lines, so that a malformed line is only
    reported once the reader gets to it.

    Blank lines after the last declaration are ignored.
    """
    pending_blank = 0
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            pending_blank += 1
            continue
        if pending_blank:
            logger.debug("Blank line before line %d", number)
            raise MalformedInput()
        logger.debug("Line %d: %s", number, line)
        yield parse_declaration(line)


def render_report(report: Report) -> str:
    """
    Render a report. An error is written verbatim with no trailing newline;
    otherwise every line is newline-terminated.
    """
    if report.failed:
        return report.error

    lines = [report.verdict]
    if report.warnings:
        lines.append(WARNING_HEADER)
        lines.extend(report.warnings)
    return "".join(line + "\n" for line in lines)
