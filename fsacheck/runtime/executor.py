# fsacheck/runtime/executor.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from fsacheck.core.validations import Validator
from fsacheck.interfaces.types import Report
from fsacheck.persistence.serializer import read_declarations, render_report

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunConfig:
    """Where a run reads its declarations from and writes its report to."""

    input_path: str = "fsa.txt"
    output_path: str = "result.txt"
    encoding: str = "utf-8"


class Executor:
    """
    Runs one validation: reads the declaration source, feeds it to a fresh
    :class:`Validator` and writes the rendered report to the sink.
    """

    def __init__(self, config: Optional[RunConfig] = None) -> None:
        """
        :param config: Input/output locations. Defaults to ``fsa.txt`` / ``result.txt``.
        """
        self.config = config or RunConfig()

    def validate_lines(self, lines: Iterable[str]) -> Report:
        """
        Validate declaration lines without touching the filesystem.

        :param lines: Declaration lines, with or without line terminators.
        """
        return Validator().run(read_declarations(lines))

    def run(self) -> Report:
        """
        Validate the configured input file and write the report.

        :return: The report that was written.
        :raises OSError: If the input cannot be read or the output written.
        """
        logger.debug("Validating %s", self.config.input_path)
        with open(self.config.input_path, encoding=self.config.encoding) as source:
            report = self.validate_lines(source)

        with open(self.config.output_path, "w", encoding=self.config.encoding) as sink:
            sink.write(render_report(report))
        logger.debug("Report written to %s", self.config.output_path)
        return report
