"""Writes rendered results to the output stream."""

import sys
from typing import TextIO

from cloudflare_rdns.models.output_data import OUTPUT_FORMATS, OutputData


class OutputReporter:
    """Renders OutputData in the format chosen at startup."""

    def __init__(self, output_format: str = "json", stream: TextIO | None = None):
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format: {output_format}")
        self.output_format = output_format
        self.stream = stream or sys.stdout

    def emit(self, output: OutputData) -> None:
        rendered = output.render(self.output_format)
        self.stream.write(rendered.rstrip("\n") + "\n")
        self.stream.flush()
