"""
Extraction through an external program.

The configured argument list may contain ``{output_path}``, ``{out_file}``
and ``{format}`` placeholders, e.g.::

    command: [ng, extract-i18n, --output-path, "{output_path}",
              --out-file, "{out_file}", --format, "{format}", --progress=false]
"""

from __future__ import annotations

import asyncio

from .base import ExtractionRequest, ExtractionResult, extractor_logger


def build_command(request: ExtractionRequest) -> list[str]:
    """Substitute the request's output location into the configured command."""
    values = {
        "output_path": str(request.output_directory),
        "out_file": request.output_filename,
        "format": request.format,
    }
    return [arg.format_map(values) for arg in request.options.command]


def last_line(text: str) -> str | None:
    """Last non-blank line of a program's output."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    return lines[-1] if lines else None


class CommandExtractor:
    """Runs an external extraction program and waits for it to finish."""

    name: str = "command"

    async def extract(self, request: ExtractionRequest) -> ExtractionResult:
        """Run the configured program; a non-zero exit code is a failure."""
        log = extractor_logger(self.name, request.verbose)
        if not request.options.command:
            return ExtractionResult(success=False, error="no command configured")

        try:
            argv = build_command(request)
        except (KeyError, IndexError, ValueError) as e:
            return ExtractionResult(success=False, error=f"invalid command template: {e}")
        log.debug(f"Running {' '.join(argv)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            return ExtractionResult(success=False, error=f"cannot run {argv[0]}: {e}")

        stdout, stderr = await process.communicate()
        output = stdout.decode("utf-8", errors="replace")
        errors = stderr.decode("utf-8", errors="replace")
        for line in output.splitlines():
            log.debug(line)

        if process.returncode != 0:
            for line in errors.splitlines():
                log.error(line)
            detail = last_line(errors) or f"exit code {process.returncode}"
            return ExtractionResult(success=False, error=detail)

        return ExtractionResult(success=True)
