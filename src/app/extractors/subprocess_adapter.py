"""Drive an external extraction CLI over stdin/stdout, one process per document."""

from __future__ import annotations

import json
import logging
import re
import subprocess
import time
from typing import Sequence

from pydantic import ValidationError

from commons.config import config, section
from commons.constants import Constants as Co
from commons.io.local import LocalFileReader
from entity.finding_schema import FindingList
from entity.job import Candidate, ExtractionResult

from app.extractors._paths import DEFAULT_PROMPT_PARTS, project_path, resolve_project_relative

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "npx @polka-codes/cli --silent"
DEFAULT_FILE_LABEL = "PDF"
DEFAULT_PREVIEW_CHARS = 200


def build_payload(prompt: str, candidate: Candidate, file_label: str = DEFAULT_FILE_LABEL) -> str:
    """Instruction block, a delimiter line, then the one-line file reference."""
    return f"{prompt}\n\n---\n\nProcess {file_label}: {candidate}\n"


def _preview(text: str, limit: int) -> str:
    return re.sub(r"\s+", " ", text[:limit])


class SubprocessExtractionAdapter:
    """
    Spawns `command` for each candidate, streams the prompt plus file reference to
    its stdin, captures stdout in full and returns it with the exit status.
    stderr is inherited so the tool's diagnostics reach the operator live.

    command: a string runs through the platform shell, a sequence runs as argv.
    The prompt is read once at construction and never changes afterwards.
    """

    def __init__(
        self,
        command: str | Sequence[str] | None = None,
        prompt: str | None = None,
        prompt_path: str | None = None,
        file_label: str | None = None,
        preview_chars: int | None = None,
    ):
        extractor_cfg = section(config, Co.EXTRACTOR)
        self.command = command or extractor_cfg.get(Co.COMMAND) or DEFAULT_COMMAND
        self.file_label = file_label or extractor_cfg.get(Co.FILE_LABEL) or DEFAULT_FILE_LABEL
        self.preview_chars = (
            preview_chars
            if preview_chars is not None
            else extractor_cfg.get(Co.PREVIEW_CHARS, DEFAULT_PREVIEW_CHARS)
        )
        if prompt is None:
            prompt = self._load_prompt(prompt_path or extractor_cfg.get(Co.PROMPT_PATH))
        self.prompt = prompt

    @staticmethod
    def _load_prompt(prompt_path: str | None) -> str:
        path = resolve_project_relative(prompt_path) if prompt_path else project_path(*DEFAULT_PROMPT_PARTS)
        text = LocalFileReader().read_text(path)
        if text is None:
            raise FileNotFoundError(f"Prompt file not found: {path}")
        logger.debug("loaded prompt: %s (%d chars)", path, len(text))
        return text

    def _spawn(self) -> subprocess.Popen:
        shell = isinstance(self.command, str)
        return subprocess.Popen(
            self.command if shell else list(self.command),
            shell=shell,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=None,
        )

    def extract(self, candidate: Candidate) -> ExtractionResult:
        logger.debug("spawn cmd: %s for: %s", self.command, candidate)
        started = time.perf_counter()
        payload = build_payload(self.prompt, candidate, self.file_label).encode("utf-8")

        # Popen.__exit__ closes the pipes and reaps the child if anything below raises.
        with self._spawn() as proc:
            # Order matters: deliver all input and close stdin, drain stdout, then wait.
            logger.debug("writing to stdin bytes: %d", len(payload))
            try:
                proc.stdin.write(payload)
                proc.stdin.flush()
            except BrokenPipeError:
                logger.warning("extractor closed stdin early for: %s", candidate)
            finally:
                try:
                    proc.stdin.close()
                except BrokenPipeError:
                    # only reachable after the failed flush reported above
                    pass

            output_text = proc.stdout.read().decode("utf-8", errors="replace")
            proc.stdout.close()
            logger.debug("stdout chars: %d", len(output_text))

            is_json = self._check_output(output_text, candidate)

            exit_code = proc.wait()

        elapsed_ms = round((time.perf_counter() - started) * 1000)
        logger.info("extractor exit code: %d for: %s elapsed: %d ms", exit_code, candidate, elapsed_ms)
        return ExtractionResult(
            output_text=output_text,
            exit_code=exit_code,
            elapsed_ms=elapsed_ms,
            is_json=is_json,
        )

    def _check_output(self, output_text: str, candidate: Candidate) -> bool:
        """Log-only shape checks; the caller persists the output regardless."""
        try:
            data = json.loads(output_text)
        except (ValueError, RecursionError) as e:
            # ValueError covers JSONDecodeError and oversized integer literals
            logger.warning("stdout is not valid JSON (writing raw anyway): %s - %s", candidate, type(e).__name__)
            logger.debug("stdout preview: %s ...", _preview(output_text, self.preview_chars))
            return False

        try:
            findings = FindingList.model_validate(data)
        except ValidationError as e:
            logger.warning(
                "stdout JSON does not match the finding schema (%d error(s)): %s",
                e.error_count(),
                candidate,
            )
            logger.debug("schema errors: %s", e.errors(include_url=False)[:5])
        else:
            logger.debug("findings parsed: %d", len(findings.root))
        return True
