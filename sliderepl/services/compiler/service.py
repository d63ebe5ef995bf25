"""
Compiler Service

Builds and runs a submitted Go snippet with the local toolchain:

1. draw a unique number and derive the artifact paths from it
2. normalize the snippet into a complete program and write it out
3. ``go build`` it next to the source file
4. run the produced executable
5. rewrite the captured output so it does not depend on the temp paths

Both artifacts are removed on every exit path. Programs run with the same
privileges and environment as the server process.
"""
import logging
import os
import re
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sliderepl.core import Settings, get_settings
from sliderepl.models import CompileOutcome
from .normalizer import normalize
from .uniq import UniqueNameGenerator, get_unique_names

logger = logging.getLogger(__name__)

ARTIFACT_PREFIX = "compile"
SOURCE_PLACEHOLDER = b"main.go"

# Lines such as '# command-line-arguments' printed by the go tool
TOOL_COMMENT_PATTERN = re.compile(rb"^#[^\n]*\n?", re.MULTILINE)


def resolve_temp_root(root: Path) -> Path:
    """Resolve symlinks in the artifact directory so output paths can be rewritten."""
    try:
        resolved = Path(root).resolve(strict=True)
    except OSError as e:
        logger.error(f"Cannot resolve temp directory {root}: {e}")
        raise
    if not resolved.is_dir():
        logger.error(f"Temp directory {resolved} is not a directory")
        raise NotADirectoryError(str(resolved))
    return resolved


def rewrite_output(output: bytes, source_path: Path, failed: bool) -> bytes:
    """
    Clean up captured output before it is returned to the caller.

    On failure the go tool's '#' preamble lines are dropped. The temporary
    source path is always replaced with a stable file name.
    """
    if failed:
        output = TOOL_COMMENT_PATTERN.sub(b"", output)
    output = output.replace(os.fsencode(source_path), SOURCE_PLACEHOLDER)
    return output.replace(os.fsencode(source_path.name), SOURCE_PLACEHOLDER)


@contextmanager
def _artifact(path: Path) -> Iterator[Path]:
    """Remove ``path`` when the block exits, however it exits."""
    try:
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Failed to remove artifact {path}: {e}")


class CompilerService:
    """Turns snippets into program output."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        unique_names: Optional[UniqueNameGenerator] = None,
    ):
        self._settings = settings or get_settings()
        self._unique_names = unique_names or get_unique_names()
        self._temp_root = resolve_temp_root(self._settings.artifact_root)

    @property
    def temp_root(self) -> Path:
        return self._temp_root

    def artifact_paths(self, uniq: int) -> tuple[Path, Path]:
        """Get the (source, executable) paths for one invocation."""
        base = self._temp_root / f"{ARTIFACT_PREFIX}{uniq}"
        source = base.with_name(base.name + ".go")
        binary = base.with_name(base.name + ".exe") if os.name == "nt" else base
        return source, binary

    def execute(self, source: bytes) -> CompileOutcome:
        """
        Build and run a snippet.

        Args:
            source: Raw snippet bytes, either a full program or a fragment

        Returns:
            CompileOutcome with the combined output of the first failing
            step, or of the successful run
        """
        src, binary = self.artifact_paths(self._unique_names.next())
        program = normalize(source)

        with _artifact(src):
            try:
                src.write_bytes(program)
            except OSError as e:
                logger.warning(f"Failed to write source {src}: {e}")
                return CompileOutcome(output=str(e).encode(), failed=True)

            with _artifact(binary):
                output, ok = self._run(
                    [self._settings.go_binary, "build", "-o", str(binary), src.name],
                    cwd=src.parent,
                    timeout=self._settings.build_timeout,
                    label="build",
                )
                if ok:
                    output, ok = self._run(
                        [str(binary)],
                        cwd=None,
                        timeout=self._settings.run_timeout,
                        label="program",
                    )
                else:
                    logger.info(f"Build failed for {src.name}")

        return CompileOutcome(
            output=rewrite_output(output, src, failed=not ok),
            failed=not ok,
        )

    def _run(
        self,
        args: list[str],
        cwd: Optional[Path],
        timeout: Optional[float],
        label: str,
    ) -> tuple[bytes, bool]:
        """Run a command with stdout and stderr merged; return (output, succeeded)."""
        logger.debug(f"Running: {' '.join(args)}")
        try:
            result = subprocess.run(
                args,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=timeout,
            )
        except subprocess.TimeoutExpired as e:
            logger.warning(f"{label} timed out after {timeout}s")
            partial = e.output or b""
            return partial + f"\n{label} timed out after {timeout}s\n".encode(), False
        except OSError as e:
            logger.error(f"Failed to start {label}: {e}")
            return str(e).encode(), False

        if result.returncode != 0:
            logger.debug(f"{label} exited with status {result.returncode}")
        return result.stdout or b"", result.returncode == 0


_compiler_service: Optional[CompilerService] = None


def get_compiler_service() -> CompilerService:
    """Get or create the compiler service singleton."""
    global _compiler_service
    if _compiler_service is None:
        _compiler_service = CompilerService()
    return _compiler_service
