"""
Runs ichiran-cli and decodes what it prints.

Usage:
    from ichiran_bindings.process import IchiranCli

    cli = IchiranCli()                       # uses $ICHIRAN_CLI
    cli = IchiranCli(["docker", "exec", "-i", "ichiran-main-1", "ichiran-cli"])

    cli.romanize("一覧は最高だぞ")            # 'ichiran wa saikō da zo'
    cli.romanize_with_info("一覧は最高だぞ")  # RomanizedWithInfo
    cli.segment("一覧は最高だぞ", limit=3)    # Document
"""

import logging
import subprocess
from typing import List, Optional, Sequence, Tuple, Union

from ichiran_bindings import settings
from ichiran_bindings.errors import InvalidEncoding, InvocationFailure, NonZeroExit
from ichiran_bindings.models import Document, RomanizedWithInfo, normalize
from ichiran_bindings.raw import RawDocument, decode_structured
from ichiran_bindings.report import decode_line_report
from ichiran_bindings.shapes import Strictness

logger = logging.getLogger(__name__)


def _decode(stream: str, data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncoding(stream, e) from e


class IchiranCli:
    """
    Wrapper around the ichiran-cli binary.

    Instances hold only configuration and can be shared between threads.

    Args:
        command: Command line prefix that runs ichiran-cli. Defaults to
            settings.ICHIRAN_CLI.
        timeout: Seconds before the process is abandoned. Defaults to
            settings.TIMEOUT; 0 or None disables it.
        strictness: Strictness used when decoding ``-f`` output. Defaults
            to settings.STRICTNESS.
    """

    def __init__(
        self,
        command: Optional[Sequence[str]] = None,
        timeout: Optional[float] = None,
        strictness: Union[Strictness, str, None] = None,
    ):
        self.command: List[str] = list(command) if command else list(settings.ICHIRAN_CLI)
        self.timeout = settings.TIMEOUT if timeout is None else timeout
        self.strictness = Strictness.coerce(strictness)

    def __repr__(self) -> str:
        return f"IchiranCli(command={self.command!r}, strictness={self.strictness.value!r})"

    def run(self, args: Sequence[str]) -> Tuple[str, str]:
        """
        Run ichiran-cli with args and return (stdout, stderr).

        Raises:
            InvocationFailure: The process could not be started or timed out.
            InvalidEncoding: Output is not valid UTF-8.
            NonZeroExit: The process returned a non-zero exit code.
        """
        cmd = self.command + list(args)
        logger.debug(f"Running {cmd}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.timeout or None,
            )
        except subprocess.TimeoutExpired as e:
            logger.warning(f"ichiran-cli timed out after {self.timeout}s")
            raise InvocationFailure(f"ichiran-cli timed out after {self.timeout}s", cmd) from e
        except OSError as e:
            raise InvocationFailure(f"Error while trying to run ichiran-cli: {e}", cmd) from e

        stdout = _decode("stdout", result.stdout)
        stderr = _decode("stderr", result.stderr)
        if result.returncode != 0:
            logger.warning(f"ichiran-cli returned code {result.returncode}: {stderr.strip()}")
            raise NonZeroExit(result.returncode, stdout, stderr)
        return stdout, stderr

    def segment_raw(self, text: str, limit: Optional[int] = None) -> RawDocument:
        """
        Run ``ichiran-cli -f`` and decode the raw document.

        Args:
            text: Japanese text to segment.
            limit: Maximum number of segmentations returned per segment.
        """
        if not text:
            return RawDocument(())
        args = ["-f"]
        if limit is not None:
            args += ["-l", str(limit)]
        stdout, _ = self.run(args + [text])
        return decode_structured(stdout, self.strictness)

    def segment(self, text: str, limit: Optional[int] = None) -> Document:
        """Run ``ichiran-cli -f`` and return the normalized document."""
        return normalize(self.segment_raw(text, limit))

    def romanize_with_info(self, text: str) -> RomanizedWithInfo:
        """Run ``ichiran-cli -i``."""
        if not text:
            return RomanizedWithInfo(romanized="")
        stdout, _ = self.run(["-i", text])
        return decode_line_report(stdout)

    def romanize(self, text: str) -> str:
        """Run ``ichiran-cli`` without flags. Trailing whitespace is trimmed."""
        if not text:
            return ""
        stdout, _ = self.run([text])
        return stdout.rstrip()
