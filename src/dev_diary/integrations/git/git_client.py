"""Local git repository access through the ``git`` command line."""

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime, time
from pathlib import Path

from dev_diary.models.activity import Commit

from .exceptions import GitCommandError, GitNotFoundError

logger = logging.getLogger(__name__)

FIELD_SEP = "\x1f"


class GitRepository:
    """Reads commit history and branches of a working copy."""

    def __init__(self, path: str | Path, git_binary: str = "git") -> None:
        self.path = Path(path).expanduser()
        self.git_binary = git_binary

    async def _run(self, *args: str) -> str:
        cmd = [self.git_binary, "-C", str(self.path), *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise GitNotFoundError(
                f"git executable '{self.git_binary}' not found on PATH"
            ) from e
        except OSError as e:
            raise GitCommandError(f"Failed to run git: {e}") from e

        stdout, stderr = await proc.communicate()
        if proc.returncode != 0:
            err_text = stderr.decode(errors="replace").strip()
            raise GitCommandError(f"git {args[0]} exited {proc.returncode}: {err_text}")
        return stdout.decode(errors="replace")

    async def log(self, since: date) -> list[Commit]:
        """Commits made on or after local midnight of ``since``."""
        start = datetime.combine(since, time.min).astimezone()
        output = await self._run(
            "log",
            f"--since={start.isoformat()}",
            f"--format=%aI{FIELD_SEP}%s",
        )
        commits = []
        for line in output.splitlines():
            if FIELD_SEP not in line:
                continue
            stamp, message = line.split(FIELD_SEP, 1)
            timestamp = datetime.fromisoformat(stamp)
            if timestamp < start:
                continue
            commits.append(Commit(message=message, timestamp=timestamp))
        return commits

    async def list_branches(self) -> list[str]:
        """Names of all local and remote-tracking branches."""
        output = await self._run("branch", "--all", "--format=%(refname:short)")
        return [line.strip() for line in output.splitlines() if line.strip()]
