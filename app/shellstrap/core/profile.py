"""Shell profile wiring.

Makes each PowerShell runtime's startup file dot-source the profile
repository's entry script. The import line is only appended when it is
not already present, so wiring the same repository twice is a no-op.
"""

import codecs
import locale
import logging
import re
import subprocess
from dataclasses import dataclass
from pathlib import Path

from shellstrap.core.config import DEFAULT_ENTRY_SCRIPT
from shellstrap.core.errors import ProfileWriteError, ShellRuntimeUnavailableError
from shellstrap.models.result import ProfileWiringResult
from shellstrap.utils.shell import resolve_executable, run_command

logger = logging.getLogger(__name__)

# Timeout for $PROFILE queries; the shell is started without a profile.
_PROFILE_QUERY_TIMEOUT: float = 30.0


@dataclass(frozen=True, slots=True)
class ShellRuntime:
    """A PowerShell runtime whose startup file can be wired.

    Attributes:
        name: Display name.
        executable: Executable name or path.
        bom: Whether the runtime needs a UTF-8 BOM to read non-ASCII text.
    """

    name: str
    executable: str
    bom: bool = False


KNOWN_RUNTIMES: dict[str, ShellRuntime] = {
    "powershell": ShellRuntime(name="Windows PowerShell", executable="powershell", bom=True),
    "pwsh": ShellRuntime(name="PowerShell 7", executable="pwsh"),
}


def get_runtimes(executables: list[str]) -> list[ShellRuntime]:
    """Map configured executables to ShellRuntime instances.

    Unknown executables are used as-is, named after the executable.
    """
    return [KNOWN_RUNTIMES.get(exe, ShellRuntime(name=exe, executable=exe)) for exe in executables]


def import_line(repo_path: Path | str, entry_script: str = DEFAULT_ENTRY_SCRIPT) -> str:
    """Build the dot-source line for a repository's entry script.

    The separator is always a backslash: the line is read by PowerShell on
    Windows.
    """
    return f". {repo_path}\\{entry_script}"


def has_entry_script(repo_path: Path, entry_script: str = DEFAULT_ENTRY_SCRIPT) -> bool:
    """Check that the repository root contains the entry script."""
    return (repo_path / entry_script).is_file()


def resolve_profile_path(runtime: ShellRuntime) -> Path:
    """Ask a runtime for its ``$PROFILE`` path.

    Args:
        runtime: Shell runtime to query.

    Returns:
        Path to the runtime's current-user startup file.

    Raises:
        ShellRuntimeUnavailableError: If the runtime can't be run or reports
            no path.
    """
    args = [
        resolve_executable(runtime.executable),
        "-NoLogo",
        "-NoProfile",
        "-Command",
        "$PROFILE",
    ]
    try:
        result = run_command(args, timeout=_PROFILE_QUERY_TIMEOUT)
    except (FileNotFoundError, OSError, subprocess.TimeoutExpired) as e:
        msg = f"{runtime.name} ({runtime.executable}) is not available: {e}"
        raise ShellRuntimeUnavailableError(msg) from e

    if not result.success:
        msg = f"{runtime.name} exited with code {result.returncode} while reporting $PROFILE"
        raise ShellRuntimeUnavailableError(msg)

    path = result.stdout.strip()
    if not path:
        msg = f"{runtime.name} reported an empty $PROFILE"
        raise ShellRuntimeUnavailableError(msg)

    return Path(path)


def has_import_line(content: str, line: str) -> bool:
    """Check whether content contains the import line as a whole line.

    Windows paths are case-insensitive, so the match is too.
    """
    pattern = rf"^[ \t]*{re.escape(line)}[ \t]*\r?$"
    return re.search(pattern, content, flags=re.MULTILINE | re.IGNORECASE) is not None


def _profile_encoding(data: bytes) -> str:
    """Return the encoding an existing startup file is written in."""
    if data.startswith(codecs.BOM_UTF8):
        return "utf-8-sig"
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        # BOM-less files that aren't UTF-8 use the ANSI code page
        return locale.getpreferredencoding(False)
    return "utf-8"


def wire_profile(
    profile_path: Path,
    repo_path: Path | str,
    entry_script: str = DEFAULT_ENTRY_SCRIPT,
    *,
    bom: bool = False,
) -> bool:
    """Append the import line to a startup file unless already present.

    Creates the parent directory and the file if missing. Existing content
    is never changed and the line is written in the file's own encoding.
    With ``bom``, a new or all-ASCII file gets a UTF-8 BOM so that
    Windows PowerShell 5.1 reads non-ASCII paths correctly.

    Args:
        profile_path: Startup file to edit.
        repo_path: Absolute path of the cloned repository.
        entry_script: Entry script filename.
        bom: Whether the runtime needs a BOM to read UTF-8.

    Returns:
        True if the line was appended, False if it was already there.

    Raises:
        ProfileWriteError: If the file can't be read, created or written.
    """
    line = import_line(repo_path, entry_script)

    try:
        profile_path.parent.mkdir(parents=True, exist_ok=True)
        data = profile_path.read_bytes() if profile_path.exists() else b""
        encoding = _profile_encoding(data)

        if has_import_line(data.decode(encoding, errors="replace"), line):
            logger.info("%s already sources %s", profile_path, repo_path)
            return False

        addition = "\n" + line
        if bom and data.isascii():
            # ASCII content reads the same with a BOM in front of it
            profile_path.write_bytes(codecs.BOM_UTF8 + data + addition.encode("utf-8"))
        else:
            with profile_path.open("ab") as f:
                f.write(addition.encode(encoding.removesuffix("-sig")))
    except OSError as e:
        msg = f"Cannot write {profile_path}: {e}"
        raise ProfileWriteError(msg) from e
    except UnicodeEncodeError as e:
        msg = f"Cannot write {line!r} to {profile_path} in its {encoding} encoding"
        raise ProfileWriteError(msg) from e

    logger.info("Added import line to %s", profile_path)
    return True


def wire_profiles(
    repo_path: Path | str,
    runtimes: list[ShellRuntime],
    entry_script: str = DEFAULT_ENTRY_SCRIPT,
) -> list[ProfileWiringResult]:
    """Wire every runtime's startup file independently.

    A runtime that cannot report its profile path is skipped; the others
    are still wired.

    Args:
        repo_path: Absolute path of the cloned repository.
        runtimes: Shell runtimes to wire.
        entry_script: Entry script filename.

    Returns:
        One ProfileWiringResult per runtime, in order.

    Raises:
        ProfileWriteError: If a startup file can't be written.
    """
    results: list[ProfileWiringResult] = []

    for runtime in runtimes:
        try:
            profile_path = resolve_profile_path(runtime)
        except ShellRuntimeUnavailableError as e:
            logger.warning("Skipping %s: %s", runtime.name, e)
            results.append(ProfileWiringResult(runtime=runtime.name, error=str(e)))
            continue

        added = wire_profile(profile_path, repo_path, entry_script, bom=runtime.bom)
        results.append(
            ProfileWiringResult(runtime=runtime.name, profile_path=profile_path, added=added)
        )

    return results
