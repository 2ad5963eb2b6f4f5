"""
Shell and operating system detection.
"""

import os
import platform
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass(frozen=True)
class SystemInfo:
    shell: str
    operating_system: str


def get_system_info(environ: Optional[Mapping[str, str]] = None) -> SystemInfo:
    """Current shell (from $SHELL / $COMSPEC) and OS name."""
    environ = os.environ if environ is None else environ

    shell_path = environ.get("SHELL") or environ.get("COMSPEC") or ""
    shell = os.path.basename(shell_path.replace("\\", "/").rstrip("/")) or "sh"
    if shell.lower().endswith(".exe"):
        shell = shell[:-4]

    operating_system = platform.system() or "unknown"
    if operating_system == "Linux":
        # distribution name is more useful to the model than "Linux"
        try:
            release = platform.freedesktop_os_release()
        except OSError:
            release = {}
        operating_system = release.get("PRETTY_NAME") or release.get("NAME") or operating_system
    elif operating_system == "Darwin":
        operating_system = f"macOS {platform.mac_ver()[0]}".strip()

    return SystemInfo(shell=shell, operating_system=operating_system)
