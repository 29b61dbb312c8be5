# services/dependency.py
"""
Service for checking and installing the external tools kp drives.

The workflow needs cargo (with the cargo-expand plugin) to build Rust
solutions, oj to run samples and npx to launch atcoder-cli.
"""

import platform
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from kyopro.core import shell
from kyopro.core.exceptions import KyoproError
from kyopro.core.logger import get_logger
from kyopro.models.dependency import DependencyInfo, DependencyReport

from .base import BaseService, ServiceResult

logger = get_logger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    """How to find and describe one external tool."""

    name: str
    executable: str
    version_args: Sequence[str]
    description: str
    required_for: str
    install_hint: str
    install_command: Optional[str] = None


TOOLS: List[ToolSpec] = [
    ToolSpec(
        name="cargo",
        executable="cargo",
        version_args=("--version",),
        description="Rust package manager and build tool",
        required_for="Building solutions (kp new, test, submit, debug)",
        install_hint="Install Rust from https://rustup.rs",
    ),
    ToolSpec(
        name="cargo-expand",
        executable="cargo-expand",
        version_args=("--version",),
        description="Macro expansion for cargo",
        required_for="Writing expand/main.rs for submission",
        install_hint="cargo install cargo-expand",
        install_command="cargo install cargo-expand",
    ),
    ToolSpec(
        name="oj",
        executable="oj",
        version_args=("--version",),
        description="online-judge-tools test runner",
        required_for="Running samples (kp test, submit)",
        install_hint="pip install online-judge-tools",
        install_command="pip install online-judge-tools",
    ),
    ToolSpec(
        name="npx",
        executable="npx",
        version_args=("--version",),
        description="Node.js package runner",
        required_for="Running atcoder-cli (kp new, submit)",
        install_hint="Install Node.js from https://nodejs.org, then: npm install -g atcoder-cli",
    ),
]


def detect_os() -> str:
    """Detect the operating system.

    Returns:
        One of: 'linux', 'macos', 'windows', 'unknown'
    """
    system = platform.system().lower()
    if system == "darwin":
        return "macos"
    if system in ("linux", "windows"):
        return system
    return "unknown"


def parse_version(output: str) -> Optional[str]:
    """Pick the first token that looks like a version number from tool output."""
    for token in output.split():
        candidate = token.lstrip("v").rstrip(",")
        if candidate[:1].isdigit() and "." in candidate:
            return candidate
    return None


def check_tool(spec: ToolSpec) -> DependencyInfo:
    """Check whether ``spec`` is installed and, if so, which version."""
    path = shutil.which(spec.executable)
    version = None

    if path:
        try:
            result = subprocess.run(
                [path, *spec.version_args],
                capture_output=True,
                text=True,
                timeout=10,
            )
            version = parse_version(result.stdout or result.stderr)
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug(f"Could not query {spec.name} version: {e}")

    return DependencyInfo(
        name=spec.name,
        description=spec.description,
        required_for=spec.required_for,
        installed=path is not None,
        version=version,
        install_hint=spec.install_hint,
        install_command=spec.install_command,
    )


class DependencyService(BaseService):
    """
    Service for external tool checking and installation.

    Provides ServiceResult-wrapped methods for dependency management.
    """

    def __init__(self, tools: Optional[List[ToolSpec]] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.tools = tools if tools is not None else TOOLS

    def detect_os(self) -> ServiceResult[str]:
        os_type = detect_os()
        return ServiceResult.ok(data=os_type, message=f"Detected OS: {os_type}")

    def check_all(self) -> ServiceResult[DependencyReport]:
        """
        Check all external tools.

        Returns:
            ServiceResult containing DependencyReport
        """
        dependencies = [check_tool(spec) for spec in self.tools]
        report = DependencyReport(
            os_type=detect_os(),
            all_installed=all(d.installed for d in dependencies),
            dependencies=dependencies,
        )

        if report.all_installed:
            message = "All dependencies installed"
        else:
            message = f"Missing dependencies: {', '.join(d.name for d in report.missing)}"

        return ServiceResult.ok(data=report, message=message)

    def install_missing(self, cwd: Optional[str] = None) -> ServiceResult[List[str]]:
        """
        Run the install command of every missing tool that has one.

        Args:
            cwd: Directory to run the installers in (default: current directory)

        Returns:
            ServiceResult containing the names of the tools installed
        """
        report = self.check_all().data
        workdir = Path(cwd) if cwd else Path.cwd()

        installable = [d for d in report.missing if d.install_command]
        manual = [d for d in report.missing if not d.install_command]

        installed = []
        for dep in installable:
            try:
                shell.run_command(dep.install_command, workdir)
            except KyoproError as e:
                return ServiceResult.fail(
                    f"Failed to install {dep.name}: {e}",
                    installed=installed,
                )
            installed.append(dep.name)

        warnings = [f"{d.name} must be installed manually: {d.install_hint}" for d in manual]
        return ServiceResult.ok(
            data=installed,
            message=f"Installed {len(installed)} tool(s)",
            warnings=warnings,
        )
