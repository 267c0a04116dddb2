"""
Local OS information adapter backed by the standard library.
"""

import getpass
import logging
import os
import platform
import subprocess
import sys
from typing import Optional

from typing_extensions import override

from file_manager.entities.os_info import CpuInfo
from file_manager.ports.system.os_info_port import OsInfoPort

UNKNOWN_MODEL = "Unknown"


class LocalOsInfoAdapter(OsInfoPort):
    """Reads host facts from os/platform, /proc/cpuinfo or sysctl."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        cpuinfo_path: str = "/proc/cpuinfo",
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._cpuinfo_path = cpuinfo_path

    @override
    def eol(self) -> str:
        return os.linesep

    @override
    def cpus(self) -> list[CpuInfo]:
        count = os.cpu_count() or 1
        if sys.platform.startswith("linux"):
            cpus = self._read_proc_cpuinfo()
            if cpus:
                return cpus
        if sys.platform == "darwin":
            cpu = self._read_sysctl_cpu()
            if cpu is not None:
                return [cpu] * count
        model = platform.processor() or UNKNOWN_MODEL
        return [CpuInfo(model=model, speed_mhz=0.0)] * count

    @override
    def homedir(self) -> str:
        return os.path.expanduser("~")

    @override
    def username(self) -> str:
        return getpass.getuser()

    @override
    def architecture(self) -> str:
        return platform.machine()

    def _read_proc_cpuinfo(self) -> list[CpuInfo]:
        """Parse one CpuInfo per 'processor' block of /proc/cpuinfo."""
        try:
            with open(self._cpuinfo_path, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            self._logger.debug(f"Cannot read {self._cpuinfo_path}: {e}")
            return []

        cpus: list[CpuInfo] = []
        for block in text.split("\n\n"):
            fields: dict[str, str] = {}
            for line in block.splitlines():
                key, sep, value = line.partition(":")
                if sep:
                    fields[key.strip()] = value.strip()
            if "processor" not in fields:
                continue
            model = fields.get("model name") or fields.get("Model") or UNKNOWN_MODEL
            try:
                speed = float(fields.get("cpu MHz", "0"))
            except ValueError:
                speed = 0.0
            cpus.append(CpuInfo(model=model, speed_mhz=speed))
        return cpus

    def _read_sysctl_cpu(self) -> Optional[CpuInfo]:
        try:
            model = subprocess.run(
                ["sysctl", "-n", "machdep.cpu.brand_string"],
                capture_output=True,
                text=True,
                timeout=5,
            ).stdout.strip()
            freq = subprocess.run(
                ["sysctl", "-n", "hw.cpufrequency"],
                capture_output=True,
                text=True,
                timeout=5,
            ).stdout.strip()
        except (OSError, subprocess.SubprocessError) as e:
            self._logger.debug(f"sysctl unavailable: {e}")
            return None
        # hw.cpufrequency is in Hz and absent on Apple silicon
        speed = int(freq) / 1_000_000 if freq.isdigit() else 0.0
        return CpuInfo(model=model or UNKNOWN_MODEL, speed_mhz=speed)
