"""ICMP reachability probe via the system `ping` binary.

Best effort only: any failure (missing binary, timeout, non-zero exit)
reads as "unreachable".
"""

from __future__ import annotations

import asyncio
import math
import shutil
import sys
from typing import Awaitable, Callable

PingProbe = Callable[[str, float], Awaitable[bool]]


def build_ping_command(host: str, timeout: float, *, platform: str | None = None) -> list[str]:
    platform = platform or sys.platform
    if platform.startswith("win"):
        # -w is in milliseconds on Windows.
        return ["ping", "-n", "1", "-w", str(int(timeout * 1000)), host]
    if platform == "darwin":
        # -W is in milliseconds on macOS.
        return ["ping", "-c", "1", "-W", str(int(timeout * 1000)), host]
    return ["ping", "-c", "1", "-W", str(max(1, math.ceil(timeout))), host]


async def ping_host(host: str, timeout: float) -> bool:
    """Send a single echo request to `host`; True if it was answered."""

    args = build_ping_command(host, timeout)
    executable = shutil.which(args[0])
    if executable is None:
        return False
    args[0] = executable

    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.DEVNULL,
        )
    except OSError:
        return False

    try:
        # Grace period on top of ping's own deadline.
        returncode = await asyncio.wait_for(proc.wait(), timeout=timeout + 3)
    except asyncio.TimeoutError:
        proc.kill()
        await proc.wait()
        return False
    return returncode == 0
