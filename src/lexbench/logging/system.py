import os
import platform

import psutil


def get_system_info(machine: bool = True, op_sys: bool = True) -> dict:
    """
    Gather basic hardware and platform information about the current environment.

    Benchmark numbers are only comparable on the same hardware, so this is
    logged alongside every run.

    Args:
        machine (bool, optional): If True, include CPU counts, total RAM,
            architecture and PID. Defaults to True.
        op_sys (bool, optional): If True, include the platform and Python
            version. Defaults to True.

    Returns:
        dict: A dictionary of system information. The keys included depend on which
        flags (machine, op_sys) are set to True.
    """
    info = {}

    if machine:
        info.update({
            "cpu-physical": psutil.cpu_count(logical=False) or 0,
            "cpu-logical": psutil.cpu_count(logical=True) or 0,
            "memory-mb": psutil.virtual_memory().total // (1024 * 1024),
            "architecture": platform.machine(),
            "pid": os.getpid(),
        })

    if op_sys:
        info.update({
            "platform": platform.platform(),
            "python-version": platform.python_version(),
        })

    return info
