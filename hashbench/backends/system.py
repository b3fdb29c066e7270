"""
Utilizes psutil for host details that affect hashing throughput
"""

import platform

import psutil

from hashbench.models.bench_models import SystemInfo


def get_system_info() -> SystemInfo:
    """
    Describe the interpreter and CPU the benchmark runs on

    Returns:
        SystemInfo with interpreter, platform and core counts
    """
    return SystemInfo(
        python_implementation=platform.python_implementation(),
        python_version=platform.python_version(),
        platform=platform.system() or "unknown",
        machine=platform.machine() or "unknown",
        physical_cores=psutil.cpu_count(logical=False),
        logical_cores=psutil.cpu_count(logical=True),
    )
