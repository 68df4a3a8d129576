"""
Shared enumerations used across the simulator, the API and the CLI.

Both enums inherit from str so they serialize to JSON as plain strings
("rr", not "Algorithm.RR") and work directly as FastAPI query parameters.
"""

import enum


class Algorithm(str, enum.Enum):
    FCFS = "fcfs"  # First Come First Served: table order, back-to-back
    SJF = "sjf"    # Shortest Job First: stable sort by burst, then FCFS
    RR = "rr"      # Round Robin: fixed-order sweeps with a time quantum

    @classmethod
    def _missing_(cls, value):
        # Accept the upper-case tags (FCFS, SJF, RR) and the long RR name.
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered == "round_robin":
                return cls.RR
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Algorithm.FCFS: "First Come First Served",
    Algorithm.SJF: "Shortest Job First",
    Algorithm.RR: "Round Robin",
}


class JobState(str, enum.Enum):
    WAITING = "WAITING"    # ready, not on the CPU
    RUNNING = "RUNNING"    # currently consuming CPU time
    FINISHED = "FINISHED"  # remaining_time reached 0
