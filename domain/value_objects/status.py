from enum import Enum


class Status(str, Enum):
    """Execution status shared by launches and test items."""

    IN_PROGRESS = "IN_PROGRESS"
    PASSED = "PASSED"
    FAILED = "FAILED"
    STOPPED = "STOPPED"
    SKIPPED = "SKIPPED"
    INTERRUPTED = "INTERRUPTED"
    CANCELLED = "CANCELLED"
    INFO = "INFO"
    WARN = "WARN"
