"""Enumerations used across the catalog."""

from enum import Enum


class Category(str, Enum):
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class EventKind(str, Enum):
    PRINT = "print"
    ASSERTION = "assertion"


class Outcome(str, Enum):
    PASS = "pass"
    FAIL = "fail"


class RunState(str, Enum):
    """Lifecycle of a single example invocation."""

    UNSTARTED = "unstarted"
    RUNNING = "running"
    COMPLETED_SUCCESS = "completed_success"
    COMPLETED_FAILURE = "completed_failure"


class IdSourceKind(str, Enum):
    SEQUENTIAL = "sequential"
    SEEDED = "seeded"
    UUID = "uuid"


class ClockKind(str, Enum):
    SIM = "sim"
    WALL = "wall"
