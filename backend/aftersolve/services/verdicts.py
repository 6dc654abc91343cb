from __future__ import annotations
from enum import Enum
from aftersolve.schemas.problem import UNATTEMPTED


class Verdict(str, Enum):
    OK = "OK"
    WRONG_ANSWER = "WRONG_ANSWER"
    TIME_LIMIT_EXCEEDED = "TIME_LIMIT_EXCEEDED"
    MEMORY_LIMIT_EXCEEDED = "MEMORY_LIMIT_EXCEEDED"
    COMPILATION_ERROR = "COMPILATION_ERROR"
    RUNTIME_ERROR = "RUNTIME_ERROR"
    PRESENTATION_ERROR = "PRESENTATION_ERROR"
    PARTIAL = "PARTIAL"
    CHALLENGED = "CHALLENGED"
    TESTING = "TESTING"
    SKIPPED = "SKIPPED"
    IDLENESS_LIMIT_EXCEEDED = "IDLENESS_LIMIT_EXCEEDED"
    SECURITY_VIOLATED = "SECURITY_VIOLATED"
    OUTPUT_LIMIT_EXCEEDED = "OUTPUT_LIMIT_EXCEEDED"
    INPUT_PREPARATION_ERROR = "INPUT_PREPARATION_ERROR"
    REJECTED = "REJECTED"
    HACKED = "HACKED"
    CRASHED = "CRASHED"


VERDICT_LABELS: dict[Verdict, str] = {
    Verdict.OK: "AC",
    Verdict.WRONG_ANSWER: "WA",
    Verdict.TIME_LIMIT_EXCEEDED: "TLE",
    Verdict.MEMORY_LIMIT_EXCEEDED: "MLE",
    Verdict.COMPILATION_ERROR: "Compilation Error",
    Verdict.RUNTIME_ERROR: "Runtime Error",
    Verdict.PRESENTATION_ERROR: "PE",
    Verdict.PARTIAL: "PA",
    Verdict.CHALLENGED: "Challenged",
    Verdict.TESTING: "Testing",
    Verdict.SKIPPED: "Skipped",
    Verdict.IDLENESS_LIMIT_EXCEEDED: "ILE",
    Verdict.SECURITY_VIOLATED: "Security Violated",
    Verdict.OUTPUT_LIMIT_EXCEEDED: "OLE",
    Verdict.INPUT_PREPARATION_ERROR: "IPE",
    Verdict.REJECTED: "Rejected",
    Verdict.HACKED: "Hacked",
    Verdict.CRASHED: "Crashed",
}


def verdict_label(code: str | None) -> str:
    """Short display label for a verdict code; unknown codes pass through unchanged."""
    if code is None:
        return UNATTEMPTED
    try:
        return VERDICT_LABELS[Verdict(code)]
    except ValueError:
        return code


def label_table() -> dict[str, str]:
    return {v.value: label for v, label in VERDICT_LABELS.items()}
