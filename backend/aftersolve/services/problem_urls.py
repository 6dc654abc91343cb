from __future__ import annotations

CODEFORCES_BASE = "https://codeforces.com"


def contest_url(contest_id: int) -> str:
    return f"{CODEFORCES_BASE}/contest/{contest_id}"


def problem_url(contest_id: int, index: str) -> str:
    return f"{contest_url(contest_id)}/problem/{index}"
