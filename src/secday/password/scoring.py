"""
Password sub-scorers.

Each function maps one aspect of a password (or its breach count) to a
0-100 score. All of them are pure and never log their input.
"""

import re
from typing import Iterable

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"\d")
# Any non-alphanumeric counts as special
_SPECIAL = re.compile(r"[^A-Za-z0-9]")

COMMON_PASSWORDS = (
    "password",
    "passw0rd",
    "123456",
    "12345678",
    "qwerty",
    "abc123",
    "111111",
    "iloveyou",
    "admin",
    "welcome",
    "letmein",
    "monkey",
    "dragon",
    "master",
    "sunshine",
    "princess",
    "football",
    "baseball",
    "login",
    "secret",
    "starwars",
    "whatever",
    "trustno1",
    "superman",
)

# Common character substitutions, undone before the common-password check.
# "1" reads as either "i" or "l", so both spellings are tried.
_LEET_TABLES = (
    str.maketrans("@4013$57", "aaoiesst"),
    str.maketrans("@4013$57", "aaolesst"),
)

KEYBOARD_ROWS = (
    "1234567890",
    "qwertyuiop",
    "asdfghjkl",
    "zxcvbnm",
)

SEQUENCE_RUN = 3
REPEAT_RUN = 3
KEYBOARD_RUN = 4

SEQUENCE_PENALTY = 20
REPEAT_PENALTY = 20
COMMON_PENALTY = 30
KEYBOARD_PENALTY = 20


def score_length(password: str) -> int:
    """Score password length: >=16 -> 100, >=12 -> 75, >=8 -> 50, else 25."""
    length = len(password)
    if length >= 16:
        return 100
    elif length >= 12:
        return 75
    elif length >= 8:
        return 50
    else:
        return 25


def score_complexity(password: str) -> int:
    """
    Score character-class variety.

    25 points each for lowercase, uppercase, digit and special characters.
    """
    score = 0
    for pattern in (_LOWER, _UPPER, _DIGIT, _SPECIAL):
        if pattern.search(password):
            score += 25
    return score


def has_sequential_run(password: str, run: int = SEQUENCE_RUN) -> bool:
    """Detect `run` characters stepping up or down by one code point (abc, 321)."""
    if len(password) < run:
        return False

    ascending = descending = 1
    for prev, cur in zip(password, password[1:]):
        step = ord(cur) - ord(prev)
        ascending = ascending + 1 if step == 1 else 1
        descending = descending + 1 if step == -1 else 1
        if ascending >= run or descending >= run:
            return True
    return False


def has_repeated_run(password: str, run: int = REPEAT_RUN) -> bool:
    """Detect `run` identical characters in a row (aaa, 111)."""
    count = 1
    for prev, cur in zip(password, password[1:]):
        count = count + 1 if cur == prev else 1
        if count >= run:
            return True
    return False


def contains_common_password(
    password: str,
    words: Iterable[str] = COMMON_PASSWORDS,
) -> bool:
    """
    Detect a common password or dictionary word as a substring.

    Also matches spellings with common substitutions (p@ssw0rd, l3tm3in).
    """
    lowered = password.lower()
    candidates = {lowered}
    candidates.update(lowered.translate(table) for table in _LEET_TABLES)
    return any(word in candidate for word in words for candidate in candidates)


def has_keyboard_run(password: str, run: int = KEYBOARD_RUN) -> bool:
    """Detect `run` adjacent keys from one keyboard row, forwards or backwards."""
    lowered = password.lower()
    for row in KEYBOARD_ROWS:
        for reference in (row, row[::-1]):
            for start in range(len(reference) - run + 1):
                if reference[start:start + run] in lowered:
                    return True
    return False


def score_predictability(password: str) -> int:
    """
    Score how hard the password is to guess from patterns.

    Starts at 100 and subtracts once per pattern family:
    - sequential runs (-20)
    - repeated characters (-20)
    - common passwords / dictionary words (-30)
    - keyboard-adjacent runs (-20)
    """
    lowered = password.lower()
    score = 100

    if has_sequential_run(lowered):
        score -= SEQUENCE_PENALTY

    if has_repeated_run(lowered):
        score -= REPEAT_PENALTY

    if contains_common_password(lowered):
        score -= COMMON_PENALTY

    if has_keyboard_run(lowered):
        score -= KEYBOARD_PENALTY

    return max(0, score)


def score_breach(breach_count: int) -> int:
    """Score breach exposure: 0 -> 100, <10 -> 50, <100 -> 25, else 0."""
    if breach_count <= 0:
        return 100
    elif breach_count < 10:
        return 50
    elif breach_count < 100:
        return 25
    else:
        return 0
