"""
passwords.py

Random password generation with guaranteed character-class coverage, plus a
check that a password does not leak the owner's personal data.

Public functions:
    generate_password(length, ...) -> str
    validate_against_personal_data(password, name=None, birthday=None, phone=None) -> list
    calculate_strength(password) -> dict
    generate_for_user(length, ...) -> tuple
"""

import logging
import re
import secrets
import string
from typing import List, Optional, Tuple

logger = logging.getLogger("passwords")

UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
NUMBERS = string.digits
SYMBOLS = '!@#$%^&*()_+-=[]{}|;:,.<>?~'

MAX_LENGTH = 128
MAX_ATTEMPTS = 10

_rng = secrets.SystemRandom()


class PasswordOptionsError(ValueError):
    pass


def _selected_sets(uppercase: bool, lowercase: bool, numbers: bool, symbols: bool) -> List[str]:
    chosen = [
        (uppercase, UPPERCASE),
        (lowercase, LOWERCASE),
        (numbers, NUMBERS),
        (symbols, SYMBOLS),
    ]
    return [chars for flag, chars in chosen if flag]


def generate_password(length: int, uppercase: bool = True, lowercase: bool = True,
                      numbers: bool = True, symbols: bool = True) -> str:
    """Return a password of exactly `length` characters.

    At least one character comes from every selected class; the rest is
    drawn from the union of the selected classes. All randomness comes
    from the OS CSPRNG.
    """
    sets = _selected_sets(uppercase, lowercase, numbers, symbols)
    if not sets:
        raise PasswordOptionsError("Please select at least one character type")
    if length < len(sets) or length > MAX_LENGTH:
        raise PasswordOptionsError(
            f"length must be between {len(sets)} and {MAX_LENGTH} for the selected character types"
        )

    charset = ''.join(sets)
    chars = [secrets.choice(s) for s in sets]
    chars.extend(secrets.choice(charset) for _ in range(length - len(sets)))
    _rng.shuffle(chars)
    return ''.join(chars)


def validate_against_personal_data(password: str, name: Optional[str] = None,
                                   birthday: Optional[str] = None,
                                   phone: Optional[str] = None) -> List[str]:
    """Return warnings for name parts, birth date pieces or phone digits found in the password."""
    warnings = []
    lowered = password.lower()

    if name:
        for part in name.lower().split():
            if len(part) > 2 and part in lowered:
                warnings.append(f'Password contains part of your name: "{part}"')

    if birthday:
        # ISO date: YYYY-MM-DD
        if any(p and p in password for p in birthday.split('-')):
            warnings.append('Password contains your birth date')

    if phone:
        digits = re.sub(r'\D', '', phone)
        if len(digits) > 3:
            segments = (digits[:3], digits[-4:], digits[3:6])
            if any(s and s in password for s in segments):
                warnings.append('Password contains part of your phone number')

    return list(dict.fromkeys(warnings))


def calculate_strength(password: str) -> dict:
    score = 0
    for threshold in (8, 12, 16, 20):
        if len(password) >= threshold:
            score += 1
    if re.search(r'[a-z]', password):
        score += 1
    if re.search(r'[A-Z]', password):
        score += 1
    if re.search(r'[0-9]', password):
        score += 1
    if re.search(r'[^A-Za-z0-9]', password):
        score += 2
    if not re.search(r'(.)\1{2,}', password):
        score += 1

    if score <= 3:
        return {'level': 'weak', 'text': 'Weak', 'score': score}
    if score <= 6:
        return {'level': 'medium', 'text': 'Medium', 'score': score}
    if score <= 9:
        return {'level': 'strong', 'text': 'Strong', 'score': score}
    return {'level': 'very-strong', 'text': 'Very Strong', 'score': score}


def generate_for_user(length: int, name: Optional[str] = None, birthday: Optional[str] = None,
                      phone: Optional[str] = None, max_attempts: int = MAX_ATTEMPTS,
                      **classes) -> Tuple[str, List[str]]:
    """Generate until the password no longer leaks personal data.

    Gives up after `max_attempts` regenerations and returns the last
    password together with its warnings.
    """
    password = generate_password(length, **classes)
    warnings = validate_against_personal_data(password, name, birthday, phone)
    attempts = 0
    while warnings and attempts < max_attempts:
        password = generate_password(length, **classes)
        warnings = validate_against_personal_data(password, name, birthday, phone)
        attempts += 1

    if warnings:
        logger.warning("Generated password still matches personal data after %d attempts: %s",
                       max_attempts, "; ".join(warnings))
    return password, warnings
