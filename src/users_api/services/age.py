"""
Age derivation from a date of birth
"""

from datetime import date, datetime
from typing import Union


def compute_age(date_of_birth: date, as_of: Union[date, datetime]) -> int:
    """
    Whole years between date_of_birth and as_of

    The birthday counts once (month, day) of as_of reaches that of the
    date of birth, so a 29 February birthday is reached on 1 March in
    non-leap years.

    Args:
        date_of_birth: Calendar date of birth
        as_of: Evaluation date; a datetime contributes its date part

    Returns:
        Age in completed years
    """
    if isinstance(as_of, datetime):
        as_of = as_of.date()

    age = as_of.year - date_of_birth.year
    if (as_of.month, as_of.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age
