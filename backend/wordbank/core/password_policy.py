"""Password Policy — rules beyond the schema's length check.

Invariants:
    - PURE: no IO, no hashing
    - Return Failure on violation, None on success
    - Every violated rule is reported, not only the first

Design Decisions:
    - Kept out of the pydantic schema: the schema checks shape, the policy
      checks strength, and the register service decides when to apply it
"""

from wordbank.core.errors import Failure, validation_failure


def check_password_policy(password: str, email: str) -> Failure | None:
    """Require a letter and a digit, and reject the email as password."""
    problems = []
    if not any(ch.isalpha() for ch in password):
        problems.append("Password must contain at least one letter")
    if not any(ch.isdigit() for ch in password):
        problems.append("Password must contain at least one digit")
    if password.strip().casefold() == email.strip().casefold():
        problems.append("Password must not be the same as the email address")
    if not problems:
        return None
    return validation_failure(
        "Password does not meet the password policy",
        [
            {"field": "password", "message": p, "type": "password_policy"}
            for p in problems
        ],
    )
