from .exceptions import InvariantViolation

MIN_YEAR = 2000
MAX_YEAR = 2100


def assert_publication_period(*, month: int, year: int) -> None:
    if not 1 <= month <= 12:
        raise InvariantViolation("Month must be between 1 and 12", field="month")

    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvariantViolation(
            f"Year must be between {MIN_YEAR} and {MAX_YEAR}", field="year"
        )
