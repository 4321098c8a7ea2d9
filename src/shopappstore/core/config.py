"""Core defaults (no environment reads)."""

SUCCESS_CODE_MIN = 200
SUCCESS_CODE_MAX = 300  # exclusive
BULK_PATH = "/webapi/rest/bulk"
DEFAULT_TIMEOUT = 30.0


def is_success(code: int | str | None) -> bool:
    if code is None:
        return False
    try:
        value = int(code)
    except (TypeError, ValueError):
        return False
    return SUCCESS_CODE_MIN <= value < SUCCESS_CODE_MAX
