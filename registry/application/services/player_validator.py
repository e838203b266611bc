"""Field-level validation for players."""

from datetime import date

from registry.application.dtos.player import PlayerDTO


def validate_player(dto: PlayerDTO, today: date | None = None) -> list[str]:
    """Return violated rules for dto; an empty list means valid.

    Rules: first_name, last_name, position and team are not blank;
    date_of_birth is in the past; squad_number is a positive integer.
    """
    today = today or date.today()
    errors: list[str] = []
    for field in ("first_name", "last_name", "position", "team"):
        value = getattr(dto, field)
        if value is None or not value.strip():
            errors.append(f"{field} must not be blank")
    if dto.date_of_birth is not None and dto.date_of_birth >= today:
        errors.append("date_of_birth must be a date in the past")
    if dto.squad_number is None:
        errors.append("squad_number is required")
    elif dto.squad_number <= 0:
        errors.append("squad_number must be positive")
    return errors
