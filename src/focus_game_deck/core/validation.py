"""Input validation for game and managed-app forms.

Validators are pure: they take candidate values and the IDs already in use
and return errors in field declaration order. Callers show the first error
and mark every invalid field.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from ..config.schema import METADATA_PREFIX, Platform
from .form import Field
from .messages import Message, MessageKey, OperationResult

# Platform -> (form field, message key) of its required identifier. EA has none.
_PLATFORM_REQUIREMENTS = {
    Platform.STEAM: (Field.STEAM_APP_ID, MessageKey.STEAM_APP_ID_REQUIRED),
    Platform.EPIC: (Field.EPIC_GAME_ID, MessageKey.EPIC_GAME_ID_REQUIRED),
    Platform.RIOT: (Field.RIOT_GAME_ID, MessageKey.RIOT_GAME_ID_REQUIRED),
    Platform.DIRECT: (Field.EXECUTABLE_PATH, MessageKey.EXECUTABLE_PATH_REQUIRED),
}


@dataclass(frozen=True)
class ValidationError:
    """One invalid field and the message explaining why"""
    field: str
    key: MessageKey
    args: tuple[Any, ...] = ()

    @property
    def message(self) -> Message:
        return Message(self.key, self.args)


@dataclass
class ValidationReport:
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def first(self) -> Optional[ValidationError]:
        return self.errors[0] if self.errors else None

    @property
    def fields(self) -> list[str]:
        return [error.field for error in self.errors]

    def to_result(self) -> OperationResult:
        """Failure result carrying the first error and every invalid field."""
        first = self.first
        if first is None:
            return OperationResult.success()
        return OperationResult(ok=False, message=first.message, invalid_fields=self.fields)


@dataclass
class GameCandidate:
    """Game values as they would be saved"""
    game_id: str
    platform: str
    steam_app_id: str = ""
    epic_game_id: str = ""
    riot_game_id: str = ""
    executable_path: str = ""

    def identifier_for(self, form_field: str) -> str:
        return {
            Field.STEAM_APP_ID: self.steam_app_id,
            Field.EPIC_GAME_ID: self.epic_game_id,
            Field.RIOT_GAME_ID: self.riot_game_id,
            Field.EXECUTABLE_PATH: self.executable_path,
        }[form_field]


def _validate_id(
    new_id: str,
    original_id: Optional[str],
    existing_ids: Iterable[str],
    id_field: str,
    empty_key: MessageKey,
    invalid_key: MessageKey,
    exists_key: MessageKey,
) -> list[ValidationError]:
    if not new_id:
        return [ValidationError(id_field, empty_key)]
    # Such keys would be read back as collection metadata
    if new_id.startswith(METADATA_PREFIX):
        return [ValidationError(id_field, invalid_key, (new_id,))]
    if new_id != original_id and new_id in set(existing_ids):
        return [ValidationError(id_field, exists_key, (new_id,))]
    return []


def validate_game(
    candidate: GameCandidate,
    original_id: Optional[str],
    existing_ids: Iterable[str],
) -> ValidationReport:
    """Validate a game before saving.

    Args:
        candidate: Values about to be saved
        original_id: ID of the game being edited (None for a new game)
        existing_ids: IDs currently present in the games collection

    Returns:
        ValidationReport with errors in declaration order
    """
    errors = _validate_id(
        candidate.game_id,
        original_id,
        existing_ids,
        Field.GAME_ID,
        MessageKey.GAME_ID_CANNOT_BE_EMPTY,
        MessageKey.GAME_ID_INVALID,
        MessageKey.GAME_ID_ALREADY_EXISTS,
    )

    try:
        platform = Platform(candidate.platform)
    except ValueError:
        errors.append(ValidationError(Field.PLATFORM, MessageKey.INVALID_PLATFORM, (candidate.platform,)))
        return ValidationReport(errors)

    requirement = _PLATFORM_REQUIREMENTS.get(platform)
    if requirement is not None:
        form_field, key = requirement
        if not candidate.identifier_for(form_field):
            errors.append(ValidationError(form_field, key))

    return ValidationReport(errors)


def validate_app(
    app_id: str,
    original_id: Optional[str],
    existing_ids: Iterable[str],
) -> ValidationReport:
    """Validate a managed app before saving.

    Args:
        app_id: ID about to be saved
        original_id: ID of the app being edited (None for a new app)
        existing_ids: IDs currently present in the managed apps collection

    Returns:
        ValidationReport with errors in declaration order
    """
    return ValidationReport(_validate_id(
        app_id,
        original_id,
        existing_ids,
        Field.APP_ID,
        MessageKey.APP_ID_CANNOT_BE_EMPTY,
        MessageKey.APP_ID_INVALID,
        MessageKey.APP_ID_ALREADY_EXISTS,
    ))


def validate_game_id(
    game_id: str,
    original_id: Optional[str],
    existing_ids: Iterable[str],
) -> ValidationReport:
    """Validate only the ID of a game, as needed by a rename."""
    return ValidationReport(_validate_id(
        game_id,
        original_id,
        existing_ids,
        Field.GAME_ID,
        MessageKey.GAME_ID_CANNOT_BE_EMPTY,
        MessageKey.GAME_ID_INVALID,
        MessageKey.GAME_ID_ALREADY_EXISTS,
    ))
