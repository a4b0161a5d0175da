"""Symbolic message keys reported to the UI.

The core never produces display text. Outcomes are a MessageKey plus
positional arguments that the localization layer formats.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class MessageKey(Enum):
    # Validation
    GAME_ID_CANNOT_BE_EMPTY = "gameIdCannotBeEmpty"
    GAME_ID_ALREADY_EXISTS = "gameIdAlreadyExists"
    GAME_ID_INVALID = "gameIdInvalid"
    INVALID_PLATFORM = "invalidPlatform"
    STEAM_APP_ID_REQUIRED = "steamAppIdRequired"
    EPIC_GAME_ID_REQUIRED = "epicGameIdRequired"
    RIOT_GAME_ID_REQUIRED = "riotGameIdRequired"
    EXECUTABLE_PATH_REQUIRED = "executablePathRequired"
    APP_ID_CANNOT_BE_EMPTY = "appIdCannotBeEmpty"
    APP_ID_ALREADY_EXISTS = "appIdAlreadyExists"
    APP_ID_INVALID = "appIdInvalid"

    # State changes
    GAME_NOT_FOUND = "gameNotFound"
    APP_NOT_FOUND = "appNotFound"
    NO_GAME_SELECTED = "noGameSelected"
    NO_APP_SELECTED = "noAppSelected"

    # Persistence
    CONFIG_LOAD_FAILED = "configLoadFailed"
    CONFIG_CREATED = "configCreated"
    CONFIG_SAVED = "configSaved"
    CONFIG_SAVE_FAILED = "configSaveFailed"

    # Generic outcomes
    GAME_SAVED = "gameSaved"
    APP_SAVED = "appSaved"
    SETTINGS_SAVED = "settingsSaved"
    UNEXPECTED_ERROR = "unexpectedError"


@dataclass(frozen=True)
class Message:
    """A message key with its positional format arguments"""
    key: MessageKey
    args: tuple[Any, ...] = ()

    @classmethod
    def of(cls, key: MessageKey, *args: Any) -> "Message":
        return cls(key, tuple(args))


@dataclass
class OperationResult:
    """Outcome of a mutating operation.

    ``message`` is the blocking error on failure, or an optional status
    message on success. ``invalid_fields`` lists every field that failed
    validation.
    """
    ok: bool
    message: Optional[Message] = None
    invalid_fields: list[str] = field(default_factory=list)
    entity_id: Optional[str] = None

    @classmethod
    def success(cls, message: Optional[Message] = None, entity_id: Optional[str] = None) -> "OperationResult":
        return cls(ok=True, message=message, entity_id=entity_id)

    @classmethod
    def failure(cls, key: MessageKey, *args: Any, invalid_fields: Optional[list[str]] = None) -> "OperationResult":
        return cls(ok=False, message=Message.of(key, *args), invalid_fields=list(invalid_fields or []))

    def __bool__(self) -> bool:
        return self.ok
