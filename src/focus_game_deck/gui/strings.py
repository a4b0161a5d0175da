"""English display text for message keys and form labels.

The core reports outcomes as MessageKey values with positional arguments;
this table turns them into text. Other languages would add a table with the
same keys.
"""

from ..core.messages import Message, MessageKey

MESSAGES_EN = {
    MessageKey.GAME_ID_CANNOT_BE_EMPTY: "Game ID cannot be empty.",
    MessageKey.GAME_ID_ALREADY_EXISTS: "A game with ID '{0}' already exists.",
    MessageKey.GAME_ID_INVALID: "Game ID '{0}' cannot start with '_'.",
    MessageKey.INVALID_PLATFORM: "Unknown platform '{0}'.",
    MessageKey.STEAM_APP_ID_REQUIRED: "Steam AppID is required for Steam games.",
    MessageKey.EPIC_GAME_ID_REQUIRED: "Epic game ID is required for Epic games.",
    MessageKey.RIOT_GAME_ID_REQUIRED: "Riot game ID is required for Riot games.",
    MessageKey.EXECUTABLE_PATH_REQUIRED: "Executable path is required for directly started games.",
    MessageKey.APP_ID_CANNOT_BE_EMPTY: "App ID cannot be empty.",
    MessageKey.APP_ID_ALREADY_EXISTS: "An app with ID '{0}' already exists.",
    MessageKey.APP_ID_INVALID: "App ID '{0}' cannot start with '_'.",
    MessageKey.GAME_NOT_FOUND: "Game '{0}' was not found.",
    MessageKey.APP_NOT_FOUND: "App '{0}' was not found.",
    MessageKey.NO_GAME_SELECTED: "Select a game first.",
    MessageKey.NO_APP_SELECTED: "Select an app first.",
    MessageKey.CONFIG_LOAD_FAILED: "Could not read {0}:\n{1}\n\nThe sample configuration is shown instead. "
                                   "The file will only be replaced when you save.",
    MessageKey.CONFIG_CREATED: "Created a sample configuration at {0}.",
    MessageKey.CONFIG_SAVED: "Saved to {0}.",
    MessageKey.CONFIG_SAVE_FAILED: "Could not save {0}: {1}",
    MessageKey.GAME_SAVED: "Game '{0}' updated. Remember to save the configuration.",
    MessageKey.APP_SAVED: "App '{0}' updated. Remember to save the configuration.",
    MessageKey.SETTINGS_SAVED: "Settings updated. Remember to save the configuration.",
    MessageKey.UNEXPECTED_ERROR: "Unexpected error during {0}: {1}",
}


def tr(message: Message) -> str:
    """Format a message for display, falling back to the raw key."""
    template = MESSAGES_EN.get(message.key)
    if template is None:
        return message.key.value
    try:
        return template.format(*message.args)
    except IndexError:
        return template
