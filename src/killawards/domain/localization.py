"""Player-facing notification texts."""

from __future__ import annotations

from collections.abc import Mapping

from .enums import MessageKey

DEFAULT_MESSAGES: dict[str, dict[MessageKey, str]] = {
    "en": {
        MessageKey.HEALTH_RESTORED: (
            "You have been healed by <color=#75A838>{0}</color> health points!"
        ),
        MessageKey.AMMO_REFILLED: "Your ammo has been fully topped up!",
        MessageKey.GEAR_SET_GIVEN: "You have received the gear set <color=#CACF52>{0}</color>!",
    }
}


class Localizer:
    """Look up and format notification texts for a language."""

    def __init__(
        self,
        language: str = "en",
        messages: Mapping[str, Mapping[MessageKey, str]] = DEFAULT_MESSAGES,
    ) -> None:
        self.language = language
        self._messages = messages

    def get_message(self, key: MessageKey, *args: object) -> str:
        """Return the text for ``key``, falling back to English then the key."""

        catalog = self._messages.get(self.language) or self._messages.get("en", {})
        message = catalog.get(key, str(key))
        if args:
            message = message.format(*args)
        return message
