"""Exceptions raised by the sharpgen builders."""

from __future__ import annotations


class SharpGenError(Exception):
    """Base class for every error raised by sharpgen."""


class MissingConfigurationError(SharpGenError):
    """Raised by ``build()`` when a required setting was never supplied.

    Attributes:
        entity: Kind of declaration being built (``"class"``, ``"property"``...).
        setting: The missing attribute (``"name"``, ``"type"``, ``"class_name"``).
    """

    def __init__(self, entity: str, setting: str) -> None:
        self.entity = entity
        self.setting = setting
        super().__init__(
            f"Providing the {setting} of the {entity} is required when building a {entity}."
        )
