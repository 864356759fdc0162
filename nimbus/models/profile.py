"""Ideal Customer Profile data model.

Pure data structure with no business logic. Attribute names are snake_case;
``to_dict`` speaks the camelCase keys used by the model responses and the
web API.
"""

from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass, field as dataclass_field
from typing import Any


# Wire key -> attribute name, in display order
LIST_FIELDS: dict[str, str] = {
    "painPoints": "pain_points",
    "goals": "goals",
    "buyingTriggers": "buying_triggers",
    "preferredChannels": "preferred_channels",
    "techStack": "tech_stack",
}


def new_profile_id() -> str:
    """Generate an opaque profile identifier."""
    return str(uuid.uuid4())


@dataclass
class Profile:
    """Target buyer description used to steer creative feedback."""
    id: str
    role: str = ""
    company_size: str = ""
    pain_points: list[str] = dataclass_field(default_factory=list)
    goals: list[str] = dataclass_field(default_factory=list)
    buying_triggers: list[str] = dataclass_field(default_factory=list)
    preferred_channels: list[str] = dataclass_field(default_factory=list)
    tech_stack: list[str] = dataclass_field(default_factory=list)

    @classmethod
    def empty(cls) -> "Profile":
        """Create a blank user-authored profile with a fresh id."""
        return cls(id=new_profile_id())

    def list_field(self, name: str) -> list[str]:
        """Return the live list for a list field.

        Accepts either the wire key (``painPoints``) or the attribute name
        (``pain_points``). The returned list is the profile's own, so edits
        mutate the profile in place.

        Raises:
            KeyError: If ``name`` is not one of the five list fields
        """
        attr = LIST_FIELDS.get(name)
        if attr is None and name in LIST_FIELDS.values():
            attr = name
        if attr is None:
            raise KeyError(f"Unknown profile list field: {name}")
        return getattr(self, attr)

    def copy(self) -> "Profile":
        """Deep copy keeping the same id."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data: dict[str, Any] = {
            "id": self.id,
            "role": self.role,
            "companySize": self.company_size,
        }
        for key, attr in LIST_FIELDS.items():
            data[key] = list(getattr(self, attr))
        return data

