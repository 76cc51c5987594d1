"""
Base model for all league stat records

Records are immutable values: built once from parsed input and compared
structurally. Field names are snake_case in Python and camelCase in the
static JSON files the site serves.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Dict, Any


class LeagueBaseModel(BaseModel):
    """Base model for league records with common functionality."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=True,
    )

    def __repr__(self):
        fields = ', '.join(f'{k}={v}' for k, v in self.model_dump(exclude_none=True).items())
        return f"{self.__class__.__name__}({fields})"

    def to_dict(self, exclude_none: bool = False, by_alias: bool = True) -> Dict[str, Any]:
        """Convert model to a JSON-ready dictionary (camelCase keys by default)."""
        return self.model_dump(exclude_none=exclude_none, by_alias=by_alias)

    @classmethod
    def from_api_data(cls, data: Dict[str, Any]):
        """Create model instance from static JSON data."""
        if not data:
            raise ValueError(f"Cannot create {cls.__name__} from empty data")
        return cls.model_validate(data)
