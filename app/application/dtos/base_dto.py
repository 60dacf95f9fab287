# app/application/dtos/base_dto.py

"""
Base class for the application DTOs.

Defines CustomBaseModel, which extends Pydantic's BaseModel with the
conventions shared by every DTO: camelCase JSON keys (snake_case is also
accepted on input) and attribute-based construction from ORM objects.
"""

from typing import Annotated, Any, Dict

from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

# String trimmed on input, like the name/vehicle/notes fields of the API
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True)]


class CustomBaseModel(BaseModel):
    """
    Custom base model for all application DTOs.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def present_fields(self) -> Dict[str, Any]:
        """
        Return only the fields explicitly sent by the caller.

        An explicit ``null`` is kept, so validators can tell
        "not sent" apart from "sent as null".
        """
        return self.model_dump(exclude_unset=True)
