from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Required text field; an empty string counts as missing
RequiredStr = Annotated[str, Field(min_length=1)]


# Shared configuration: camelCase on the wire, ORM objects accepted as input
class ORMBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Generic response carrying only a status message
class MessageResponse(BaseModel):
    message: str
