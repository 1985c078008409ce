"""
Shared pydantic base for every compiler record.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CompilerModel(BaseModel):
    """
    Immutable record with snake_case attributes and camelCase wire names.

    Build with either spelling; dump with ``by_alias=True`` to get the
    JSON shape the front-end form expects.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
