# snippet_catalog/models/base.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CatalogModel(BaseModel):
    """Base model for catalog records.

    Attributes are snake_case in Python and camelCase on the wire
    (``componentCount``, ``categoryId``, ``isActive``); both spellings are
    accepted on input.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )
