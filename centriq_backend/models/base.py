"""
Shared base for read models that travel as camelCase JSON.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel, to_pascal


class CamelModel(BaseModel):
    """Accepts camelCase from the wire or snake_case from Python."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PascalModel(BaseModel):
    """Accepts PascalCase from the wire (reporting and create payloads)."""

    class Config:
        alias_generator = to_pascal
        populate_by_name = True
