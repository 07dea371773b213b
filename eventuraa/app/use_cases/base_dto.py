"""
Base DTO

Every use case DTO serializes with camelCase keys (regNumber,
approvalStatus, ...) and still accepts snake_case names in Python.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
