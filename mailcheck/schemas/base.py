"""Base Pydantic schema with common configuration.

Fields are declared in snake_case and serialized in camelCase, matching
what browser form-validation clients expect.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema with common configuration for all schemas.

    Strings are kept as sent; surrounding whitespace is reported by the
    validator as a warning.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
    )
