from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _column_value(value):
    # nested documents end up in JSON columns, stored the way the API returns them
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_column_value(v) for v in value]
    return value


class CamelModel(BaseModel):
    """
    Request bodies arrive in camelCase, model fields are snake_case.
    Unknown keys are dropped, so a body can never smuggle in fields
    such as status or companyId that a schema does not declare.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )

    def columns(self, exclude=()):
        """Every field keyed by column name."""
        return {
            name: _column_value(getattr(self, name))
            for name in type(self).model_fields
            if name not in exclude
        }

    def fields_set(self, not_null=()):
        """Only the fields the client actually sent, keyed by column name.

        Explicit nulls for the names in ``not_null`` are dropped.
        """
        fields = {name: _column_value(getattr(self, name)) for name in self.model_fields_set}
        for name in not_null:
            if name in fields and fields[name] is None:
                del fields[name]
        return fields
