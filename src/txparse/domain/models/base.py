from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire. Accepts either on input."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "coerce_numbers_to_str": True,
    }
