"""
Base model classes for SkillGlobe data models.

Provides common configuration shared across all models.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EmbeddedModel(BaseModel):
    """
    Base model for every matching input and output.

    Attributes are snake_case in Python; the camelCase names used by the
    web client (``primarySkills``, ``yearsExperienceRequired``) are accepted
    on input and emitted by ``model_dump(by_alias=True)``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )
