from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from spa_admin.utils.identifiers import new_entity_id

# camelCase aliases match the seed file layout; snake_case names are
# accepted as well.
ENTITY_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    use_enum_values=False,
)


class Entity(BaseModel):
    """Base for stored entities: immutable, identified by an opaque id."""

    model_config = ENTITY_MODEL_CONFIG

    id: str = Field(
        default_factory=new_entity_id,
        min_length=1,
        description="Opaque unique identifier",
    )
