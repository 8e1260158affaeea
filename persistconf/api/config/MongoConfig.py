"""MongoDB backend configuration."""

from pydantic import BaseModel, ConfigDict, Field

from .ScalarMapping import ScalarMapping


class MongoConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    connection_string: str = Field(default="", description="MongoDB connection URI")
    options: ScalarMapping = Field(
        default_factory=dict, validate_default=True, description="Driver options passed to the client (read-only)"
    )
