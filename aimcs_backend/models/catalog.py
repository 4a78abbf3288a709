"""
Model Catalog
Static descriptors of the chat models the gateway advertises
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict


class ModelStatus(str, Enum):
    """Model availability"""
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class ModelDescriptor(BaseModel):
    """A model entry as listed by GET /api/models"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    provider: str
    status: ModelStatus = ModelStatus.AVAILABLE


MODEL_CATALOG: Tuple[ModelDescriptor, ...] = (
    ModelDescriptor(
        id="gpt-4o-mini",
        name="GPT-4o Mini",
        provider="OpenAI",
        status=ModelStatus.AVAILABLE,
    ),
    ModelDescriptor(
        id="claude-3-haiku",
        name="Claude 3 Haiku",
        provider="Anthropic",
        status=ModelStatus.AVAILABLE,
    ),
)


def find_model(model_id: str, catalog: Tuple[ModelDescriptor, ...] = MODEL_CATALOG) -> Optional[ModelDescriptor]:
    """Look up a descriptor by model id"""
    for descriptor in catalog:
        if descriptor.id == model_id:
            return descriptor
    return None
