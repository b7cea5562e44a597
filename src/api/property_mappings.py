"""Start-up registration of every property mapping the API sorts with."""

from src.models.enums import ShapePair
from src.modules.author.mapping import AUTHOR_PROPERTY_MAPPING
from src.modules.shaping.property_mapping import PropertyMappingRegistry


def build_property_mappings() -> PropertyMappingRegistry:
    return PropertyMappingRegistry({ShapePair.AUTHOR: AUTHOR_PROPERTY_MAPPING})
