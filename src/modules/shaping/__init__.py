from src.modules.shaping.data_shaping import shape, shape_many
from src.modules.shaping.field_validation import field_names, has_properties
from src.modules.shaping.links import Link, LinkBuilder, linked_collection, paged_collection_links, with_links
from src.modules.shaping.negotiation import wants_hypermedia
from src.modules.shaping.paging import PagedList
from src.modules.shaping.property_mapping import (
    PropertyMappingRegistry,
    PropertyMappingValue,
    SortKey,
)

__all__ = [
    "Link",
    "LinkBuilder",
    "PagedList",
    "PropertyMappingRegistry",
    "PropertyMappingValue",
    "SortKey",
    "field_names",
    "has_properties",
    "linked_collection",
    "paged_collection_links",
    "shape",
    "shape_many",
    "wants_hypermedia",
    "with_links",
]
