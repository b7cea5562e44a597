"""Link relations and query parameter names shared by every resource."""

REL_SELF = "self"
REL_NEXT_PAGE = "nextPage"
REL_PREVIOUS_PAGE = "previousPage"

LINKS_KEY = "links"
COLLECTION_VALUE_KEY = "value"

# Wire names of the paging/shaping query parameters
FIELDS_PARAM = "fields"
ORDER_BY_PARAM = "orderBy"
PAGE_NUMBER_PARAM = "pageNumber"
PAGE_SIZE_PARAM = "pageSize"
