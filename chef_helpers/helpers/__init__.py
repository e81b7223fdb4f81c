from .allies import AllyResolver
from .addressing import AddressSelector, region_of
from .jsonpath_access import AttributePathAccessor
from .node_helper import NodeHelper

__all__ = [
    "AllyResolver",
    "AddressSelector",
    "region_of",
    "AttributePathAccessor",
    "NodeHelper",
]
