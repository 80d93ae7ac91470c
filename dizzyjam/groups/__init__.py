"""API method groups exposed as attributes of the client."""

from dizzyjam.groups.base import MethodGroup
from dizzyjam.groups.catalogue import CatalogueGroup
from dizzyjam.groups.manage import ManageGroup
from dizzyjam.groups.order import OrderGroup

GROUPS: dict[str, type[MethodGroup]] = {
    "catalogue": CatalogueGroup,
    "order": OrderGroup,
    "manage": ManageGroup,
}

__all__ = ["GROUPS", "MethodGroup", "CatalogueGroup", "OrderGroup", "ManageGroup"]
