import logging
import re
from typing import Optional

from ..models.node import Node

logger = logging.getLogger(__name__)

_ZONE_SUFFIX = re.compile(r"[a-z]\Z")


def region_of(availability_zone: Optional[str]) -> Optional[str]:
    """Strip the trailing zone letter: ``us-east-1a`` -> ``us-east-1``."""
    if availability_zone is None:
        return None
    return _ZONE_SUFFIX.sub("", availability_zone, count=1)


class AddressSelector:
    """
    Decides which IP should be used to contact another node.

    If both nodes are on EC2 and in the same region, the other node's
    ``ec2.local_ipv4`` is used. Otherwise, if the other node is a cloud
    instance, its ``cloud.public_ipv4``. Otherwise, its ``ipaddress``.

    May pick the wrong address on non-EC2 cloud providers.
    Missing attributes come back as ``None``.
    """

    def select_address(self, self_node: Node, other_node: Node) -> Optional[str]:

        if self._same_ec2_region(self_node, other_node):
            address = other_node.get("ec2.local_ipv4")
            rule = "ec2-local"
        elif other_node["cloud"] is not None:
            address = other_node.get("cloud.public_ipv4")
            rule = "cloud-public"
        else:
            address = other_node["ipaddress"]
            rule = "ipaddress"

        logger.debug(
            "[ADDRESS] %s -> %s via %s: %s",
            self_node.name, other_node.name, rule, address,
        )
        return address

    @staticmethod
    def _same_ec2_region(self_node: Node, other_node: Node) -> bool:
        if self_node["ec2"] is None or other_node["ec2"] is None:
            return False

        mine = region_of(self_node.get("ec2.placement_availability_zone"))
        theirs = region_of(other_node.get("ec2.placement_availability_zone"))

        # Unknown zone on either side never counts as a match
        return mine is not None and mine == theirs
