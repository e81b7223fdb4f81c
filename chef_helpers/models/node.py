from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


DEFAULT_ENVIRONMENT = "_default"

# Lowest to highest.
PRECEDENCE_LEVELS = ("default", "normal", "override", "automatic")


def deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge ``overlay`` onto ``base`` and return a new mapping.

    Nested mappings merge recursively. Any other value in ``overlay``
    replaces the value in ``base`` outright (lists are not concatenated).
    """
    merged = deepcopy(base)

    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)

    return merged


@dataclass(eq=False)
class Node:
    """
    An agent's in-memory record of a managed host.

    The node is owned by the caller. Helpers in this package only read
    from it; any derived state (such as resolved allies) lives on the
    wrapper, not here. Nodes compare and hash by identity.
    """

    name: str
    chef_environment: Optional[str] = DEFAULT_ENVIRONMENT
    attributes: Dict[str, Any] = field(default_factory=dict)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_chef_json(cls, data: Dict[str, Any]) -> "Node":
        """
        Build a node from Chef server node JSON.

        Attribute levels are merged in precedence order, so an
        ``automatic`` value wins over ``override``, which wins over
        ``normal``, which wins over ``default``.
        """
        if "name" not in data:
            raise ValueError("Node JSON is missing required field 'name'.")

        attributes: Dict[str, Any] = {}
        for level in PRECEDENCE_LEVELS:
            layer = data.get(level) or {}
            if not isinstance(layer, dict):
                raise ValueError(
                    f"Node '{data['name']}' has non-mapping '{level}' attributes."
                )
            attributes = deep_merge(attributes, layer)

        return cls(
            name=data["name"],
            chef_environment=data.get("chef_environment") or DEFAULT_ENVIRONMENT,
            attributes=attributes,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        """Build a node from an already-merged attribute document."""
        if "name" not in data:
            raise ValueError("Node document is missing required field 'name'.")

        attributes = {
            k: deepcopy(v)
            for k, v in data.items()
            if k not in ("name", "chef_environment")
        }
        return cls(
            name=data["name"],
            chef_environment=data.get("chef_environment") or DEFAULT_ENVIRONMENT,
            attributes=attributes,
        )

    # ------------------------------------------------------------------
    # Attribute Access
    # ------------------------------------------------------------------

    def __getitem__(self, key: str) -> Any:
        return self.attributes.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self.attributes

    def get(self, path: str, default: Any = None) -> Any:
        """
        Walk a dotted attribute path such as ``"ec2.local_ipv4"``.

        Returns ``default`` as soon as a segment is missing or the value
        at that point is not a mapping.
        """
        current: Any = self.attributes
        for segment in path.split("."):
            if not isinstance(current, dict) or segment not in current:
                return default
            current = current[segment]
        return current

    def to_hash(self) -> Dict[str, Any]:
        """Full attribute tree as a single nested document (deep copy)."""
        document = deepcopy(self.attributes)
        document["name"] = self.name
        document["chef_environment"] = self.chef_environment
        return document

    def __repr__(self) -> str:
        return f"Node(name='{self.name}', env='{self.chef_environment}')"
