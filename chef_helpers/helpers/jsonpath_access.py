from functools import lru_cache
from typing import Any, List

from jsonpath_ng.ext import parse
from jsonpath_ng.jsonpath import JSONPath

from ..models.node import Node

COMPILED_EXPRESSION_CACHE_SIZE = 256


@lru_cache(maxsize=COMPILED_EXPRESSION_CACHE_SIZE)
def compile_expression(expression: str) -> JSONPath:
    return parse(expression)


class AttributePathAccessor:
    """
    jsonpath-aware access to node attributes.

    Keys are dispatched on their shape:
        • compiled JSONPath       → evaluated against the full attribute tree
        • string starting with $  → parsed as jsonpath, then evaluated
        • anything else           → plain ``node[key]`` lookup

    jsonpath results are lists of matched values. Parse errors from
    jsonpath-ng propagate unchanged.
    """

    def get(self, node: Node, key: Any) -> Any:
        if isinstance(key, JSONPath):
            return self._evaluate(key, node)

        if isinstance(key, str) and key.startswith("$"):
            return self._evaluate(compile_expression(key), node)

        return node[key]

    @staticmethod
    def _evaluate(path: JSONPath, node: Node) -> List[Any]:
        return [match.value for match in path.find(node.to_hash())]
