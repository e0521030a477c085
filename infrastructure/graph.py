"""Dependency graph for constructing resources in topological order."""

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

Builder = Callable[[Mapping[str, Any]], Any]


@dataclass
class _Node:
  name: str
  build: Builder
  depends_on: tuple[str, ...]


class ResourceGraph:
  """Named resource builders with explicit dependency edges.

  Each builder receives a mapping of the resources built so far, so a node
  can only reference resources it declared as dependencies.
  """

  def __init__(self) -> None:
    self._nodes: dict[str, _Node] = {}

  def add(
    self,
    name: str,
    build: Builder,
    *,
    depends_on: Iterable[str] = (),
  ) -> None:
    """Register a resource builder."""
    if name in self._nodes:
      raise ValueError(f"Resource {name!r} is already registered")
    self._nodes[name] = _Node(name=name, build=build, depends_on=tuple(depends_on))

  def order(self) -> list[str]:
    """Return resource names so that every node follows its dependencies.

    Registration order is kept wherever it already satisfies the edges.
    """
    ordered: list[str] = []
    done: set[str] = set()
    path: list[str] = []

    def visit(name: str) -> None:
      if name in done:
        return
      if name in path:
        cycle = " -> ".join([*path[path.index(name) :], name])
        raise ValueError(f"Dependency cycle: {cycle}")
      if name not in self._nodes:
        raise KeyError(f"Unknown dependency {name!r} (required by {path[-1]!r})")
      path.append(name)
      for dependency in self._nodes[name].depends_on:
        visit(dependency)
      path.pop()
      done.add(name)
      ordered.append(name)

    for name in self._nodes:
      visit(name)
    return ordered

  def build(self) -> dict[str, Any]:
    """Build every resource in dependency order."""
    built: dict[str, Any] = {}
    for name in self.order():
      node = self._nodes[name]
      built[name] = node.build({dep: built[dep] for dep in node.depends_on})
    return built
