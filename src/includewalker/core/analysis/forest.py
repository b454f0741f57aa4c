from __future__ import annotations

"""
Dependency Forest.

Builds the include graph of a C/C++ source tree and derives its include
order. Nodes live in an append-only arena; a key -> index map resolves the
keys stored in ``uses`` and ``used_by``. Every edge is written on both of
its ends at insertion time, so ``B.key in A.uses`` holds exactly when
``A.key in B.used_by`` (with matching multiplicity).
"""

import logging
import re
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence

from includewalker.core.analysis.graph import SimpleGraph
from includewalker.core.analysis.identity import is_source_or_header, normalize
from includewalker.core.pipeline.components.reader import extract_includes, read_includes
from includewalker.core.services.scanner import walk
from includewalker.domain.dependency_models import DependencyNode, ErrorKind, ScanError
from includewalker.domain.exceptions import NoStemError
from includewalker.infra.fs import strip_root

logger = logging.getLogger(__name__)


class NodeMap(Mapping[str, DependencyNode]):
    """Read-only key -> node view over a forest's arena."""

    def __init__(self, arena: List[DependencyNode], index: Dict[str, int]):
        self._arena = arena
        self._index = index

    def __getitem__(self, key: str) -> DependencyNode:
        return self._arena[self._index[key]]

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)


class DependencyForest(SimpleGraph[DependencyNode]):
    """
    The set of include trees found under a source directory.

    Attributes:
        directory: Root passed to the last ``fill_from_directory`` call.
        errors: Non-fatal failures collected while building.
    """

    def __init__(self) -> None:
        self.directory: str = ""
        self.errors: List[ScanError] = []
        self._arena: List[DependencyNode] = []
        self._index: Dict[str, int] = {}

    @property
    def node_map(self) -> NodeMap:
        return NodeMap(self._arena, self._index)

    # ------------------------------------------------------------------
    # Build phase
    # ------------------------------------------------------------------

    def fill_from_directory(
            self,
            root: str,
            recursive: bool,
            exclude_rx: Optional[List[re.Pattern]] = None,
    ) -> None:
        """
        Add every header and source file found under ``root``.

        Args:
            root: Directory to scan; stored verbatim in ``directory``.
            recursive: Whether to descend into subdirectories.
            exclude_rx: Compiled patterns for names to prune from the walk.
        """
        self.directory = root
        logger.debug(f"Scanning '{root}' (recursive={recursive})")

        for path in walk(root, recursive, exclude_rx, on_error=self._on_directory_error):
            if not is_source_or_header(path):
                continue
            self.add_file(path)

        logger.info(f"Dependency forest holds {len(self._arena)} node(s), {len(self.errors)} error(s)")

    def add_file(self, path: str, text: Optional[str] = None) -> Optional[DependencyNode]:
        """
        Register a file and wire the edges of its includes.

        Args:
            path: Location of the file. Must lie under ``directory`` when a
                  root has been recorded.
            text: File contents; read from ``path`` when omitted.

        Returns:
            Optional[DependencyNode]: The file's node, or None if the path
            could not be normalized.

        Raises:
            ValueError: If ``path`` lies outside the recorded root.
        """
        rel_path = strip_root(path, self.directory) if self.directory else path

        try:
            key = normalize(path)
        except NoStemError as e:
            self._record(rel_path, ErrorKind.NO_STEM, e)
            return None

        node = self._get_or_insert(key)
        if node.path == rel_path:
            # Same file seen again: its includes replace the old ones
            self._drop_edges(node)
        elif node.path is not None:
            logger.debug(f"'{rel_path}' shares key '{key}' with '{node.path}'")
        node.path = rel_path

        if text is not None:
            targets = extract_includes(text)
        else:
            try:
                targets = read_includes(path)
            except OSError as e:
                self._record(rel_path, ErrorKind.FILE_READ_FAILURE, e)
                targets = []

        for target in targets:
            try:
                dep_key = normalize(target)
            except NoStemError as e:
                self._record(rel_path, ErrorKind.NO_STEM, e)
                continue
            self._add_edge(node, dep_key)

        return node

    def _get_or_insert(self, key: str) -> DependencyNode:
        i = self._index.get(key)
        if i is None:
            i = len(self._arena)
            self._arena.append(DependencyNode(key=key))
            self._index[key] = i
        return self._arena[i]

    def _add_edge(self, node: DependencyNode, dep_key: str) -> None:
        dependency = self._get_or_insert(dep_key)
        node.uses.append(dep_key)
        dependency.used_by.append(node.key)

    def _drop_edges(self, node: DependencyNode) -> None:
        for dep_key in node.uses:
            self._arena[self._index[dep_key]].used_by.remove(node.key)
        node.uses.clear()

    def _record(self, rel_path: str, kind: ErrorKind, exc: Exception) -> None:
        logger.warning(f"{kind.value} at '{rel_path}': {exc}")
        self.errors.append(ScanError(rel_path=rel_path, kind=kind, error=str(exc)))

    def _on_directory_error(self, path: str, exc: OSError) -> None:
        try:
            rel_path = strip_root(path, self.directory)
        except ValueError:
            rel_path = path
        self.errors.append(
            ScanError(rel_path=rel_path, kind=ErrorKind.DIRECTORY_READ_FAILURE, error=str(exc))
        )

    # ------------------------------------------------------------------
    # Graph interface
    # ------------------------------------------------------------------

    def nodes(self) -> Sequence[DependencyNode]:
        return self._arena

    def children(self, node: DependencyNode) -> List[DependencyNode]:
        return [self._arena[self._index[k]] for k in node.uses]

    def ancestors(self, node: DependencyNode) -> List[DependencyNode]:
        return [self._arena[self._index[k]] for k in node.used_by]

    # ------------------------------------------------------------------
    # Query phase
    # ------------------------------------------------------------------

    def include_order(self, with_external: bool) -> List[DependencyNode]:
        """
        Order the forest so that every file follows the files it includes.

        Args:
            with_external: Prefix the order with the external nodes (files
                           referenced but never found under the root).
                           When False they are left out entirely.

        Returns:
            List[DependencyNode]: Nodes in include order.

        Raises:
            CycleError: If the includes form a cycle.
        """
        order = self.get_topological_order()
        internal = [node for node in order if node.path is not None]
        if not with_external:
            return internal
        external = [node for node in order if node.path is None]
        return external + internal

    def external_nodes(self) -> List[DependencyNode]:
        return [node for node in self._arena if node.path is None]

    def users_of(self, key: str) -> List[DependencyNode]:
        """Return the direct dependents of ``key``, one entry per include."""
        return self.ancestors(self.node_map[key])

    def as_dict(self) -> Dict[str, Dict[str, Any]]:
        return {node.key: node.to_dict() for node in self._arena}
