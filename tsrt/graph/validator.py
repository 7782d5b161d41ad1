"""Graph validation with exact cycle detection and visualization.

The bounded walks in tsrt.graph.traversal only guard against runaway loops.
GraphValidator does a full depth-first search and reports each cycle it
finds as an explicit vertex path, and can render a graph as a Mermaid
flowchart or a Graphviz digraph.
"""

from collections.abc import Hashable
from dataclasses import dataclass, field

from tsrt.graph.sparse_graph import SparseGraph


@dataclass
class ValidationReport:
    """Validation results for a relation graph.

    Attributes:
        is_valid: Whether the graph can be topologically sorted
        errors: Error messages (critical issues)
        warnings: Warning messages (potential issues)
        cycles: Detected cycles, each a vertex path that ends on its first vertex
        self_loops: Vertices that are declared to precede themselves
    """

    is_valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    cycles: list[list[Hashable]] = field(default_factory=list)
    self_loops: list[Hashable] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message and mark validation as failed."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message without failing validation."""
        self.warnings.append(message)

    def summary(self) -> str:
        """Generate a human-readable summary of the validation report."""
        lines = [
            f"Validation Status: {'PASS' if self.is_valid else 'FAIL'}",
            f"Errors: {len(self.errors)}",
            f"Warnings: {len(self.warnings)}",
            f"Cycles: {len(self.cycles)}",
        ]

        if self.errors:
            lines.append("\nErrors:")
            lines.extend(f"  - {error}" for error in self.errors)

        if self.warnings:
            lines.append("\nWarnings:")
            lines.extend(f"  - {warning}" for warning in self.warnings)

        if self.cycles:
            lines.append("\nCycles Detected:")
            for i, cycle in enumerate(self.cycles, 1):
                lines.append(f"  {i}. {_format_path(cycle)}")

        return "\n".join(lines)


class GraphValidator:
    """Validator for relation graphs with detailed error reporting."""

    def __init__(self):
        self._visited: set[Hashable] = set()
        self._rec_stack: set[Hashable] = set()
        self._path: list[Hashable] = []

    def validate(self, graph: SparseGraph) -> ValidationReport:
        """Validate *graph* and generate a report.

        Args:
            graph: The SparseGraph to validate

        Returns:
            ValidationReport containing all validation results
        """
        report = ValidationReport()

        if graph.is_empty():
            report.add_warning("Graph has no relations")
            return report

        report.self_loops = [source for source, target in graph.edges() if source == target]
        for vertex in report.self_loops:
            report.add_warning(f"Vertex {vertex!s} precedes itself")

        cycles = self._detect_cycles(graph)
        report.cycles = cycles
        for cycle in cycles:
            report.add_error(f"Cycle detected: {_format_path(cycle)}")

        return report

    def find_cycle(self, graph: SparseGraph) -> list[Hashable] | None:
        """Return one cycle path of *graph*, or None if it is acyclic."""
        cycles = self._detect_cycles(graph)
        return cycles[0] if cycles else None

    def _detect_cycles(self, graph: SparseGraph) -> list[list[Hashable]]:
        """Find cycles by DFS; at most one per unvisited DFS root."""
        self._visited = set()
        self._rec_stack = set()
        self._path = []
        cycles = []

        for vertex in graph.vertices():
            if vertex not in self._visited:
                cycle = self._dfs_cycle_detect(vertex, graph)
                if cycle:
                    cycles.append(cycle)
                # a cycle aborts the descent part-way; restart clean
                self._rec_stack.clear()
                self._path.clear()

        return cycles

    def _dfs_cycle_detect(
        self,
        vertex: Hashable,
        graph: SparseGraph,
    ) -> list[Hashable] | None:
        self._visited.add(vertex)
        self._rec_stack.add(vertex)
        self._path.append(vertex)

        for successor in graph.outgoing(vertex) or ():
            if successor not in self._visited:
                cycle = self._dfs_cycle_detect(successor, graph)
                if cycle:
                    return cycle
            elif successor in self._rec_stack:
                cycle_start_idx = self._path.index(successor)
                return [*self._path[cycle_start_idx:], successor]

        self._rec_stack.remove(vertex)
        self._path.pop()
        return None

    def generate_visualization(
        self,
        graph: SparseGraph,
        output_format: str = "mermaid",
    ) -> str:
        """Render *graph* as text in the requested format.

        Args:
            graph: The SparseGraph to visualize
            output_format: 'mermaid' or 'dot' (case-insensitive)

        Raises:
            ValueError: If an unsupported format is requested
        """
        output_format = output_format.lower().strip()

        if output_format == "mermaid":
            return self._generate_mermaid(graph)
        if output_format == "dot":
            return self._generate_graphviz(graph)
        error_msg = f"Unsupported format: {output_format}. Use 'mermaid' or 'dot'."
        raise ValueError(error_msg)

    def _generate_mermaid(self, graph: SparseGraph) -> str:
        lines = ["graph TD"]

        if graph.is_empty():
            lines.append("    Empty[Empty Graph]")
            return "\n".join(lines)

        vertices = sorted(graph.vertices(), key=str)
        node_ids = {vertex: f"n{i}" for i, vertex in enumerate(vertices)}

        for vertex in vertices:
            lines.append(f'    {node_ids[vertex]}["{_mermaid_label(vertex)}"]')

        for source, target in sorted(graph.edges(), key=lambda e: (str(e[0]), str(e[1]))):
            lines.append(f"    {node_ids[source]} --> {node_ids[target]}")

        return "\n".join(lines)

    def _generate_graphviz(self, graph: SparseGraph) -> str:
        def escape_dot_string(s: str) -> str:
            return s.replace('"', '\\"')

        lines = ["digraph RelationGraph {"]
        lines.append("    rankdir=LR;")
        lines.append("    node [shape=box, style=rounded];")

        if graph.is_empty():
            lines.append('    Empty [label="Empty Graph"];')
        else:
            lines.extend(
                f'    "{escape_dot_string(str(vertex))}";'
                for vertex in sorted(graph.vertices(), key=str)
            )
            lines.extend(
                f'    "{escape_dot_string(str(source))}" -> "{escape_dot_string(str(target))}";'
                for source, target in sorted(graph.edges(), key=lambda e: (str(e[0]), str(e[1])))
            )

        lines.append("}")
        return "\n".join(lines)


def _format_path(path: list[Hashable]) -> str:
    return " -> ".join(str(vertex) for vertex in path)


def _mermaid_label(vertex: Hashable) -> str:
    """Escape a vertex label for a quoted Mermaid node text."""
    return str(vertex).replace('"', "#quot;")
