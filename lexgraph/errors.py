# lexgraph/errors.py


class GraphError(Exception):
    """Base class for every error raised by lexgraph."""


class GraphDestroyedError(GraphError, RuntimeError):
    """The graph was already destroyed; its vertices and edges are gone."""


class VertexNotInGraphError(GraphError, LookupError):
    def __init__(self, vertex, graph_name: str = ""):
        self.vertex = vertex
        super().__init__(f"vertex {getattr(vertex, 'name', vertex)!r} does not belong to graph {graph_name!r}")


class RootNotInGraphError(VertexNotInGraphError):
    """Ordering requested from a root that is not a vertex of the graph."""


class SelfLoopError(GraphError, ValueError):
    pass


class InvalidOrderError(GraphError, ValueError):
    """The vertex order handed to the colourer is not a permutation of the graph."""


class ColorCapacityExceededError(GraphError, RuntimeError):
    def __init__(self, vertex_name: str, needed: int, max_colors: int):
        self.vertex_name = vertex_name
        self.needed = needed
        self.max_colors = max_colors
        super().__init__(f"vertex {vertex_name!r} needs color {needed} but only {max_colors} colors are allowed")


class MalformedGraphError(GraphError, ValueError):
    """Input graph description could not be turned into a graph."""
