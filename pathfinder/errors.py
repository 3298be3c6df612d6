class PathfinderError(Exception):
    """Base class for graph and search errors."""


class NodeNotFound(PathfinderError):
    def __init__(self, node_id):
        super().__init__(f"node {node_id} is not in the graph")
        self.node_id = node_id


class EmptyGraph(NodeNotFound):
    def __init__(self):
        PathfinderError.__init__(self, "graph has no nodes; add nodes before searching")
        self.node_id = None


class InvalidReference(PathfinderError):
    def __init__(self, from_, to):
        super().__init__(f"edge {from_} -> {to} references a node that does not exist")
        self.from_ = from_
        self.to = to


class InvalidWeight(PathfinderError):
    def __init__(self, weight):
        super().__init__(f"edge weight must be a positive integer, got {weight!r}")
        self.weight = weight
