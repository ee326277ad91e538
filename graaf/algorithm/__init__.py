"""Graph algorithms: shortest paths, spanning trees, cliques, cycles, ordering and transposition."""