DEFAULTS = {
    # PageRank damping factor
    "PAGERANK_DAMPING": 0.85,
    # PageRank convergence tolerance
    "PAGERANK_TOLERANCE": 1e-6,
    # Community modularisation resolution
    "COMMUNITY_RESOLUTION": 1.0,
    # Random seed for community detection (None = unseeded)
    "COMMUNITY_SEED": None,
    # Smallest clique kept by clique aggregation
    "CLIQUE_MIN_SIZE": 3,
    # Clear previous clique labels before aggregating
    "CLIQUE_RESET": True,
    # Graphviz layout engine
    "RENDER_ENGINE": "dot",
    # Graphviz output format
    "RENDER_FORMAT": "svg",
    # Graphviz page size
    "RENDER_SIZE": "10!",
    # Analysis passes run by default, in order
    "PASSES": [
        "betweenness",
        "edge_betweenness",
        "page_rank",
        "closeness",
        "farness",
        "communities",
        "cliques",
    ],
}
