"""Default settings shared by the engine and the CLI."""

# Palette offered to players, in display order.
DEFAULT_PALETTE: tuple[str, ...] = (
    "#FF6B6B",
    "#4ECDC4",
    "#FFD166",
    "#6A4C93",
    "#1A936F",
    "#F78C6B",
    "#118AB2",
    "#EF476F",
)

BIPARTITE_EDGE_PROBABILITY = 0.7
RANDOM_EDGE_FACTOR = 1.5

# Sampling attempts per missing edge before the random generator gives up.
RANDOM_EDGE_ATTEMPTS_PER_EDGE = 100

LAYOUT_RADIUS = 200.0
LAYOUT_MARGIN = 50.0

SEED_ENVVAR = "CHROMAGRAPH_SEED"
PALETTE_ENVVAR = "CHROMAGRAPH_PALETTE"
