import random
from typing import Dict, List, Optional, Tuple

SOURCE = "A"
SINK = "T"

# Diamond lattice: A fans out to B C D, merges through E F, G H, into T.
TOPOLOGY: Tuple[Tuple[str, str], ...] = (
    ("A", "B"), ("A", "C"), ("A", "D"),
    ("B", "E"), ("B", "F"),
    ("C", "E"), ("C", "F"),
    ("D", "F"),
    ("E", "G"), ("E", "H"),
    ("F", "H"),
    ("G", "T"),
    ("H", "T"),
)

NODES: Tuple[str, ...] = ("A", "B", "C", "D", "E", "F", "G", "H", "T")


def generate_network(min_capacity: int = 5, max_capacity: int = 15,
                     rng: Optional[random.Random] = None) -> List[Dict]:
    """Fixed topology with fresh capacities drawn from [min_capacity, max_capacity]."""
    if min_capacity > max_capacity:
        raise ValueError(f"min_capacity {min_capacity} > max_capacity {max_capacity}")
    rng = rng or random
    return [
        {"from": u, "to": v, "capacity": rng.randint(min_capacity, max_capacity)}
        for u, v in TOPOLOGY
    ]
