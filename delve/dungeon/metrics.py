from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'rooms_attempted': 0,
        'rooms_placed': 0,
        'door_candidates': 0,
        'doors_created': 0,
        'doors_downgraded': 0,
        'cells_pruned': 0,
        'water_cells': 0,
        'grass_cells': 0,
        'runtime_ms': 0.0,
    }
