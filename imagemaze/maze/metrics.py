from typing import Dict

def init_metrics() -> Dict[str, int | float | dict]:
    return {
        'rooms_carved': 0,
        'edges_pushed': 0,
        'stale_edges': 0,
        'max_frontier': 0,
        'runtime_ms': 0.0,
        'phase_ms': {},
    }
