from pathlib import Path
from typing import Dict, Optional
import os
import yaml

ENV_KEYS = [
    'output_dir', 'mazes_dir', 'workers', 'global_visited', 'record_frames', 'MAZE_LOG_LEVEL',
]

DEFAULTS: Dict = {
    'output_dir': 'outputs',
    'mazes_dir': 'mazes',
    'workers': 4,
    'global_visited': False,
    'record_frames': False,
    'max_frames': 200,
    'cell_px': 24,
    'log_level': 'INFO',
    'maze_symbols': {'wall': '@', 'corridor': '-'},
}


def load_config(base: Optional[str] = None, local: Optional[str] = None) -> Dict:
    base_p = Path(base or 'config/config.yaml')
    local_p = Path(local or 'config/local.yaml')
    cfg: Dict = dict(DEFAULTS)
    cfg['maze_symbols'] = dict(DEFAULTS['maze_symbols'])
    for p in (base_p, local_p):
        if p.exists():
            loaded = yaml.safe_load(p.read_text(encoding='utf-8')) or {}
            symbols = loaded.pop('maze_symbols', None) or {}
            cfg.update(loaded)
            cfg['maze_symbols'].update(symbols)
    # Pull overrides from environment
    for k in ENV_KEYS:
        if os.getenv(k) is not None:
            cfg[k] = os.getenv(k)
    return cfg


def as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)
