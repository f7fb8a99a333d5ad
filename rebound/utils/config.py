"""Configuration management."""

import copy
import json
import yaml
from pathlib import Path
from typing import Dict, Any


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file, layered over the defaults."""
    path = Path(config_path)
    
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            loaded = yaml.safe_load(f)
        elif path.suffix.lower() == '.json':
            loaded = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")
    
    return merge_config(get_default_config(), loaded or {})


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'priority_weights': {
            'weight': 0.35,
            'urgency': 0.30,
            'backlog': 0.20,
            'comfort': 0.15,
        },
        'stress_bands': [
            {
                'max_stress': 3,
                'factor': 1.0,
                'strategy': "Full Acceleration: Tackle high-weight, hard tasks.",
            },
            {
                'max_stress': 6,
                'factor': 0.8,
                'strategy': "Balanced Recovery: Mix of hard and easy tasks.",
            },
            {
                'max_stress': 8,
                'factor': 0.5,
                'strategy': "Critical Stabilize: Only high-urgency tasks or quick wins.",
            },
            {
                'max_stress': None,  # catch-all
                'factor': 0.2,
                'strategy': "Emergency Halt: Just one small task to maintain habit.",
            },
        ],
        'planning': {
            'task_hours': 1.0,
            'use_estimated_duration': False,
            'emergency_stress': 9,
        },
        'risk': {
            'history_days': 7,
        },
    }
