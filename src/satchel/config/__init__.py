from .loader import GridLayout, LayoutConfig, load_layout_config

__all__ = [
    'GridLayout',
    'LayoutConfig',
    'load_layout_config',
]
