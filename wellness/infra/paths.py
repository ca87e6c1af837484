from pathlib import Path

# Centralized paths for web assets (single source of truth)
PACKAGE_DIR = Path(__file__).parent.parent.resolve()
TEMPLATES_DIR = PACKAGE_DIR / 'templates'
STATIC_DIR = PACKAGE_DIR / 'static'

__all__ = ['PACKAGE_DIR', 'TEMPLATES_DIR', 'STATIC_DIR']
