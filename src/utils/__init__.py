"""
Utility modules for the contract portal
"""
from .config_loader import PortalConfig, load_portal_config

__all__ = [
    'PortalConfig',
    'load_portal_config',
]
