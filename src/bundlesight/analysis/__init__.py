"""Queries over a normalized Report."""

from .asset_modules import AssetModuleResolver
from .dependents import DependentsResolver
from .queries import get_config, list_assets, resolve_asset_modules, resolve_module_dependents

__all__ = [
    "AssetModuleResolver",
    "DependentsResolver",
    "get_config",
    "list_assets",
    "resolve_asset_modules",
    "resolve_module_dependents",
]
