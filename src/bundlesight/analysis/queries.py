"""
Query surface over a loaded report.

These are the calls a presentation layer (CLI, HTTP handler, export) makes.
All of them are pure reads of an immutable Report.
"""

from typing import Any, Dict, List

from ..core.index import ModuleIndex
from ..core.types import Asset, Module, Report
from .asset_modules import AssetModuleResolver
from .dependents import DependentsResolver


def list_assets(report: Report) -> List[Asset]:
    """Assets, largest first (normalization already sorted them)."""
    return report.assets


def get_config(report: Report) -> Dict[str, Any]:
    """Build problems reported by the bundler."""
    return {"warnings": report.warnings, "errors": report.errors}


def resolve_asset_modules(report: Report, index: ModuleIndex, asset_name: str) -> List[Module]:
    return AssetModuleResolver(report, index).resolve(asset_name)


def resolve_module_dependents(report: Report, index: ModuleIndex, module_ref: str) -> List[Module]:
    return DependentsResolver(report, index).resolve(module_ref)


def module_payload(module: Module) -> Dict[str, Any]:
    """
    Serialize a module for consumers.

    Always carries id, identifier, name, size, issuer, issuerId and
    issuerName; nested modules only for concatenated modules.
    """
    payload: Dict[str, Any] = {
        "id": module.id,
        "identifier": module.identifier,
        "name": module.name,
        "size": module.size,
        "issuer": module.issuer,
        "issuerId": module.issuer_id,
        "issuerName": module.issuer_name,
    }
    if module.modules:
        payload["modules"] = [module_payload(m) for m in module.modules]
    return payload
