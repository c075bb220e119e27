"""Asset host adapters."""

from report.infrastructure.asset_host.cloudinary_asset_host import CloudinaryAssetHost

__all__ = ["CloudinaryAssetHost"]
