"""Services package."""

from app.services import outcast_service, sap_service, taxonomy_service, wordnet_service

__all__ = ["outcast_service", "sap_service", "taxonomy_service", "wordnet_service"]
