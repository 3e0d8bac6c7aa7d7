"""Services layer - Application orchestration.

This module contains the services that orchestrate the flow of data
through adapters to fulfill use cases.

Available services:
- RouteQueryService: Loads a graph and answers shortest-path queries
"""

from .route_service import RouteQueryService

__all__ = ["RouteQueryService"]
