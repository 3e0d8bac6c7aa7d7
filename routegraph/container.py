"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving the graph repository, the route
solver and the query service built on top of them.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(RouteQueryService)

        # Testing
        container = Container()
        container.register(RouteSolverPort, lambda: FakeSolver())
        solver = container.resolve(RouteSolverPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    @classmethod
    def create_default(
        cls,
        config: Optional[AppConfig] = None,
        matrix_path: Optional[Path] = None,
    ) -> Container:
        """Create a container with default bindings.

        Args:
            config: Optional configuration override.
            matrix_path: Optional matrix file overriding the configured one.

        Returns:
            A configured Container instance.
        """
        from .adapters.graph import DijkstraRouteSolver, TextMatrixGraphRepository
        from .ports.graph import GraphRepositoryPort, RouteSolverPort
        from .services import RouteQueryService

        config = config or get_config()
        container = cls(config=config)

        container.register(
            GraphRepositoryPort,
            lambda: TextMatrixGraphRepository(config.graph, path=matrix_path),
        )
        container.register(RouteSolverPort, lambda: DijkstraRouteSolver())

        def create_route_service() -> RouteQueryService:
            return RouteQueryService(
                graph_repository=container.resolve(GraphRepositoryPort),
                route_solver=container.resolve(RouteSolverPort),
            )

        container.register(RouteQueryService, create_route_service)

        return container
