from .dependency_resolution_service import DependencyResolutionService
