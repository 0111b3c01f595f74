from .DependencyResolution import ResolveDependenciesRequestSerializer, normalize_context
