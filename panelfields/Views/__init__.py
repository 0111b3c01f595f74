from .DependencyResolver import DependencyResolverView
