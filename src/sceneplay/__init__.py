"""sceneplay: progress-driven scene and stage timeline engine."""

__version__ = "0.1.0"
