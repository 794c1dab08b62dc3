"""dockgen: detect a project's runtime and generate a Dockerfile for it."""

__version__ = "0.1.0"
