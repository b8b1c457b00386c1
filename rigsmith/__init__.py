"""3D math, convex hulls, primitive shapes and reactive project settings for vehicle rigs."""

__version__ = "0.1.0"