"""Domain layer.

Holds the protocols (ports) the services depend on. No framework or Redis
imports live here.
"""
