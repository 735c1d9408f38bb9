"""
Smokefield - Particle Simulation
"""

from smokefield.simulation.particle import Particle
from smokefield.simulation.pools import FixedPool, GrowablePool
from smokefield.simulation.scene import Scene, Layer, build_hero_scene, build_backdrop_scene

__all__ = [
    "Particle", "FixedPool", "GrowablePool",
    "Scene", "Layer", "build_hero_scene", "build_backdrop_scene",
]
