from registry_codegen.generators.particle import DEFAULT_PARTICLE_TYPE_NAME, ParticleGenerator

__all__ = ["DEFAULT_PARTICLE_TYPE_NAME", "ParticleGenerator"]
