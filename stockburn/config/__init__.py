"""
Configuration module.

Typed defaults, YAML overrides and validation for the generator, scaler,
batcher and tick file parameters.
"""
