"""
Data layer for SkillGlobe.

Submodules:
- models: Pydantic models for profiles, opportunities and match results
- loaders: JSON loading of matching inputs
"""
