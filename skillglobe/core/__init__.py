"""
Core business logic modules for SkillGlobe.

Submodules:
- matching: Profile-opportunity matching engine, gap analysis and reasoning
"""
