"""
SkillGlobe Matcher

Picks the best of a user's career profiles for a job opportunity and
explains the match.
"""

__app_name__ = "SkillGlobe Matcher"
__version__ = "0.1.0"
