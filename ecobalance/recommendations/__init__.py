"""
Recommendation engine: turns inputs + emissions into an ordered, capped
list of actionable tips.

Modules
-------
rules     : RecommendationRule dataclass + the ordered RULES catalog and
            the catch-all tip.
generator : generate_recommendations() — evaluate, append catch-all, truncate.
"""
