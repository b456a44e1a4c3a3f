"""
Weather recommendation engine.

Responsibilities:
- Hold the four static catalogs (activities, clothing, transportation,
  health advisories).
- Filter each catalog against a current-weather snapshot.
- Rank matches with the catalog's own ordering rule.
"""
