"""
Weather-fetch collaborator.

Responsibilities:
- Manage OpenWeatherMap configuration and credentials.
- Fetch current conditions for a coordinate pair.
- Reduce the API response to the ``{"current": {...}}`` shape the
  recommendation engine consumes.
"""
