"""Request and response schemas for the mission API."""
